"""Configuration — preferences file, settings, and logging."""
