"""Service layer — report, check, init, and edit operations."""
