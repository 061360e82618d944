"""whencal — a small personal calendar reminder tool."""

__version__ = "0.1.0"
