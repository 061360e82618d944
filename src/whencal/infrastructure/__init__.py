"""Infrastructure layer — calendar and preferences file I/O."""
