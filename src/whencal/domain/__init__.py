"""Domain layer — dates, month names, date expressions, calendar lines.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
