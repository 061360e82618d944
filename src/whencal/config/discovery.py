"""Preferences file discovery.

The preferences file lives at ``~/.whencal/preferences``. The
WHENCAL_PREFERENCES env var and the --preferences CLI flag override it.
"""

from __future__ import annotations

import os
from pathlib import Path

from whencal.config.preferences import parse_preferences
from whencal.infrastructure.filesystem import PREFERENCES_FILENAME, app_dir

PREFERENCES_ENV_VAR = "WHENCAL_PREFERENCES"


def default_preferences_path(home: Path | None = None) -> Path:
    """The preferences file location when WHENCAL_PREFERENCES is unset."""
    return app_dir(home) / PREFERENCES_FILENAME


def resolve_preferences_path(home: Path | None = None) -> Path:
    """Where the preferences file should live, whether or not it exists yet.

    WHENCAL_PREFERENCES wins over ``~/.whencal/preferences``.
    """
    env_path = os.environ.get(PREFERENCES_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return default_preferences_path(home)


def find_preferences(home: Path | None = None) -> Path | None:
    """Locate an existing preferences file, or return None."""
    path = resolve_preferences_path(home)
    return path if path.is_file() else None


def load_preferences(path: Path | None) -> dict[str, str]:
    """Read and parse a preferences file. Missing files yield ``{}``."""
    if path is None or not path.is_file():
        return {}
    raw = path.read_text(encoding="utf-8")
    return parse_preferences(raw.splitlines())
