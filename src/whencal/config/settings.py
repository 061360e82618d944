"""Unified settings — CLI flags, env vars, and the preferences file in one object.

Priority chain (highest to lowest):
  1. Init kwargs      — CLI flags passed by Click
  2. Env vars         — ``WHENCAL_*`` prefix
  3. Preferences file — ``~/.whencal/preferences`` (``key = value`` lines)
  4. Code defaults

Uses Pydantic Settings v2 with a custom :class:`PreferencesSettingsSource`
that reuses :func:`whencal.config.discovery.load_preferences`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from whencal.config.discovery import find_preferences, load_preferences

DEFAULT_EDITOR = "emacs -nw"

# Fields the preferences file may not set.
_NOT_PREFERENCES = frozenset({"preferences_path"})


class PreferencesSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``key = value`` preferences file."""

    def __init__(self, settings_cls: type[BaseSettings], prefs_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {
            key: value
            for key, value in load_preferences(prefs_path).items()
            if key in settings_cls.model_fields and key not in _NOT_PREFERENCES
        }

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the full preferences dict for Pydantic to merge."""
        return self._data


# Thread-local storage for the preferences path during construction.
_tls = threading.local()


class WhenSettings(BaseSettings):
    """Unified settings for the whencal CLI.

    Merges CLI flags, environment variables, the preferences file, and
    code-baked defaults into a single frozen object.  Stored on the
    :class:`~whencal.commands._context.AppContext` at the CLI root level.

    Attributes:
        calendar: Calendar file path, or None until ``whencal init`` runs.
        editor: Command line used by ``whencal e``.
        future: Report window end, in days relative to today.
        past: Report window start, in days relative to today (usually negative).
        preferences_path: The preferences file the settings were read from.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "WHENCAL_",
    }

    # --- Preferences ---
    calendar: Path | None = None
    editor: str = DEFAULT_EDITOR
    future: int = 14
    past: int = -1
    header: bool = True

    # --- Resolved path (not in the preferences file) ---
    preferences_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    @field_validator("calendar", "preferences_path")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the preferences source between env vars and defaults."""
        prefs_path = getattr(_tls, "prefs_path", None)
        return (
            init_settings,
            env_settings,
            PreferencesSettingsSource(settings_cls, prefs_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        preferences_path: str | Path | None = None,
        home: Path | None = None,
        **cli_flags: Any,
    ) -> WhenSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *preferences_path* or discovers the preferences
        file under *home*. CLI flags left as None do not override lower
        priority sources.
        """
        prefs_path: Path | None
        if preferences_path:
            prefs_path = Path(preferences_path).expanduser()
        else:
            prefs_path = find_preferences(home)

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.prefs_path = prefs_path
        try:
            return cls(preferences_path=prefs_path, **overrides)
        except ValidationError as exc:
            raise click.ClickException(_describe_invalid(exc, prefs_path)) from exc
        finally:
            _tls.prefs_path = None


def _describe_invalid(exc: ValidationError, prefs_path: Path | None) -> str:
    """One ``field: problem (got 'value')`` line per rejected setting."""
    source = f" (preferences file: {prefs_path})" if prefs_path else ""
    lines = [f"Invalid settings{source}:"]
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "settings"
        lines.append(f"  {field}: {err['msg']} (got {err.get('input')!r})")
    return "\n".join(lines)
