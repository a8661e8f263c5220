"""Process-wide defaults applied when an assertion context is created.

Call :func:`configure` once at start-up (the pytest plugin does this for
``--nocolor``). If it is never called, the settings are initialised on first
read from the environment. Contexts read the settings once, at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

NO_COLOR_ENV_VARS = ("BEE_NOCOLOR", "NO_COLOR")


@dataclass(frozen=True, slots=True)
class Settings:
    no_color: bool = False


_settings: Settings | None = None


def configure(*, no_color: bool = False) -> Settings:
    """Install the process-wide settings, replacing any previous ones."""
    global _settings
    _settings = Settings(no_color=no_color)
    logger.debug("bee settings configured: no_color=%s", no_color)
    return _settings


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = settings_from_env()
    return _settings


def reset_settings() -> None:
    """Forget the current settings so the next read starts from the environment."""
    global _settings
    _settings = None


def settings_from_env(environ: dict[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    no_color = any(env.get(name, "").strip() for name in NO_COLOR_ENV_VARS)
    return Settings(no_color=no_color)
