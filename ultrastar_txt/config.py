"""Configuration for ultrastar_txt.

Settings come from environment variables and are read once per process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

REMOTE_SOURCES_ENV = "ULTRASTAR_TXT_REMOTE_SOURCES"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Package settings.

    Parameters
    ----------
    allow_remote_sources : bool
        Whether header paths may be parsed as URLs. When disabled every
        path is local.
    """

    allow_remote_sources: bool = True


def load_settings() -> Settings:
    """Build settings from the environment.

    Returns
    -------
    Settings
        Settings with environment overrides applied.
    """
    raw = os.environ.get(REMOTE_SOURCES_ENV)
    if raw is None:
        return Settings()
    return Settings(allow_remote_sources=raw.strip().lower() not in _FALSE_VALUES)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return load_settings()
