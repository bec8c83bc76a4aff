# frontend/board_app/core/config.py
# SPDX-License-Identifier: Apache-2.0
"""
Centralized, immutable application configuration for the board client.

This module defines a frozen `Settings` dataclass whose fields are populated
from environment variables (loaded via python-dotenv if a `.env` file is
present). The resulting singleton `settings` is imported by other modules to
avoid scattering `os.getenv` calls throughout the codebase.

Design goals
------------
- **Single source of truth**: The remote API base URL is read exactly once,
  here, at process start. Other modules consume `settings` rather than
  reading environment variables directly.
- **Immutability**: `@dataclass(frozen=True)` prevents accidental mutation at
  runtime. Changes require a process restart (or re-instantiation in tests).
- **Fast import**: Only minimal work at import time (dotenv load + dataclass
  construction). No network calls or validation here.
- **No silent default for the API**: `BOARD_API_URL` has no default. When it
  is unset every remote operation fails fast with `ConfigurationMissing`
  instead of talking to a guessed host.

Testing
-------
Set environment variables **before** importing this module (see
`tests/conftest.py`), or build a `Settings` directly with `Settings.from_env`
and a dictionary:
    >>> from core.config import Settings
    >>> s = Settings.from_env({"BOARD_API_URL": "http://localhost:8080/api/"})
    >>> s.BOARD_API_URL
    'http://localhost:8080/api'
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load key-value pairs from a local `.env` file into process environment, if
# present. `override=False` by default, so pre-set env vars take precedence.
load_dotenv()

#: Value of `BOARD_PROFILE_DIR` that turns identity persistence off.
PERSISTENCE_DISABLED = "none"

_DEFAULT_PROFILE_DIR = "~/.anon_board"
_DEFAULT_TIMEOUT_SECONDS = 10.0


def _clean_url(raw: str | None) -> str | None:
    """Strip whitespace and trailing slashes; blank means "not configured"."""
    value = (raw or "").strip().rstrip("/")
    return value or None


def _parse_timeout(raw: str | None) -> float:
    try:
        value = float(raw) if raw else _DEFAULT_TIMEOUT_SECONDS
    except ValueError:
        return _DEFAULT_TIMEOUT_SECONDS
    return value if value > 0 else _DEFAULT_TIMEOUT_SECONDS


def _parse_profile_dir(raw: str | None) -> Path | None:
    value = (raw or _DEFAULT_PROFILE_DIR).strip()
    if value.lower() == PERSISTENCE_DISABLED:
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class Settings:
    """
    Immutable application settings.

    Each attribute mirrors an environment variable of the same name; see the
    repository `.env.example` for a template of common values.
    """

    # --- Remote board API -----------------------------------------------------
    # Base URL of the board API (e.g. "https://example.org/api"). `None` when
    # unset; the client then refuses every call with ConfigurationMissing.
    BOARD_API_URL: str | None = None
    # Transport-level timeout for each HTTP call, in seconds.
    BOARD_REQUEST_TIMEOUT: float = _DEFAULT_TIMEOUT_SECONDS

    # --- Identity persistence ---------------------------------------------------
    # Directory holding the durable identity slot. `None` disables persistence
    # (the identity then lives only as long as the Streamlit session).
    BOARD_PROFILE_DIR: Path | None = None

    # --- Logging ------------------------------------------------------------------
    BOARD_LOG_LEVEL: str = "INFO"
    # "text" for human-readable lines, "json" for one JSON object per line.
    BOARD_LOG_FORMAT: str = "text"

    @property
    def api_configured(self) -> bool:
        """True when a base URL for the remote API is available."""
        return self.BOARD_API_URL is not None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from a mapping of environment variables.

        Args:
            env: Source mapping; defaults to `os.environ`.

        Returns:
            A populated `Settings` instance. Malformed numeric values fall back
            to their documented defaults rather than raising.
        """
        env = os.environ if env is None else env
        return cls(
            BOARD_API_URL=_clean_url(env.get("BOARD_API_URL")),
            BOARD_REQUEST_TIMEOUT=_parse_timeout(env.get("BOARD_REQUEST_TIMEOUT")),
            BOARD_PROFILE_DIR=_parse_profile_dir(env.get("BOARD_PROFILE_DIR")),
            BOARD_LOG_LEVEL=(env.get("BOARD_LOG_LEVEL") or "INFO").upper(),
            BOARD_LOG_FORMAT=(env.get("BOARD_LOG_FORMAT") or "text").lower(),
        )


# Singleton settings object imported by consumers.
settings = Settings.from_env()
