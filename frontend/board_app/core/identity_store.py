# frontend/board_app/core/identity_store.py
# SPDX-License-Identifier: Apache-2.0
"""
Durable slot holding at most one identity token.

The token is opaque: it is stored and returned exactly as given, with no
shape checks. An empty slot and an empty string both read as absent.

Backends
--------
- :class:`FileIdentityStore`  plain-text file named after the storage key in
  a profile directory. Survives process restarts.
- :class:`NullIdentityStore`  no durable medium; reads absent, ignores writes.
- :class:`MemoryIdentityStore` process-local slot.

None of them raise. When the medium fails (permissions, missing disk, etc.)
the failure is logged at WARNING and the call degrades to the
``NullIdentityStore`` behaviour.

Only :class:`core.session.IdentitySessionManager` may call ``write`` and
``clear``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from core.constants import STORAGE_KEY

logger = logging.getLogger(__name__)


class IdentityStore(Protocol):
    def read(self) -> str | None: ...

    def write(self, identity: str) -> None: ...

    def clear(self) -> None: ...


class NullIdentityStore:
    """Store used when no durable medium is available."""

    def read(self) -> str | None:
        return None

    def write(self, identity: str) -> None:
        return None

    def clear(self) -> None:
        return None


class MemoryIdentityStore:
    def __init__(self, identity: str | None = None) -> None:
        self._identity = identity or None

    def read(self) -> str | None:
        return self._identity

    def write(self, identity: str) -> None:
        self._identity = identity or None

    def clear(self) -> None:
        self._identity = None


class FileIdentityStore:
    """Identity slot persisted as ``<directory>/<key>``.

    Args:
        directory: Profile directory; created on first write.
        key: Slot name, which is also the file name.
    """

    def __init__(self, directory: Path, key: str = STORAGE_KEY) -> None:
        self.path = Path(directory).expanduser() / key

    def read(self) -> str | None:
        try:
            value = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("identity slot %s unreadable: %s", self.path, e)
            return None
        return value or None

    def write(self, identity: str) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(identity)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning("identity slot %s not written: %s", self.path, e)

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("identity slot %s not cleared: %s", self.path, e)


def open_identity_store(directory: Path | None) -> IdentityStore:
    """Return a file-backed store, or a null store when `directory` is None."""
    if directory is None:
        logger.info("identity persistence disabled; identities last one session")
        return NullIdentityStore()
    return FileIdentityStore(directory)
