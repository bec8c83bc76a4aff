# frontend/board_app/core/session.py
# SPDX-License-Identifier: Apache-2.0
"""
Identity session: the one owner of "who am I" on this client.

State machine
-------------
``Resolving`` (initial) → ``Resolved``, exactly once, when :meth:`resolve`
performs the single synchronous read of the identity store. No network call
is involved. While resolving, :meth:`set_identity` is accepted but ignored.

Ownership
---------
The manager is the only writer of the identity store. Every consumer (views,
controllers, sidebar) receives the manager through the render context and
reads a :class:`SessionState` snapshot; identity changes only through
:meth:`set_identity`.

Usage
-----
    store = open_identity_store(settings.BOARD_PROFILE_DIR)
    session = IdentitySessionManager.start(store)
    session.get_session_state()   # SessionState(identity=..., resolving=False)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.identity_store import IdentityStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    identity: str | None
    resolving: bool


class IdentitySessionManager:
    def __init__(self, store: IdentityStore) -> None:
        self._store = store
        self._identity: str | None = None
        self._resolving = True

    @classmethod
    def start(cls, store: IdentityStore) -> IdentitySessionManager:
        """Create a manager and resolve it against `store` immediately."""
        manager = cls(store)
        manager.resolve()
        return manager

    def resolve(self) -> SessionState:
        """Read the stored identity once and leave the resolving state.

        Calling this again after resolution is a no-op; the store is not read
        a second time.
        """
        if self._resolving:
            self._identity = self._store.read() or None
            self._resolving = False
            logger.debug("identity resolved (present=%s)", self._identity is not None)
        return self.get_session_state()

    def set_identity(self, identity: str | None) -> None:
        """Replace (or, with None, clear) the active identity and persist it."""
        if self._resolving:
            logger.debug("set_identity ignored while resolving")
            return
        identity = identity or None
        self._identity = identity
        if identity is None:
            self._store.clear()
            logger.info("identity cleared")
        else:
            self._store.write(identity)
            logger.info("identity set")

    def get_session_state(self) -> SessionState:
        return SessionState(identity=self._identity, resolving=self._resolving)

    @property
    def identity(self) -> str | None:
        return self._identity

    @property
    def resolving(self) -> bool:
        return self._resolving
