"""
Purpose:
- Keep one Orchestrator per browser session, in memory only.
- Session ids are opaque random tokens carried in a cookie.
- Bounded: at most settings.session_max_count sessions, each dropped after
  settings.session_ttl_s without use (cachetools TTLCache, LRU on overflow).
"""

from __future__ import annotations
import secrets
import time
from typing import Callable, Optional, Tuple

from cachetools import TTLCache

from ..core.settings import settings
from .orchestrator import Orchestrator

_STORE_SINGLETON = None  # cached instance

class SessionStore:
    def __init__(self, factory: Callable[[], Orchestrator] = Orchestrator,
                 max_count: Optional[int] = None, ttl_s: Optional[float] = None,
                 timer: Callable[[], float] = time.monotonic):
        self._factory = factory
        self._sessions: TTLCache = TTLCache(
            maxsize=max_count or settings.session_max_count,
            ttl=ttl_s or settings.session_ttl_s,
            timer=timer,
        )

    def get(self, session_id: Optional[str]) -> Optional[Orchestrator]:
        """Look up without creating; a hit counts as use and restarts the TTL."""
        if not session_id:
            return None
        orch = self._sessions.get(session_id)
        if orch is not None:
            self._sessions[session_id] = orch
        return orch

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, Orchestrator]:
        orch = self.get(session_id)
        if orch is not None:
            return session_id, orch
        new_id = secrets.token_urlsafe(16)
        orch = self._factory()
        self._sessions[new_id] = orch
        return new_id, orch

    def __len__(self) -> int:
        return len(self._sessions)

def get_store() -> SessionStore:
    global _STORE_SINGLETON
    if _STORE_SINGLETON is None:
        _STORE_SINGLETON = SessionStore()
    return _STORE_SINGLETON
