from __future__ import annotations

import threading
import uuid
from typing import Dict, Optional

from ...engine.game import GameState


class InMemorySessionStore:
    """Thread-safe in-memory store of position sessions.

    Each session owns one GameState; callers replace it wholesale when the
    position changes.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._states: Dict[str, GameState] = {}

    def create(self, state: Optional[GameState] = None) -> str:
        """Store ``state`` (start position by default) and return its id."""
        sid = str(uuid.uuid4())
        if state is None:
            state = GameState.new()
        with self._lock:
            self._states[sid] = state
        return sid

    def get(self, session_id: str) -> Optional[GameState]:
        with self._lock:
            return self._states.get(session_id)

    def set(self, session_id: str, state: GameState) -> None:
        with self._lock:
            if session_id not in self._states:
                raise KeyError(session_id)
            self._states[session_id] = state

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._states.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)
