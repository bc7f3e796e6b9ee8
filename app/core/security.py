import secrets
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol


@dataclass
class SessionData:
    """What a session token resolves to."""
    user_type: str
    user_data: Dict[str, Any] = field(default_factory=dict)


class SessionStore(Protocol):
    def issue(self, user_type: str, user_data: Dict[str, Any]) -> str: ...

    def resolve(self, token: Optional[str]) -> Optional[SessionData]: ...

    def revoke(self, token: Optional[str]) -> None: ...


class InMemorySessionStore:
    """
    Opaque token -> session map held in process memory.

    Tokens never expire and are lost on restart. A persistent store can
    replace this one as long as it offers issue/resolve/revoke.
    """

    def __init__(self):
        self._sessions: Dict[str, SessionData] = {}
        self._lock = threading.Lock()

    def issue(self, user_type: str, user_data: Dict[str, Any]) -> str:
        token = generate_token()
        with self._lock:
            self._sessions[token] = SessionData(user_type=user_type, user_data=dict(user_data))
        return token

    def resolve(self, token: Optional[str]) -> Optional[SessionData]:
        if not token:
            return None
        with self._lock:
            return self._sessions.get(token)

    def revoke(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


def generate_token() -> str:
    return secrets.token_urlsafe(32)


session_store = InMemorySessionStore()
