from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from typing import Optional
from app.core.database import SessionLocal
from app.core.exceptions import UnauthorizedError
from app.core.security import SessionData, SessionStore, session_store



def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_store() -> SessionStore:
    """Dependency returning the process-wide session store."""
    return session_store


# auto_error=False so that /me and /logout work without a header
bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    if credentials is None:
        return None
    return credentials.credentials


def get_current_session(
    token: Optional[str] = Depends(get_bearer_token),
    store: SessionStore = Depends(get_session_store),
) -> Optional[SessionData]:
    """
    Resolve the bearer token to a session.
    Unknown or missing tokens resolve to None rather than an error.
    """
    return store.resolve(token)


def get_current_admin(
    current_session: Optional[SessionData] = Depends(get_current_session),
) -> SessionData:
    """
    Require an admin session.
    Raises UnauthorizedError (401) for missing tokens and non-admin sessions.
    """
    if current_session is None or current_session.user_type != "admin":
        raise UnauthorizedError("Not logged in or not permitted")
    return current_session
