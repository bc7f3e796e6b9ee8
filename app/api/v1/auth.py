from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional
from app.core.dependencies import (
    get_db,
    get_bearer_token,
    get_current_session,
    get_current_admin,
    get_session_store
)
from app.core.exceptions import InvalidCredentialsError
from app.core.security import SessionData, SessionStore
from app.services.auth_service import (
    USER_TYPE_ADMIN,
    admin_session_data,
    authenticate_admin,
    authenticate_user,
    change_admin_password
)
from app.schemas.auth import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminSummary,
    ChangePasswordRequest,
    CurrentSessionResponse,
    LoginResponse,
    LogoutResponse,
    SessionUser,
    UserLoginRequest
)
from app.schemas.base import MessageResponse
from app.logger_config import logger

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    login_data: UserLoginRequest,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store)
):
    """
    Unified login for admins and employees.
    Returns an opaque session token.
    """
    logger.info(f"Login attempt for {login_data.user_type} '{login_data.identifier}'")

    user_type, user_data = authenticate_user(
        db, login_data.user_type, login_data.identifier, login_data.password
    )
    token = store.issue(user_type, user_data)

    logger.info(f"{user_type} '{login_data.identifier}' logged in successfully")
    return LoginResponse(
        token=token,
        user=SessionUser(user_type=user_type, user_data=user_data)
    )


@router.post("/admin-login", response_model=AdminLoginResponse)
def admin_login(
    login_data: AdminLoginRequest,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store)
):
    """
    Legacy admin login by username and password.
    """
    admin = authenticate_admin(db, login_data.username, login_data.password)
    token = store.issue(USER_TYPE_ADMIN, admin_session_data(admin))

    logger.info(f"Admin {admin.username} logged in successfully")
    return AdminLoginResponse(
        token=token,
        admin=AdminSummary(id=admin.id, username=admin.username)
    )


@router.post("/logout", response_model=LogoutResponse)
def logout(
    token: Optional[str] = Depends(get_bearer_token),
    store: SessionStore = Depends(get_session_store)
):
    """
    Forget the session of the bearer token, if any.
    """
    store.revoke(token)
    logger.info("User logged out")
    return LogoutResponse()


@router.get("/me", response_model=CurrentSessionResponse)
def get_me(current_session: Optional[SessionData] = Depends(get_current_session)):
    """
    Describe the current session. Never fails; unknown tokens are unauthenticated.
    """
    if current_session is None:
        return CurrentSessionResponse(is_authenticated=False)

    return CurrentSessionResponse(
        is_authenticated=True,
        user=SessionUser(
            user_type=current_session.user_type,
            user_data=current_session.user_data
        )
    )


@router.post("/change-password", response_model=MessageResponse)
def change_password_route(
    password_data: ChangePasswordRequest,
    current_admin: SessionData = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """
    Change the password of the logged in admin.
    """
    username = current_admin.user_data.get("username")
    try:
        change_admin_password(
            db, username, password_data.current_password, password_data.new_password
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return MessageResponse(message="Password changed successfully")
