from pydantic import Field
from typing import Any, Dict, Optional
from app.schemas.base import CamelModel


class UserLoginRequest(CamelModel):
    user_type: str = Field(..., min_length=1)
    identifier: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminLoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionUser(CamelModel):
    user_type: str
    user_data: Dict[str, Any]


class LoginResponse(CamelModel):
    success: bool = True
    token: str
    user: SessionUser


class AdminSummary(CamelModel):
    id: int
    username: str


class AdminLoginResponse(CamelModel):
    success: bool = True
    token: str
    admin: AdminSummary


class CurrentSessionResponse(CamelModel):
    is_authenticated: bool
    user: Optional[SessionUser] = None


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1, max_length=255)


class LogoutResponse(CamelModel):
    success: bool = True
