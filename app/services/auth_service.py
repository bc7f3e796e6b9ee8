from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Any, Dict, Optional, Tuple
from app.core.config import settings
from app.core.exceptions import (
    DuplicateKeyError,
    InvalidCredentialsError,
    StorageError,
    UnsupportedUserTypeError,
)
from app.models.admin_user import AdminUser
from app.logger_config import logger


USER_TYPE_ADMIN = "admin"
USER_TYPE_EMPLOYEE = "employee"


def get_admin_by_username(db: Session, username: str) -> Optional[AdminUser]:
    """Get admin user by username."""
    return db.query(AdminUser).filter(AdminUser.username == username).first()


def admin_session_data(admin: AdminUser) -> Dict[str, Any]:
    """Public view of an admin kept in the session. Never carries the password."""
    return {
        "id": admin.id,
        "username": admin.username,
        "role": admin.role,
        "createdAt": admin.created_at.isoformat() if admin.created_at else None,
    }


def employee_session_data(identifier: str) -> Dict[str, Any]:
    """Employees are not stored; their identity lives in the session only."""
    return {
        "id": 0,
        "username": identifier,
        "role": USER_TYPE_EMPLOYEE,
    }


def create_admin_user(db: Session, username: str, password: str, role: str = "admin") -> AdminUser:
    """Create a new admin user."""
    if get_admin_by_username(db, username):
        raise DuplicateKeyError(f"Admin '{username}' already exists")

    admin = AdminUser(username=username, password=password, role=role)
    db.add(admin)

    try:
        db.commit()
        db.refresh(admin)
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Error creating admin user: {str(e)}")
        raise DuplicateKeyError(f"Admin '{username}' already exists")

    logger.info(f"Admin user {username} created")
    return admin


def authenticate_admin(db: Session, username: str, password: str) -> AdminUser:
    """Authenticate an admin by username and password."""
    admin = get_admin_by_username(db, username)
    if not admin or admin.password != password:
        raise InvalidCredentialsError("Incorrect username or password")
    return admin


def authenticate_user(
    db: Session,
    user_type: str,
    identifier: str,
    password: str,
) -> Tuple[str, Dict[str, Any]]:
    """
    Unified login.

    Returns (user_type, user_data). Admins are checked against the database,
    employees share one password and get an ephemeral identity.
    """
    if user_type == USER_TYPE_ADMIN:
        admin = authenticate_admin(db, identifier, password)
        return USER_TYPE_ADMIN, admin_session_data(admin)

    if user_type == USER_TYPE_EMPLOYEE:
        if password != settings.EMPLOYEE_PASSWORD:
            raise InvalidCredentialsError("Incorrect login information")
        return USER_TYPE_EMPLOYEE, employee_session_data(identifier)

    raise UnsupportedUserTypeError(f"Unsupported user type '{user_type}'")


def change_admin_password(
    db: Session,
    username: str,
    current_password: str,
    new_password: str,
) -> bool:
    """Change admin password after checking the current one."""
    admin = get_admin_by_username(db, username)
    if not admin or admin.password != current_password:
        raise InvalidCredentialsError("Current password is incorrect")

    admin.password = new_password

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error changing password of {username}: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Password of admin {username} changed")
    return True
