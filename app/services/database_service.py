from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import Base
from app.core.exceptions import DuplicateKeyError
from app.services.auth_service import create_admin_user
from app.logger_config import logger

# Register every model on Base.metadata
import app.models  # noqa: F401


def initialize_database(db: Session) -> None:
    """
    Create missing tables and make sure the seed admin exists.
    Safe to run any number of times.
    """
    Base.metadata.create_all(bind=db.get_bind())
    logger.info("Database tables initialized")

    try:
        create_admin_user(db, settings.SEED_ADMIN_USERNAME, settings.SEED_ADMIN_PASSWORD)
    except DuplicateKeyError:
        logger.info(f"Seed admin {settings.SEED_ADMIN_USERNAME} already exists")

    logger.info("Database initialization completed")
