from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.dependencies import get_db
from app.services.database_service import initialize_database
from app.schemas.base import MessageResponse
from app.logger_config import logger

router = APIRouter()


@router.post("/initialize-db", response_model=MessageResponse)
def initialize_db_route(db: Session = Depends(get_db)):
    """
    Create missing tables and the seed admin. Safe to call repeatedly.
    """
    logger.info("Initializing database...")
    initialize_database(db)
    return MessageResponse(message="Database initialized successfully")
