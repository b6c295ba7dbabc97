from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import InternalError
from app.dependencies import get_db
from app.logger import Logger

router = APIRouter()
logger = Logger.get_logger(__name__)


@router.get("")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Health check could not reach the database", exc_info=True)
        raise InternalError("Database connection failed") from exc
    return {"status": "ok", "database": "connected"}
