import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from tourops.database import get_db

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        db_status = f"unhealthy: {e.__class__.__name__}"

    return {
        "status": "ok" if db_status == "healthy" else "degraded",
        "database": db_status
    }
