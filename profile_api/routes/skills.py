import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.queries import top_skills

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/skills", tags=["skills"])

@router.get("/top")
def get_top_skills(db: Session = Depends(get_db)):
    try:
        return top_skills(db)
    except SQLAlchemyError:
        logger.exception("Error fetching top skills")
        raise HTTPException(status_code=500, detail="Failed to fetch skills")
