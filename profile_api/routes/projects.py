from typing import Optional

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.queries import list_projects

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])

@router.get("")
def get_projects(skill: Optional[str] = None, db: Session = Depends(get_db)):
    try:
        return list_projects(db, skill=skill)
    except SQLAlchemyError:
        logger.exception("Error fetching projects skill=%r", skill)
        raise HTTPException(status_code=500, detail="Failed to fetch projects")
