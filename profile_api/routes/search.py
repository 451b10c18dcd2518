"""
GET /search: substring lookup across projects, skills and education.
"""
from typing import Optional

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.queries import search

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])

@router.get("")
def search_profile(q: Optional[str] = None, db: Session = Depends(get_db)):
    """
    q shorter than 2 chars -> {"results": []}.
    Otherwise {"projects": [...], "skills": [...], "education": [...]}, 5 max each.
    """
    try:
        return search(db, q)
    except SQLAlchemyError:
        logger.exception("Error searching")
        raise HTTPException(status_code=500, detail="Failed to search")
