# profile_api/routes/profile.py
from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import ProfileUpdate
from ..services.aggregator import build_profile_view
from ..services.replacer import replace_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
def get_profile(db: Session = Depends(get_db)):
    """Profile columns plus education, skills, projects, work and links."""
    try:
        view = build_profile_view(db)
    except SQLAlchemyError:
        logger.exception("Error fetching profile")
        raise HTTPException(status_code=500, detail="Failed to fetch profile")
    if view is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return view


@router.put("")
def put_profile(body: ProfileUpdate, db: Session = Depends(get_db)):
    """
    Replace the profile. Each submitted collection replaces the stored one;
    omitted collections are kept. Links are updated in place.
    """
    try:
        replace_profile(db, body)
    except SQLAlchemyError:
        logger.exception("Error updating profile")
        raise HTTPException(status_code=500, detail="Failed to update profile")
    return {"success": True, "message": "Profile updated"}
