# profile_api/schemas.py
from __future__ import annotations
import logging
from typing import List, Optional, Union

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)


class EducationIn(BaseModel):
    school: str
    degree: Optional[str] = None
    field: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class SkillIn(BaseModel):
    skill: str
    proficiency: Optional[int] = None   # None -> 5


class ProjectIn(BaseModel):
    title: str
    description: Optional[str] = None
    links: Optional[List[str]] = None   # None -> []
    skills: Optional[List[str]] = None  # tags for /projects?skill=


class WorkIn(BaseModel):
    company: str
    position: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None


class LinksIn(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None
    resume: Optional[str] = None


class ProfileUpdate(BaseModel):
    """
    Full replacement payload for PUT /profile.
    A collection left out (or sent as something other than a list) keeps
    the rows already stored for it.
    """
    name: str
    email: str
    bio: Optional[str] = None
    education: Optional[List[EducationIn]] = None
    skills: Optional[List[Union[SkillIn, str]]] = None
    projects: Optional[List[ProjectIn]] = None
    work: Optional[List[WorkIn]] = None
    links: Optional[LinksIn] = None

    @field_validator("education", "skills", "projects", "work", mode="before")
    @classmethod
    def _non_list_means_unchanged(cls, v, info):
        if v is not None and not isinstance(v, list):
            logger.warning("Ignoring %s: expected a list, got %s", info.field_name, type(v).__name__)
            return None
        return v

    @field_validator("links", mode="before")
    @classmethod
    def _non_object_means_unchanged(cls, v):
        if v is not None and not isinstance(v, dict):
            logger.warning("Ignoring links: expected an object, got %s", type(v).__name__)
            return None
        return v
