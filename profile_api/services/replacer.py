# profile_api/services/replacer.py
"""
Write side of the profile store: PUT /profile replaces the profile and its
child collections in one transaction.

Per child table the rule is replace-all: every row for the profile is deleted
and the submitted list is inserted. A collection that was not submitted
(None after schema validation) keeps its stored rows. Links are the
exception: a single row, updated in place or inserted.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..config import settings
from ..models import Education, Link, Profile, Project, ProjectSkill, Skill, Work, utcnow
from ..schemas import EducationIn, LinksIn, ProfileUpdate, ProjectIn, SkillIn, WorkIn
from .aggregator import encode_links, get_singleton_profile

logger = logging.getLogger(__name__)

DEFAULT_PROFICIENCY = 5


# ---------- helpers ----------

def _upsert_profile(db: Session, body: ProfileUpdate) -> int:
    prof = get_singleton_profile(db)
    if prof is not None:
        prof.name = body.name
        prof.email = body.email
        prof.bio = body.bio
        prof.updated_at = utcnow()
    else:
        prof = Profile(
            id=settings.default_profile_id,
            name=body.name, email=body.email, bio=body.bio,
        )
        db.add(prof)
    db.flush()
    return prof.id


def _normalize_skill(item: Union[SkillIn, str]) -> tuple[str, int]:
    """Accept {"skill", "proficiency"} or a bare name."""
    if isinstance(item, str):
        return item, DEFAULT_PROFICIENCY
    prof = item.proficiency if item.proficiency is not None else DEFAULT_PROFICIENCY
    return item.skill, prof


def replace_education(db: Session, profile_id: int, items: List[EducationIn]) -> int:
    db.query(Education).filter(Education.profile_id == profile_id).delete()
    for e in items:
        db.add(Education(profile_id=profile_id, **e.model_dump()))
    return len(items)


def replace_skills(db: Session, profile_id: int, items: List[Union[SkillIn, str]]) -> int:
    db.query(Skill).filter(Skill.profile_id == profile_id).delete()
    for item in items:
        name, proficiency = _normalize_skill(item)
        db.add(Skill(profile_id=profile_id, skill=name, proficiency=proficiency))
    return len(items)


def replace_projects(db: Session, profile_id: int, items: List[ProjectIn]) -> int:
    """
    Drop the profile's projects together with their skill tags, then insert
    the new set. Tags come from each project's `skills` list.
    """
    old_ids = select(Project.id).where(Project.profile_id == profile_id)
    db.query(ProjectSkill).filter(ProjectSkill.project_id.in_(old_ids)).delete()
    db.query(Project).filter(Project.profile_id == profile_id).delete()

    for p in items:
        row = Project(
            profile_id=profile_id,
            title=p.title,
            description=p.description,
            links=encode_links(p.links),
        )
        row.tags = [ProjectSkill(skill=s) for s in (p.skills or [])]
        db.add(row)
        # one flush per project keeps created_at/id order equal to payload order
        db.flush()
    return len(items)


def replace_work(db: Session, profile_id: int, items: List[WorkIn]) -> int:
    db.query(Work).filter(Work.profile_id == profile_id).delete()
    for w in items:
        db.add(Work(profile_id=profile_id, **w.model_dump()))
    return len(items)


def upsert_links(db: Session, profile_id: int, links: LinksIn) -> None:
    row = db.query(Link).filter(Link.profile_id == profile_id).order_by(Link.id).first()
    data = links.model_dump()
    if row is None:
        db.add(Link(profile_id=profile_id, **data))
    else:
        for k, v in data.items():
            setattr(row, k, v)


# ---------- public API ----------

def replace_profile(db: Session, body: ProfileUpdate) -> int:
    """
    Apply a full PUT /profile payload and return the profile id.
    Commits once at the end; any failure rolls the whole request back.
    """
    counts: Dict[str, Optional[int]] = {}
    try:
        pid = _upsert_profile(db, body)

        if body.education is not None:
            counts["education"] = replace_education(db, pid, body.education)
        if body.skills is not None:
            counts["skills"] = replace_skills(db, pid, body.skills)
        if body.projects is not None:
            counts["projects"] = replace_projects(db, pid, body.projects)
        if body.work is not None:
            counts["work"] = replace_work(db, pid, body.work)
        if body.links is not None:
            upsert_links(db, pid, body.links)

        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Replaced profile profile_id=%s collections=%s links=%s",
        pid, counts or "none", body.links is not None,
    )
    return pid
