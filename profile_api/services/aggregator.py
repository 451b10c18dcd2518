# profile_api/services/aggregator.py
"""
Read side of the profile store: one profile row plus every child collection,
flattened into the JSON document served by GET /profile.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from ..models import Education, Link, Profile, Project, Skill, Work


# ---------- project links <-> stored text ----------

def encode_links(links: Optional[List[str]]) -> str:
    """Serialize a project's URL list for the `projects.links` column."""
    return json.dumps(list(links or []))


def decode_links(raw: Optional[str]) -> List[str]:
    """Inverse of encode_links. Unset, malformed or non-list text reads as []."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        return []
    if not isinstance(data, list):
        return []
    return [str(u) for u in data]


# ---------- row -> dict ----------

def _columns(row: Any, names: List[str]) -> Dict[str, Any]:
    return {n: getattr(row, n) for n in names}


_PROFILE_COLS = ["id", "name", "email", "bio", "created_at", "updated_at"]
_EDU_COLS = ["id", "profile_id", "school", "degree", "field", "start_date", "end_date"]
_WORK_COLS = ["id", "profile_id", "company", "position", "start_date", "end_date", "description"]
_LINK_COLS = ["id", "profile_id", "github", "linkedin", "portfolio", "resume"]


def project_to_dict(p: Project) -> Dict[str, Any]:
    return {
        "id": p.id,
        "profile_id": p.profile_id,
        "title": p.title,
        "description": p.description,
        "links": decode_links(p.links),
        "skills": [t.skill for t in p.tags],
        "created_at": p.created_at,
    }


# ---------- queries ----------

def get_singleton_profile(db: Session) -> Optional[Profile]:
    """The one profile row, or None. Lowest id wins if more ever exist."""
    return db.query(Profile).order_by(Profile.id).first()


def projects_newest_first(db: Session, profile_id: int):
    return (
        db.query(Project)
        .filter(Project.profile_id == profile_id)
        .order_by(Project.created_at.desc(), Project.id.desc())
    )


def build_profile_view(db: Session) -> Optional[Dict[str, Any]]:
    """
    Compose the profile document. Returns None when no profile exists
    (the route turns that into a 404).

    Ordering: education by insertion, skills by proficiency desc,
    projects newest first, work by start_date desc (plain string compare).
    """
    prof = get_singleton_profile(db)
    if prof is None:
        return None
    pid = prof.id

    education = (
        db.query(Education)
        .filter(Education.profile_id == pid)
        .order_by(Education.id)
        .all()
    )
    skills = (
        db.query(Skill.skill)
        .filter(Skill.profile_id == pid)
        .order_by(Skill.proficiency.desc(), Skill.id)
        .all()
    )
    projects = projects_newest_first(db, pid).all()
    work = (
        db.query(Work)
        .filter(Work.profile_id == pid)
        .order_by(Work.start_date.desc(), Work.id)
        .all()
    )
    links = db.query(Link).filter(Link.profile_id == pid).order_by(Link.id).first()

    view = _columns(prof, _PROFILE_COLS)
    view.update(
        education=[_columns(e, _EDU_COLS) for e in education],
        skills=[s.skill for s in skills],
        projects=[project_to_dict(p) for p in projects],
        work=[_columns(w, _WORK_COLS) for w in work],
        links=_columns(links, _LINK_COLS) if links else {},
    )
    return view
