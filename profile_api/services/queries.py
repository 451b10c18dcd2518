# profile_api/services/queries.py
from __future__ import annotations
from typing import Any, Dict, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from ..models import Education, Project, ProjectSkill, Skill
from .aggregator import get_singleton_profile, project_to_dict, projects_newest_first

TOP_SKILLS_LIMIT = 10
SEARCH_LIMIT = 5
MIN_QUERY_LENGTH = 2


def _profile_id(db: Session) -> Optional[int]:
    prof = get_singleton_profile(db)
    return prof.id if prof else None


def list_projects(db: Session, skill: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Projects newest first. With `skill`, only projects tagged with exactly
    that string (case-sensitive); each project appears once.
    """
    pid = _profile_id(db)
    if pid is None:
        return []
    q = projects_newest_first(db, pid)
    if skill:
        tagged = select(ProjectSkill.project_id).where(ProjectSkill.skill == skill)
        q = q.filter(Project.id.in_(tagged))
    return [project_to_dict(p) for p in q.all()]


def top_skills(db: Session, limit: int = TOP_SKILLS_LIMIT) -> List[Dict[str, Any]]:
    """Highest proficiency first; ties keep storage order."""
    pid = _profile_id(db)
    if pid is None:
        return []
    rows = (
        db.query(Skill.skill, Skill.proficiency)
        .filter(Skill.profile_id == pid)
        .order_by(Skill.proficiency.desc(), Skill.id)
        .limit(limit)
        .all()
    )
    return [{"skill": r.skill, "proficiency": r.proficiency} for r in rows]


def search(db: Session, term: Optional[str]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Case-insensitive substring search over projects, skills and education.
    Terms shorter than MIN_QUERY_LENGTH short-circuit to {"results": []}
    without touching the store.
    """
    if not term or len(term) < MIN_QUERY_LENGTH:
        return {"results": []}

    pid = _profile_id(db)
    if pid is None:
        return {"projects": [], "skills": [], "education": []}

    def like(col):
        return col.icontains(term, autoescape=True)

    projects = (
        db.query(Project.title, Project.description)
        .filter(Project.profile_id == pid, or_(like(Project.title), like(Project.description)))
        .order_by(Project.id)
        .limit(SEARCH_LIMIT)
        .all()
    )
    skills = (
        db.query(Skill.skill)
        .filter(Skill.profile_id == pid, like(Skill.skill))
        .distinct()
        .order_by(Skill.skill)
        .limit(SEARCH_LIMIT)
        .all()
    )
    education = (
        db.query(Education.school, Education.degree, Education.field)
        .filter(
            Education.profile_id == pid,
            or_(like(Education.school), like(Education.degree), like(Education.field)),
        )
        .order_by(Education.id)
        .limit(SEARCH_LIMIT)
        .all()
    )
    return {
        "projects": [{"title": r.title, "description": r.description} for r in projects],
        "skills": [{"skill": r.skill} for r in skills],
        "education": [{"school": r.school, "degree": r.degree, "field": r.field} for r in education],
    }
