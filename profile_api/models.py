"""
SQLAlchemy ORM models for the profile store: one Profile plus its child tables
(education, skills, projects + project_skills, work, links).
Child rows always point back at the profile through profile_id.
"""

from datetime import datetime, timezone
from typing import List
from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .database import Base


def utcnow() -> datetime:
    # naive UTC; SQLite has no timezone-aware column type
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Profile(Base):
    """
    The single person this deployment describes.
    At most one row exists; its id is reused by every child table.
    """
    __tablename__ = "profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(200))
    email: Mapped[str] = mapped_column(String(320))
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class Education(Base):
    __tablename__ = "education"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(ForeignKey("profile.id"), index=True)
    school: Mapped[str] = mapped_column(String(300))
    degree: Mapped[str | None] = mapped_column(String(200), nullable=True)
    field: Mapped[str | None] = mapped_column(String(200), nullable=True)
    start_date: Mapped[str | None] = mapped_column(String(60), nullable=True)  # free text, e.g. "May 2027"
    end_date: Mapped[str | None] = mapped_column(String(60), nullable=True)


class Skill(Base):
    """Named skill with a self-rated proficiency (no bound enforced)."""
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(ForeignKey("profile.id"), index=True)
    skill: Mapped[str] = mapped_column(String(120))
    proficiency: Mapped[int] = mapped_column(Integer, default=5)


class Project(Base):
    """
    Portfolio project. `links` holds a JSON-encoded list of URLs;
    see services.aggregator.encode_links / decode_links.
    """
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(ForeignKey("profile.id"), index=True)
    title: Mapped[str] = mapped_column(String(300))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    links: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    tags: Mapped[List["ProjectSkill"]] = relationship(
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProjectSkill.id",
    )


class ProjectSkill(Base):
    """
    Skill tag on a project, used only by the /projects?skill= filter.
    `skill` is free text, not a foreign key to skills.
    """
    __tablename__ = "project_skills"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), index=True
    )
    skill: Mapped[str] = mapped_column(String(120), index=True)

    project: Mapped[Project] = relationship(back_populates="tags")


class Work(Base):
    __tablename__ = "work"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(ForeignKey("profile.id"), index=True)
    company: Mapped[str] = mapped_column(String(200))
    position: Mapped[str] = mapped_column(String(200))
    start_date: Mapped[str | None] = mapped_column(String(60), nullable=True)  # sorted as text
    end_date: Mapped[str | None] = mapped_column(String(60), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Link(Base):
    """Singleton row of external links per profile; upserted, never replaced."""
    __tablename__ = "links"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(ForeignKey("profile.id"), index=True)
    github: Mapped[str | None] = mapped_column(String(512), nullable=True)
    linkedin: Mapped[str | None] = mapped_column(String(512), nullable=True)
    portfolio: Mapped[str | None] = mapped_column(String(512), nullable=True)
    resume: Mapped[str | None] = mapped_column(String(512), nullable=True)
