from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from profile_api.database import get_db, init_schema, make_engine
from profile_api.main import app
from profile_api.services.seed import reset_and_seed


@pytest.fixture
def session_factory() -> Iterator[sessionmaker]:
    """Fresh in-memory store per test, foreign keys enforced."""
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_schema(engine)
    TestingSessionLocal = sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )
    yield TestingSessionLocal
    engine.dispose()


@pytest.fixture
def client(session_factory) -> Iterator[TestClient]:
    def override_get_db() -> Iterator[Session]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(client, session_factory) -> TestClient:
    db = session_factory()
    try:
        reset_and_seed(db)
    finally:
        db.close()
    return client


@pytest.fixture
def payload() -> dict:
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "bio": "Analyst of engines.",
        "education": [
            {"school": "Home Tutoring", "degree": "Private", "field": "Mathematics",
             "start_date": "1828", "end_date": "1835"},
            {"school": "University of London", "degree": None, "field": "Logic"},
        ],
        "skills": [
            {"skill": "Mathematics", "proficiency": 10},
            {"skill": "Poetry", "proficiency": 4},
            "Translation",
        ],
        "projects": [
            {"title": "Notes on the Analytical Engine", "description": "Note G",
             "links": ["https://example.com/notes", "https://example.com/g"],
             "skills": ["Mathematics", "Algorithms"]},
            {"title": "Flyology", "description": "Flying machine sketches"},
        ],
        "work": [
            {"company": "Babbage & Co", "position": "Collaborator",
             "start_date": "1842", "end_date": "1843", "description": "Translation and notes"},
            {"company": "Self", "position": "Researcher", "start_date": "1835"},
        ],
        "links": {"github": "https://github.com/ada", "linkedin": None,
                  "portfolio": "https://ada.example.com", "resume": None},
    }
