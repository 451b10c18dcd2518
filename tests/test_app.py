from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from profile_api.database import check_connection, make_engine
from profile_api.main import app
from profile_api.models import Profile, ProjectSkill, Skill
from profile_api.routes import profile as profile_routes
from profile_api.routes import projects as projects_routes
from profile_api.routes import search as search_routes
from profile_api.routes import skills as skills_routes
from profile_api.services.seed import reset_and_seed


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert datetime.fromisoformat(body["timestamp"])


def test_cors_is_open(client):
    resp = client.get("/health", headers={"Origin": "https://portfolio.example.com"})
    assert "access-control-allow-origin" in resp.headers


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert "error" in resp.json()


@pytest.mark.parametrize(
    "module, attr, method, path, message",
    [
        (profile_routes, "build_profile_view", "get", "/profile", "Failed to fetch profile"),
        (projects_routes, "list_projects", "get", "/projects", "Failed to fetch projects"),
        (skills_routes, "top_skills", "get", "/skills/top", "Failed to fetch skills"),
        (search_routes, "search", "get", "/search?q=python", "Failed to search"),
    ],
)
def test_store_failures_become_generic_500(client, monkeypatch, module, attr, method, path, message):
    def broken(*args, **kwargs):
        raise SQLAlchemyError("connection lost: secret detail")

    monkeypatch.setattr(module, attr, broken)
    resp = getattr(client, method)(path)
    assert resp.status_code == 500
    assert resp.json() == {"error": message}
    assert "secret" not in resp.text


def test_unexpected_error_hits_catch_all(client, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(projects_routes, "list_projects", broken)
    resp = TestClient(app, raise_server_exceptions=False).get("/projects")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_check_connection_raises_for_unreachable_store(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path}/missing/dir/profile.db")
    with pytest.raises(OperationalError):
        check_connection(eng)
    eng.dispose()


def test_reset_and_seed_is_repeatable(session_factory):
    db = session_factory()
    try:
        reset_and_seed(db)
        reset_and_seed(db)
        assert db.query(Profile).count() == 1
        assert db.query(Skill).count() == 17
        assert db.query(ProjectSkill).count() == 16
    finally:
        db.close()
