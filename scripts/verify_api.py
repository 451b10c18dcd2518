# scripts/verify_api.py
"""
Smoke-check a running server: python scripts/verify_api.py
Base URL comes from API_URL (default http://localhost:3001).
Exits 1 if any check fails.
"""
import os
import sys
from typing import Callable

import httpx

BASE_URL = os.getenv("API_URL", "http://localhost:3001")
passed = 0
failed = 0


def check(name: str, fn: Callable[[httpx.Client], None], client: httpx.Client) -> None:
    global passed, failed
    try:
        fn(client)
        print(f"PASS {name}")
        passed += 1
    except (AssertionError, httpx.HTTPError, ValueError, KeyError) as e:
        print(f"FAIL {name}: {type(e).__name__}: {e}")
        failed += 1


def _health(c: httpx.Client):
    r = c.get("/health")
    assert r.status_code == 200, r.status_code
    assert r.json()["status"] == "ok"


def _profile(c: httpx.Client):
    r = c.get("/profile")
    assert r.status_code == 200, r.status_code
    body = r.json()
    assert body["name"] and body["email"]
    assert isinstance(body["skills"], list)
    assert all(isinstance(p["links"], list) for p in body["projects"])


def _projects(c: httpx.Client):
    r = c.get("/projects")
    assert r.status_code == 200, r.status_code
    assert isinstance(r.json(), list)


def _projects_filtered(c: httpx.Client):
    everything = {p["id"] for p in c.get("/projects").json()}
    r = c.get("/projects", params={"skill": "Python"})
    assert r.status_code == 200, r.status_code
    subset = {p["id"] for p in r.json()}
    assert subset <= everything, "filter returned unknown projects"


def _top_skills(c: httpx.Client):
    r = c.get("/skills/top")
    assert r.status_code == 200, r.status_code
    rows = r.json()
    assert len(rows) <= 10
    profs = [s["proficiency"] for s in rows]
    assert profs == sorted(profs, reverse=True), "not sorted by proficiency"


def _search(c: httpx.Client):
    r = c.get("/search", params={"q": "Python"})
    assert r.status_code == 200, r.status_code
    body = r.json()
    for key in ("projects", "skills", "education"):
        assert key in body and len(body[key]) <= 5


def _search_short(c: httpx.Client):
    r = c.get("/search", params={"q": "P"})
    assert r.status_code == 200, r.status_code
    assert r.json() == {"results": []}


def main() -> int:
    print(f"API checks against {BASE_URL}\n")
    with httpx.Client(base_url=BASE_URL, timeout=10) as client:
        check("GET /health returns 200", _health, client)
        check("GET /profile returns the composite profile", _profile, client)
        check("GET /projects returns a list", _projects, client)
        check("GET /projects?skill=Python is a subset", _projects_filtered, client)
        check("GET /skills/top is capped and ordered", _top_skills, client)
        check("GET /search?q=Python returns three lists", _search, client)
        check("GET /search?q=P short-circuits", _search_short, client)
    print(f"\n{passed} passed, {failed} failed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
