from profile_api.services.aggregator import decode_links, encode_links


def test_get_profile_404_when_empty(client):
    resp = client.get("/profile")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Profile not found"}


def test_get_profile_returns_seed_document(seeded):
    resp = seeded.get("/profile")
    assert resp.status_code == 200
    data = resp.json()

    assert data["id"] == 1
    assert data["name"] == "Devesh Sarda"
    assert data["email"] == "deveshsarda5@gmail.com"
    assert data["created_at"] and data["updated_at"]

    # education keeps insertion order
    assert [e["school"] for e in data["education"]] == [
        "National Institute of Technology Delhi",
        "Cambridge Court World School (CBSE)",
    ]
    assert data["education"][0]["end_date"] == "May 2027"


def test_profile_skills_are_names_by_proficiency(seeded):
    skills = seeded.get("/profile").json()["skills"]
    assert len(skills) == 17
    assert all(isinstance(s, str) for s in skills)
    # ties keep storage order
    assert skills[:3] == ["Machine Learning", "Python", "React.js"]
    assert skills[-1] == "Gradio"


def test_profile_projects_newest_first_with_decoded_links(seeded):
    projects = seeded.get("/profile").json()["projects"]
    assert [p["title"] for p in projects] == [
        "TrashScan: Smart Waste Classifier",
        "Personal Finance Dashboard",
        "Healthcare Insurance Fraud Detection",
    ]
    for p in projects:
        assert isinstance(p["links"], list) and len(p["links"]) == 1
        assert p["links"][0].startswith("https://github.com/")
    assert projects[0]["skills"] == ["Python", "PyTorch", "EfficientNet", "OpenCV", "Gradio"]


def test_profile_work_sorted_by_start_date_text(client, payload):
    payload["work"] = [
        {"company": "A", "position": "p", "start_date": "2019-01"},
        {"company": "B", "position": "p", "start_date": "2021-06"},
        {"company": "C", "position": "p", "start_date": "May 2020"},
    ]
    client.put("/profile", json=payload)
    work = client.get("/profile").json()["work"]
    # text order, not chronological: "M" > "2" puts "May 2020" first
    assert [w["company"] for w in work] == ["C", "B", "A"]


def test_profile_links_object_from_seed(seeded):
    links = seeded.get("/profile").json()["links"]
    assert links["github"] == "https://github.com/DeveshSarda5"
    assert links["portfolio"] == ""


def test_profile_without_links_row_has_empty_object(client):
    client.put("/profile", json={"name": "N", "email": "n@example.com"})
    data = client.get("/profile").json()
    assert data["links"] == {}
    assert data["education"] == [] and data["projects"] == [] and data["work"] == []


def test_decode_links_tolerates_bad_text():
    assert decode_links(None) == []
    assert decode_links("") == []
    assert decode_links("not json") == []
    assert decode_links('{"url": "x"}') == []
    assert decode_links('["https://a", "https://b"]') == ["https://a", "https://b"]


def test_encode_links_defaults_to_empty_list():
    assert encode_links(None) == "[]"
    assert decode_links(encode_links([])) == []
