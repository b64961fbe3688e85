import pytest
from fastapi.testclient import TestClient

from roomfit.main import app


@pytest.fixture
def client():
    return TestClient(app)


ROOM = {"width": 20, "depth": 14, "height": 10}


def chair_json(id, cx, cy, **extra):
    return {"id": id, "kind": "chair", "cx": cx, "cy": cy, "w": 1.6, "d": 1.6, **extra}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_root_and_openapi_tags(client):
    assert "/api/v1" in client.get("/").json()["message"]
    tags = [t["name"] for t in client.get("/openapi.json").json()["tags"]]
    assert tags == ["Analysis", "Optimization", "Presets", "Health"]


def test_analyze_reports_overlap_with_area(client):
    response = client.post("/api/v1/analyze", json={
        "room": ROOM,
        "objects": [chair_json("a", 10, 7), chair_json("b", 10, 7)],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["error_count"] == 1
    assert data["warning_count"] == 1

    overlap = data["violations"][0]
    assert overlap["constraint_name"] == "overlap"
    assert overlap["severity"] == "error"
    assert overlap["objects_involved"] == ["a", "b"]
    assert overlap["overlap_area"] == pytest.approx(2.56)
    assert data["layers"]["floor"] == 2


def test_analyze_accepts_attach_to_alias(client):
    response = client.post("/api/v1/analyze", json={
        "room": ROOM,
        "objects": [
            {"id": "desk", "kind": "custom", "cx": 10, "cy": 7, "w": 4, "d": 2},
            {"id": "lamp", "kind": "custom", "cx": 10, "cy": 7, "w": 1, "d": 1, "attachTo": "desk"},
        ],
    })
    assert response.json()["error_count"] == 0


def test_analyze_rejects_bad_room(client):
    response = client.post("/api/v1/analyze", json={
        "room": {"width": 0, "depth": 14},
        "objects": [],
    })
    assert response.status_code == 422


def test_resolve_endpoint(client):
    response = client.post("/api/v1/optimize/resolve", json={
        "room": ROOM,
        "objects": [chair_json("a", 10, 7), chair_json("b", 10, 7)],
        "iterations": 8,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["error_count"] == 0
    assert data["objects"][0]["cx"] != data["objects"][1]["cx"]


def test_resolve_iterations_are_bounded(client):
    response = client.post("/api/v1/optimize/resolve", json={
        "room": ROOM, "objects": [], "iterations": 0,
    })
    assert response.status_code == 422


def test_optimize_baseline_scene(client):
    scene = client.get("/api/v1/presets/scene").json()
    response = client.post("/api/v1/optimize", json={
        "room": scene["room"],
        "objects": scene["objects"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["is_valid"] is True
    assert data["passes_used"] == 1
    assert "tv" in data["moved_ids"]


def test_quick_optimize_caps_passes(client):
    response = client.post("/api/v1/optimize/quick", json={
        "room": ROOM,
        "objects": [{"id": "t", "kind": "table", "cx": 1, "cy": 7, "w": 7, "d": 3}],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["passes_used"] == 2
    assert data["is_valid"] is False
    assert data["explanation"].startswith("Stopped after 2 passes")


def test_optimize_respects_custom_policy(client):
    response = client.post("/api/v1/optimize", json={
        "room": ROOM,
        "objects": [{"id": "t", "kind": "table", "cx": 1, "cy": 7, "w": 7, "d": 3}],
        "policy": {"max_warnings": 5, "max_passes": 3},
    })
    assert response.json()["passes_used"] == 3


def test_presets(client):
    rooms = client.get("/api/v1/presets/rooms").json()
    assert rooms["compact"]["width"] == 18
    assert client.get("/api/v1/presets/rooms/interview").json()["depth"] == 14
    assert client.get("/api/v1/presets/rooms/ballroom").status_code == 404
    assert client.get("/api/v1/presets/objects").json()["chair"]["w"] == 1.6
