from __future__ import annotations

from datetime import datetime

import pytest

from classroom_attendance.attendance import service as attendance_service_module
from classroom_attendance.core.exceptions import StoreIOError
from classroom_attendance.main import create_app
from classroom_attendance.store.memory_store import InMemoryDocumentStore


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(attendance_service_module, "now_utc", lambda: datetime(2024, 1, 1, 9, 0))
    return create_app(store=InMemoryDocumentStore())


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, user_id: str, name: str) -> None:
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["name"] = name


def register(client, user_id: str, name: str, role: str) -> None:
    login(client, user_id, name)
    resp = client.post("/me/profile", json={"role": role})
    assert resp.status_code == 201


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_me_routes_to_landing_without_profile(client):
    assert client.get("/me").get_json()["dashboard"] == "landing"

    login(client, "U1", "Una")
    assert client.get("/me").get_json()["dashboard"] == "landing"

    client.post("/me/profile", json={"role": "teacher"})
    assert client.get("/me").get_json()["dashboard"] == "teacher"


def test_me_falls_back_to_landing_when_store_fails(client, app, monkeypatch):
    login(client, "U1", "Una")
    container = app.extensions["container"]

    def boom(user_id):
        raise StoreIOError("network down")

    monkeypatch.setattr(container.user_service, "resolve_role", boom)
    body = client.get("/me").get_json()

    assert body["dashboard"] == "landing"


def test_requires_login_and_role(client):
    assert client.get("/teacher/classes").status_code == 401

    register(client, "S1", "Ana", "student")
    assert client.get("/teacher/classes").status_code == 403
    assert client.post("/teacher/classes", json={"name": "x", "description": "y"}).status_code == 403


def test_create_class_validation(client):
    register(client, "T1", "Ms. Lee", "teacher")

    resp = client.post("/teacher/classes", json={"name": "Algebra", "description": ""})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_non_text_fields_are_rejected_as_bad_input(client):
    register(client, "T1", "Ms. Lee", "teacher")

    resp = client.post("/teacher/classes", json={"name": 5, "description": "Period 1"})
    assert resp.status_code == 400
    assert client.get("/teacher/classes").get_json() == []

    login(client, "U2", "Una")
    resp = client.post("/me/profile", json={"role": "student", "display_name": ["Una"]})
    assert resp.status_code == 400


def test_full_flow(client):
    register(client, "T1", "Ms. Lee", "teacher")
    created = client.post("/teacher/classes", json={"name": "Algebra", "description": "Period 1"})
    assert created.status_code == 201
    class_id = created.get_json()["class"]["id"]

    for user_id, name in (("S1", "Ana"), ("S2", "Ben")):
        register(client, user_id, name, "student")
        listing = client.get("/student/classes").get_json()
        assert listing == [
            {"id": class_id, "name": "Algebra", "description": "Period 1", "teacher_id": "T1", "already_joined": False}
        ]
        assert client.post(f"/student/classes/{class_id}/join").get_json()["joined"] is True
        assert client.post(f"/student/classes/{class_id}/join").get_json()["joined"] is False

    login(client, "T1", "Ms. Lee")
    roster = client.get(f"/teacher/classes/{class_id}/roster").get_json()
    assert [s["id"] for s in roster["students"]] == ["S1", "S2"]

    saved = client.post(f"/teacher/classes/{class_id}/attendance", json={"present": ["S1"]}).get_json()
    assert saved["session"] == {"date": "2024-01-01", "students": {"S1": True, "S2": False}, "present": 1}

    history = client.get(f"/teacher/classes/{class_id}/history").get_json()
    assert history["chart"] == {"labels": ["2024-01-01"], "present": [1]}

    csv_resp = client.get(f"/teacher/classes/{class_id}/history.csv")
    assert csv_resp.mimetype == "text/csv"
    assert "2024-01-01,S2,Ben,Absent" in csv_resp.get_data().decode("utf-8-sig")

    summary = {s["student_id"]: s["attendance_percentage"] for s in client.get(f"/teacher/classes/{class_id}/summary").get_json()}
    assert summary == {"S1": "100.0", "S2": "0.0"}

    login(client, "S2", "Ben")
    overview = client.get("/student/overview").get_json()
    assert overview["summary"] == {"present_days": 0, "absent_days": 1, "total_days": 1, "attendance_percentage": "0.0"}
    assert overview["recent"] == [{"date": "2024-01-01", "status": "Absent", "class_id": class_id}]
    assert overview["classes"][0]["class_name"] == "Algebra"


def test_unknown_student_in_attendance_payload(client):
    register(client, "T1", "Ms. Lee", "teacher")
    class_id = client.post("/teacher/classes", json={"name": "Algebra", "description": "x"}).get_json()["class"]["id"]

    resp = client.post(f"/teacher/classes/{class_id}/attendance", json={"present": ["ghost"]})

    assert resp.status_code == 404


def test_other_teacher_cannot_see_history(client):
    register(client, "T1", "Ms. Lee", "teacher")
    class_id = client.post("/teacher/classes", json={"name": "Algebra", "description": "x"}).get_json()["class"]["id"]

    register(client, "T2", "Mr. Kim", "teacher")

    assert client.get(f"/teacher/classes/{class_id}/history").status_code == 403
    assert client.get("/teacher/classes/missing/history").status_code == 404


def test_new_student_overview_is_empty(client):
    register(client, "S9", "Cy", "student")

    overview = client.get("/student/overview").get_json()

    assert overview["summary"]["attendance_percentage"] == "0"
    assert overview["recent"] == []
