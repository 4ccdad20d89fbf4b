from __future__ import annotations

import pytest

from attendance_tracker.container import build_services
from attendance_tracker.core.exceptions import RemoteServiceError, ServiceUnavailableError
from attendance_tracker.main import create_app


@pytest.fixture
def client(fake_repo, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_services(fake_repo))
    return app.test_client()


def test_dashboard_endpoint_applies_filters(client):
    resp = client.get("/api/dashboard?status=Absent")
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["success"] is True
    assert [r["id"] for r in data["records"]] == [2]
    assert data["stats"]["total"] == 1


def test_dashboard_falls_back_to_empty_view_when_backend_down(client, fake_repo):
    fake_repo.fail_with = ServiceUnavailableError("down")
    data = client.get("/api/dashboard").get_json()

    assert data["success"] is False
    assert data["records"] == []
    assert data["stats"]["total"] == 0
    assert data["notice"]


def test_mark_attendance_endpoint(client, fake_repo):
    resp = client.post(
        "/api/attendance",
        json={"employeeName": "Ann Lee", "employeeID": "EMP9", "date": "2024-01-03", "status": "Present"},
    )

    assert resp.status_code == 201
    assert resp.get_json()["message"] == "Attendance marked successfully"
    assert fake_repo.created[0].employee_id == "EMP9"


def test_mark_attendance_validation_error(client):
    resp = client.post("/api/attendance", json={"employeeName": "Ann", "employeeID": "nope"})
    assert resp.status_code == 400
    assert "Employee ID" in resp.get_json()["error"]


def test_remote_error_is_passed_through(client, fake_repo):
    fake_repo.fail_with = RemoteServiceError("Attendance already marked", status_code=409)
    resp = client.post("/api/attendance", json={"employeeName": "Ann", "employeeID": "EMP1"})

    assert resp.status_code == 409
    assert resp.get_json()["error"] == "Attendance already marked"


def test_delete_endpoint(client, fake_repo):
    resp = client.delete("/api/attendance/3")
    assert resp.status_code == 200
    assert fake_repo.deleted == ["3"]


def test_delete_when_backend_down(client, fake_repo):
    fake_repo.fail_with = ServiceUnavailableError("down")
    assert client.delete("/api/attendance/3").status_code == 503


def test_reports_and_csv_export(client):
    data = client.get("/api/reports").get_json()
    assert data["success"] is True
    assert data["summary"]["absent_count"] == 1

    resp = client.get("/api/reports.csv")
    assert resp.mimetype == "text/csv"
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Employee Name,Employee ID,Date,Status,Department,Record ID"
    assert len(lines) == 4


def test_reports_fall_back_when_backend_down(client, fake_repo):
    fake_repo.fail_with = ServiceUnavailableError("down")
    data = client.get("/api/reports").get_json()

    assert data["success"] is False
    assert data["summary"]["total"] == 0


def test_employees_endpoint(client):
    data = client.get("/api/employees?search=ann").get_json()
    assert [e["employee_id"] for e in data["employees"]] == ["EMP1"]


def test_refresh_and_options(client, fake_repo):
    client.get("/api/dashboard")
    client.post("/api/refresh")
    client.get("/api/dashboard")
    assert len(fake_repo.list_calls) == 2

    assert client.get("/api/filters/options").get_json()["page_sizes"] == [10, 25, 50, 100]
    assert client.get("/health").get_json() == {"status": "ok"}


def test_non_object_body_is_rejected(client, fake_repo):
    resp = client.post("/api/attendance", json=["x"])

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid request body"
    assert fake_repo.created == []


def test_add_employee_endpoint(client, fake_repo):
    resp = client.post("/api/employees", json={"name": "Dee Park", "employeeId": "EMP3"})

    assert resp.status_code == 201
    assert fake_repo.created[0].employee_name == "Dee Park"


def test_add_employee_endpoint_rejects_duplicate_id(client, fake_repo):
    resp = client.post("/api/employees", json={"name": "Ann Lee", "employeeId": "EMP2"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Employee ID already exists!"
    assert fake_repo.created == []
