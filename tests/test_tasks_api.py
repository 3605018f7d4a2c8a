"""
Task endpoints and task statistics
"""

import csv
import io
from datetime import datetime, timedelta

import pytest

from app.services.task_service import TaskService

pytestmark = pytest.mark.unit


def _iso(delta: timedelta) -> str:
    return (datetime.utcnow() + delta).strftime("%Y-%m-%dT%H:%M:%S.000Z")


@pytest.fixture
def employee(create_employee):
    return create_employee()


class TestCreateTask:
    def test_defaults_and_stats(self, client, admin_headers, employee):
        response = client.post(
            "/api/tasks",
            json={"title": "Fix bug", "employeeId": employee["id"]},
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Task created successfully"
        task = body["data"]
        assert task["title"] == "Fix bug"
        assert task["status"] == "pending"
        assert task["priority"] == "medium"
        assert task["dueDate"] is None
        assert task["employeeId"] == employee["id"]
        assert task["employee"] == {
            "id": employee["id"],
            "firstName": "Ann",
            "lastName": "Lee",
            "email": "ann@x.com",
            "department": "Engineering",
        }

        stats = client.get("/api/tasks/stats", headers=admin_headers).json()["data"]
        assert stats["totalTasks"] == 1
        assert stats["overdueTasks"] == 0

    def test_explicit_fields(self, client, admin_headers, employee):
        response = client.post(
            "/api/tasks",
            json={
                "title": "Ship release",
                "description": "v2",
                "status": "in-progress",
                "priority": "urgent",
                "dueDate": "2030-06-01T12:00:00.000Z",
                "employeeId": employee["id"],
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        task = response.json()["data"]
        assert task["status"] == "in-progress"
        assert task["priority"] == "urgent"
        assert task["description"] == "v2"
        assert task["dueDate"].startswith("2030-06-01T12:00:00")

    def test_unknown_employee(self, client, admin_headers):
        response = client.post(
            "/api/tasks", json={"title": "Orphan", "employeeId": 999}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Employee not found"}

    def test_missing_title(self, client, admin_headers, employee):
        response = client.post(
            "/api/tasks", json={"employeeId": employee["id"]}, headers=admin_headers
        )

        assert response.status_code == 400
        assert "title" in response.json()["message"]

    @pytest.mark.parametrize(
        "overrides",
        [{"status": "done"}, {"priority": "critical"}, {"title": ""}, {"dueDate": "soon"}],
    )
    def test_invalid_values(self, client, admin_headers, employee, overrides):
        payload = {"title": "Fix bug", "employeeId": employee["id"], **overrides}

        assert client.post("/api/tasks", json=payload, headers=admin_headers).status_code == 400

    def test_non_admin_is_forbidden(self, client, user_headers, employee):
        response = client.post(
            "/api/tasks", json={"title": "Fix bug", "employeeId": employee["id"]}, headers=user_headers
        )

        assert response.status_code == 403


class TestReadTasks:
    def test_list_includes_employee_projection(self, client, user_headers, employee, create_task):
        create_task(employee["id"])
        create_task(employee["id"], title="Write docs")

        body = client.get("/api/tasks", headers=user_headers).json()

        assert body["pagination"] == {"total": 2, "page": 1, "limit": 10, "totalPages": 1}
        assert [t["title"] for t in body["data"]] == ["Write docs", "Fix bug"]
        assert body["data"][0]["employee"]["department"] == "Engineering"
        assert "salary" not in body["data"][0]["employee"]

    def test_filter_by_status_and_priority(self, client, admin_headers, employee, create_task):
        create_task(employee["id"], status="completed", priority="low")
        create_task(employee["id"], status="completed", priority="high")
        create_task(employee["id"])

        body = client.get(
            "/api/tasks?status=completed&priority=high", headers=admin_headers
        ).json()

        assert body["pagination"]["total"] == 1
        assert body["data"][0]["priority"] == "high"

    def test_sort_by_due_date(self, client, admin_headers, employee, create_task):
        create_task(employee["id"], title="Later", dueDate="2031-01-01")
        create_task(employee["id"], title="Sooner", dueDate="2030-01-01")

        data = client.get(
            "/api/tasks?sortBy=dueDate&order=asc", headers=admin_headers
        ).json()["data"]

        assert [t["title"] for t in data] == ["Sooner", "Later"]

    def test_unknown_filter_values(self, client, admin_headers):
        assert client.get("/api/tasks?status=done", headers=admin_headers).status_code == 400
        assert client.get("/api/tasks?sortBy=secret", headers=admin_headers).status_code == 400

    def test_get_includes_full_employee(self, client, admin_headers, employee, create_task):
        task = create_task(employee["id"])

        response = client.get(f"/api/tasks/{task['id']}", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == task["id"]
        assert data["employee"]["id"] == employee["id"]
        assert data["employee"]["salary"] == 90000
        assert data["employee"]["position"] == "Dev"

    def test_get_unknown_task(self, client, admin_headers):
        response = client.get("/api/tasks/999", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Task not found"

    def test_list_by_employee(self, client, admin_headers, employee, create_employee, create_task):
        other = create_employee(email="bob@y.com")
        first = create_task(employee["id"])
        second = create_task(employee["id"], title="Write docs")
        create_task(other["id"], title="Not mine")

        data = client.get(f"/api/tasks/employee/{employee['id']}", headers=admin_headers).json()["data"]

        assert [t["id"] for t in data] == [second["id"], first["id"]]
        assert all(t["employee"]["id"] == employee["id"] for t in data)

    def test_list_by_unknown_employee_is_empty(self, client, admin_headers):
        response = client.get("/api/tasks/employee/999", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_requires_authentication(self, client):
        assert client.get("/api/tasks").status_code == 401
        assert client.get("/api/tasks/stats").status_code == 401


class TestUpdateTask:
    def test_partial_update(self, client, admin_headers, employee, create_task):
        task = create_task(employee["id"], description="Crash on save")

        response = client.put(
            f"/api/tasks/{task['id']}",
            json={"status": "completed", "priority": "high"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "completed"
        assert data["priority"] == "high"
        assert data["title"] == "Fix bug"
        assert data["description"] == "Crash on save"

    def test_reassign_to_other_employee(self, client, admin_headers, employee, create_employee, create_task):
        other = create_employee(email="bob@y.com", firstName="Bob")
        task = create_task(employee["id"])

        response = client.put(
            f"/api/tasks/{task['id']}", json={"employeeId": other["id"]}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["data"]["employee"]["firstName"] == "Bob"

    def test_reassign_to_unknown_employee(self, client, admin_headers, employee, create_task):
        task = create_task(employee["id"])

        response = client.put(
            f"/api/tasks/{task['id']}", json={"employeeId": 999}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Employee not found"

    def test_due_date_can_be_cleared(self, client, admin_headers, employee, create_task):
        task = create_task(employee["id"], dueDate="2030-01-01")

        response = client.put(f"/api/tasks/{task['id']}", json={"dueDate": None}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["data"]["dueDate"] is None

    def test_null_title_is_rejected(self, client, admin_headers, employee, create_task):
        task = create_task(employee["id"])

        response = client.put(f"/api/tasks/{task['id']}", json={"title": None}, headers=admin_headers)

        assert response.status_code == 400

    def test_unknown_task(self, client, admin_headers):
        response = client.put("/api/tasks/999", json={"title": "x"}, headers=admin_headers)

        assert response.status_code == 404

    def test_patch_status(self, client, admin_headers, employee, create_task):
        task = create_task(employee["id"])

        response = client.patch(
            f"/api/tasks/{task['id']}/status", json={"status": "in-progress"}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "in-progress"

    def test_patch_status_rejects_other_fields(self, client, admin_headers, employee, create_task):
        task = create_task(employee["id"])

        response = client.patch(
            f"/api/tasks/{task['id']}/status",
            json={"status": "completed", "title": "Sneaky"},
            headers=admin_headers,
        )

        assert response.status_code == 400


class TestDeleteTask:
    def test_delete(self, client, admin_headers, employee, create_task):
        task = create_task(employee["id"])

        response = client.delete(f"/api/tasks/{task['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Task deleted successfully"
        assert client.get(f"/api/tasks/{task['id']}", headers=admin_headers).status_code == 404
        assert client.get(f"/api/employees/{employee['id']}", headers=admin_headers).status_code == 200

    def test_delete_unknown_task(self, client, admin_headers):
        response = client.delete("/api/tasks/999", headers=admin_headers)

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Task not found"}

    def test_non_admin_is_forbidden(self, client, user_headers, employee, create_task):
        task = create_task(employee["id"])

        assert client.delete(f"/api/tasks/{task['id']}", headers=user_headers).status_code == 403


class TestTaskStats:
    def test_overdue_counts_past_due_unless_completed(self, client, admin_headers, employee, create_task):
        past = _iso(timedelta(days=-3))
        future = _iso(timedelta(days=3))
        create_task(employee["id"], title="Late", dueDate=past)
        create_task(employee["id"], title="Late and started", dueDate=past, status="in-progress")
        create_task(employee["id"], title="Late but cancelled", dueDate=past, status="cancelled")
        create_task(employee["id"], title="Late but done", dueDate=past, status="completed")
        create_task(employee["id"], title="Upcoming", dueDate=future)
        create_task(employee["id"], title="Whenever")

        data = client.get("/api/tasks/stats", headers=admin_headers).json()["data"]

        assert data["totalTasks"] == 6
        assert data["overdueTasks"] == 3
        assert {s["status"]: s["_count"] for s in data["statusStats"]} == {
            "pending": 3,
            "in-progress": 1,
            "cancelled": 1,
            "completed": 1,
        }
        assert data["priorityStats"] == [{"priority": "medium", "_count": 6}]

    def test_overdue_is_relative_to_now(self, session_factory, client, employee, create_task):
        create_task(employee["id"], dueDate="2030-01-01T00:00:00Z")

        db = session_factory()
        try:
            before = TaskService.get_stats(db, now=datetime(2029, 12, 31))
            after = TaskService.get_stats(db, now=datetime(2030, 1, 2))
        finally:
            db.close()

        assert before["overdue_tasks"] == 0
        assert after["overdue_tasks"] == 1

    def test_timezone_offsets_are_normalised(self, session_factory, client, employee, create_task):
        create_task(employee["id"], dueDate="2030-01-01T02:00:00+02:00")

        db = session_factory()
        try:
            stats = TaskService.get_stats(db, now=datetime(2030, 1, 1, 0, 30))
        finally:
            db.close()

        assert stats["overdue_tasks"] == 1


class TestExportTasks:
    def test_csv_download(self, client, user_headers, employee, create_task):
        create_task(employee["id"], dueDate="2030-01-01")
        create_task(employee["id"], title="Done already", status="completed")

        response = client.get("/api/tasks/export?status=pending", headers=user_headers)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[0][0] == "Title"
        assert len(rows) == 2
        assert rows[1][0] == "Fix bug"
        assert rows[1][4] == "2030-01-01"
        assert rows[1][5] == "Ann Lee"
