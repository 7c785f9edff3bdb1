import pytest
from django.urls import reverse
from django.utils.dateparse import parse_datetime

from tasks.api.views import TaskViewSet
from tasks.models import Task

TASK_BODY = {"description": "Ship report", "assigned_to": "Alex", "due_date": "2025-03-01"}


@pytest.fixture
def controlled_clock(monkeypatch, clock):
	monkeypatch.setattr(TaskViewSet.store, "clock", clock)
	return clock


@pytest.mark.django_db
def test_list_tasks_empty_returns_empty_list(api_client):
	response = api_client.get(reverse("task-list"))

	assert response.status_code == 200
	assert response.json() == []


@pytest.mark.django_db
def test_create_task_defaults_status_to_pending(api_client):
	response = api_client.post(reverse("task-list"), TASK_BODY, format="json")

	assert response.status_code == 201
	payload = response.json()
	assert payload["status"] == "PENDING"
	assert payload["description"] == "Ship report"
	assert payload["assigned_to"] == "Alex"
	assert payload["due_date"] == "2025-03-01"
	assert payload["id"]
	assert payload["created_at"] == payload["updated_at"]
	assert Task.objects.filter(id=payload["id"], status="PENDING").exists()


@pytest.mark.django_db
def test_create_task_keeps_explicit_status(api_client):
	body = dict(TASK_BODY, status="SENT")

	response = api_client.post(reverse("task-list"), body, format="json")

	assert response.status_code == 201
	assert response.json()["status"] == "SENT"


@pytest.mark.django_db
def test_task_lifecycle_create_update_delete(api_client, controlled_clock):
	created = api_client.post(reverse("task-list"), TASK_BODY, format="json").json()
	task_id = created["id"]

	response = api_client.put(
		reverse("task-detail", args=[task_id]),
		dict(TASK_BODY, status="SENT"),
		format="json",
	)

	assert response.status_code == 200
	updated = response.json()
	assert updated["status"] == "SENT"
	assert updated["created_at"] == created["created_at"]
	assert parse_datetime(updated["updated_at"]) > parse_datetime(updated["created_at"])

	response = api_client.delete(reverse("task-detail", args=[task_id]))

	assert response.status_code == 200
	assert response.json() == {"message": "Task deleted successfully", "id": task_id}
	listed = api_client.get(reverse("task-list")).json()
	assert task_id not in [task["id"] for task in listed]


@pytest.mark.django_db
def test_list_tasks_newest_first(api_client, controlled_clock):
	ids = []
	for name in ("first", "second", "third"):
		body = dict(TASK_BODY, description=name)
		ids.append(api_client.post(reverse("task-list"), body, format="json").json()["id"])

	payload = api_client.get(reverse("task-list")).json()

	assert len(payload) == 3
	assert [task["id"] for task in payload] == list(reversed(ids))
	stamps = [parse_datetime(task["created_at"]) for task in payload]
	assert stamps == sorted(stamps, reverse=True)


@pytest.mark.django_db
def test_task_created_with_earlier_clock_sorts_after(api_client, monkeypatch, clock):
	later = clock.current + clock.step * 10
	monkeypatch.setattr(TaskViewSet.store, "clock", lambda: later)
	recent = api_client.post(reverse("task-list"), TASK_BODY, format="json").json()
	monkeypatch.setattr(TaskViewSet.store, "clock", clock)
	older = api_client.post(reverse("task-list"), TASK_BODY, format="json").json()

	payload = api_client.get(reverse("task-list")).json()

	assert [task["id"] for task in payload] == [recent["id"], older["id"]]


@pytest.mark.django_db
def test_retrieve_task(api_client):
	task_id = api_client.post(reverse("task-list"), TASK_BODY, format="json").json()["id"]

	response = api_client.get(reverse("task-detail", args=[task_id]))

	assert response.status_code == 200
	assert response.json()["id"] == task_id


@pytest.mark.django_db
def test_update_unknown_task_returns_404_and_changes_nothing(api_client):
	api_client.post(reverse("task-list"), TASK_BODY, format="json")
	before = api_client.get(reverse("task-list")).json()

	response = api_client.put(
		reverse("task-detail", args=[999]),
		dict(TASK_BODY, status="COMPLETED"),
		format="json",
	)

	assert response.status_code == 404
	assert response.json() == {"error": "Task not found"}
	assert api_client.get(reverse("task-list")).json() == before


@pytest.mark.django_db
def test_update_without_status_resets_to_pending(api_client):
	body = dict(TASK_BODY, status="COMPLETED")
	task_id = api_client.post(reverse("task-list"), body, format="json").json()["id"]

	response = api_client.put(reverse("task-detail", args=[task_id]), TASK_BODY, format="json")

	assert response.status_code == 200
	assert response.json()["status"] == "PENDING"


@pytest.mark.django_db
def test_delete_twice_returns_404_the_second_time(api_client):
	task_id = api_client.post(reverse("task-list"), TASK_BODY, format="json").json()["id"]

	first = api_client.delete(reverse("task-detail", args=[task_id]))
	second = api_client.delete(reverse("task-detail", args=[task_id]))

	assert first.status_code == 200
	assert second.status_code == 404
	assert second.json() == {"error": "Task not found"}
	assert Task.objects.count() == 0


@pytest.mark.django_db
def test_update_and_delete_on_collection_require_id(api_client):
	put = api_client.put(reverse("task-list"), TASK_BODY, format="json")
	delete = api_client.delete(reverse("task-list"))

	assert put.status_code == 400
	assert put.json() == {"error": "ID is required for update"}
	assert delete.status_code == 400
	assert delete.json() == {"error": "ID is required for delete"}


@pytest.mark.django_db
def test_create_task_rejects_unknown_status(api_client):
	body = dict(TASK_BODY, status="ARCHIVED")

	response = api_client.post(reverse("task-list"), body, format="json")

	assert response.status_code == 400
	payload = response.json()
	assert payload["error"] == "Invalid request body"
	assert "status" in payload["details"]
	assert Task.objects.count() == 0


@pytest.mark.django_db
def test_create_task_requires_assignee_and_due_date(api_client):
	response = api_client.post(reverse("task-list"), {"description": "Orphan"}, format="json")

	assert response.status_code == 400
	details = response.json()["details"]
	assert "assigned_to" in details
	assert "due_date" in details


@pytest.mark.django_db
def test_non_numeric_task_id_is_not_found(api_client):
	response = api_client.delete("/api/tasks/abc")

	assert response.status_code == 404
	assert response.json() == {"error": "Task not found"}


@pytest.mark.django_db
def test_patch_is_not_allowed(api_client):
	task_id = api_client.post(reverse("task-list"), TASK_BODY, format="json").json()["id"]

	response = api_client.patch(reverse("task-detail", args=[task_id]), {"status": "SENT"}, format="json")

	assert response.status_code == 405
	assert response.json() == {"error": "Method not allowed"}
	assert Task.objects.get(id=task_id).status == "PENDING"


@pytest.mark.django_db
def test_create_and_update_task_keep_surrounding_whitespace(api_client):
	body = dict(TASK_BODY, description="  Ship report  ", assigned_to=" Alex ")

	created = api_client.post(reverse("task-list"), body, format="json").json()

	assert created["description"] == "  Ship report  "
	assert created["assigned_to"] == " Alex "

	update = {key: created[key] for key in ("description", "assigned_to", "due_date", "status")}
	response = api_client.put(reverse("task-detail", args=[created["id"]]), update, format="json")

	assert response.status_code == 200
	assert response.json()["description"] == "  Ship report  "
	assert Task.objects.get(id=created["id"]).assigned_to == " Alex "
