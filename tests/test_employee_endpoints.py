from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from employee_directory_api.app.core.config import Settings
from employee_directory_api.app.main import create_app
from employee_directory_api.app.models.employee import Employee

from tests.fakes import RecordingEmployeeRepository

EMPLOYEES_URL = "/api/v1/employees"
ANDREA = {"first_name": "Andrea", "last_name": "Ramirez", "email": "andrea@gmail.com"}
FLOR = {"first_name": "Flor", "last_name": "Perez", "email": "flor@gmail.com"}


def _seed(repository: RecordingEmployeeRepository, count: int) -> None:
    for i in range(1, count + 1):
        repository.save(Employee(first_name=f"Persona{i}", last_name=f"Apellido{i}", email=f"persona{i}@gmail.com"))
    repository.calls.clear()


def test_create_employee(client: TestClient) -> None:
    response = client.post(EMPLOYEES_URL, json=ANDREA)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] > 0
    assert body["first_name"] == "Andrea"
    assert body["last_name"] == "Ramirez"
    assert body["email"] == "andrea@gmail.com"


def test_create_employee_with_duplicate_email(client: TestClient, recording_repository: RecordingEmployeeRepository) -> None:
    assert client.post(EMPLOYEES_URL, json=ANDREA).status_code == 201

    response = client.post(EMPLOYEES_URL, json={**ANDREA, "first_name": "Otra"})

    assert response.status_code == 409
    assert "andrea@gmail.com" in response.json()["detail"]
    assert len(recording_repository.find_all()) == 1


def test_create_employee_normalises_email(client: TestClient) -> None:
    response = client.post(EMPLOYEES_URL, json={**ANDREA, "email": "  Andrea@Gmail.com "})

    assert response.status_code == 201
    assert response.json()["email"] == "andrea@gmail.com"


def test_create_employee_rejects_invalid_payload(client: TestClient, recording_repository: RecordingEmployeeRepository) -> None:
    assert client.post(EMPLOYEES_URL, json={**ANDREA, "email": "not-an-email"}).status_code == 422
    assert client.post(EMPLOYEES_URL, json={**ANDREA, "first_name": "   "}).status_code == 422
    assert client.post(EMPLOYEES_URL, json={"first_name": "Andrea"}).status_code == 422
    assert recording_repository.calls_to("save") == []


@pytest.mark.parametrize(
    "email",
    ["an drea@gmail.com", "a@b", "a@.", "a..b@c..d", "andrea@@gmail.com", "@gmail.com", "andrea@"],
)
def test_create_employee_rejects_malformed_email(
    client: TestClient, recording_repository: RecordingEmployeeRepository, email: str
) -> None:
    response = client.post(EMPLOYEES_URL, json={"first_name": "A", "last_name": "B", "email": email})

    assert response.status_code == 422
    assert recording_repository.calls_to("save") == []


def test_update_employee_rejects_malformed_email(client: TestClient, recording_repository: RecordingEmployeeRepository) -> None:
    created = client.post(EMPLOYEES_URL, json=ANDREA).json()

    response = client.put(f"{EMPLOYEES_URL}/{created['id']}", json={**FLOR, "email": "a..b@c..d"})

    assert response.status_code == 422
    assert recording_repository.find_by_id(created["id"]).email == "andrea@gmail.com"


def test_list_employees(client: TestClient, recording_repository: RecordingEmployeeRepository) -> None:
    _seed(recording_repository, 5)

    response = client.get(EMPLOYEES_URL)

    assert response.status_code == 200
    assert len(response.json()) == 5
    assert [e["id"] for e in response.json()] == [1, 2, 3, 4, 5]


def test_list_employees_empty(client: TestClient) -> None:
    response = client.get(EMPLOYEES_URL)

    assert response.status_code == 200
    assert response.json() == []


def test_get_employee(client: TestClient) -> None:
    created = client.post(EMPLOYEES_URL, json=ANDREA).json()

    response = client.get(f"{EMPLOYEES_URL}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_employee_not_found(client: TestClient) -> None:
    response = client.get(f"{EMPLOYEES_URL}/1")

    assert response.status_code == 404
    assert response.json()["detail"] == "Employee not found"


def test_update_employee(client: TestClient, recording_repository: RecordingEmployeeRepository) -> None:
    created = client.post(EMPLOYEES_URL, json=ANDREA).json()

    response = client.put(f"{EMPLOYEES_URL}/{created['id']}", json=FLOR)

    assert response.status_code == 200
    assert response.json() == {"id": created["id"], **FLOR}
    stored = recording_repository.find_by_id(created["id"])
    assert stored.first_name == "Flor"
    assert stored.email == "flor@gmail.com"


def test_update_employee_not_found_never_writes(client: TestClient, recording_repository: RecordingEmployeeRepository) -> None:
    response = client.put(f"{EMPLOYEES_URL}/1", json=FLOR)

    assert response.status_code == 404
    assert recording_repository.calls_to("find_by_id") == [1]
    assert recording_repository.calls_to("save") == []


def test_update_employee_to_email_of_another_employee(client: TestClient) -> None:
    client.post(EMPLOYEES_URL, json=ANDREA)
    flor = client.post(EMPLOYEES_URL, json=FLOR).json()

    response = client.put(f"{EMPLOYEES_URL}/{flor['id']}", json={**FLOR, "email": "andrea@gmail.com"})

    assert response.status_code == 409
    assert client.get(f"{EMPLOYEES_URL}/{flor['id']}").json()["email"] == "flor@gmail.com"


def test_delete_employee(client: TestClient, recording_repository: RecordingEmployeeRepository) -> None:
    created = client.post(EMPLOYEES_URL, json=ANDREA).json()

    first = client.delete(f"{EMPLOYEES_URL}/{created['id']}")
    second = client.delete(f"{EMPLOYEES_URL}/{created['id']}")

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json() == {"detail": "Employee deleted"}
    assert client.get(f"{EMPLOYEES_URL}/{created['id']}").status_code == 404
    assert recording_repository.calls_to("delete_by_id") == [created["id"], created["id"]]


def test_delete_missing_employee_succeeds(client: TestClient) -> None:
    assert client.delete(f"{EMPLOYEES_URL}/42").status_code == 200


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_sqlite_backend_round_trip(tmp_path: Path) -> None:
    settings = Settings(
        storage_backend="sqlite",
        database_url=str(tmp_path / "api.sqlite3"),
        log_level="WARNING",
    )
    app = create_app(settings)

    with TestClient(app) as client:
        created = client.post(EMPLOYEES_URL, json=ANDREA)
        duplicate = client.post(EMPLOYEES_URL, json=ANDREA)
        listed = client.get(EMPLOYEES_URL)

    assert created.status_code == 201
    assert duplicate.status_code == 409
    assert [e["email"] for e in listed.json()] == ["andrea@gmail.com"]


def test_custom_api_prefix(recording_repository: RecordingEmployeeRepository) -> None:
    app = create_app(Settings(storage_backend="memory", api_prefix="/directory", log_level="WARNING"))
    app.state.employee_repository = recording_repository

    with TestClient(app) as client:
        assert client.get("/directory/employees").status_code == 200
        assert client.get(EMPLOYEES_URL).status_code == 404
