from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from employee_directory_api.app.core.config import Settings
from employee_directory_api.app.core.db import init_db
from employee_directory_api.app.main import create_app
from employee_directory_api.app.models.employee import Employee
from employee_directory_api.app.repositories.employee_repository import (
    EmployeeRepository,
    InMemoryEmployeeRepository,
    SQLiteEmployeeRepository,
)
from employee_directory_api.app.services.employee_service import EmployeeService

from tests.fakes import RecordingEmployeeRepository


@pytest.fixture()
def db_path(tmp_path: Path) -> str:
    path = str(tmp_path / "employees.sqlite3")
    init_db(path)
    return path


@pytest.fixture(params=["memory", "sqlite"])
def repository(request: pytest.FixtureRequest) -> EmployeeRepository:
    """Return an empty record store for each backend."""
    if request.param == "memory":
        return InMemoryEmployeeRepository()
    return SQLiteEmployeeRepository(request.getfixturevalue("db_path"))


@pytest.fixture()
def employee() -> Employee:
    return Employee(first_name="Andrea", last_name="Ramirez", email="andrea@gmail.com")


@pytest.fixture()
def recording_repository() -> RecordingEmployeeRepository:
    return RecordingEmployeeRepository()


@pytest.fixture()
def service(recording_repository: RecordingEmployeeRepository) -> EmployeeService:
    return EmployeeService(recording_repository)


@pytest.fixture()
def memory_settings() -> Settings:
    return Settings(storage_backend="memory", log_level="WARNING")


@pytest.fixture()
def app(memory_settings: Settings, recording_repository: RecordingEmployeeRepository) -> FastAPI:
    application = create_app(memory_settings)
    application.state.employee_repository = recording_repository
    return application


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
