"""
FastAPI dependencies shared by the v1 endpoints.

The record store is created once per application by ``create_app``
and kept on ``app.state``; every request gets a service bound to it.
Tests replace either the store on ``app.state`` or the whole
``get_employee_service`` dependency via ``app.dependency_overrides``.
"""

from fastapi import Request

from ..core.config import Settings
from ..repositories.employee_repository import (
    EmployeeRepository,
    InMemoryEmployeeRepository,
    SQLiteEmployeeRepository,
)
from ..services.employee_service import EmployeeService


def build_repository(settings: Settings) -> EmployeeRepository:
    """Create the record store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        return InMemoryEmployeeRepository()
    if settings.storage_backend == "sqlite":
        return SQLiteEmployeeRepository(settings.database_url)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")


def get_employee_service(request: Request) -> EmployeeService:
    """Return an ``EmployeeService`` bound to the application's store."""
    return EmployeeService(request.app.state.employee_repository)
