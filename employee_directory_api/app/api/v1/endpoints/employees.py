"""
Employee endpoints for API v1.

These routes expose a CRUD API for employee records.  Request bodies
are validated by the pydantic schemas; business rules live in
``EmployeeService``.  A duplicate email is reported as ``409`` and an
unknown id as ``404``.  Deleting is idempotent and always answers
``200``.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from employee_directory_api.app.api.deps import get_employee_service
from employee_directory_api.app.core.exceptions import DuplicateEmailError
from employee_directory_api.app.schemas.employee import (
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
)
from employee_directory_api.app.services.employee_service import EmployeeService

router = APIRouter()


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Create a new employee.

    Returns HTTP 409 if another employee already uses the email.
    """
    try:
        employee = await service.create_employee(employee_in.to_employee())
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return EmployeeRead.model_validate(employee)


@router.get("", response_model=List[EmployeeRead])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeRead]:
    """Return every employee ordered by id."""
    employees = await service.list_employees()
    return [EmployeeRead.model_validate(e) for e in employees]


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Retrieve a single employee by ID.

    Returns HTTP 404 if the employee is not found.
    """
    employee = await service.get_employee(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return EmployeeRead.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Replace the fields of an existing employee.

    The record must exist; otherwise HTTP 404 is returned and nothing
    is written.  HTTP 409 is returned if the new email belongs to a
    different employee.
    """
    existing = await service.get_employee(employee_id)
    if existing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    try:
        employee = await service.update_employee(employee_in.to_employee(existing.id))
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return EmployeeRead.model_validate(employee)


@router.delete("/{employee_id}", response_model=Dict[str, str])
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Dict[str, str]:
    """Delete an employee.  Succeeds whether or not the record existed."""
    await service.delete_employee(employee_id)
    return {"detail": "Employee deleted"}
