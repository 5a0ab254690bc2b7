"""
Service layer for employees.

``EmployeeService`` holds the one business rule of the directory: an
email address may belong to a single employee.  Every other operation
is delegated to the record store unchanged.  Absence is reported as
``None`` rather than an exception; the API layer decides how to
present it.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.exceptions import DuplicateEmailError
from ..models.employee import Employee
from ..repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service class for managing employee records."""

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def create_employee(self, employee: Employee) -> Employee:
        """Persist a new employee and return it with its assigned id.

        Raises ``DuplicateEmailError`` without writing anything if
        another employee already uses ``employee.email``.
        """
        existing = self.repository.find_by_email(employee.email)
        if existing is not None:
            logger.warning("Rejected employee with duplicate email %s", employee.email)
            raise DuplicateEmailError(employee.email)
        saved = self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved

    async def list_employees(self) -> List[Employee]:
        """Return all employees in storage order."""
        return self.repository.find_all()

    async def get_employee(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None``."""
        return self.repository.find_by_id(employee_id)

    async def update_employee(self, employee: Employee) -> Employee:
        """Persist ``employee`` over its existing record.

        The caller is responsible for checking that ``employee.id``
        exists.  Email uniqueness is not re‑checked here.
        """
        saved = self.repository.save(employee)
        logger.info("Updated employee %s", saved.id)
        return saved

    async def delete_employee(self, employee_id: int) -> None:
        """Delete an employee.  Unknown ids are ignored."""
        self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
