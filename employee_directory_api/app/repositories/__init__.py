"""
Record stores for the employee directory.

``EmployeeRepository`` describes the capability the service layer
depends on.  ``SQLiteEmployeeRepository`` is used in production and
``InMemoryEmployeeRepository`` in tests or when ``STORAGE_BACKEND`` is
set to ``memory``.
"""

from .employee_repository import (  # noqa: F401
    EmployeeRepository,
    InMemoryEmployeeRepository,
    SQLiteEmployeeRepository,
)
