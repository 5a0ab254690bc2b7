"""
Employee domain value.

Repositories store and return ``Employee`` instances; the API layer
converts them to and from the pydantic schemas in
``schemas.employee``.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class Employee:
    """A single employee record.

    ``id`` is ``None`` until the record store assigns one on the first
    save and never changes afterwards.
    """

    first_name: str
    last_name: str
    email: str
    id: Optional[int] = None

    def with_id(self, employee_id: int) -> "Employee":
        """Return a copy of this employee carrying ``employee_id``."""
        return replace(self, id=employee_id)
