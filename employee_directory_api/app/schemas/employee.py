"""
Pydantic schemas for employee records.

``EmployeeCreate`` and ``EmployeeUpdate`` validate request bodies;
``EmployeeRead`` is the response shape and can be built directly from
the ``Employee`` dataclass.  Emails are checked by pydantic's ``EmailStr``
(backed by ``email-validator``) and compared case‑insensitively by
normalising them to lower case on the way in.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from ..models.employee import Employee


class EmployeeBase(BaseModel):
    first_name: str = Field(..., min_length=1, examples=["Andrea"])
    last_name: str = Field(..., min_length=1, examples=["Ramirez"])
    email: EmailStr = Field(..., examples=["andrea@gmail.com"])

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_names(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="after")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    def to_employee(self, employee_id: Optional[int] = None) -> Employee:
        """Build a domain value from this payload."""
        return Employee(
            id=employee_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee.  The id is assigned by the store."""


class EmployeeUpdate(EmployeeBase):
    """Schema for replacing the mutable fields of an existing employee."""


class EmployeeRead(BaseModel):
    """Schema for reading an employee from the API."""

    id: int
    first_name: str
    last_name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
