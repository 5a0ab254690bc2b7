"""Errors raised by the employee directory."""


class EmployeeDirectoryError(Exception):
    """Base class for all employee directory errors."""


class DuplicateEmailError(EmployeeDirectoryError):
    """Raised when an email is already held by another employee."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"An employee with email {email} already exists")
