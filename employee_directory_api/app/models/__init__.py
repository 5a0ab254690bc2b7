"""Domain values shared by the repositories and services."""

from .employee import Employee  # noqa: F401
