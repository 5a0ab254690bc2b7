"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  The code is split by layer: ``schemas`` holds the
pydantic payloads, ``repositories`` the record stores, ``services``
the business rules and ``api/<version>/`` the HTTP routes.  New API
versions can be added without breaking existing clients.
"""

from .main import app  # noqa: F401
