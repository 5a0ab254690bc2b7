"""
Top‑level package for the Employee Directory API.

This file makes ``employee_directory_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``employee_directory_api.app.main``.  The HTTP client for remote
callers lives in ``employee_directory_api.client``.
"""

__all__ = []
