"""Employee Directory API client.

A small wrapper around the REST API exposed by
``employee_directory_api.app``.  It uses the ``requests`` library and
exposes one method per operation:

* :meth:`EmployeeDirectoryClient.list_employees`
* :meth:`EmployeeDirectoryClient.get_employee`
* :meth:`EmployeeDirectoryClient.create_employee`
* :meth:`EmployeeDirectoryClient.update_employee`
* :meth:`EmployeeDirectoryClient.delete_employee`

Methods never raise for HTTP or transport failures.  Each returns a
tuple ``(data, error)``: ``error`` is ``None`` on success, otherwise a
dictionary with ``status_code`` and ``message`` keys.  The message is
taken from the ``detail`` field of the error body when the server
provides one.

Optional authentication via an API key is supported; the key is sent
in the ``Authorization`` header as a bearer token.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EmployeeDirectoryClient:
    """Client for the employee endpoints of the directory API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        api_key: Optional[str] = None,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the versioned router is mounted under.
            api_key: Optional bearer token sent with every request.
            timeout: Request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/employees``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(err_json, dict):
                        message = str(err_json.get("detail") or err_json.get("message") or err_json)
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all employees.  The list is empty on failure."""
        data, error = self._request("GET", "/employees")
        if error:
            return [], error
        return data or [], None

    def get_employee(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single employee; a missing id yields a 404 error."""
        return self._request("GET", f"/employees/{employee_id}")

    def create_employee(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an employee from ``first_name``, ``last_name`` and ``email``."""
        return self._request("POST", "/employees", json_body=payload)

    def update_employee(
        self, employee_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the fields of an existing employee."""
        return self._request("PUT", f"/employees/{employee_id}", json_body=payload)

    def delete_employee(self, employee_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete an employee.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/employees/{employee_id}")
        if error:
            return False, error
        return True, None
