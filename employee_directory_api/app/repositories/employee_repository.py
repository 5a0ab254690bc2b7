"""
Record stores for employees.

``EmployeeRepository`` is the capability the service layer relies on:
key based lookup by id or email, listing, saving and deleting.  Two
implementations are provided:

* ``SQLiteEmployeeRepository`` runs parameterized statements against
  the ``employees`` table created by ``core.db.init_db``.  A new
  connection is opened for every call and closed before returning.
* ``InMemoryEmployeeRepository`` keeps records in a dict keyed by id.
  It is used by the test suite and when ``STORAGE_BACKEND=memory``.

Both stores keep emails unique and raise ``DuplicateEmailError`` when
a save would give two records the same address.
"""

from __future__ import annotations

import abc
import logging
import sqlite3
from dataclasses import replace
from typing import Dict, List, Optional

from ..core.db import get_connection
from ..core.exceptions import DuplicateEmailError
from ..models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository(abc.ABC):
    """Persistence capability for employee records."""

    @abc.abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None``."""

    @abc.abstractmethod
    def find_by_email(self, email: str) -> Optional[Employee]:
        """Return the employee holding ``email`` or ``None``."""

    @abc.abstractmethod
    def find_all(self) -> List[Employee]:
        """Return every stored employee ordered by id."""

    @abc.abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert or overwrite ``employee`` and return the stored value.

        An id is assigned when ``employee.id`` is ``None``; otherwise the
        record with that id is overwritten.
        """

    @abc.abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Remove the employee with ``employee_id``.  Absent ids are ignored."""


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dict backed store.  Values are copied in and out."""

    def __init__(self) -> None:
        self._rows: Dict[int, Employee] = {}
        self._next_id = 1

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        row = self._rows.get(employee_id)
        return replace(row) if row is not None else None

    def find_by_email(self, email: str) -> Optional[Employee]:
        row = self._holder_of(email)
        return replace(row) if row is not None else None

    def find_all(self) -> List[Employee]:
        return [replace(self._rows[key]) for key in sorted(self._rows)]

    def save(self, employee: Employee) -> Employee:
        holder = self._holder_of(employee.email)
        if holder is not None and holder.id != employee.id:
            raise DuplicateEmailError(employee.email)
        if employee.id is None:
            stored = employee.with_id(self._next_id)
        else:
            stored = replace(employee)
        self._next_id = max(self._next_id, stored.id + 1)
        self._rows[stored.id] = stored
        return replace(stored)

    def delete_by_id(self, employee_id: int) -> None:
        self._rows.pop(employee_id, None)

    def _holder_of(self, email: str) -> Optional[Employee]:
        for row in self._rows.values():
            if row.email == email:
                return row
        return None


class SQLiteEmployeeRepository(EmployeeRepository):
    """Store backed by the SQLite ``employees`` table.

    ``db_path`` overrides ``settings.database_url``; the schema must
    already exist (see ``core.db.init_db``).
    """

    _COLUMNS = "id, first_name, last_name, email"

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT {self._COLUMNS} FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
            return self._row_to_employee(row) if row else None
        finally:
            conn.close()

    def find_by_email(self, email: str) -> Optional[Employee]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT {self._COLUMNS} FROM employees WHERE email = ?",
                (email,),
            ).fetchone()
            return self._row_to_employee(row) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[Employee]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                f"SELECT {self._COLUMNS} FROM employees ORDER BY id ASC"
            ).fetchall()
            return [self._row_to_employee(row) for row in rows]
        finally:
            conn.close()

    def save(self, employee: Employee) -> Employee:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            if employee.id is None:
                cursor.execute(
                    "INSERT INTO employees (first_name, last_name, email) VALUES (?, ?, ?)",
                    (employee.first_name, employee.last_name, employee.email),
                )
                employee_id = cursor.lastrowid
            else:
                employee_id = employee.id
                cursor.execute(
                    "UPDATE employees SET first_name = ?, last_name = ?, email = ? WHERE id = ?",
                    (employee.first_name, employee.last_name, employee.email, employee_id),
                )
                if cursor.rowcount == 0:
                    cursor.execute(
                        "INSERT INTO employees (id, first_name, last_name, email) VALUES (?, ?, ?, ?)",
                        (employee_id, employee.first_name, employee.last_name, employee.email),
                    )
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            logger.debug("Integrity error saving employee %s: %s", employee.email, e)
            raise DuplicateEmailError(employee.email) from e
        finally:
            conn.close()
        return employee.with_id(employee_id)

    def delete_by_id(self, employee_id: int) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> Employee:
        return Employee(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )
