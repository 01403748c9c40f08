"""Employee directory backed by a SQL table.

All business rules for the roster live here (name required, salary
non-negative, no duplicate name+salary pair). CLI commands are thin
wrappers that parse text and call these methods.

Every method opens its own short-lived session and returns frozen
Employee values, so callers never hold a live ORM object and the payroll
engine always works on a snapshot.
"""

import logging
from decimal import Decimal
from typing import List, Optional, Union

from sqlalchemy import func, select

from ..config import get_db_url
from ..errors import DuplicateEmployeeError, EmployeeNotFoundError
from ..schemas import Employee
from .db import init_db, make_engine, make_session_factory
from .models import EmployeeRow
from .validation import normalize_department, parse_salary, validate_name

logger = logging.getLogger(__name__)

SalaryInput = Union[str, Decimal, int]


class EmployeeDirectory:
    """Create, read, update and delete employee records."""

    def __init__(self, db_url: Optional[str] = None):
        self.db_url = get_db_url(db_url)
        self.engine = make_engine(self.db_url)
        self._session_factory = make_session_factory(self.engine)
        self.ensure_schema()

    def ensure_schema(self) -> None:
        """Create the employees table if it doesn't exist."""
        init_db(self.engine)

    def close(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> "EmployeeDirectory":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    def get(self, employee_id: int) -> Employee:
        """Get an employee by id.

        Raises:
            EmployeeNotFoundError: If no employee has this id
        """
        with self._session_factory() as session:
            row = session.get(EmployeeRow, employee_id)
            if row is None:
                raise EmployeeNotFoundError(employee_id)
            return row.to_employee()

    def list(self) -> List[Employee]:
        """All employees ordered by id ascending."""
        with self._session_factory() as session:
            rows = session.scalars(select(EmployeeRow).order_by(EmployeeRow.id)).all()
            return [row.to_employee() for row in rows]

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(EmployeeRow)) or 0

    def find_duplicate(self, name: str, base_salary: Decimal) -> Optional[Employee]:
        """Find an employee with the same name (case-insensitive) and salary."""
        wanted = name.strip().lower()
        query = (
            select(EmployeeRow)
            .where(
                func.lower(EmployeeRow.name) == wanted,
                EmployeeRow.base_salary == base_salary,
            )
            .order_by(EmployeeRow.id)
            .limit(1)
        )
        with self._session_factory() as session:
            row = session.scalars(query).first()
            return row.to_employee() if row is not None else None

    # -------------------------------------------------------------------------
    # Write
    # -------------------------------------------------------------------------

    def add(self, name: str, department: Optional[str], base_salary: SalaryInput) -> Employee:
        """Add an employee.

        Args:
            name: Display name (required)
            department: Department, may be empty
            base_salary: Monthly gross as Decimal, int or decimal text

        Returns:
            The stored employee, with its assigned id

        Raises:
            InvalidInputError: Blank name or negative salary
            SalaryParseError: Salary text is not a number
            DuplicateEmployeeError: Same name and salary already on file
        """
        name = validate_name(name)
        department = normalize_department(department)
        salary = parse_salary(base_salary)

        duplicate = self.find_duplicate(name, salary)
        if duplicate is not None:
            raise DuplicateEmployeeError(name, duplicate.id)

        with self._session_factory() as session:
            row = EmployeeRow(name=name, department=department, base_salary=salary)
            session.add(row)
            session.commit()
            employee = row.to_employee()

        logger.debug(f"added employee {employee.id}: {employee.name}")
        return employee

    def update(
        self,
        employee_id: int,
        name: Optional[str] = None,
        department: Optional[str] = None,
        base_salary: Optional[SalaryInput] = None,
    ) -> Employee:
        """Update an employee. Fields left as None (or blank text) keep their value.

        Raises:
            EmployeeNotFoundError: If no employee has this id
            InvalidInputError: Negative salary
            SalaryParseError: Salary text is not a number
        """
        new_name = name.strip() if name and name.strip() else None
        new_department = department.strip() if department and department.strip() else None
        new_salary = None
        if base_salary is not None and not (isinstance(base_salary, str) and not base_salary.strip()):
            new_salary = parse_salary(base_salary)

        with self._session_factory() as session:
            row = session.get(EmployeeRow, employee_id)
            if row is None:
                raise EmployeeNotFoundError(employee_id)

            if new_name is not None:
                row.name = new_name
            if new_department is not None:
                row.department = new_department
            if new_salary is not None:
                row.base_salary = new_salary

            session.commit()
            employee = row.to_employee()

        logger.debug(f"updated employee {employee_id}")
        return employee

    def delete(self, employee_id: int) -> Employee:
        """Delete an employee.

        Returns:
            The employee as it was before deletion

        Raises:
            EmployeeNotFoundError: If no employee has this id
        """
        with self._session_factory() as session:
            row = session.get(EmployeeRow, employee_id)
            if row is None:
                raise EmployeeNotFoundError(employee_id)
            employee = row.to_employee()
            session.delete(row)
            session.commit()

        logger.debug(f"deleted employee {employee_id}")
        return employee
