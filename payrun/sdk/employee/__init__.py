"""employee - Employee roster storage and input validation.

Scope:
- CRUD against the employees table (directory.py)
- Parsing of user-entered salary and id text (validation.py)
- SQLAlchemy engine/session setup and ORM model (db.py, models.py)

Constraints:
- Returns frozen Employee values, never live ORM rows
- Validation happens here, before anything reaches the payroll engine

Usage:
    from payrun.sdk.employee import EmployeeDirectory

    directory = EmployeeDirectory()           # default database
    emp = directory.add("Ana Perez", "Sales", "30000.00")
    employees = directory.list()
"""

from .directory import EmployeeDirectory

from .validation import (
    parse_salary,
    parse_employee_id,
    validate_name,
    validate_salary,
)

__all__ = [
    "EmployeeDirectory",
    "parse_salary",
    "parse_employee_id",
    "validate_name",
    "validate_salary",
]
