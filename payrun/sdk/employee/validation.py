"""Parsing and validation of user-entered employee fields.

Used by the directory before anything is written and by the CLI when it
reads text from prompts or arguments.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..errors import IdParseError, InvalidInputError, SalaryParseError
from ..schemas import MAX_SALARY

CENT = Decimal("0.01")


def parse_salary(text: Union[str, Decimal, int]) -> Decimal:
    """Parse a base salary.

    Accepts plain decimal text ("15000", "15000.50", " 1,250.00 ").
    Thousands separators are allowed; floats are not.

    Raises:
        SalaryParseError: If the text is not a finite decimal number
        InvalidInputError: If the salary is negative
    """
    if isinstance(text, bool) or isinstance(text, float):
        raise SalaryParseError(f"Invalid salary: {text!r} (use a decimal string)")

    if isinstance(text, (Decimal, int)):
        value = Decimal(text)
    else:
        cleaned = str(text).strip().replace(",", "")
        if not cleaned:
            raise SalaryParseError("Invalid salary: empty value")
        try:
            value = Decimal(cleaned)
        except InvalidOperation:
            raise SalaryParseError(f"Invalid salary: '{text}'") from None

    if not value.is_finite():
        raise SalaryParseError(f"Invalid salary: '{text}'")
    return validate_salary(value)


def validate_salary(value: Decimal) -> Decimal:
    """Reject negative or oversized salaries and fractions of a cent.

    Returns:
        The salary quantized to cents (15000 -> 15000.00)
    """
    if value < 0:
        raise InvalidInputError("Salary cannot be negative")
    if value > MAX_SALARY:
        raise InvalidInputError(f"Salary out of range: {value} (maximum {MAX_SALARY})")
    cents = value.quantize(CENT)
    if cents != value:
        raise InvalidInputError(f"Salary cannot have fractions of a cent: {value}")
    return cents


def parse_employee_id(text: Union[str, int]) -> int:
    """Parse an employee id.

    Raises:
        IdParseError: If the text is not a positive integer
    """
    if isinstance(text, bool):
        raise IdParseError(f"Invalid id: {text!r}")
    if isinstance(text, int):
        value = text
    else:
        try:
            value = int(str(text).strip())
        except ValueError:
            raise IdParseError(f"Invalid id: '{text}'") from None
    if value < 1:
        raise IdParseError(f"Invalid id: {value}")
    return value


def validate_name(name: Optional[str]) -> str:
    """Strip and require a non-blank name."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidInputError("Name cannot be empty")
    return cleaned


def normalize_department(department: Optional[str]) -> str:
    return (department or "").strip()
