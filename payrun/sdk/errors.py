"""Exception hierarchy for the Payrun SDK.

Every failure the SDK reports has its own class so callers (CLI, tests,
other tools) can tell a missing employee from a malformed number or a
failed export. All of them derive from PayrunError.
"""


class PayrunError(Exception):
    """Base class for all Payrun errors."""
    pass


class InvalidInputError(PayrunError, ValueError):
    """Raised when a value is outside the domain an operation accepts.

    Examples: negative salary, blank employee name, float passed where an
    exact decimal amount is required.
    """
    pass


class ParseError(PayrunError, ValueError):
    """Raised when user-entered text cannot be parsed."""
    pass


class SalaryParseError(ParseError):
    """Raised when salary text is not a decimal number."""
    pass


class IdParseError(ParseError):
    """Raised when employee id text is not an integer."""
    pass


class EmployeeNotFoundError(PayrunError, LookupError):
    """Raised when no employee exists for the requested id."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id} not found")


class DuplicateEmployeeError(PayrunError):
    """Raised when adding an employee with the same name and salary as an existing one."""

    def __init__(self, name: str, existing_id: int):
        self.name = name
        self.existing_id = existing_id
        super().__init__(
            f"Duplicate employee: '{name}' already exists with the same salary (id {existing_id})"
        )


class ExportError(PayrunError, OSError):
    """Raised when a payroll export cannot be written."""
    pass


class ConfigError(PayrunError):
    """Raised when settings.json or rates.yaml cannot be read."""
    pass
