"""Pydantic schemas for employees and payroll results.

All schemas are frozen and use extra='forbid': values are built once and
never edited in place, and a typo in a field name is an error rather than
silently ignored. Money is always Decimal; floats are rejected because
binary floating point cannot reproduce cent rounding reliably.
"""

from decimal import Decimal
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Largest salary the engine and the employees table (Numeric(12, 2)) accept
MAX_SALARY = Decimal("9999999999.99")


def _reject_float(value: Any) -> Any:
    if isinstance(value, float):
        raise ValueError("monetary amounts must be Decimal or int, not float")
    return value


# =============================================================================
# Employee
# =============================================================================


class Employee(BaseModel):
    """An employee record as held by the directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(..., ge=1, description="Identity assigned by storage")
    name: str = Field(..., min_length=1, description="Display name")
    department: str = Field(default="", description="Free text, may be empty")
    base_salary: Decimal = Field(..., ge=0, description="Monthly gross pay before deductions")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("department", mode="before")
    @classmethod
    def normalize_department(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @field_validator("base_salary", mode="before")
    @classmethod
    def check_salary_type(cls, value: Any) -> Any:
        return _reject_float(value)

    def ref(self) -> "EmployeeRef":
        """Read-only copy of the fields a payroll line displays."""
        return EmployeeRef(id=self.id, name=self.name, department=self.department)


class EmployeeRef(BaseModel):
    """Identity and display fields of the employee a payroll line belongs to."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str
    department: str = ""


# =============================================================================
# Payroll results
# =============================================================================


class PayrollLine(BaseModel):
    """One employee's itemized payroll. Internally coherent.

    total_deductions and net_salary are stored, not recomputed on access;
    the validator guarantees they match the components exactly. Use
    PayrollLine.build() to derive them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    employee: EmployeeRef
    gross_salary: Decimal = Field(..., ge=0, description="Copied from base salary")
    afp: Decimal = Field(..., ge=0, description="Retirement fund deduction")
    ars: Decimal = Field(..., ge=0, description="Health insurance deduction")
    isr: Decimal = Field(..., ge=0, description="Income tax deduction")
    total_deductions: Decimal = Field(..., ge=0)
    net_salary: Decimal

    @field_validator("gross_salary", "afp", "ars", "isr", "total_deductions", "net_salary",
                     mode="before")
    @classmethod
    def check_amount_type(cls, value: Any) -> Any:
        return _reject_float(value)

    @model_validator(mode="after")
    def check_coherence(self) -> "PayrollLine":
        """Validate that the derived totals match their components."""
        expected_total = self.afp + self.ars + self.isr
        if self.total_deductions != expected_total:
            raise ValueError(
                f"total_deductions {self.total_deductions} != afp + ars + isr ({expected_total})"
            )
        expected_net = self.gross_salary - self.total_deductions
        if self.net_salary != expected_net:
            raise ValueError(
                f"net_salary {self.net_salary} != gross_salary - total_deductions ({expected_net})"
            )
        return self

    @classmethod
    def build(
        cls,
        employee: EmployeeRef,
        gross_salary: Decimal,
        afp: Decimal,
        ars: Decimal,
        isr: Decimal,
    ) -> "PayrollLine":
        """Create a line, deriving total_deductions and net_salary."""
        total = afp + ars + isr
        return cls(
            employee=employee,
            gross_salary=gross_salary,
            afp=afp,
            ars=ars,
            isr=isr,
            total_deductions=total,
            net_salary=gross_salary - total,
        )


class PayrollRun(BaseModel):
    """Payroll lines for one batch of employees, in input order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    lines: Tuple[PayrollLine, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_gross(self) -> Decimal:
        return sum((line.gross_salary for line in self.lines), Decimal("0.00"))

    @property
    def total_deductions(self) -> Decimal:
        return sum((line.total_deductions for line in self.lines), Decimal("0.00"))

    @property
    def total_net(self) -> Decimal:
        """Total paid out by the company (sum of net salaries)."""
        return sum((line.net_salary for line in self.lines), Decimal("0.00"))
