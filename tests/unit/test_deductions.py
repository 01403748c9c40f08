"""Unit tests for payroll deduction calculations.

Covers the AFP/ARS fixed rates, ISR bracket boundaries, cent rounding
(half away from zero) and the three reference salaries.
"""

from decimal import Decimal

import pytest

from payrun.sdk.errors import InvalidInputError
from payrun.sdk.schemas import Employee
from payrun.sdk.taxes import (
    PayrollCalculator,
    RateTable,
    TaxBracket,
    calc_afp,
    calc_ars,
    calc_isr,
    compute_payroll_line,
    round_currency,
)


D = Decimal


def make_employee(emp_id: int, salary: str, name: str = None) -> Employee:
    return Employee(id=emp_id, name=name or f"Employee {emp_id}", department="Ops",
                    base_salary=D(salary))


# === ROUNDING ===


class TestRoundCurrency:
    """round_currency rounds midpoints away from zero, not to even."""

    @pytest.mark.parametrize("amount,expected", [
        ("2.345", "2.35"),
        ("2.355", "2.36"),
        ("0.125", "0.13"),
        ("0.135", "0.14"),
        ("2.344999", "2.34"),
        ("-2.345", "-2.35"),
        ("430.5", "430.50"),
    ])
    def test_midpoints(self, amount, expected):
        assert round_currency(D(amount)) == D(expected)
        assert str(round_currency(D(amount))) == expected

    def test_always_two_places(self):
        assert str(round_currency(D("0"))) == "0.00"
        assert str(round_currency(D("1000"))) == "1000.00"


# === FIXED RATES ===


class TestFixedRates:
    """AFP 2.87% and ARS 3.04% of gross."""

    @pytest.mark.parametrize("gross", ["0", "0.01", "999.99", "15000.00", "33333.33", "123456.78"])
    def test_afp_matches_formula(self, gross):
        assert calc_afp(D(gross)) == round_currency(D(gross) * D("0.0287"))

    @pytest.mark.parametrize("gross", ["0", "0.01", "999.99", "15000.00", "33333.33", "123456.78"])
    def test_ars_matches_formula(self, gross):
        assert calc_ars(D(gross)) == round_currency(D(gross) * D("0.0304"))

    def test_afp_midpoint_rounds_up(self):
        """150.00 x 2.87% = 4.305 exactly; banker's rounding would give 4.30."""
        assert calc_afp(D("150.00")) == D("4.31")

    def test_integer_gross_accepted(self):
        assert calc_afp(15000) == D("430.50")
        assert calc_ars(15000) == D("456.00")


# === ISR BRACKETS ===


class TestIsrBrackets:
    """ISR taxes the whole gross at its bracket's rate; upper bounds inclusive."""

    def test_top_of_zero_bracket(self):
        assert calc_isr(D("20000.00")) == D("0.00")

    def test_just_above_zero_bracket(self):
        assert calc_isr(D("20000.01")) == round_currency(D("20000.01") * D("0.05"))
        assert calc_isr(D("20000.01")) == D("1000.00")

    def test_top_of_five_percent_bracket(self):
        assert calc_isr(D("40000.00")) == round_currency(D("40000.00") * D("0.05"))
        assert calc_isr(D("40000.00")) == D("2000.00")

    def test_just_above_five_percent_bracket(self):
        assert calc_isr(D("40000.01")) == round_currency(D("40000.01") * D("0.10"))
        assert calc_isr(D("40000.01")) == D("4000.00")

    def test_flat_not_marginal(self):
        """50,000 pays 10% of everything, not 5% + 10% slices."""
        assert calc_isr(D("50000.00")) == D("5000.00")

    def test_midpoint_in_five_percent_bracket(self):
        """20000.10 x 5% = 1000.005 exactly, rounds away from zero."""
        assert calc_isr(D("20000.10")) == D("1000.01")

    def test_zero_gross(self):
        assert calc_isr(D("0")) == D("0.00")


# === INPUT DOMAIN ===


class TestInvalidInput:
    """Negative or inexact gross is rejected, never clamped."""

    @pytest.mark.parametrize("func", [calc_afp, calc_ars, calc_isr])
    def test_negative_gross_rejected(self, func):
        with pytest.raises(InvalidInputError, match="negative"):
            func(D("-0.01"))

    @pytest.mark.parametrize("func", [calc_afp, calc_ars, calc_isr])
    def test_float_gross_rejected(self, func):
        with pytest.raises(InvalidInputError, match="float"):
            func(15000.0)

    def test_non_finite_gross_rejected(self):
        with pytest.raises(InvalidInputError):
            calc_afp(D("NaN"))

    def test_negative_employee_salary_rejected_by_engine(self):
        """An Employee that bypassed validation still can't produce a line."""
        bad = Employee.model_construct(id=1, name="Bad", department="", base_salary=D("-100.00"))
        with pytest.raises(InvalidInputError):
            compute_payroll_line(bad)

    def test_largest_salary_computes(self):
        line = compute_payroll_line(make_employee(1, "9999999999.99"))

        assert line.afp == D("287000000.00")
        assert line.isr == D("1000000000.00")
        assert line.net_salary == line.gross_salary - line.total_deductions

    @pytest.mark.parametrize("gross", ["10000000000.00", "1E+27"])
    def test_oversized_salary_rejected(self, gross):
        huge = Employee(id=1, name="X", base_salary=D(gross))

        with pytest.raises(InvalidInputError, match="exceeds"):
            compute_payroll_line(huge)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            calc_isr(D("-1"))


# === PAYROLL LINES ===


class TestPayrollLine:
    """compute_payroll_line reference scenarios."""

    @pytest.mark.parametrize("salary,afp,ars,isr,total,net", [
        ("15000.00", "430.50", "456.00", "0.00", "886.50", "14113.50"),
        ("30000.00", "861.00", "912.00", "1500.00", "3273.00", "26727.00"),
        ("50000.00", "1435.00", "1520.00", "5000.00", "7955.00", "42045.00"),
    ])
    def test_reference_salaries(self, salary, afp, ars, isr, total, net):
        line = compute_payroll_line(make_employee(1, salary))

        assert line.gross_salary == D(salary)
        assert line.afp == D(afp)
        assert line.ars == D(ars)
        assert line.isr == D(isr)
        assert line.total_deductions == D(total)
        assert line.net_salary == D(net)

    def test_line_references_employee_by_copy(self):
        employee = make_employee(7, "30000.00", name="Ana Perez")
        line = compute_payroll_line(employee)

        assert line.employee.id == 7
        assert line.employee.name == "Ana Perez"
        assert line.employee.department == "Ops"
        assert line.employee is not employee

    def test_gross_is_base_salary_unmodified(self):
        line = compute_payroll_line(make_employee(1, "12345.67"))
        assert line.gross_salary == D("12345.67")

    @pytest.mark.parametrize("salary", ["0.00", "0.01", "150.00", "19999.99", "20000.10",
                                        "39999.99", "40000.01", "87654.32", "1000000.00"])
    def test_invariants_hold(self, salary):
        line = compute_payroll_line(make_employee(1, salary))
        assert line.total_deductions == line.afp + line.ars + line.isr
        assert line.net_salary == line.gross_salary - line.total_deductions


# === INJECTED RATES ===


class TestCustomRates:
    """The calculator applies whatever RateTable it is given."""

    @pytest.fixture
    def rates(self):
        return RateTable(
            afp_rate=D("0.01"),
            ars_rate=D("0.02"),
            isr_brackets=[
                TaxBracket(up_to=D("1000"), rate=D("0")),
                TaxBracket(up_to=D("1500"), rate=D("0.1")),
                TaxBracket(up_to=None, rate=D("0.2")),
            ],
        )

    def test_custom_rates_applied(self, rates):
        calc = PayrollCalculator(rates)
        line = calc.compute_payroll_line(make_employee(1, "2000.00"))

        assert line.afp == D("20.00")
        assert line.ars == D("40.00")
        assert line.isr == D("400.00")
        assert line.net_salary == D("1540.00")

    def test_custom_bracket_boundary_inclusive(self, rates):
        assert calc_isr(D("1000.00"), rates) == D("0.00")
        assert calc_isr(D("1000.01"), rates) == D("100.00")
        assert calc_isr(D("1500.00"), rates) == D("150.00")
        assert calc_isr(D("1500.01"), rates) == D("300.00")

    def test_default_rates_when_none(self):
        assert PayrollCalculator().rates.afp_rate == D("0.0287")
        assert PayrollCalculator(None).rates.ars_rate == D("0.0304")
