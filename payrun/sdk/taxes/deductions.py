"""Payroll deduction calculations.

Computes the three statutory deductions taken from an employee's monthly
gross salary:

- AFP: retirement fund, fixed rate (default 2.87%)
- ARS: health insurance, fixed rate (default 3.04%)
- ISR: income tax, flat rate on the whole gross chosen by bracket
  (default 0% up to 20,000, 5% up to 40,000, 10% above)

ISR is deliberately not marginal: a gross of 40,000.01 pays 10% of the
entire amount, not 10% of the part above 40,000.

Every amount is rounded to cents with ROUND_HALF_UP, which for Decimal
means half away from zero (2.345 -> 2.35, -2.345 -> -2.35).
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Union

from ..errors import InvalidInputError
from ..schemas import MAX_SALARY, Employee, PayrollLine, PayrollRun
from .schemas import DEFAULT_RATES, RateTable

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

Amount = Union[Decimal, int]


def round_currency(amount: Decimal) -> Decimal:
    """Round to 2 decimal places, midpoints away from zero.

    Example: 430.505 -> 430.51 (not 430.50 as banker's rounding would give)
    """
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def _check_gross(gross: Amount) -> Decimal:
    """Validate a gross salary and return it as Decimal.

    Raises:
        InvalidInputError: If gross is a float, not a number, negative or
            above MAX_SALARY
    """
    if isinstance(gross, bool) or not isinstance(gross, (Decimal, int)):
        raise InvalidInputError(
            f"Gross salary must be Decimal or int, got {type(gross).__name__}"
        )
    gross = Decimal(gross)
    if not gross.is_finite():
        raise InvalidInputError(f"Gross salary must be finite, got {gross}")
    if gross < 0:
        raise InvalidInputError(f"Gross salary cannot be negative: {gross}")
    if gross > MAX_SALARY:
        raise InvalidInputError(f"Gross salary exceeds {MAX_SALARY}: {gross}")
    return gross


class PayrollCalculator:
    """Applies a rate table to gross salaries.

    Stateless apart from the injected rates, so one instance can be shared
    across threads.
    """

    def __init__(self, rates: Optional[RateTable] = None):
        self.rates = rates if rates is not None else DEFAULT_RATES

    def calc_afp(self, gross: Amount) -> Decimal:
        """Retirement fund deduction: gross x afp_rate, rounded."""
        gross = _check_gross(gross)
        return round_currency(gross * self.rates.afp_rate)

    def calc_ars(self, gross: Amount) -> Decimal:
        """Health insurance deduction: gross x ars_rate, rounded."""
        gross = _check_gross(gross)
        return round_currency(gross * self.rates.ars_rate)

    def calc_isr(self, gross: Amount) -> Decimal:
        """Income tax: whole gross x the rate of its bracket, rounded.

        Upper bounds are inclusive, so with the default table 20,000.00
        pays 0% and 40,000.00 pays 5%.
        """
        gross = _check_gross(gross)
        rate = self.rates.isr_rate_for(gross)
        return round_currency(gross * rate)

    def compute_payroll_line(self, employee: Employee) -> PayrollLine:
        """Compute one employee's payroll line.

        Gross is the base salary unmodified; each deduction is rounded on
        its own before being summed.
        """
        gross = _check_gross(employee.base_salary)
        afp = self.calc_afp(gross)
        ars = self.calc_ars(gross)
        isr = self.calc_isr(gross)

        line = PayrollLine.build(
            employee=employee.ref(),
            gross_salary=gross,
            afp=afp,
            ars=ars,
            isr=isr,
        )
        logger.debug(
            f"employee {employee.id}: gross={gross} afp={afp} ars={ars} isr={isr} "
            f"net={line.net_salary}"
        )
        return line

    def generate_payroll_run(
        self,
        employees: Iterable[Employee],
        max_workers: Optional[int] = None,
    ) -> PayrollRun:
        """Compute a payroll line for every employee, preserving input order.

        The input is copied into a tuple first, so changes made to the
        caller's collection during the run are not observed.

        Args:
            employees: Employees to pay
            max_workers: If > 1, compute lines on a thread pool. Output
                order still matches input order.

        Returns:
            PayrollRun with one line per employee (empty for empty input)
        """
        snapshot = tuple(employees)
        if not snapshot:
            return PayrollRun()

        if max_workers is not None and max_workers < 1:
            raise InvalidInputError(f"max_workers must be >= 1, got {max_workers}")

        if max_workers and max_workers > 1 and len(snapshot) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                lines = tuple(executor.map(self.compute_payroll_line, snapshot))
        else:
            lines = tuple(self.compute_payroll_line(e) for e in snapshot)

        logger.debug(f"payroll run: {len(lines)} line(s)")
        return PayrollRun(lines=lines)


# =============================================================================
# Module-level helpers
# =============================================================================


def calc_afp(gross: Amount, rates: Optional[RateTable] = None) -> Decimal:
    """Retirement fund (AFP) deduction for a gross salary."""
    return PayrollCalculator(rates).calc_afp(gross)


def calc_ars(gross: Amount, rates: Optional[RateTable] = None) -> Decimal:
    """Health insurance (ARS) deduction for a gross salary."""
    return PayrollCalculator(rates).calc_ars(gross)


def calc_isr(gross: Amount, rates: Optional[RateTable] = None) -> Decimal:
    """Income tax (ISR) deduction for a gross salary."""
    return PayrollCalculator(rates).calc_isr(gross)


def compute_payroll_line(employee: Employee, rates: Optional[RateTable] = None) -> PayrollLine:
    """Payroll line for a single employee."""
    return PayrollCalculator(rates).compute_payroll_line(employee)


def generate_payroll_run(
    employees: Iterable[Employee],
    rates: Optional[RateTable] = None,
    max_workers: Optional[int] = None,
) -> PayrollRun:
    """Payroll run for a batch of employees, in input order."""
    return PayrollCalculator(rates).generate_payroll_run(employees, max_workers=max_workers)
