"""taxes - Payroll deduction calculation.

Scope:
- AFP (retirement fund) and ARS (health insurance) fixed-rate deductions
- ISR (income tax) flat-rate-by-bracket deduction
- Cent rounding, half away from zero
- Payroll lines and payroll runs

Constraints:
- Pure calculation - no storage access, no I/O
- Exact Decimal arithmetic; floats are rejected
- Rates come from an injected RateTable (defaults when not given)

Modules:
- deductions: PayrollCalculator and module-level helpers
- schemas: RateTable and TaxBracket
- rates: rates.yaml loading

Usage:
    from payrun.sdk.taxes import PayrollCalculator, load_rate_table

    calc = PayrollCalculator(load_rate_table())
    run = calc.generate_payroll_run(employees)
"""

from .deductions import (
    PayrollCalculator,
    round_currency,
    calc_afp,
    calc_ars,
    calc_isr,
    compute_payroll_line,
    generate_payroll_run,
)

from .schemas import TaxBracket, RateTable, DEFAULT_RATES

from .rates import load_rate_table, rate_table_to_dict

__all__ = [
    # Calculation
    "PayrollCalculator",
    "round_currency",
    "calc_afp",
    "calc_ars",
    "calc_isr",
    "compute_payroll_line",
    "generate_payroll_run",
    # Rates
    "TaxBracket",
    "RateTable",
    "DEFAULT_RATES",
    "load_rate_table",
    "rate_table_to_dict",
]
