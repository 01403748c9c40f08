"""Payroll export and plain-data conversion.

Turns a PayrollRun into CSV or JSON-ready dicts. The engine only
guarantees the numbers; everything about text layout lives here.
"""

import csv
import logging
from decimal import Decimal
from pathlib import Path
from typing import List, Union

from .errors import ExportError
from .schemas import PayrollLine, PayrollRun

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "payroll_export.csv"

CSV_HEADER = [
    "Employee",
    "GrossSalary",
    "AFP",
    "ARS",
    "ISR",
    "TotalDeductions",
    "NetSalary",
]

_CENT = Decimal("0.01")


def _cents(amount: Decimal) -> Decimal:
    # Display only; engine amounts are already rounded
    return amount.quantize(_CENT)


def line_to_row(line: PayrollLine) -> list:
    """CSV row for a payroll line: quoted name, then amounts."""
    return [
        line.employee.name,
        _cents(line.gross_salary),
        _cents(line.afp),
        _cents(line.ars),
        _cents(line.isr),
        _cents(line.total_deductions),
        _cents(line.net_salary),
    ]


def write_payroll_csv(run: PayrollRun, output_path: Union[str, Path]) -> Path:
    """Write a payroll run to a CSV file.

    The header is written unquoted; employee names are always quoted and
    amounts are plain decimals with two places (no thousands separators).

    Args:
        run: Payroll run from generate_payroll_run()
        output_path: Path to output CSV file

    Returns:
        Path to the written file

    Raises:
        ExportError: If the file cannot be written
    """
    output_path = Path(output_path)
    try:
        with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
            csv.writer(csvfile).writerow(CSV_HEADER)
            # QUOTE_NONNUMERIC quotes the name and leaves Decimal amounts bare
            writer = csv.writer(csvfile, quoting=csv.QUOTE_NONNUMERIC)
            for line in run.lines:
                writer.writerow(line_to_row(line))
    except OSError as e:
        raise ExportError(f"Cannot write payroll export to {output_path}: {e}") from e

    logger.info(f"exported {len(run)} payroll line(s) to {output_path}")
    return output_path


def line_to_dict(line: PayrollLine) -> dict:
    """JSON-ready dict for a payroll line, amounts as strings."""
    return {
        "employee_id": line.employee.id,
        "name": line.employee.name,
        "department": line.employee.department,
        "gross_salary": str(_cents(line.gross_salary)),
        "afp": str(_cents(line.afp)),
        "ars": str(_cents(line.ars)),
        "isr": str(_cents(line.isr)),
        "total_deductions": str(_cents(line.total_deductions)),
        "net_salary": str(_cents(line.net_salary)),
    }


def run_to_dict(run: PayrollRun) -> dict:
    """JSON-ready dict for a whole run, with company totals."""
    lines: List[dict] = [line_to_dict(line) for line in run.lines]
    return {
        "lines": lines,
        "totals": {
            "employees": len(run),
            "gross_salary": str(_cents(run.total_gross)),
            "total_deductions": str(_cents(run.total_deductions)),
            "net_salary": str(_cents(run.total_net)),
        },
    }
