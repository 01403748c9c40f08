"""Payrun - employee roster and monthly payroll deductions."""

__version__ = "0.3.0"
