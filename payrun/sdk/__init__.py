"""Payrun SDK - Employee roster and payroll deduction calculation."""

from .config import (
    get_config_dir,
    get_settings_path,
    get_rates_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_data_path,
    get_db_url,
)

from .errors import (
    PayrunError,
    InvalidInputError,
    ParseError,
    SalaryParseError,
    IdParseError,
    EmployeeNotFoundError,
    DuplicateEmployeeError,
    ExportError,
    ConfigError,
)

from .schemas import MAX_SALARY, Employee, EmployeeRef, PayrollLine, PayrollRun

from .taxes import (
    PayrollCalculator,
    RateTable,
    TaxBracket,
    DEFAULT_RATES,
    round_currency,
    calc_afp,
    calc_ars,
    calc_isr,
    compute_payroll_line,
    generate_payroll_run,
    load_rate_table,
)

from .employee import EmployeeDirectory, parse_salary, parse_employee_id

from .export import (
    write_payroll_csv,
    run_to_dict,
    line_to_dict,
    DEFAULT_EXPORT_FILENAME,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "get_rates_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "get_data_path",
    "get_db_url",
    # Errors
    "PayrunError",
    "InvalidInputError",
    "ParseError",
    "SalaryParseError",
    "IdParseError",
    "EmployeeNotFoundError",
    "DuplicateEmployeeError",
    "ExportError",
    "ConfigError",
    # Schemas
    "MAX_SALARY",
    "Employee",
    "EmployeeRef",
    "PayrollLine",
    "PayrollRun",
    # Calculation
    "PayrollCalculator",
    "RateTable",
    "TaxBracket",
    "DEFAULT_RATES",
    "round_currency",
    "calc_afp",
    "calc_ars",
    "calc_isr",
    "compute_payroll_line",
    "generate_payroll_run",
    "load_rate_table",
    # Employees
    "EmployeeDirectory",
    "parse_salary",
    "parse_employee_id",
    # Export
    "write_payroll_csv",
    "run_to_dict",
    "line_to_dict",
    "DEFAULT_EXPORT_FILENAME",
]
