"""Tests for the employees CLI commands."""

import json

import pytest
from click.testing import CliRunner

from payrun.cli.__main__ import cli


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Set up isolated config and data directories with an empty database."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"

    config_dir.mkdir()
    data_dir.mkdir()

    monkeypatch.setenv("PAYRUN_CONFIG_PATH", str(config_dir))
    monkeypatch.delenv("PAYRUN_DB_URL", raising=False)

    settings = {"data_dir": str(data_dir)}
    (config_dir / "settings.json").write_text(json.dumps(settings))

    return {
        "config_dir": config_dir,
        "data_dir": data_dir,
    }


def invoke(*args, input=None):
    return CliRunner().invoke(cli, list(args), input=input)


class TestEmployeesAdd:

    def test_add(self, isolated_env):
        result = invoke("employees", "add", "Ana Perez", "--department", "Sales", "--salary", "15000")

        assert result.exit_code == 0, result.output
        assert "Employee added with Id 1." in result.output
        assert (isolated_env["data_dir"] / "payroll.db").exists()

    def test_add_negative_salary(self, isolated_env):
        result = invoke("employees", "add", "Ana Perez", "--salary", "-10")

        assert result.exit_code == 1
        assert "Salary cannot be negative" in result.output

    def test_add_malformed_salary(self, isolated_env):
        result = invoke("employees", "add", "Ana Perez", "--salary", "ten")

        assert result.exit_code == 1
        assert "Invalid salary" in result.output

    def test_add_duplicate(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "--salary", "15000")
        result = invoke("employees", "add", "ana perez", "--salary", "15000.00")

        assert result.exit_code == 1
        assert "Duplicate employee" in result.output

    def test_salary_required(self, isolated_env):
        result = invoke("employees", "add", "Ana Perez")
        assert result.exit_code == 2


class TestEmployeesListShow:

    def test_list_empty(self, isolated_env):
        result = invoke("employees", "list")

        assert result.exit_code == 0
        assert "No employees registered." in result.output

    def test_list_count(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "--salary", "15000")
        invoke("employees", "add", "Luis Gomez", "--salary", "30000")

        result = invoke("employees", "list", "--count")

        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_list_text(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "-d", "Sales", "--salary", "15000")

        result = invoke("employees", "list")

        assert "Id: 1 | Name: Ana Perez | Department: Sales | Salary: 15000.00" in result.output
        assert "Total: 1 employee(s)" in result.output

    def test_list_json(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "-d", "Sales", "--salary", "15000")

        result = invoke("employees", "list", "--format", "json")

        assert json.loads(result.output) == [
            {"id": 1, "name": "Ana Perez", "department": "Sales", "base_salary": "15000.00"}
        ]

    def test_list_table(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "--salary", "15000")

        result = invoke("employees", "list", "--format", "table")

        assert result.exit_code == 0
        assert "Ana Perez" in result.output
        assert "15,000.00" in result.output

    def test_show(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "--salary", "15000")

        result = invoke("employees", "show", "1")

        assert result.exit_code == 0
        assert "Name: Ana Perez" in result.output

    def test_show_missing(self, isolated_env):
        result = invoke("employees", "show", "99")

        assert result.exit_code == 1
        assert "Employee 99 not found" in result.output


class TestEmployeesEditRemove:

    def test_edit_salary(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "-d", "Sales", "--salary", "15000")

        result = invoke("employees", "edit", "1", "--salary", "20000")

        assert result.exit_code == 0
        assert "Employee updated." in result.output
        assert "Salary: 20000.00" in result.output
        assert "Department: Sales" in result.output

    def test_edit_nothing(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "--salary", "15000")

        result = invoke("employees", "edit", "1")

        assert result.exit_code == 2
        assert "Nothing to update" in result.output

    def test_edit_missing(self, isolated_env):
        result = invoke("employees", "edit", "5", "--name", "X")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_remove_with_yes(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "--salary", "15000")

        result = invoke("employees", "remove", "1", "--yes")

        assert result.exit_code == 0
        assert "Employee deleted." in result.output
        assert invoke("employees", "list", "--count").output.strip() == "0"

    def test_remove_confirm_declined(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "--salary", "15000")

        result = invoke("employees", "remove", "1", input="n\n")

        assert "Cancelled." in result.output
        assert invoke("employees", "list", "--count").output.strip() == "1"

    def test_remove_confirm_accepted(self, isolated_env):
        invoke("employees", "add", "Ana Perez", "--salary", "15000")

        result = invoke("employees", "remove", "1", input="y\n")

        assert "Employee deleted." in result.output
        assert invoke("employees", "list", "--count").output.strip() == "0"
