"""Tests for the fieldrules CLI commands."""

import textwrap
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from fieldrules.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("FIELDRULES_LOCALE", raising=False)
    monkeypatch.delenv("FIELDRULES_DICTIONARY", raising=False)


def write(path: Path, content: str) -> Path:
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


@pytest.fixture
def rules_file(tmp_path):
    return write(
        tmp_path / "rules.yaml",
        """\
        name: required|alpha
        age: required|between:18,99
        """,
    )


class TestCheck:
    def test_valid_values(self, runner, rules_file, tmp_path):
        values = write(tmp_path / "values.yaml", "name: Ada\nage: 36\n")
        result = runner.invoke(cli, ["check", str(rules_file), str(values)])

        assert result.exit_code == 0
        assert "All 2 field(s) are valid." in result.output

    def test_invalid_values(self, runner, rules_file, tmp_path):
        values = write(tmp_path / "values.yaml", "name: Ada1\nage: 12\n")
        result = runner.invoke(cli, ["check", str(rules_file), str(values)])

        assert result.exit_code == 1
        assert "name: The name field may only contain alphabetic characters." in result.output
        assert "age: The age field must be between 18 and 99." in result.output
        assert "2 error(s) in 2 field(s)" in result.output

    def test_missing_value_is_validated_as_none(self, runner, rules_file, tmp_path):
        values = write(tmp_path / "values.yaml", "name: Ada\n")
        result = runner.invoke(cli, ["check", str(rules_file), str(values)])

        assert result.exit_code == 1
        assert "The age field is required." in result.output

    def test_locale_and_dictionary(self, runner, rules_file, tmp_path):
        dictionary = write(
            tmp_path / "de.yaml",
            """\
            de:
              required: "{field} ist erforderlich."
            """,
        )
        values = write(tmp_path / "values.yaml", "name: Ada\n")
        result = runner.invoke(
            cli,
            ["check", str(rules_file), str(values), "--locale", "de", "--dictionary", str(dictionary)],
        )

        assert result.exit_code == 1
        assert "age: age ist erforderlich." in result.output

    def test_rejects_non_mapping_rules(self, runner, tmp_path):
        rules = write(tmp_path / "rules.yaml", "- required\n")
        values = write(tmp_path / "values.yaml", "name: Ada\n")
        result = runner.invoke(cli, ["check", str(rules), str(values)])

        assert result.exit_code != 0
        assert "expected a mapping" in result.output

    def test_rejects_invalid_yaml(self, runner, rules_file, tmp_path):
        values = write(tmp_path / "values.yaml", "name: [unclosed\n")
        result = runner.invoke(cli, ["check", str(rules_file), str(values)])

        assert result.exit_code == 1
        assert "invalid YAML" in result.output
        assert not isinstance(result.exception, yaml.YAMLError)

    def test_rejects_non_string_expression(self, runner, tmp_path):
        rules = write(tmp_path / "rules.yaml", "age: 5\n")
        values = write(tmp_path / "values.yaml", "age: 12\n")
        result = runner.invoke(cli, ["check", str(rules), str(values)])

        assert result.exit_code == 1
        assert "rules for 'age' must be a string" in result.output


class TestRules:
    def test_lists_builtins(self, runner):
        result = runner.invoke(cli, ["rules"])
        assert result.exit_code == 0
        names = result.output.split()
        assert "required" in names
        assert "between" in names
