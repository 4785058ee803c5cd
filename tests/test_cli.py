"""Tests for the typegen CLI.

Tests cover:
- Generating from files and stdin
- Option flags and profiles
- The detect, analyze, list-formats and init-profile commands
- Error cases
"""

import json
import warnings
from pathlib import Path

import pytest
from click.testing import CliRunner

from json_typegen import __version__
from json_typegen.cli.main import cli
from json_typegen.emitters import OutputFormat
from json_typegen.profiles import load_profile


SAMPLES_DIR = Path(__file__).parent.parent / "examples" / "samples"
USER_FILE = SAMPLES_DIR / "user.json"
CUSTOMERS_FILE = SAMPLES_DIR / "customers.jsonl"


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


# =============================================================================
# Generate Tests
# =============================================================================

class TestGenerate:
    """Tests for the generate command."""

    def test_generate_interface(self, runner):
        """Test the default output format."""
        result = runner.invoke(cli, ["generate", str(USER_FILE)])

        assert result.exit_code == 0
        assert "export interface Root {" in result.output
        assert "export interface Address {" in result.output
        assert "Detected input format: json" in result.output

    def test_generate_with_name_and_format(self, runner):
        result = runner.invoke(cli, ["generate", str(USER_FILE), "-n", "User", "-f", "zod"])

        assert result.exit_code == 0
        assert "export const UserSchema = z.object({" in result.output

    def test_generate_from_stdin(self, runner):
        result = runner.invoke(cli, ["generate", "-"], input='{"a": 1}')

        assert result.exit_code == 0
        assert "export interface Root {\n    a: number;\n}" in result.output

    def test_stdin_read_has_no_deprecation_warning(self, runner):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = runner.invoke(cli, ["detect", "-"], input='{"a": 1}')

        assert result.exit_code == 0
        assert not [w for w in caught if issubclass(w.category, DeprecationWarning)
                    and "get_text_stream" in str(w.message)]

    def test_generate_to_file(self, runner, tmp_path):
        output = tmp_path / "user.ts"
        result = runner.invoke(cli, ["generate", str(USER_FILE), "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_text().startswith("export interface Root {")
        assert "Generation Complete" in result.output

    def test_extension_selects_input_format(self, runner):
        result = runner.invoke(cli, [
            "generate", str(SAMPLES_DIR / "settings.json5"), "-f", "type", "-n", "Settings",
        ])

        assert result.exit_code == 0
        assert "export type Settings = {" in result.output
        assert "Detected input format: json5" in result.output

    def test_explicit_input_format(self, runner, tmp_path):
        sample = tmp_path / "sample.txt"
        sample.write_text("a: 1\n")

        result = runner.invoke(cli, ["generate", str(sample), "-i", "yaml", "-f", "graphql"])

        assert result.exit_code == 0
        assert "type Root {\n  a: Int\n}" in result.output

    def test_advanced_flags(self, runner):
        result = runner.invoke(cli, [
            "generate", str(CUSTOMERS_FILE),
            "-f", "advanced-interface",
            "-n", "Customer",
            "--no-optional",
            "--no-readonly",
            "--no-enums",
        ])

        assert result.exit_code == 0
        assert "  tag: string;" in result.output
        assert "  plan: string;" in result.output
        assert "readonly" not in result.output
        assert "enum" not in result.output

    def test_profile(self, runner, tmp_path):
        profile = tmp_path / "customer.yaml"
        profile.write_text(
            "name: Customer\n"
            "output_format: advanced-type\n"
            "options:\n"
            "  use_readonly: false\n"
        )

        result = runner.invoke(cli, ["generate", str(CUSTOMERS_FILE), "-p", str(profile)])

        assert result.exit_code == 0
        assert "type Customer = {" in result.output
        assert "readonly" not in result.output

    def test_flags_override_profile(self, runner, tmp_path):
        profile = tmp_path / "customer.yaml"
        profile.write_text(
            "name: Customer\n"
            "output_format: advanced-interface\n"
            "options:\n"
            "  use_readonly: false\n"
        )

        result = runner.invoke(cli, [
            "generate", str(CUSTOMERS_FILE), "-p", str(profile), "--readonly", "-n", "Client",
        ])

        assert result.exit_code == 0
        assert "interface Client {" in result.output
        assert "  readonly id: number;" in result.output

    def test_invalid_name(self, runner):
        result = runner.invoke(cli, ["generate", str(USER_FILE), "-n", "my-type"])

        assert result.exit_code == 2
        assert "Invalid value" in result.output

    def test_invalid_format(self, runner):
        result = runner.invoke(cli, ["generate", str(USER_FILE), "-f", "xml"])
        assert result.exit_code == 2

    def test_parse_error(self, runner, tmp_path):
        sample = tmp_path / "broken.json"
        sample.write_text("{not json")

        result = runner.invoke(cli, ["generate", str(sample), "-i", "json"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Failed to parse JSON" in result.output

    def test_emission_error(self, runner):
        result = runner.invoke(cli, ["generate", "-", "-f", "graphql"], input="42")

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["generate", str(tmp_path / "missing.json")])
        assert result.exit_code == 2


# =============================================================================
# Inspection Command Tests
# =============================================================================

class TestDetect:
    """Tests for the detect command."""

    def test_detect_jsonlines(self, runner):
        result = runner.invoke(cli, ["detect", str(CUSTOMERS_FILE)])

        assert result.exit_code == 0
        assert result.output.strip() == "jsonlines"

    def test_detect_stdin(self, runner):
        result = runner.invoke(cli, ["detect", "-"], input="name,age\nAlice,30\n")

        assert result.exit_code == 0
        assert result.output.strip() == "csv"


class TestAnalyze:
    """Tests for the analyze command."""

    def test_analyze_table(self, runner):
        result = runner.invoke(cli, ["analyze", str(CUSTOMERS_FILE)])

        assert result.exit_code == 0
        assert "Structural Schema" in result.output
        assert "email" in result.output
        assert "plan" in result.output
        assert "nickname" in result.output

    def test_analyze_json(self, runner):
        result = runner.invoke(cli, ["analyze", str(CUSTOMERS_FILE), "--json"])

        assert result.exit_code == 0
        schema = json.loads(result.output)
        assert schema["type"] == "object"
        assert schema["properties"]["plan"]["isEnum"] is True
        assert schema["properties"]["tag"]["isOptional"] is True
        assert schema["properties"]["email"]["pattern"] == "email"

    def test_analyze_nested(self, runner):
        result = runner.invoke(cli, ["analyze", str(USER_FILE), "--json"])

        assert result.exit_code == 0
        schema = json.loads(result.output)
        assert schema["properties"]["orders"]["nested"]["items"]["type"] == "object"


class TestListFormats:
    """Tests for the list-formats command."""

    def test_lists_all_formats(self, runner):
        result = runner.invoke(cli, ["list-formats"])

        assert result.exit_code == 0
        for name in ("zod", "graphql", "interface"):
            assert name in result.output


class TestInitProfile:
    """Tests for the init-profile command."""

    def test_creates_profile(self, runner, tmp_path):
        output = tmp_path / "typegen.yaml"
        result = runner.invoke(cli, ["init-profile", "-n", "Customer", "-o", str(output)])

        assert result.exit_code == 0
        profile = load_profile(output)
        assert profile.name == "Customer"
        assert profile.output_format == OutputFormat.ADVANCED_INTERFACE

    def test_invalid_name(self, runner, tmp_path):
        result = runner.invoke(cli, ["init-profile", "-n", "1st", "-o", str(tmp_path / "p.yaml")])
        assert result.exit_code == 2


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
