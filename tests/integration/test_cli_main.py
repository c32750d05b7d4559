#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import json

import pytest
from click.testing import CliRunner

import cowry.core.config as config_module
from cowry.cli.main import main
from cowry.core.currency import NGN
from cowry.core.money import Money
from cowry.core.serialization import from_json, load_money_list


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Fixed-Point Money Toolkit" in result.output
        for command in ["version", "config", "currencies", "format", "multiply", "divide", "percentage", "allocate"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Cowry v" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Default Currency: USD" in result.output
        assert "Rounding Mode: nearest" in result.output
        assert "Currencies File: (built-in only)" in result.output

    def test_invalid_command_shows_error(self):
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "Error" in result.output or "No such" in result.output

    def test_verbose_flag(self):
        result = self.runner.invoke(main, ["--verbose", "config"])

        assert result.exit_code == 0
        assert "Default currency: USD" in result.output

    def test_config_env_override_changes_environment(self):
        result = self.runner.invoke(main, ["--config-env", "production", "config"])

        assert result.exit_code == 0
        assert "Environment: production" in result.output

    def test_invalid_configuration_reported(self, monkeypatch):
        monkeypatch.setenv("COWRY_ROUNDING_MODE", "bankers")
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code != 0
        assert "Configuration validation failed" in result.output

    def test_currencies_lists_builtins(self):
        result = self.runner.invoke(main, ["currencies"])

        assert result.exit_code == 0
        assert "Code  Symbol  Precision" in result.output
        assert "NGN" in result.output
        assert "₦" in result.output

    def test_currencies_includes_catalog_file(self, monkeypatch, currency_catalog_file):
        monkeypatch.setenv("COWRY_CURRENCIES_FILE", str(currency_catalog_file))
        result = self.runner.invoke(main, ["currencies"])

        assert result.exit_code == 0
        assert "KES" in result.output
        assert "BHD" in result.output


@pytest.mark.integration
class TestMoneyCommands:
    """Test the money arithmetic commands."""

    def setup_method(self):
        self.runner = CliRunner()

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["1234.5", "--currency", "NGN"], "₦1,234.50"),
            (["1234.5", "--currency", "NGN", "--no-grouping"], "₦1234.50"),
            (["12.345", "--display-precision", "1"], "$12.4"),
            (["12.345", "--display-precision", "1", "--mode", "floor"], "$12.3"),
            (["1500", "--currency", "JPY"], "¥1,500"),
        ],
    )
    def test_format(self, args, expected):
        result = self.runner.invoke(main, ["format", *args])

        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_format_unknown_currency(self):
        result = self.runner.invoke(main, ["format", "1.00", "--currency", "ZZZ"])

        assert result.exit_code != 0
        assert "not found" in result.output

    def test_format_unparseable_amount(self):
        result = self.runner.invoke(main, ["format", "abc"])

        assert result.exit_code != 0
        assert "Error" in result.output

    def test_default_currency_from_environment(self, monkeypatch):
        monkeypatch.setenv("COWRY_DEFAULT_CURRENCY", "NGN")
        result = self.runner.invoke(main, ["format", "5"])

        assert result.exit_code == 0
        assert result.output.strip() == "₦5.00"

    @pytest.mark.parametrize(
        "command,args,expected",
        [
            ("multiply", ["10.00", "1.5"], "$15.00"),
            ("multiply", ["0.10", "0.33"], "$0.03"),
            ("multiply", ["0.10", "0.33", "--mode", "ceil"], "$0.04"),
            ("divide", ["10.00", "4"], "$2.50"),
            ("divide", ["1.00", "3", "--mode", "floor"], "$0.33"),
            ("divide", ["1.00", "3", "--mode", "ceil"], "$0.34"),
            ("percentage", ["200", "12.5"], "$25.00"),
        ],
    )
    def test_scaling_commands(self, command, args, expected):
        result = self.runner.invoke(main, [command, *args])

        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_scaling_json_output(self):
        result = self.runner.invoke(main, ["multiply", "5.00", "2", "--currency", "NGN", "--json"])

        assert result.exit_code == 0
        assert from_json(result.output.strip()) == Money(1000, NGN)

    def test_scaling_verbose_output(self):
        result = self.runner.invoke(main, ["--verbose", "divide", "1.00", "3"])

        assert result.exit_code == 0
        assert "100 minor units" in result.output
        assert "[nearest]" in result.output
        assert result.output.strip().endswith("$0.33")

    def test_divide_by_zero(self):
        result = self.runner.invoke(main, ["divide", "10.00", "0"])

        assert result.exit_code != 0
        assert "Error" in result.output
        assert "zero" in result.output.lower()

    def test_allocate_text(self):
        result = self.runner.invoke(main, ["allocate", "1.00", "1", "1", "1"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == ["     1  $0.34", "     1  $0.33", "     1  $0.33", " total  $1.00"]

    def test_allocate_negative_amount(self):
        result = self.runner.invoke(main, ["allocate", "--", "-1.00", "1", "1", "1"])

        assert result.exit_code == 0
        assert "-$0.34" in result.output

    def test_allocate_json(self):
        result = self.runner.invoke(main, ["allocate", "250", "3", "7", "--currency", "JPY", "--json"])

        assert result.exit_code == 0
        records = json.loads(result.output)
        assert [record["amount"] for record in records] == [75, 175]
        assert all(record["currency"]["code"] == "JPY" for record in records)

    def test_allocate_output_file(self, temp_dir):
        output = temp_dir / "shares.json"
        result = self.runner.invoke(
            main, ["allocate", "1000", "1", "1", "1", "--currency", "NGN", "--output", str(output)]
        )

        assert result.exit_code == 0
        shares = load_money_list(output)
        assert [share.amount for share in shares] == [33334, 33333, 33333]

    def test_allocate_invalid_ratios(self):
        result = self.runner.invoke(main, ["allocate", "1.00", "0", "0"])

        assert result.exit_code != 0
        assert "Error" in result.output

    def test_catalog_file_read_once_per_command(self, monkeypatch, currency_catalog_file):
        calls = []
        original = config_module.load_currency_catalog

        def counting_loader(path):
            calls.append(path)
            return original(path)

        monkeypatch.setattr(config_module, "load_currency_catalog", counting_loader)
        monkeypatch.setenv("COWRY_CURRENCIES_FILE", str(currency_catalog_file))

        result = self.runner.invoke(main, ["format", "1234.567", "--currency", "BHD"])

        assert result.exit_code == 0
        assert result.output.strip() == "BD1,234.567"
        assert len(calls) == 1

    @pytest.mark.parametrize("amount", ["1e3", "12abc34", "USD 12 USD"])
    def test_malformed_amount_rejected(self, amount):
        result = self.runner.invoke(main, ["multiply", amount, "2"])

        assert result.exit_code != 0
        assert "Cannot parse amount" in result.output
