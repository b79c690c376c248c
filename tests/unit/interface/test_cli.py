"""Unit tests for Typer-based CLI interface."""

import json
from pathlib import Path
from unittest.mock import Mock

from typer.testing import CliRunner

from naming_linter.domain.config import ConfigurationLoader
from naming_linter.domain.rules.enum_naming import EnumNamingRule
from naming_linter.domain.rules.interface_naming import InterfaceNamingRule
from naming_linter.infrastructure.gateways.astroid_gateway import AstroidNamingGateway
from naming_linter.infrastructure.reporters import TerminalViolationReporter
from naming_linter.infrastructure.services.rule_registry import RuleRegistryService
from naming_linter.interface.cli import CLIAppFactory, CLIDependencies

runner = CliRunner()

BAD_SOURCE = """\
from typing import Protocol


class Config(Protocol):
    user_name: str
"""


def _make_deps(**overrides) -> CLIDependencies:
    """Create CLIDependencies wired with real collaborators unless overridden."""
    registry_service = RuleRegistryService()
    defaults: dict = {
        "config_loader": ConfigurationLoader({}, {}),
        "gateway": AstroidNamingGateway(),
        "registry_service": registry_service,
        "rules": (EnumNamingRule(), InterfaceNamingRule()),
        "reporter": TerminalViolationReporter(registry_service),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


class TestResolveTargetPaths:
    """Test path resolution logic."""

    def test_explicit_paths(self) -> None:
        assert CLIAppFactory.resolve_target_paths([Path("a.py")]) == [Path("a.py")]

    def test_defaults_to_src_when_exists(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "src").mkdir()
        monkeypatch.chdir(tmp_path)
        assert CLIAppFactory.resolve_target_paths(None) == [Path.cwd() / "src"]

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert CLIAppFactory.resolve_target_paths(None) == [Path(".")]


class TestCheckCommand:
    """Test the check command."""

    def test_text_output_and_exit_code(self, tmp_path: Path) -> None:
        target = tmp_path / "models.py"
        target.write_text(BAD_SOURCE, encoding="utf-8")
        app = CLIAppFactory.create_app(_make_deps())

        result = runner.invoke(app, ["check", str(target)])

        assert result.exit_code == 1
        assert "C9414 interface-no-too-generic (interfaceNoTooGeneric)" in result.output
        assert "Interface name 'Config' is too generic." in result.output
        assert "Interface property 'user_name' must not be in snake_case." in result.output
        assert f"{target}:4:0:" in result.output
        assert "3 naming violation(s) in 1 file(s)" in result.output

    def test_json_output(self, tmp_path: Path) -> None:
        target = tmp_path / "models.py"
        target.write_text(BAD_SOURCE, encoding="utf-8")
        app = CLIAppFactory.create_app(_make_deps())

        result = runner.invoke(app, ["check", str(target), "--format", "json"])

        assert result.exit_code == 1
        rows = json.loads(result.stdout)
        assert [row["message_id"] for row in rows] == [
            "interfaceNoTooGeneric",
            "propertyCamelCase",
            "propertyNoSnakeCase",
        ]
        assert rows[1]["line"] == 5
        assert rows[1]["symbol"] == "property-camel-case"

    def test_clean_file_exits_zero(self, tmp_path: Path) -> None:
        target = tmp_path / "clean.py"
        target.write_text("from enum import Enum\n\nclass Color(Enum):\n    RED = 1\n", encoding="utf-8")
        app = CLIAppFactory.create_app(_make_deps())

        result = runner.invoke(app, ["check", str(target)])

        assert result.exit_code == 0
        assert "0 naming violation(s) in 1 file(s)" in result.output

    def test_missing_path_is_usage_error(self, tmp_path: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())

        result = runner.invoke(app, ["check", str(tmp_path / "missing.py")])

        assert result.exit_code == 2

    def test_unknown_format_is_usage_error(self, tmp_path: Path) -> None:
        target = tmp_path / "clean.py"
        target.write_text("", encoding="utf-8")
        app = CLIAppFactory.create_app(_make_deps())

        result = runner.invoke(app, ["check", str(target), "--format", "xml"])

        assert result.exit_code == 2

    def test_reporter_receives_result(self, tmp_path: Path) -> None:
        target = tmp_path / "clean.py"
        target.write_text("", encoding="utf-8")
        reporter = Mock()
        app = CLIAppFactory.create_app(_make_deps(reporter=reporter))

        result = runner.invoke(app, ["check", str(target), "--format", "json"])

        assert result.exit_code == 0
        reporter.report.assert_called_once()
        assert reporter.report.call_args.kwargs["output_format"] == "json"


class TestRulesCommand:
    def test_lists_every_message(self) -> None:
        app = CLIAppFactory.create_app(_make_deps())

        result = runner.invoke(app, ["rules"])

        assert result.exit_code == 0
        assert "enum-naming: Enforce enum naming conventions" in result.output
        assert "C9401 enum-name-singular (enumNameSingular)" in result.output
        assert "C9426 property-no-bad-abbr (propertyNoBadAbbr)" in result.output
