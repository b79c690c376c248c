"""CLI entry points for the naming linter - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer

from naming_linter.domain.config import ConfigurationLoader
from naming_linter.domain.protocols import (
    NamingGatewayProtocol,
    ViolationReporterProtocol,
)
from naming_linter.domain.rules import NamingRule
from naming_linter.infrastructure.services.rule_registry import RuleRegistryService
from naming_linter.use_cases.analyze_module import AnalyzeNamingUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    gateway: NamingGatewayProtocol
    registry_service: RuleRegistryService
    rules: tuple[NamingRule, ...]
    reporter: ViolationReporterProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_paths(paths: list[Path] | None) -> list[Path]:
        """Explicit paths, else src/ if it exists, else the current directory."""
        if paths:
            return list(paths)
        src_dir = Path.cwd() / "src"
        if src_dir.is_dir():
            return [src_dir]
        return [Path(".")]

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="naming-linter",
            help="Naming policy linter for Enum, Protocol and TypedDict classes.",
            add_completion=False,
        )

        @app.command()
        def check(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories to check (default: src/ or .)"),  # noqa: B008
            output_format: str = typer.Option(
                "text", "--format", help="Output format: text (default) or json"),
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Log debug output to stderr"),
        ) -> None:
            """Check enum and interface naming in the given paths."""
            if verbose:
                logging.basicConfig(level=logging.DEBUG)
            if output_format not in ("text", "json"):
                raise typer.BadParameter(
                    f"unknown format '{output_format}'", param_hint="--format")
            targets = CLIAppFactory.resolve_target_paths(paths)
            for target in targets:
                if not target.exists():
                    raise typer.BadParameter(
                        f"path does not exist: {target}", param_hint="PATHS")
            use_case = AnalyzeNamingUseCase(
                rules=deps.rules,
                gateway=deps.gateway,
                config_loader=deps.config_loader,
            )
            result = use_case.execute(targets)
            deps.reporter.report(result, output_format=output_format)
            if result.has_violations():
                sys.exit(1)
            sys.exit(0)

        @app.command()
        def rules() -> None:
            """List every naming message with its pylint code and symbol."""
            catalog = deps.registry_service.get_catalog()
            for rule in deps.rules:
                typer.echo(f"{rule.rule_id}: {rule.description}")
                for message_id in rule.message_ids:
                    code = deps.registry_service.get_code(message_id) or "-"
                    entry = deps.registry_service.get_entry(message_id) or {}
                    symbol = entry.get("symbol", message_id)
                    template = catalog.template(message_id) or ""
                    typer.echo(f"  {code} {symbol} ({message_id}): {template}")

        return app
