"""Terminal reporter implementation - lives in infrastructure (writes to stdout)."""

import json
from typing import TYPE_CHECKING, TypedDict

import typer

from naming_linter.domain.entities import ViolationRecord

if TYPE_CHECKING:
    from naming_linter.domain.entities import AnalysisResult
    from naming_linter.domain.protocols import RegistryProtocol


class ViolationRow(TypedDict):
    """One violation as emitted by the json format."""

    path: str
    line: int
    column: int
    code: str
    symbol: str
    message_id: str
    rule_id: str
    message: str


class TerminalViolationReporter:
    """Renders analysis results as text lines or a JSON document."""

    FORMATS = ("text", "json")

    def __init__(self, registry: "RegistryProtocol") -> None:
        self._registry = registry
        self._catalog = registry.get_catalog()

    def to_row(self, path: str, violation: ViolationRecord) -> ViolationRow:
        """path defaults to the file of the violation's node."""
        code = self._registry.get_code(violation.message_id) or ""
        entry = self._registry.get_entry(code) if code else None
        node_path, line, column = ViolationRecord.split_location(violation.location)
        return ViolationRow(
            path=path or node_path,
            line=line,
            column=column,
            code=code,
            symbol=(entry or {}).get("symbol", violation.message_id),
            message_id=violation.message_id,
            rule_id=violation.rule_id,
            message=self._catalog.render_violation(violation),
        )

    def format_violation(self, violation: ViolationRecord, path: str = "") -> str:
        row = self.to_row(path, violation)
        return (
            f"{row['path']}:{row['line']}:{row['column']}: "
            f"{row['code']} {row['symbol']} ({row['message_id']}) {row['message']}"
        )

    def report(self, result: "AnalysisResult", output_format: str = "text") -> None:
        if output_format == "json":
            rows = [self.to_row(f.path, v) for f in result.files for v in f.violations]
            typer.echo(json.dumps(rows, indent=2))
            return
        for file_result in result.files:
            for violation in file_result.violations:
                typer.echo(self.format_violation(violation, file_result.path))
        total = len(result.violations)
        skipped = len(result.skipped)
        summary = f"{total} naming violation(s) in {len(result.files)} file(s)"
        if skipped:
            summary += f", {skipped} skipped"
        typer.echo(summary)
