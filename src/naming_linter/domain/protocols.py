"""Ports implemented by Infrastructure and consumed by use cases."""

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import astroid

    from naming_linter.domain.entities import AnalysisResult, ViolationRecord
    from naming_linter.domain.registry_types import RuleRegistryEntry
    from naming_linter.domain.rule_msgs import MessageCatalog


class NamingGatewayProtocol(Protocol):
    """Supplies declaration nodes from a parsed tree."""

    def parse_file(self, file_path: str | Path) -> "astroid.nodes.Module":
        """Parse a file. Raises OSError or astroid.AstroidSyntaxError."""
        ...

    def iter_nodes(self, module: "astroid.nodes.Module") -> Iterator[tuple[str, object]]:
        """Yield (node kind, declaration node) pairs in document order."""
        ...

    def nodes_for_class(
        self, class_node: "astroid.nodes.ClassDef"
    ) -> Iterator[tuple[str, object]]:
        """Yield (node kind, declaration node) pairs for a single class."""
        ...


class RegistryProtocol(Protocol):
    def get_catalog(self) -> "MessageCatalog":
        ...

    def get_code(self, message_id: str) -> str | None:
        ...

    def get_entry(self, rule_code: str) -> "RuleRegistryEntry | None":
        ...


class ViolationReporterProtocol(Protocol):
    """Renders analysis results for the user."""

    def report(self, result: "AnalysisResult", output_format: str = "text") -> None:
        ...

    def format_violation(self, violation: "ViolationRecord", path: str = "") -> str:
        ...
