"""Rule protocol and node-kind dispatch shared by the naming rules."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol

from naming_linter.domain.entities import ViolationRecord

__all__ = [
    "NamingRule",
    "NodeHandler",
    "ReportFn",
    "RuleDispatcher",
]

ReportFn = Callable[[ViolationRecord], None]
NodeHandler = Callable[[Any], None]


class NamingRule(Protocol):
    """
    A stateless naming rule.

    create() receives the sink's report callable and returns handlers keyed
    by node-kind label. Handlers keep nothing between calls.
    """

    rule_id: str
    description: str
    message_ids: tuple[str, ...]

    def create(self, report: ReportFn) -> dict[str, NodeHandler]:
        """Return node-kind label -> handler, each handler reporting through report."""
        ...


class RuleDispatcher:
    """Merges handler mappings of several rules into kind -> handlers."""

    @staticmethod
    def build(
        rules: Iterable[NamingRule], report: ReportFn
    ) -> dict[str, tuple[NodeHandler, ...]]:
        merged: dict[str, list[NodeHandler]] = {}
        for rule in rules:
            for kind, handler in rule.create(report).items():
                merged.setdefault(kind, []).append(handler)
        return {kind: tuple(handlers) for kind, handlers in merged.items()}

    @staticmethod
    def dispatch(
        handlers: Mapping[str, tuple[NodeHandler, ...]], kind: str, node: object
    ) -> None:
        """Invoke every handler registered for kind. Unknown kinds are ignored."""
        for handler in handlers.get(kind, ()):
            handler(node)
