"""Naming convention checks (C9401-C9405 enums, C9411-C9426 interfaces)."""

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from naming_linter.domain.config import ConfigurationLoader
from naming_linter.domain.entities import ViolationRecord
from naming_linter.domain.protocols import NamingGatewayProtocol
from naming_linter.domain.registry_types import RuleRegistryEntry
from naming_linter.domain.rule_msgs import MessageCatalog, RuleMsgBuilder
from naming_linter.domain.rules import NamingRule, RuleDispatcher
from naming_linter.domain.rules.enum_naming import EnumNamingRule
from naming_linter.domain.rules.interface_naming import InterfaceNamingRule


class NamingConventionChecker(BaseChecker):
    """Enum and interface naming policy. Thin: translates classes and delegates to the rules."""

    name: str = "naming-conventions"

    def __init__(
        self,
        linter: "PyLinter",
        gateway: NamingGatewayProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
        rules: Sequence[NamingRule] | None = None,
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs(registry)  # type: ignore[assignment]
        super().__init__(linter)
        self.config_loader = config_loader
        self._gateway = gateway
        self._catalog = MessageCatalog.from_registry(registry)
        self._codes: dict[str, str] = {}
        for message_id in self._catalog.message_ids:
            code = RuleMsgBuilder.code_for(registry, message_id)
            if code is not None:
                self._codes[message_id] = code
        self._rules: tuple[NamingRule, ...] = (
            tuple(rules) if rules is not None else (EnumNamingRule(), InterfaceNamingRule())
        )
        self._handlers = RuleDispatcher.build(self._rules, self._report)

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        path = getattr(node.root(), "file", "") or ""
        if self.config_loader.is_excluded(path):
            return
        for kind, declaration in self._gateway.nodes_for_class(node):
            RuleDispatcher.dispatch(self._handlers, kind, declaration)

    def _report(self, violation: ViolationRecord) -> None:
        code = self._codes.get(violation.message_id)
        if code is None:
            logging.debug("No pylint code registered for %s", violation.message_id)
            return
        self.add_message(
            code,
            node=violation.node,
            args=RuleMsgBuilder.message_args(self._catalog, violation),
        )
