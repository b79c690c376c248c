"""Enum naming rule: singular names without Type/Enum suffixes, SNAKE_CASE members."""

from naming_linter.domain.classifier import IdentifierClassifier
from naming_linter.domain.constants import (
    ENUM_ENUM_SUFFIX,
    ENUM_PLURAL_MIN_LENGTH,
    ENUM_TYPE_SUFFIXES,
    NodeKind,
)
from naming_linter.domain.entities import EnumDeclaration, EnumMember, ViolationRecord
from naming_linter.domain.rules import NodeHandler, ReportFn


class EnumNamingRule:
    """Enforce enum naming conventions."""

    rule_id: str = "enum-naming"
    description: str = "Enforce enum naming conventions"

    NAME_SINGULAR = "enumNameSingular"
    NAME_NO_TYPE_SUFFIX = "enumNameNoTypeSuffix"
    NAME_NO_ENUM_SUFFIX = "enumNameNoEnumSuffix"
    MEMBER_SNAKE_CASE = "enumMemberSnakeCase"
    MEMBER_UPPERCASE = "enumMemberUppercase"

    message_ids: tuple[str, ...] = (
        NAME_SINGULAR,
        NAME_NO_TYPE_SUFFIX,
        NAME_NO_ENUM_SUFFIX,
        MEMBER_SNAKE_CASE,
        MEMBER_UPPERCASE,
    )

    def create(self, report: ReportFn) -> dict[str, NodeHandler]:
        def enum_declaration(node: EnumDeclaration) -> None:
            for violation in self.check_declaration(node):
                report(violation)

        return {NodeKind.ENUM_DECLARATION: enum_declaration}

    def check_declaration(self, node: EnumDeclaration) -> list[ViolationRecord]:
        """Run every name and member check. Checks are independent; all may fire."""
        violations: list[ViolationRecord] = []
        name = node.name

        if name.endswith(ENUM_TYPE_SUFFIXES):
            violations.append(self._violation(self.NAME_NO_TYPE_SUFFIX, node.node))

        if name.endswith(ENUM_ENUM_SUFFIX):
            violations.append(self._violation(self.NAME_NO_ENUM_SUFFIX, node.node))

        if IdentifierClassifier.is_plural(name) and len(name) >= ENUM_PLURAL_MIN_LENGTH:
            violations.append(self._violation(self.NAME_SINGULAR, node.node))

        for member in node.members:
            violations.extend(self.check_member(member))
        return violations

    def check_member(self, member: EnumMember) -> list[ViolationRecord]:
        """Members keyed by something other than a plain identifier are skipped."""
        if member.name is None:
            return []
        violations: list[ViolationRecord] = []
        if not IdentifierClassifier.is_upper_snake_case(member.name):
            violations.append(self._violation(self.MEMBER_SNAKE_CASE, member.node))
        if not IdentifierClassifier.is_all_uppercase(member.name):
            violations.append(self._violation(self.MEMBER_UPPERCASE, member.node))
        return violations

    def _violation(self, message_id: str, node: object | None) -> ViolationRecord:
        return ViolationRecord(rule_id=self.rule_id, message_id=message_id, node=node)
