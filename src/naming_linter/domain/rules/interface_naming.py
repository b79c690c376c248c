"""Interface naming rule: PascalCase interface names, camelCase descriptive properties."""

from naming_linter.domain.classifier import IdentifierClassifier
from naming_linter.domain.constants import (
    BAD_ABBREVIATIONS,
    PROPERTY_PLURAL_MIN_LENGTH,
    TOO_GENERIC_INTERFACE_NAMES,
    NodeKind,
)
from naming_linter.domain.entities import (
    InterfaceDeclaration,
    PropertySignature,
    ViolationRecord,
)
from naming_linter.domain.rules import NodeHandler, ReportFn


class InterfaceNamingRule:
    """
    Enforce interface naming and property conventions.

    Overlapping checks (PascalCase vs. lowercase start, camelCase vs.
    snake_case) each report on their own; nothing is merged.
    """

    rule_id: str = "interface-naming"
    description: str = "Enforce interface naming and property conventions"

    PASCAL_CASE = "interfacePascalCase"
    NO_I_PREFIX = "interfaceNoIPrefix"
    NO_ALL_CAPS = "interfaceNoAllCaps"
    NO_TOO_GENERIC = "interfaceNoTooGeneric"
    NO_LOWERCASE = "interfaceNoLowercase"
    PROPERTY_CAMEL_CASE = "propertyCamelCase"
    PROPERTY_NO_SNAKE_CASE = "propertyNoSnakeCase"
    PROPERTY_NO_UPPERCASE = "propertyNoUppercase"
    PROPERTY_BOOLEAN_PREFIX = "propertyBooleanPrefix"
    PROPERTY_PLURAL_COLLECTION = "propertyPluralCollection"
    PROPERTY_NO_BAD_ABBR = "propertyNoBadAbbr"

    message_ids: tuple[str, ...] = (
        PASCAL_CASE,
        NO_I_PREFIX,
        NO_ALL_CAPS,
        NO_TOO_GENERIC,
        NO_LOWERCASE,
        PROPERTY_CAMEL_CASE,
        PROPERTY_NO_SNAKE_CASE,
        PROPERTY_NO_UPPERCASE,
        PROPERTY_BOOLEAN_PREFIX,
        PROPERTY_PLURAL_COLLECTION,
        PROPERTY_NO_BAD_ABBR,
    )

    def create(self, report: ReportFn) -> dict[str, NodeHandler]:
        def interface_declaration(node: InterfaceDeclaration) -> None:
            for violation in self.check_declaration(node):
                report(violation)

        def property_signature(node: PropertySignature) -> None:
            for violation in self.check_property(node):
                report(violation)

        return {
            NodeKind.INTERFACE_DECLARATION: interface_declaration,
            NodeKind.PROPERTY_SIGNATURE: property_signature,
        }

    def check_declaration(self, node: InterfaceDeclaration) -> list[ViolationRecord]:
        violations: list[ViolationRecord] = []
        name = node.name

        if not IdentifierClassifier.is_pascal_case(name):
            violations.append(self._violation(self.PASCAL_CASE, node.node))
        if IdentifierClassifier.has_interface_prefix(name):
            violations.append(self._violation(self.NO_I_PREFIX, node.node))
        if IdentifierClassifier.is_all_caps_abbreviation(name):
            violations.append(self._violation(self.NO_ALL_CAPS, node.node))
        if name in TOO_GENERIC_INTERFACE_NAMES:
            violations.append(
                self._violation(self.NO_TOO_GENERIC, node.node, name=name))
        if not IdentifierClassifier.starts_with_uppercase(name):
            violations.append(self._violation(self.NO_LOWERCASE, node.node))
        return violations

    def check_property(self, node: PropertySignature) -> list[ViolationRecord]:
        """Check one property. Keys that are not simple identifiers are skipped."""
        name = node.name
        if name is None:
            return []
        violations: list[ViolationRecord] = []

        if not IdentifierClassifier.is_camel_case(name):
            violations.append(
                self._violation(self.PROPERTY_CAMEL_CASE, node.node, name=name))
        if IdentifierClassifier.is_snake_case(name):
            violations.append(
                self._violation(self.PROPERTY_NO_SNAKE_CASE, node.node, name=name))
        if IdentifierClassifier.starts_with_uppercase(name):
            violations.append(
                self._violation(self.PROPERTY_NO_UPPERCASE, node.node, name=name))

        declared_type = node.declared_type
        if (
            IdentifierClassifier.is_boolean_type(declared_type)
            and not IdentifierClassifier.is_boolean_name_prefixed(name)
        ):
            violations.append(
                self._violation(self.PROPERTY_BOOLEAN_PREFIX, node.node, name=name))
        if (
            IdentifierClassifier.is_collection_type(declared_type)
            and not self._is_plural_property(name)
        ):
            violations.append(
                self._violation(self.PROPERTY_PLURAL_COLLECTION, node.node, name=name))

        if name in BAD_ABBREVIATIONS:
            violations.append(
                self._violation(self.PROPERTY_NO_BAD_ABBR, node.node, name=name))
        return violations

    @staticmethod
    def _is_plural_property(name: str) -> bool:
        return (
            IdentifierClassifier.is_plural(name)
            and len(name) >= PROPERTY_PLURAL_MIN_LENGTH
        )

    def _violation(
        self, message_id: str, node: object | None, **data: str
    ) -> ViolationRecord:
        return ViolationRecord(
            rule_id=self.rule_id, message_id=message_id, node=node, data=data)
