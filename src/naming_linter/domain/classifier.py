"""Pure identifier-classification predicates. Total over str: never raise, worst case False."""

import re
from typing import Final

from naming_linter.domain.constants import (
    BOOLEAN_PREFIXES,
    COLLECTION_REFERENCE_NAMES,
    PLURAL_SUFFIXES,
)
from naming_linter.domain.entities import TypeKind, TypeShape


class IdentifierClassifier:
    """
    Casing, pluralization, prefix and collection-type predicates.

    Patterns use ASCII letter classes and must match the whole identifier.
    """

    _PASCAL_CASE: Final = re.compile(r"[A-Z][a-zA-Z0-9]*")
    _CAMEL_CASE: Final = re.compile(r"[a-z][a-zA-Z0-9]*")
    _UPPER_SNAKE_CASE: Final = re.compile(r"[A-Z][A-Z0-9_]*")
    _CAPS_RUN: Final = re.compile(r"[A-Z]{2,}")
    _LEADING_CAPS_BLOCK: Final = re.compile(r"[A-Z]+[a-zA-Z0-9]*")
    _BOOLEAN_PREFIX: Final = re.compile(
        r"(?:%s)[A-Z]" % "|".join(BOOLEAN_PREFIXES))
    _INTERFACE_PREFIX: Final = re.compile(r"I[A-Z]")
    _LEADING_UPPERCASE: Final = re.compile(r"[A-Z]")

    @staticmethod
    def is_pascal_case(name: str) -> bool:
        return IdentifierClassifier._PASCAL_CASE.fullmatch(name) is not None

    @staticmethod
    def is_camel_case(name: str) -> bool:
        return IdentifierClassifier._CAMEL_CASE.fullmatch(name) is not None

    @staticmethod
    def is_snake_case(name: str) -> bool:
        """Shape test only: any underscore counts, correctness is not checked."""
        return "_" in name

    @staticmethod
    def is_upper_snake_case(name: str) -> bool:
        return IdentifierClassifier._UPPER_SNAKE_CASE.fullmatch(name) is not None

    @staticmethod
    def is_all_uppercase(name: str) -> bool:
        """True when name has no lowercase letters; digit/punctuation-only names qualify."""
        return name == name.upper()

    @staticmethod
    def is_plural(name: str) -> bool:
        """
        Suffix heuristic, not a dictionary lookup.

        Singular nouns ending in "s" ("Status") are reported as plural. Callers
        gate on length to keep short words ("Gas") out.
        """
        return name.endswith(PLURAL_SUFFIXES)

    @staticmethod
    def is_all_caps_abbreviation(name: str) -> bool:
        """True for names opening with an abbreviation block, e.g. HTTPClientConfig."""
        return (
            IdentifierClassifier._CAPS_RUN.search(name) is not None
            and IdentifierClassifier._LEADING_CAPS_BLOCK.fullmatch(name) is not None
        )

    @staticmethod
    def is_boolean_name_prefixed(name: str) -> bool:
        return IdentifierClassifier._BOOLEAN_PREFIX.match(name) is not None

    @staticmethod
    def has_interface_prefix(name: str) -> bool:
        """Hungarian-style "I" prefix: IUser, IConfig."""
        return IdentifierClassifier._INTERFACE_PREFIX.match(name) is not None

    @staticmethod
    def starts_with_uppercase(name: str) -> bool:
        return IdentifierClassifier._LEADING_UPPERCASE.match(name) is not None

    @staticmethod
    def is_collection_type(shape: TypeShape | None) -> bool:
        if shape is None:
            return False
        if shape.kind is TypeKind.ARRAY_OF:
            return True
        return (
            shape.kind is TypeKind.NAMED_REFERENCE
            and shape.name in COLLECTION_REFERENCE_NAMES
        )

    @staticmethod
    def is_boolean_type(shape: TypeShape | None) -> bool:
        return shape is not None and shape.kind is TypeKind.BOOLEAN
