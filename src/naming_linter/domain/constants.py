"""Fixed lookup tables and labels shared by the naming rules."""

from typing import Final

LINTER_PREFIX: Final = "naming."


class NodeKind:
    """Closed set of node-kind labels a traversal driver dispatches on."""

    ENUM_DECLARATION: Final = "EnumDeclaration"
    INTERFACE_DECLARATION: Final = "InterfaceDeclaration"
    PROPERTY_SIGNATURE: Final = "PropertySignature"

    ALL: Final = frozenset({ENUM_DECLARATION, INTERFACE_DECLARATION, PROPERTY_SIGNATURE})


# Interface names too vague to say anything about their contents.
TOO_GENERIC_INTERFACE_NAMES: Final = frozenset({"Config", "Data", "Info", "Type", "Props"})

# Property names considered abbreviated past the point of readability.
BAD_ABBREVIATIONS: Final = frozenset({"mxRtAtmpt", "cfg", "usr", "dt", "lst", "itm"})

PLURAL_SUFFIXES: Final = ("s", "ies", "es")
BOOLEAN_PREFIXES: Final = ("is", "has", "should")
COLLECTION_REFERENCE_NAMES: Final = frozenset({"Array", "Map", "Set", "Record"})

ENUM_TYPE_SUFFIXES: Final = ("Type", "Types")
ENUM_ENUM_SUFFIX: Final = "Enum"

# Below these lengths a trailing "s" is more likely part of the word ("Gas", "os").
ENUM_PLURAL_MIN_LENGTH: Final = 4
PROPERTY_PLURAL_MIN_LENGTH: Final = 3

DEFAULT_ENUM_BASES: Final = ("Enum", "IntEnum", "StrEnum", "Flag", "IntFlag")
DEFAULT_INTERFACE_BASES: Final = ("Protocol", "TypedDict")
