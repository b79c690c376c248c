"""Domain entities: declaration nodes, type shapes, violation records and analysis results."""

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Tag of a declared property type. Only BOOLEAN and collections affect policy."""

    BOOLEAN = "boolean"
    ARRAY_OF = "array_of"
    NAMED_REFERENCE = "named_reference"
    OTHER = "other"


@dataclass(frozen=True)
class TypeShape:
    """Declared type of a property, reduced to what the naming policy inspects."""

    kind: TypeKind
    name: str | None = None
    type_arguments: tuple["TypeShape", ...] = ()

    @classmethod
    def boolean(cls) -> "TypeShape":
        return cls(TypeKind.BOOLEAN)

    @classmethod
    def array_of(cls, element: "TypeShape | None" = None) -> "TypeShape":
        return cls(TypeKind.ARRAY_OF, type_arguments=(element,) if element else ())

    @classmethod
    def named(cls, name: str, *type_arguments: "TypeShape") -> "TypeShape":
        return cls(TypeKind.NAMED_REFERENCE, name=name, type_arguments=type_arguments)

    @classmethod
    def other(cls) -> "TypeShape":
        return cls(TypeKind.OTHER)


@dataclass(frozen=True)
class EnumMember:
    """An enum member. name is None when the key is not a simple identifier."""

    name: str | None
    node: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class EnumDeclaration:
    name: str
    members: tuple[EnumMember, ...] = ()
    node: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class InterfaceDeclaration:
    """An interface. Its properties arrive as separate PropertySignature nodes."""

    name: str
    node: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class PropertySignature:
    """A named, typed interface member. name is None when the key is not a simple identifier."""

    name: str | None
    declared_type: TypeShape | None = None
    node: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ViolationRecord:
    """One naming violation handed to the diagnostic sink."""

    rule_id: str
    message_id: str
    node: object | None = None
    data: dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def location(self) -> str:
        """path:lineno:col_offset of the target node, empty when it has no position."""
        return ViolationRecord.location_of(self.node)

    @staticmethod
    def location_of(node: object | None) -> str:
        if node is None:
            return ""
        root = getattr(node, "root", None)
        path = ""
        if callable(root):
            path = getattr(root(), "file", "") or ""
        lineno = getattr(node, "lineno", 0) or 0
        col_offset = getattr(node, "col_offset", 0) or 0
        return f"{path}:{lineno}:{col_offset}"

    @staticmethod
    def split_location(location: str) -> tuple[str, int, int]:
        """Inverse of location_of. An empty location is ("", 0, 0)."""
        if not location:
            return "", 0, 0
        path, lineno, col_offset = location.rsplit(":", 2)
        return path, int(lineno), int(col_offset)


@dataclass(frozen=True)
class FileAnalysis:
    """Violations found in one file, or the reason it was skipped."""

    path: str
    violations: tuple[ViolationRecord, ...] = ()
    error: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    files: tuple[FileAnalysis, ...] = field(default_factory=tuple)

    @property
    def violations(self) -> list[ViolationRecord]:
        return [v for f in self.files for v in f.violations]

    @property
    def skipped(self) -> list[FileAnalysis]:
        return [f for f in self.files if f.error is not None]

    def has_violations(self) -> bool:
        return any(f.violations for f in self.files)
