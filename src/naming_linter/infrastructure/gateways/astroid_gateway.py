"""Translate astroid class nodes into the naming rules' declaration nodes."""

from collections.abc import Iterable, Iterator
from pathlib import Path

import astroid

from naming_linter.domain.constants import (
    DEFAULT_ENUM_BASES,
    DEFAULT_INTERFACE_BASES,
    NodeKind,
)
from naming_linter.domain.entities import (
    EnumDeclaration,
    EnumMember,
    InterfaceDeclaration,
    PropertySignature,
    TypeShape,
)

_ARRAY_NAMES = frozenset(
    {"list", "List", "Sequence", "MutableSequence", "tuple", "Tuple"})
_MAP_NAMES = frozenset(
    {"dict", "Dict", "Mapping", "MutableMapping", "defaultdict", "DefaultDict", "OrderedDict"})
_SET_NAMES = frozenset(
    {"set", "Set", "frozenset", "FrozenSet", "AbstractSet", "MutableSet"})
_PROPERTY_DECORATORS = frozenset({"property", "cached_property", "abstractproperty"})


class AstroidNamingGateway:
    """
    Maps Python classes onto declaration nodes.

    Subclasses of enum bases become EnumDeclaration; direct subclasses of
    interface bases (Protocol, TypedDict) become InterfaceDeclaration, followed
    by one PropertySignature per annotated attribute or @property.
    """

    def __init__(
        self,
        enum_bases: Iterable[str] = DEFAULT_ENUM_BASES,
        interface_bases: Iterable[str] = DEFAULT_INTERFACE_BASES,
    ) -> None:
        self._enum_bases = frozenset(enum_bases)
        self._interface_bases = frozenset(interface_bases)

    def parse_file(self, file_path: str | Path) -> astroid.nodes.Module:
        """Parse a file. Raises OSError or astroid.AstroidSyntaxError."""
        path = Path(file_path)
        source = path.read_text(encoding="utf-8")
        return astroid.parse(source, module_name=path.stem, path=str(path))

    def iter_nodes(self, module: astroid.nodes.Module) -> Iterator[tuple[str, object]]:
        """Yield (node kind, declaration node) for every class, in document order."""
        for class_node in module.nodes_of_class(astroid.nodes.ClassDef):
            yield from self.nodes_for_class(class_node)

    def nodes_for_class(
        self, class_node: astroid.nodes.ClassDef
    ) -> Iterator[tuple[str, object]]:
        if self.is_enum(class_node):
            yield NodeKind.ENUM_DECLARATION, self.enum_declaration(class_node)
        elif self.is_interface(class_node):
            yield NodeKind.INTERFACE_DECLARATION, InterfaceDeclaration(
                name=class_node.name, node=class_node)
            for signature in self.property_signatures(class_node):
                yield NodeKind.PROPERTY_SIGNATURE, signature

    def is_enum(self, class_node: astroid.nodes.ClassDef) -> bool:
        """True if any base or ancestor is one of the enum bases."""
        if self._base_names(class_node) & self._enum_bases:
            return True
        try:
            for ancestor in class_node.ancestors():
                if getattr(ancestor, "name", "") in self._enum_bases:
                    return True
        except astroid.InferenceError:
            pass
        return False

    def is_interface(self, class_node: astroid.nodes.ClassDef) -> bool:
        """True if a direct base is an interface base. Implementations of a Protocol are not interfaces."""
        return bool(self._base_names(class_node) & self._interface_bases)

    def enum_declaration(self, class_node: astroid.nodes.ClassDef) -> EnumDeclaration:
        members: list[EnumMember] = []
        for stmt in class_node.body:
            if isinstance(stmt, astroid.nodes.Assign):
                for target in stmt.targets:
                    member = self._enum_member(target)
                    if member is not None:
                        members.append(member)
            elif isinstance(stmt, astroid.nodes.AnnAssign) and stmt.value is not None:
                member = self._enum_member(stmt.target)
                if member is not None:
                    members.append(member)
        return EnumDeclaration(name=class_node.name, members=tuple(members), node=class_node)

    def property_signatures(
        self, class_node: astroid.nodes.ClassDef
    ) -> list[PropertySignature]:
        signatures: list[PropertySignature] = []
        for stmt in class_node.body:
            if isinstance(stmt, astroid.nodes.AnnAssign):
                target = stmt.target
                name = target.name if isinstance(target, astroid.nodes.AssignName) else None
                signatures.append(PropertySignature(
                    name=name,
                    declared_type=self.type_shape(stmt.annotation),
                    node=target,
                ))
            elif isinstance(stmt, astroid.nodes.FunctionDef) and self._is_property(stmt):
                signatures.append(PropertySignature(
                    name=stmt.name,
                    declared_type=self.type_shape(stmt.returns),
                    node=stmt,
                ))
        return signatures

    def type_shape(self, annotation: astroid.nodes.NodeNG | None) -> TypeShape | None:
        """Reduce an annotation to a TypeShape; None when there is no annotation."""
        if annotation is None:
            return None
        if isinstance(annotation, astroid.nodes.Subscript):
            name = self._annotation_name(annotation.value)
            if name is None:
                return TypeShape.other()
            return self._named_shape(name, self._subscript_arguments(annotation.slice))
        name = self._annotation_name(annotation)
        if name is None:
            return TypeShape.other()
        return self._named_shape(name, ())

    def _named_shape(self, name: str, arguments: tuple[TypeShape, ...]) -> TypeShape:
        if name == "bool":
            return TypeShape.boolean()
        if name in _ARRAY_NAMES:
            return TypeShape.array_of(arguments[0] if arguments else None)
        if name in _MAP_NAMES:
            return TypeShape.named("Map", *arguments)
        if name in _SET_NAMES:
            return TypeShape.named("Set", *arguments)
        return TypeShape.named(name, *arguments)

    def _subscript_arguments(self, slice_node: astroid.nodes.NodeNG) -> tuple[TypeShape, ...]:
        elements = slice_node.elts if isinstance(slice_node, astroid.nodes.Tuple) else [slice_node]
        shapes = (self.type_shape(element) for element in elements)
        return tuple(shape for shape in shapes if shape is not None)

    @staticmethod
    def _annotation_name(node: astroid.nodes.NodeNG) -> str | None:
        if isinstance(node, astroid.nodes.Name):
            return node.name
        if isinstance(node, astroid.nodes.Attribute):
            return node.attrname
        return None

    @staticmethod
    def _enum_member(target: astroid.nodes.NodeNG) -> EnumMember | None:
        """Member for an assignment target; None for names Enum reserves (_sunder_, __dunder__, __private)."""
        if not isinstance(target, astroid.nodes.AssignName):
            return EnumMember(name=None, node=target)
        name = target.name
        if name.startswith("__") or (len(name) > 2 and name.startswith("_") and name.endswith("_")):
            return None
        return EnumMember(name=name, node=target)

    @staticmethod
    def _is_property(function_node: astroid.nodes.FunctionDef) -> bool:
        decorators = function_node.decorators
        if decorators is None:
            return False
        for decorator in decorators.nodes:
            name = AstroidNamingGateway._annotation_name(decorator)
            if name in _PROPERTY_DECORATORS:
                return True
        return False

    @staticmethod
    def _base_names(class_node: astroid.nodes.ClassDef) -> set[str]:
        names: set[str] = set()
        for base in class_node.bases:
            if isinstance(base, astroid.nodes.Subscript):
                base = base.value
            name = AstroidNamingGateway._annotation_name(base)
            if name:
                names.add(name)
        return names
