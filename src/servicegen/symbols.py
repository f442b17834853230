"""Input symbol model consumed by the generator.

The host (a compiler front end, a build tool or a test) supplies an already
resolved view of the program: the namespaces and types of the local assembly
and of each referenced assembly, plus the function declarations that carry
service registration attributes. Every class here is a frozen, slotted
dataclass so two snapshots of the same program compare and hash equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TypeKind(Enum):
    """Classify a type symbol once, at graph construction time."""

    CLASS = "class"
    """Reference type; the only kind eligible as a registration target."""

    STRUCT = "struct"
    INTERFACE = "interface"
    ENUM = "enum"
    DELEGATE = "delegate"


class Accessibility(Enum):
    """Declared accessibility of a registration function."""

    NOT_APPLICABLE = "not_applicable"
    PRIVATE = "private"
    PROTECTED_AND_INTERNAL = "protected_and_internal"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PROTECTED_OR_INTERNAL = "protected_or_internal"
    PUBLIC = "public"


@dataclass(frozen=True, slots=True)
class Location:
    """Source position reported with diagnostics."""

    path: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.path}({self.line},{self.column})"


@dataclass(frozen=True, slots=True)
class TypeSymbol:
    """A top-level type declared in a namespace."""

    name: str
    kind: TypeKind = TypeKind.CLASS
    interfaces: tuple[str, ...] = ()
    """Fully-qualified names of the directly implemented interfaces, in declaration order."""
    type_parameters: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class NamespaceSymbol:
    """A namespace node; the root namespace of a module has an empty name."""

    name: str = ""
    types: tuple[TypeSymbol, ...] = ()
    namespaces: tuple[NamespaceSymbol, ...] = ()


@dataclass(frozen=True, slots=True)
class ModuleSymbol:
    """One assembly, either the one being compiled or a referenced one."""

    name: str
    global_namespace: NamespaceSymbol = NamespaceSymbol()


@dataclass(frozen=True, slots=True)
class Compilation:
    """Snapshot of the local assembly and the assemblies it references."""

    assembly: ModuleSymbol
    references: tuple[ModuleSymbol, ...] = ()

    def find_reference(self, name: str) -> ModuleSymbol | None:
        """Return the referenced module whose name equals ``name`` (case-sensitive).

        Args:
            name: Assembly identity name to look up.

        """
        for module in self.references:
            if module.name == name:
                return module
        return None


@dataclass(frozen=True, slots=True)
class ParameterSymbol:
    name: str
    type_name: str


@dataclass(frozen=True, slots=True)
class ContainingTypeSymbol:
    namespace: str
    """Fully-qualified namespace, empty for the global namespace."""
    name: str
    is_value_type: bool = False


@dataclass(frozen=True, slots=True)
class AttributeData:
    """An attribute instance as the host's attribute model exposes it."""

    class_name: str
    constructor_arguments: tuple[Any, ...] = ()
    named_arguments: tuple[tuple[str, Any], ...] = ()


@dataclass(frozen=True, slots=True)
class MethodDeclaration:
    """A function declaration carrying at least one attribute."""

    name: str
    containing_type: ContainingTypeSymbol
    accessibility: Accessibility = Accessibility.PUBLIC
    is_static: bool = True
    is_extension: bool = True
    is_partial_definition: bool = True
    """True when the declaration has no body and expects a generated one."""
    parameters: tuple[ParameterSymbol, ...] = ()
    return_type: str = ""
    attributes: tuple[AttributeData, ...] = ()
    location: Location = Location("<unknown>")


__all__ = [
    "Accessibility",
    "AttributeData",
    "Compilation",
    "ContainingTypeSymbol",
    "Location",
    "MethodDeclaration",
    "ModuleSymbol",
    "NamespaceSymbol",
    "ParameterSymbol",
    "TypeKind",
    "TypeSymbol",
]
