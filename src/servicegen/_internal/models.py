from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from servicegen._internal.equatable import EquatableArray
from servicegen.diagnostics import Diagnostic
from servicegen.symbols import Accessibility

T = TypeVar("T")


class Lifetime(Enum):
    """Container-managed lifetime requested by a directive."""

    SINGLETON = 1
    """One instance per container."""

    SCOPED = 2
    """One instance per logical scope."""

    TRANSIENT = 3
    """A new instance for every resolution."""

    @classmethod
    def from_directive_value(cls, value: Any) -> Lifetime:
        """Map a directive's positional lifetime argument to a lifetime.

        ``1`` is singleton, ``2`` is scoped and every other value is transient.

        Args:
            value: Raw constructor argument as the attribute model exposes it.

        """
        if isinstance(value, Lifetime):
            return value
        try:
            number = int(value)
        except (TypeError, ValueError):
            return cls.TRANSIENT
        if number == cls.SINGLETON.value:
            return cls.SINGLETON
        if number == cls.SCOPED.value:
            return cls.SCOPED
        return cls.TRANSIENT

    @property
    def method_suffix(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, slots=True)
class Directive:
    """One registration request attached to a registration function."""

    lifetime: Lifetime
    pattern: str
    assembly: str = ""
    """Referenced assembly to search; empty means the local compilation."""
    namespace: str = ""
    """Exact namespace filter; empty disables the filter."""


@dataclass(frozen=True, slots=True)
class RegistrationFunction:
    """A validated registration function and its ordered directives."""

    namespace: str
    class_name: str
    is_value_type: bool
    accessibility: Accessibility
    method_name: str
    parameter_name: str
    directives: EquatableArray[Directive] = field(default_factory=EquatableArray)

    @property
    def group_key(self) -> tuple[str, str]:
        return (self.namespace, self.class_name)


@dataclass(frozen=True, slots=True)
class ResolvedType:
    """A class-kind type found while walking a module's namespaces."""

    name: str
    namespace: str
    module: str
    interfaces: tuple[str, ...] = ()
    type_parameters: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        """Return the fully-qualified name used in generated source."""
        name = self.name
        if self.type_parameters:
            name = f"{name}<{', '.join(self.type_parameters)}>"
        if self.namespace:
            return f"{self.namespace}.{name}"
        return name


class RegistrationShape(Enum):
    """How a matched implementation type is registered."""

    DIRECT = "direct"
    """Register the implementation type under itself."""

    MERGED_INTERFACE = "merged_interface"
    """Register the single extra interface paired with the implementation type."""

    DIRECT_PLUS_FORWARDS = "direct_plus_forwards"
    """Register the implementation type, then forward every interface to it."""


@dataclass(frozen=True, slots=True)
class RegistrationPlan:
    """Registration decision for one matched type of one directive."""

    implementation: ResolvedType
    lifetime: Lifetime
    shape: RegistrationShape
    interfaces: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class IgnoredInterfaces:
    """Interfaces never counted as extra interfaces of an implementation type."""

    names: frozenset[str] = frozenset()

    @classmethod
    def from_option(cls, defaults: Iterable[str], option_value: str | None) -> IgnoredInterfaces:
        """Merge ``defaults`` with a comma separated option value.

        Args:
            defaults: Interfaces ignored regardless of configuration.
            option_value: Raw value of the ignore-interface build option, if any.

        """
        extra = (
            name.strip() for name in (option_value or "").split(",") if name.strip()
        )
        return cls(names=frozenset((*defaults, *extra)))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def filter(self, interfaces: Iterable[str]) -> tuple[str, ...]:
        """Return ``interfaces`` without ignored ones, keeping their order."""
        return tuple(name for name in interfaces if name not in self.names)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the diagnostic explaining why there is none."""

    value: T | None = None
    error: Diagnostic | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class GeneratedSource:
    """One generated source unit."""

    hint_name: str
    text: str
