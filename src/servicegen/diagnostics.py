"""Diagnostics reported for declarations the generator cannot complete."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from servicegen.symbols import Location


class DiagnosticSeverity(Enum):
    HIDDEN = "hidden"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class DiagnosticDescriptor:
    """Describe one diagnostic kind with a stable identifier."""

    id: str
    title: str
    message_format: str
    category: str
    default_severity: DiagnosticSeverity
    is_enabled_by_default: bool = True


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A reported diagnostic bound to the offending declaration."""

    descriptor: DiagnosticDescriptor
    location: Location
    arguments: tuple[str, ...] = ()

    @property
    def id(self) -> str:
        return self.descriptor.id

    @property
    def severity(self) -> DiagnosticSeverity:
        return self.descriptor.default_severity

    @property
    def message(self) -> str:
        """Return the message format with the diagnostic arguments applied."""
        return self.descriptor.message_format.format(*self.arguments)

    def __str__(self) -> str:
        return f"{self.location}: {self.severity.value} {self.id}: {self.message}"


INVALID_METHOD_DEFINITION = DiagnosticDescriptor(
    id="SRG0001",
    title="Invalid method definition",
    message_format="Method must be partial extension. method=[{0}]",
    category="Usage",
    default_severity=DiagnosticSeverity.WARNING,
)

INVALID_METHOD_PARAMETER = DiagnosticDescriptor(
    id="SRG0002",
    title="Invalid method parameter",
    message_format="Parameter type must be IServiceCollection. method=[{0}]",
    category="Usage",
    default_severity=DiagnosticSeverity.WARNING,
)

INVALID_METHOD_RETURN_TYPE = DiagnosticDescriptor(
    id="SRG0003",
    title="Invalid method return type",
    message_format="Return type must be IServiceCollection. method=[{0}]",
    category="Usage",
    default_severity=DiagnosticSeverity.WARNING,
)


__all__ = [
    "INVALID_METHOD_DEFINITION",
    "INVALID_METHOD_PARAMETER",
    "INVALID_METHOD_RETURN_TYPE",
    "Diagnostic",
    "DiagnosticDescriptor",
    "DiagnosticSeverity",
]
