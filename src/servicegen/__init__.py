from servicegen._internal.models import GeneratedSource, Lifetime
from servicegen.cancellation import CancellationToken
from servicegen.diagnostics import Diagnostic, DiagnosticDescriptor, DiagnosticSeverity
from servicegen.exceptions import (
    ServiceGenError,
    ServiceGenInvalidOptionsError,
    ServiceGenInvalidPatternError,
    ServiceGenOperationCancelledError,
    ServiceGenUnsupportedSymbolError,
)
from servicegen.generator import GeneratorRunResult, RunStatistics, ServiceRegistrationGenerator
from servicegen.options import GeneratorOptions
from servicegen.symbols import (
    Accessibility,
    AttributeData,
    Compilation,
    ContainingTypeSymbol,
    Location,
    MethodDeclaration,
    ModuleSymbol,
    NamespaceSymbol,
    ParameterSymbol,
    TypeKind,
    TypeSymbol,
)

__all__ = [
    "Accessibility",
    "AttributeData",
    "CancellationToken",
    "Compilation",
    "ContainingTypeSymbol",
    "Diagnostic",
    "DiagnosticDescriptor",
    "DiagnosticSeverity",
    "GeneratedSource",
    "GeneratorOptions",
    "GeneratorRunResult",
    "Lifetime",
    "Location",
    "MethodDeclaration",
    "ModuleSymbol",
    "NamespaceSymbol",
    "ParameterSymbol",
    "RunStatistics",
    "ServiceGenError",
    "ServiceGenInvalidOptionsError",
    "ServiceGenInvalidPatternError",
    "ServiceGenOperationCancelledError",
    "ServiceGenUnsupportedSymbolError",
    "ServiceRegistrationGenerator",
    "TypeKind",
    "TypeSymbol",
]
