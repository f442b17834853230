from __future__ import annotations

import logging

from servicegen._internal.models import RegistrationFunction, Result
from servicegen.diagnostics import (
    INVALID_METHOD_DEFINITION,
    INVALID_METHOD_PARAMETER,
    INVALID_METHOD_RETURN_TYPE,
    Diagnostic,
    DiagnosticDescriptor,
)
from servicegen.symbols import Accessibility, MethodDeclaration

logger = logging.getLogger(__name__)


def validate_declaration(
    declaration: MethodDeclaration,
    *,
    container_type_name: str,
) -> Result[RegistrationFunction]:
    """Check that a declaration can receive a generated registration body.

    Checks run in order and the first failure wins: the declaration must be a
    static partial extension definition with an emittable accessibility, take
    exactly one parameter of the container contract type, and return the
    container contract type. The returned function carries no directives yet.

    Args:
        declaration: Declaration carrying at least one registration attribute.
        container_type_name: Fully-qualified name of the container contract type.

    """
    if not (
        declaration.is_static
        and declaration.is_extension
        and declaration.is_partial_definition
        and declaration.accessibility is not Accessibility.NOT_APPLICABLE
    ):
        return _error(INVALID_METHOD_DEFINITION, declaration)

    if (
        len(declaration.parameters) != 1
        or declaration.parameters[0].type_name != container_type_name
    ):
        return _error(INVALID_METHOD_PARAMETER, declaration)

    if declaration.return_type != container_type_name:
        return _error(INVALID_METHOD_RETURN_TYPE, declaration)

    containing_type = declaration.containing_type
    return Result(
        value=RegistrationFunction(
            namespace=containing_type.namespace,
            class_name=containing_type.name,
            is_value_type=containing_type.is_value_type,
            accessibility=declaration.accessibility,
            method_name=declaration.name,
            parameter_name=declaration.parameters[0].name,
        ),
    )


def _error(
    descriptor: DiagnosticDescriptor,
    declaration: MethodDeclaration,
) -> Result[RegistrationFunction]:
    logger.debug(
        "Rejected registration function %s.%s: %s",
        declaration.containing_type.name,
        declaration.name,
        descriptor.id,
    )
    return Result(
        error=Diagnostic(
            descriptor=descriptor,
            location=declaration.location,
            arguments=(declaration.name,),
        ),
    )
