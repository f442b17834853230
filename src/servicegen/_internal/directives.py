from __future__ import annotations

from servicegen._internal.equatable import EquatableArray
from servicegen._internal.models import Directive, Lifetime
from servicegen.symbols import AttributeData, MethodDeclaration

_ASSEMBLY_ARGUMENT = "Assembly"
_NAMESPACE_ARGUMENT = "Namespace"


def has_directive(declaration: MethodDeclaration, *, attribute_name: str) -> bool:
    """Return true when ``declaration`` carries at least one directive attribute."""
    return any(attribute.class_name == attribute_name for attribute in declaration.attributes)


def extract_directives(
    declaration: MethodDeclaration,
    *,
    attribute_name: str,
) -> EquatableArray[Directive]:
    """Read the directive attributes of ``declaration`` in declaration order.

    Args:
        declaration: Validated registration function declaration.
        attribute_name: Fully-qualified name of the directive attribute.

    """
    return EquatableArray(
        _to_directive(attribute)
        for attribute in declaration.attributes
        if attribute.class_name == attribute_name
    )


def _to_directive(attribute: AttributeData) -> Directive:
    # Positional arguments are guaranteed by the attribute's constructor.
    arguments = attribute.constructor_arguments
    lifetime = Lifetime.from_directive_value(arguments[0])
    pattern = "" if arguments[1] is None else str(arguments[1])

    assembly = ""
    namespace = ""
    for name, value in attribute.named_arguments:
        if not name or value is None:
            continue
        if name == _ASSEMBLY_ARGUMENT:
            assembly = str(value)
        elif name == _NAMESPACE_ARGUMENT:
            namespace = str(value)

    return Directive(
        lifetime=lifetime,
        pattern=pattern,
        assembly=assembly,
        namespace=namespace,
    )
