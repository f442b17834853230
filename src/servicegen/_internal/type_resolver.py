from __future__ import annotations

import logging

from servicegen._internal.models import ResolvedType
from servicegen.symbols import Compilation, ModuleSymbol, NamespaceSymbol, TypeKind

logger = logging.getLogger(__name__)


def resolve_types(compilation: Compilation, assembly: str = "") -> tuple[ResolvedType, ...]:
    """Return every class-kind type reachable from a directive scope.

    An empty ``assembly`` walks the local compilation in declaration order. A
    non-empty one walks the referenced module with exactly that name, in
    lexical order; when no such module is referenced the result is empty.

    Args:
        compilation: Snapshot providing the local and referenced modules.
        assembly: Directive scope, empty for the local compilation.

    """
    scope = find_scope_module(compilation, assembly)
    if scope is None:
        return ()
    module, lexical = scope
    return walk_module(module, lexical=lexical)


def find_scope_module(
    compilation: Compilation,
    assembly: str,
) -> tuple[ModuleSymbol, bool] | None:
    """Return the module searched by a directive scope and whether to walk it lexically.

    Args:
        compilation: Snapshot providing the local and referenced modules.
        assembly: Directive scope, empty for the local compilation.

    """
    if not assembly:
        return compilation.assembly, False

    module = compilation.find_reference(assembly)
    if module is None:
        logger.debug("Referenced assembly %r not found; directive scope is empty", assembly)
        return None
    return module, True


def walk_module(module: ModuleSymbol, *, lexical: bool) -> tuple[ResolvedType, ...]:
    """Depth-first walk of ``module`` yielding class types.

    Types of a namespace come before the types of its child namespaces. With
    ``lexical`` set, types and child namespaces are visited sorted by name at
    every level; otherwise declaration order is kept.

    Args:
        module: Module whose root namespace is walked.
        lexical: Visit members sorted by name instead of declaration order.

    """
    resolved: list[ResolvedType] = []
    stack: list[tuple[NamespaceSymbol, str]] = [(module.global_namespace, "")]

    while stack:
        namespace, qualified_name = stack.pop()

        types = namespace.types
        children = namespace.namespaces
        if lexical:
            types = tuple(sorted(types, key=lambda item: item.name))
            children = tuple(sorted(children, key=lambda item: item.name))

        resolved.extend(
            ResolvedType(
                name=type_symbol.name,
                namespace=qualified_name,
                module=module.name,
                interfaces=type_symbol.interfaces,
                type_parameters=type_symbol.type_parameters,
            )
            for type_symbol in types
            if type_symbol.kind is TypeKind.CLASS
        )

        # Reversed so the first child namespace is walked first.
        stack.extend(
            (child, _qualify(qualified_name, child.name)) for child in reversed(children)
        )

    return tuple(resolved)


def _qualify(parent: str, name: str) -> str:
    if not parent:
        return name
    return f"{parent}.{name}"
