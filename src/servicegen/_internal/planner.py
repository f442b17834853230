from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable

from servicegen._internal.models import (
    Directive,
    IgnoredInterfaces,
    RegistrationFunction,
    RegistrationPlan,
    RegistrationShape,
    ResolvedType,
)
from servicegen.exceptions import ServiceGenInvalidPatternError

logger = logging.getLogger(__name__)

TypeUniverse = Callable[[str], Iterable[ResolvedType]]
"""Return the candidate types of a directive scope (empty string = local)."""


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a directive pattern.

    Args:
        pattern: Regular expression searched in implementation type names.

    Raises:
        ServiceGenInvalidPatternError: If ``pattern`` is not a valid regular expression.

    """
    try:
        return re.compile(pattern)
    except re.error as error:
        msg = f"Invalid registration pattern {pattern!r}: {error}."
        raise ServiceGenInvalidPatternError(msg) from error


def plan_type(
    candidate: ResolvedType,
    directive: Directive,
    *,
    ignored_interfaces: IgnoredInterfaces,
) -> RegistrationPlan:
    """Pick the registration shape for a matched type.

    No extra interface registers the type under itself. Exactly one extra
    interface is paired with the implementation in a single registration. Two
    or more register the implementation type and forward each interface to it,
    so every interface resolves the same instance within the lifetime.

    Args:
        candidate: Implementation type that matched ``directive``.
        directive: Directive supplying the lifetime.
        ignored_interfaces: Interfaces that never count as extra interfaces.

    """
    extra_interfaces = ignored_interfaces.filter(candidate.interfaces)

    if not extra_interfaces:
        shape = RegistrationShape.DIRECT
    elif len(extra_interfaces) == 1:
        shape = RegistrationShape.MERGED_INTERFACE
    else:
        shape = RegistrationShape.DIRECT_PLUS_FORWARDS

    return RegistrationPlan(
        implementation=candidate,
        lifetime=directive.lifetime,
        shape=shape,
        interfaces=extra_interfaces,
    )


def plan_directive(
    directive: Directive,
    candidates: Iterable[ResolvedType],
    *,
    ignored_interfaces: IgnoredInterfaces,
) -> tuple[RegistrationPlan, ...]:
    """Filter ``candidates`` by the directive and plan every match in order.

    Args:
        directive: Directive providing the namespace filter, pattern and lifetime.
        candidates: Types of the directive scope in visiting order.
        ignored_interfaces: Interfaces that never count as extra interfaces.

    Raises:
        ServiceGenInvalidPatternError: If the directive pattern does not compile.

    """
    regex = compile_pattern(directive.pattern)
    return tuple(
        plan_type(candidate, directive, ignored_interfaces=ignored_interfaces)
        for candidate in candidates
        if (not directive.namespace or directive.namespace == candidate.namespace)
        and regex.search(candidate.name) is not None
    )


def plan_function(
    function: RegistrationFunction,
    resolve: TypeUniverse,
    *,
    ignored_interfaces: IgnoredInterfaces,
) -> tuple[RegistrationPlan, ...]:
    """Plan all directives of ``function`` in declaration order.

    A directive whose pattern does not compile is logged and contributes no
    plans; the remaining directives are unaffected. Types matched by several
    directives are planned once per match.

    Args:
        function: Validated registration function with its directives.
        resolve: Candidate types per directive scope.
        ignored_interfaces: Interfaces that never count as extra interfaces.

    """
    plans: list[RegistrationPlan] = []
    for directive in function.directives:
        try:
            directive_plans = plan_directive(
                directive,
                resolve(directive.assembly),
                ignored_interfaces=ignored_interfaces,
            )
        except ServiceGenInvalidPatternError as error:
            logger.warning(
                "Skipping directive of %s.%s: %s",
                function.class_name,
                function.method_name,
                error,
            )
            continue
        plans.extend(directive_plans)
    return tuple(plans)
