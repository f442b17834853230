from __future__ import annotations

import logging
from collections.abc import Sequence
from textwrap import indent

from jinja2 import Environment, StrictUndefined, Template

from servicegen._internal.emitter.templates import (
    DIRECT_STATEMENT_TEMPLATE,
    FORWARD_STATEMENT_TEMPLATE,
    MERGED_INTERFACE_STATEMENT_TEMPLATE,
    METHOD_TEMPLATE,
    UNIT_TEMPLATE,
)
from servicegen._internal.models import (
    RegistrationFunction,
    RegistrationPlan,
    RegistrationShape,
)
from servicegen.defaults import (
    DEFAULT_CONTAINER_NAMESPACE,
    DEFAULT_CONTAINER_TYPE_NAME,
    DEFAULT_HINT_NAME_SUFFIX,
)
from servicegen.exceptions import ServiceGenUnsupportedSymbolError
from servicegen.symbols import Accessibility

_INDENT = " " * 4
_ACCESSIBILITY_TEXT: dict[Accessibility, str] = {
    Accessibility.PUBLIC: "public",
    Accessibility.PROTECTED: "protected",
    Accessibility.PRIVATE: "private",
    Accessibility.INTERNAL: "internal",
    Accessibility.PROTECTED_OR_INTERNAL: "protected internal",
    Accessibility.PROTECTED_AND_INTERNAL: "private protected",
}
logger = logging.getLogger(__name__)

FunctionPlans = tuple[RegistrationFunction, Sequence[RegistrationPlan]]


class ServiceRegistrationRenderer:
    """Render generated registration units from planned functions."""

    def __init__(
        self,
        *,
        container_type_name: str = DEFAULT_CONTAINER_TYPE_NAME,
        container_namespace: str = DEFAULT_CONTAINER_NAMESPACE,
    ) -> None:
        self._container_type_name = container_type_name
        self._container_namespace = container_namespace
        self._env = Environment(
            autoescape=False,  # noqa: S701
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._unit_template = self._template(UNIT_TEMPLATE)
        self._method_template = self._template(METHOD_TEMPLATE)
        self._direct_template = self._template(DIRECT_STATEMENT_TEMPLATE)
        self._merged_template = self._template(MERGED_INTERFACE_STATEMENT_TEMPLATE)
        self._forward_template = self._template(FORWARD_STATEMENT_TEMPLATE)

    def render_unit(self, functions: Sequence[FunctionPlans]) -> str:
        """Render one unit for functions sharing a declaring type.

        Functions keep their order; each body lists the statements of its plans
        in order and returns the container parameter unchanged.

        Args:
            functions: Registration functions of one group paired with their plans.

        """
        if not functions:
            msg = "Cannot render a registration unit without registration functions."
            raise ServiceGenUnsupportedSymbolError(msg)

        first, _ = functions[0]
        methods_block = "\n\n".join(
            self._render_method(function=function, plans=plans) for function, plans in functions
        )
        logger.debug(
            "Rendered registration unit %s with %d function(s)",
            make_hint_name(first.namespace, first.class_name),
            len(functions),
        )
        return self._unit_template.render(
            namespace=first.namespace,
            container_namespace=self._container_namespace,
            type_keyword="struct" if first.is_value_type else "class",
            class_name=first.class_name,
            methods_block=indent(methods_block, _INDENT),
        )

    def render_statements(
        self,
        *,
        parameter_name: str,
        plan: RegistrationPlan,
    ) -> list[str]:
        """Return the registration statements for one plan.

        Args:
            parameter_name: Name of the container parameter in the generated body.
            plan: Registration decision for one matched type.

        """
        lifetime = plan.lifetime.method_suffix
        implementation = plan.implementation.display_name

        if plan.shape is RegistrationShape.MERGED_INTERFACE:
            return [
                self._merged_template.render(
                    parameter_name=parameter_name,
                    lifetime=lifetime,
                    interface=plan.interfaces[0],
                    implementation=implementation,
                ),
            ]

        statements = [
            self._direct_template.render(
                parameter_name=parameter_name,
                lifetime=lifetime,
                implementation=implementation,
            ),
        ]
        if plan.shape is RegistrationShape.DIRECT_PLUS_FORWARDS:
            statements.extend(
                self._forward_template.render(
                    parameter_name=parameter_name,
                    lifetime=lifetime,
                    interface=interface,
                    implementation=implementation,
                )
                for interface in plan.interfaces
            )
        return statements

    def _render_method(
        self,
        *,
        function: RegistrationFunction,
        plans: Sequence[RegistrationPlan],
    ) -> str:
        statements = [
            statement
            for plan in plans
            for statement in self.render_statements(
                parameter_name=function.parameter_name,
                plan=plan,
            )
        ]
        return self._method_template.render(
            accessibility=accessibility_text(function.accessibility),
            container_type=self._container_type_name,
            method_name=function.method_name,
            parameter_name=function.parameter_name,
            statements=statements,
        ).rstrip("\n")

    def _template(self, text: str) -> Template:
        return self._env.from_string(text)


def accessibility_text(accessibility: Accessibility) -> str:
    """Return the source keyword(s) for ``accessibility``.

    Raises:
        ServiceGenUnsupportedSymbolError: For ``Accessibility.NOT_APPLICABLE``.

    """
    text = _ACCESSIBILITY_TEXT.get(accessibility)
    if text is None:
        msg = f"Accessibility {accessibility.name} cannot be emitted for a registration function."
        raise ServiceGenUnsupportedSymbolError(msg)
    return text


def make_hint_name(
    namespace: str,
    class_name: str,
    suffix: str = DEFAULT_HINT_NAME_SUFFIX,
) -> str:
    """Build a filesystem-safe, unique file name for a group.

    Args:
        namespace: Declaring namespace, empty for the global namespace.
        class_name: Declaring type name, possibly with generic arguments.
        suffix: File name suffix.

    """
    prefix = f"{namespace.replace('.', '_')}_" if namespace else ""
    type_part = class_name.replace("<", "[").replace(">", "]")
    return f"{prefix}{type_part}{suffix}"
