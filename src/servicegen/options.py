from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from servicegen._internal.models import IgnoredInterfaces
from servicegen.defaults import (
    DEFAULT_ATTRIBUTE_NAME,
    DEFAULT_CONTAINER_NAMESPACE,
    DEFAULT_CONTAINER_TYPE_NAME,
    DEFAULT_HINT_NAME_SUFFIX,
    DEFAULT_IGNORED_INTERFACES,
    IGNORE_INTERFACE_OPTION_KEY,
)
from servicegen.exceptions import ServiceGenInvalidOptionsError


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """Configure names the generator matches and emits.

    Options are fixed for the lifetime of a ``ServiceRegistrationGenerator``.
    Per-run host configuration (the ignore-interface build property) is passed
    to ``run`` instead and merged with ``ignored_interfaces`` once per run.
    """

    attribute_name: str = DEFAULT_ATTRIBUTE_NAME
    """Fully-qualified name of the registration directive attribute."""
    container_type_name: str = DEFAULT_CONTAINER_TYPE_NAME
    """Fully-qualified name of the container contract type."""
    container_namespace: str = DEFAULT_CONTAINER_NAMESPACE
    """Namespace imported by generated units for the registration extensions."""
    ignored_interfaces: tuple[str, ...] = DEFAULT_IGNORED_INTERFACES
    """Interfaces that never count as extra interfaces."""
    hint_name_suffix: str = DEFAULT_HINT_NAME_SUFFIX
    ignore_interface_option_key: str = IGNORE_INTERFACE_OPTION_KEY

    def __post_init__(self) -> None:
        for field_name in ("attribute_name", "container_type_name", "hint_name_suffix"):
            if not getattr(self, field_name):
                msg = f"GeneratorOptions.{field_name} must be a non-empty string."
                raise ServiceGenInvalidOptionsError(msg)

    def resolve_ignored_interfaces(
        self,
        global_options: Mapping[str, str] | None = None,
    ) -> IgnoredInterfaces:
        """Merge the configured ignored interfaces with the host build property.

        Args:
            global_options: Host-wide options, for example analyzer config values.

        """
        option_value = (global_options or {}).get(self.ignore_interface_option_key)
        return IgnoredInterfaces.from_option(self.ignored_interfaces, option_value)


__all__ = ["GeneratorOptions"]
