from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from servicegen._internal.models import GeneratedSource


class ServiceGenError(Exception):
    """Represent a base class for all servicegen-specific failures.

    Catch this type when you want to handle any generator error path without
    matching each concrete exception class individually.
    """


class ServiceGenInvalidOptionsError(ServiceGenError):
    """Signal invalid generator configuration.

    Raised by ``GeneratorOptions`` when a required name (directive attribute,
    container contract type, hint-name suffix) is empty.
    """


class ServiceGenInvalidPatternError(ServiceGenError):
    """Signal that a directive pattern is not a valid regular expression.

    The planner raises this while compiling a directive pattern and isolates it
    at the directive level: the offending directive contributes no
    registrations, sibling directives are still planned.
    """


class ServiceGenUnsupportedSymbolError(ServiceGenError):
    """Signal a symbol value the emitter cannot express in generated source.

    Raised while rendering, for example when a registration function carries
    ``Accessibility.NOT_APPLICABLE``.
    """


class ServiceGenOperationCancelledError(ServiceGenError):
    """Signal that a generation run stopped because cancellation was requested.

    The run checks its ``CancellationToken`` at every group boundary. Sources
    completed before the check are available on ``partial_sources`` and are
    never truncated.
    """

    def __init__(
        self,
        message: str,
        *,
        partial_sources: tuple[GeneratedSource, ...] = (),
    ) -> None:
        super().__init__(message)
        self.partial_sources = partial_sources
