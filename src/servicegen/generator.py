"""Generation driver wiring validation, planning and emission together."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from servicegen._internal.cache import IncrementalCache
from servicegen._internal.directives import extract_directives, has_directive
from servicegen._internal.emitter.renderer import ServiceRegistrationRenderer, make_hint_name
from servicegen._internal.equatable import EquatableArray
from servicegen._internal.models import (
    GeneratedSource,
    IgnoredInterfaces,
    RegistrationFunction,
    RegistrationPlan,
    ResolvedType,
    Result,
)
from servicegen._internal.planner import plan_function
from servicegen._internal.type_resolver import find_scope_module, walk_module
from servicegen._internal.validator import validate_declaration
from servicegen.cancellation import CancellationToken
from servicegen.diagnostics import Diagnostic
from servicegen.exceptions import ServiceGenOperationCancelledError
from servicegen.options import GeneratorOptions
from servicegen.symbols import Compilation, MethodDeclaration, ModuleSymbol

logger = logging.getLogger(__name__)

GroupKey = tuple[str, str]
Universe = EquatableArray[ResolvedType]
_PlanKey = tuple[
    RegistrationFunction,
    IgnoredInterfaces,
    EquatableArray[Universe],
]
_EmissionKey = tuple[
    GroupKey,
    IgnoredInterfaces,
    EquatableArray[tuple[RegistrationFunction, EquatableArray[RegistrationPlan]]],
]


@dataclass(frozen=True, slots=True)
class RunStatistics:
    """Counters describing one generation run."""

    declarations: int = 0
    functions: int = 0
    groups: int = 0
    rendered_groups: int = 0
    reused_groups: int = 0


@dataclass(frozen=True, slots=True)
class GeneratorRunResult:
    """Sources and diagnostics produced by one run."""

    sources: tuple[GeneratedSource, ...]
    diagnostics: tuple[Diagnostic, ...]
    statistics: RunStatistics = RunStatistics()

    @property
    def hint_names(self) -> tuple[str, ...]:
        return tuple(source.hint_name for source in self.sources)

    def get_source(self, hint_name: str) -> str:
        """Return the text of the unit named ``hint_name``.

        Distinct groups can map to the same hint name, for example namespace
        ``A`` with type ``B_C`` and namespace ``A.B`` with type ``C``. The run
        logs a warning in that case and this returns the first such unit.

        Raises:
            KeyError: If no unit with that name was generated.

        """
        for source in self.sources:
            if source.hint_name == hint_name:
                return source.text
        raise KeyError(hint_name)


class ServiceRegistrationGenerator:
    """Generate registration function bodies from a symbol snapshot.

    A generator instance keeps the results of its previous run. Re-running it
    on a snapshot where a group's functions, plans and ignore set compare equal
    reuses that group's source without rendering it again; every stage
    (validation, type resolution, planning) is memoized the same way.

    Examples:
        >>> generator = ServiceRegistrationGenerator()
        >>> result = generator.run(compilation, declarations)
        >>> for source in result.sources:
        ...     write(source.hint_name, source.text)

    """

    def __init__(
        self,
        options: GeneratorOptions | None = None,
        *,
        renderer: ServiceRegistrationRenderer | None = None,
    ) -> None:
        self._options = options or GeneratorOptions()
        self._renderer = renderer or ServiceRegistrationRenderer(
            container_type_name=self._options.container_type_name,
            container_namespace=self._options.container_namespace,
        )
        self._validation_cache: IncrementalCache[
            MethodDeclaration,
            Result[RegistrationFunction],
        ] = IncrementalCache("validation")
        self._resolution_cache: IncrementalCache[
            tuple[ModuleSymbol, bool],
            Universe,
        ] = IncrementalCache("resolution")
        self._plan_cache: IncrementalCache[
            _PlanKey,
            EquatableArray[RegistrationPlan],
        ] = IncrementalCache("planning")
        self._emission_cache: IncrementalCache[
            _EmissionKey,
            GeneratedSource,
        ] = IncrementalCache("emission")

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    def run(
        self,
        compilation: Compilation,
        declarations: Iterable[MethodDeclaration],
        *,
        global_options: Mapping[str, str] | None = None,
        cancellation: CancellationToken | None = None,
    ) -> GeneratorRunResult:
        """Run the pipeline over one snapshot.

        Args:
            compilation: Local and referenced modules of the snapshot.
            declarations: Candidate declarations; those without a directive
                attribute are skipped.
            global_options: Host-wide options; the ignore-interface property is
                read from here once per run.
            cancellation: Checked before each group is emitted.

        Raises:
            ServiceGenOperationCancelledError: When cancellation is requested.
                Sources emitted before the request are attached to the error;
                cached results the run did not reach stay available to the next run.

        """
        for cache in self._caches():
            cache.begin_run()

        candidates = [
            declaration
            for declaration in declarations
            if has_directive(declaration, attribute_name=self._options.attribute_name)
        ]

        diagnostics: list[Diagnostic] = []
        functions: list[RegistrationFunction] = []
        for declaration in candidates:
            result = self._validation_cache.get_or_compute(
                declaration,
                lambda declaration=declaration: self._validate(declaration),
            )
            if result.error is not None:
                diagnostics.append(result.error)
            elif result.value is not None:
                functions.append(result.value)

        ignored_interfaces = self._options.resolve_ignored_interfaces(global_options)

        groups: dict[GroupKey, list[RegistrationFunction]] = {}
        for function in functions:
            groups.setdefault(function.group_key, []).append(function)

        universes: dict[str, Universe] = {}
        sources: list[GeneratedSource] = []
        emitted_by_hint: dict[str, GroupKey] = {}
        for group_key, group in groups.items():
            if cancellation is not None and cancellation.is_cancellation_requested:
                # Unvisited entries stay reusable by the next run.
                for cache in self._caches():
                    cache.retain_previous()
                msg = (
                    f"Service registration generation cancelled after {len(sources)} "
                    f"of {len(groups)} group(s)."
                )
                raise ServiceGenOperationCancelledError(msg, partial_sources=tuple(sources))

            source = self._emit_group(
                group_key=group_key,
                group=group,
                compilation=compilation,
                ignored_interfaces=ignored_interfaces,
                universes=universes,
            )
            earlier = emitted_by_hint.setdefault(source.hint_name, group_key)
            if earlier != group_key:
                logger.warning(
                    "Hint name %s of %s is already used by %s; both units are emitted",
                    source.hint_name,
                    ".".join(filter(None, group_key)),
                    ".".join(filter(None, earlier)),
                )
            sources.append(source)

        emission = self._emission_cache.statistics
        statistics = RunStatistics(
            declarations=len(candidates),
            functions=len(functions),
            groups=len(groups),
            rendered_groups=emission.misses,
            reused_groups=emission.hits,
        )
        for cache in self._caches():
            cache.log_statistics()
        logger.info(
            (
                "Service registration generation: declarations=%d functions=%d "
                "diagnostics=%d groups=%d rendered=%d reused=%d"
            ),
            statistics.declarations,
            statistics.functions,
            len(diagnostics),
            statistics.groups,
            statistics.rendered_groups,
            statistics.reused_groups,
        )
        return GeneratorRunResult(
            sources=tuple(sources),
            diagnostics=tuple(diagnostics),
            statistics=statistics,
        )

    def clear_cache(self) -> None:
        """Forget every memoized stage result."""
        for cache in self._caches():
            cache.clear()

    def _validate(self, declaration: MethodDeclaration) -> Result[RegistrationFunction]:
        result = validate_declaration(
            declaration,
            container_type_name=self._options.container_type_name,
        )
        if result.value is None:
            return result
        directives = extract_directives(
            declaration,
            attribute_name=self._options.attribute_name,
        )
        return Result(value=replace(result.value, directives=directives))

    def _resolve(
        self,
        compilation: Compilation,
        assembly: str,
        universes: dict[str, Universe],
    ) -> Universe:
        # Interned per run so the module tree is hashed once per scope.
        universe = universes.get(assembly)
        if universe is not None:
            return universe

        scope = find_scope_module(compilation, assembly)
        if scope is None:
            universe = EquatableArray()
        else:
            module, lexical = scope
            universe = self._resolution_cache.get_or_compute(
                (module, lexical),
                lambda: EquatableArray(walk_module(module, lexical=lexical)),
            )
        universes[assembly] = universe
        return universe

    def _plan(
        self,
        function: RegistrationFunction,
        compilation: Compilation,
        ignored_interfaces: IgnoredInterfaces,
        universes: dict[str, Universe],
    ) -> EquatableArray[RegistrationPlan]:
        scopes = EquatableArray(
            self._resolve(compilation, directive.assembly, universes)
            for directive in function.directives
        )
        key: _PlanKey = (function, ignored_interfaces, scopes)
        return self._plan_cache.get_or_compute(
            key,
            lambda: EquatableArray(
                plan_function(
                    function,
                    lambda assembly: universes.get(assembly, ()),
                    ignored_interfaces=ignored_interfaces,
                ),
            ),
        )

    def _emit_group(
        self,
        *,
        group_key: GroupKey,
        group: list[RegistrationFunction],
        compilation: Compilation,
        ignored_interfaces: IgnoredInterfaces,
        universes: dict[str, Universe],
    ) -> GeneratedSource:
        planned = EquatableArray(
            (function, self._plan(function, compilation, ignored_interfaces, universes))
            for function in group
        )
        key: _EmissionKey = (group_key, ignored_interfaces, planned)
        namespace, class_name = group_key
        return self._emission_cache.get_or_compute(
            key,
            lambda: GeneratedSource(
                hint_name=make_hint_name(
                    namespace,
                    class_name,
                    self._options.hint_name_suffix,
                ),
                text=self._renderer.render_unit(list(planned)),
            ),
        )

    def _caches(self) -> tuple[IncrementalCache[Any, Any], ...]:
        return (
            self._validation_cache,
            self._resolution_cache,
            self._plan_cache,
            self._emission_cache,
        )


__all__ = [
    "GeneratorRunResult",
    "RunStatistics",
    "ServiceRegistrationGenerator",
]
