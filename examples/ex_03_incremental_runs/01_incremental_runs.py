"""Re-running a generator reuses units whose inputs did not change.

Keep one generator per host session. A rerun on an equal snapshot renders
nothing; adding a type only re-renders the groups whose plans change.
"""

from __future__ import annotations

from servicegen import (
    AttributeData,
    Compilation,
    ContainingTypeSymbol,
    MethodDeclaration,
    ModuleSymbol,
    NamespaceSymbol,
    ParameterSymbol,
    ServiceRegistrationGenerator,
    TypeSymbol,
)

CONTAINER = "Microsoft.Extensions.DependencyInjection.IServiceCollection"
DECLARATION = MethodDeclaration(
    name="AddViews",
    containing_type=ContainingTypeSymbol(namespace="App", name="Views"),
    parameters=(ParameterSymbol(name="services", type_name=CONTAINER),),
    return_type=CONTAINER,
    attributes=(
        AttributeData(
            class_name="ServiceGen.ServiceRegistrationAttribute",
            constructor_arguments=(3, "View$"),
        ),
    ),
)


def compilation(*type_names: str) -> Compilation:
    namespace = NamespaceSymbol(
        name="App",
        types=tuple(TypeSymbol(name=name) for name in type_names),
    )
    return Compilation(
        assembly=ModuleSymbol(
            name="App",
            global_namespace=NamespaceSymbol(namespaces=(namespace,)),
        ),
    )


def main() -> None:
    generator = ServiceRegistrationGenerator()

    first = generator.run(compilation("FooView"), [DECLARATION]).statistics
    print(f"rendered={first.rendered_groups} reused={first.reused_groups}")  # => rendered=1 reused=0

    again = generator.run(compilation("FooView"), [DECLARATION]).statistics
    print(f"rendered={again.rendered_groups} reused={again.reused_groups}")  # => rendered=0 reused=1

    unrelated = generator.run(compilation("FooView", "Other"), [DECLARATION]).statistics
    print(f"rendered={unrelated.rendered_groups} reused={unrelated.reused_groups}")  # => rendered=0 reused=1

    matching = generator.run(compilation("FooView", "BarView"), [DECLARATION]).statistics
    print(f"rendered={matching.rendered_groups} reused={matching.reused_groups}")  # => rendered=1 reused=0


if __name__ == "__main__":
    main()
