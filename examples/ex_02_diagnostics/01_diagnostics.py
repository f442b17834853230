"""Declarations with the wrong shape are reported, not generated.

Each invalid declaration produces exactly one warning diagnostic and no
source; valid siblings are still generated.
"""

from __future__ import annotations

from servicegen import (
    AttributeData,
    Compilation,
    ContainingTypeSymbol,
    Location,
    MethodDeclaration,
    ModuleSymbol,
    ParameterSymbol,
    ServiceRegistrationGenerator,
)

CONTAINER = "Microsoft.Extensions.DependencyInjection.IServiceCollection"
DIRECTIVE = AttributeData(
    class_name="ServiceGen.ServiceRegistrationAttribute",
    constructor_arguments=(1, "Service$"),
)


def declaration(name: str, *, return_type: str, is_extension: bool = True) -> MethodDeclaration:
    return MethodDeclaration(
        name=name,
        containing_type=ContainingTypeSymbol(namespace="App", name="Registrations"),
        is_extension=is_extension,
        parameters=(ParameterSymbol(name="services", type_name=CONTAINER),),
        return_type=return_type,
        attributes=(DIRECTIVE,),
        location=Location(path="Registrations.cs", line=4, column=5),
    )


def main() -> None:
    result = ServiceRegistrationGenerator().run(
        Compilation(assembly=ModuleSymbol(name="App")),
        [
            declaration("AddServices", return_type="void"),
            declaration("AddOthers", return_type=CONTAINER, is_extension=False),
        ],
    )

    first, second = result.diagnostics
    print(first)  # => Registrations.cs(4,5): warning SRG0003: Return type must be IServiceCollection. method=[AddServices]
    print(second.id)  # => SRG0001
    print(second.message)  # => Method must be partial extension. method=[AddOthers]
    print(f"sources={len(result.sources)}")  # => sources=0


if __name__ == "__main__":
    main()
