"""Generate registration bodies for classes matched by name patterns.

Declare partial extension methods carrying registration directives, hand the
generator a snapshot of the compilation, and read back one generated unit per
declaring type.
"""

from __future__ import annotations

from servicegen import (
    AttributeData,
    Compilation,
    ContainingTypeSymbol,
    Location,
    MethodDeclaration,
    ModuleSymbol,
    NamespaceSymbol,
    ParameterSymbol,
    ServiceRegistrationGenerator,
    TypeKind,
    TypeSymbol,
)

ATTRIBUTE = "ServiceGen.ServiceRegistrationAttribute"
CONTAINER = "Microsoft.Extensions.DependencyInjection.IServiceCollection"
SINGLETON = 1
TRANSIENT = 3


def build_compilation() -> Compilation:
    app_namespace = NamespaceSymbol(
        name="App",
        types=(
            TypeSymbol(name="IRepository", kind=TypeKind.INTERFACE),
            TypeSymbol(name="SqlRepository", interfaces=("App.IRepository",)),
            TypeSymbol(name="FooView"),
            TypeSymbol(name="BarViewModel"),
            TypeSymbol(name="Other"),
        ),
    )
    return Compilation(
        assembly=ModuleSymbol(
            name="App",
            global_namespace=NamespaceSymbol(namespaces=(app_namespace,)),
        ),
    )


def registration_method(name: str, *directives: tuple[int, str], line: int) -> MethodDeclaration:
    return MethodDeclaration(
        name=name,
        containing_type=ContainingTypeSymbol(namespace="App", name="ServiceCollectionExtensions"),
        parameters=(ParameterSymbol(name="services", type_name=CONTAINER),),
        return_type=CONTAINER,
        attributes=tuple(
            AttributeData(class_name=ATTRIBUTE, constructor_arguments=directive)
            for directive in directives
        ),
        location=Location(path="ServiceCollectionExtensions.cs", line=line, column=5),
    )


def main() -> None:
    declarations = [
        registration_method("AddViews", (TRANSIENT, "View$"), (TRANSIENT, "ViewModel$"), line=6),
        registration_method("AddRepositories", (SINGLETON, "Repository$"), line=9),
    ]

    result = ServiceRegistrationGenerator().run(build_compilation(), declarations)
    (source,) = result.sources
    statements = [
        line.strip() for line in source.text.splitlines() if line.strip().startswith("services.")
    ]

    print(f"hint_name={source.hint_name}")  # => hint_name=App_ServiceCollectionExtensions.g.cs
    print(f"diagnostics={len(result.diagnostics)}")  # => diagnostics=0
    print(statements[0])  # => services.AddTransient<App.FooView>();
    print(statements[1])  # => services.AddTransient<App.BarViewModel>();
    print(statements[2])  # => services.AddSingleton<App.IRepository, App.SqlRepository>();
    print(f"returns={source.text.count('return services;')}")  # => returns=2


if __name__ == "__main__":
    main()
