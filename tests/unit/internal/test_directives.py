from __future__ import annotations

from servicegen import Lifetime
from servicegen._internal.directives import extract_directives, has_directive
from servicegen._internal.models import Directive
from servicegen.defaults import DEFAULT_ATTRIBUTE_NAME
from tests.builders import directive, registration_method


def test_directives_keep_declaration_order() -> None:
    declaration = registration_method(
        "AddViews",
        directive(3, "View$"),
        directive(3, "ViewModel$"),
    )

    directives = extract_directives(declaration, attribute_name=DEFAULT_ATTRIBUTE_NAME)

    assert [item.pattern for item in directives] == ["View$", "ViewModel$"]


def test_lifetime_values_map_to_lifetimes() -> None:
    declaration = registration_method(
        "AddServices",
        directive(1, "a"),
        directive(2, "b"),
        directive(3, "c"),
        directive(0, "d"),
        directive(Lifetime.SCOPED, "e"),
    )

    directives = extract_directives(declaration, attribute_name=DEFAULT_ATTRIBUTE_NAME)

    assert [item.lifetime for item in directives] == [
        Lifetime.SINGLETON,
        Lifetime.SCOPED,
        Lifetime.TRANSIENT,
        Lifetime.TRANSIENT,
        Lifetime.SCOPED,
    ]


def test_named_arguments_fill_scope_and_namespace_filter() -> None:
    declaration = registration_method(
        "AddServices",
        directive(1, "Service$", assembly="Develop.Library", namespace="Develop.Library"),
    )

    (extracted,) = extract_directives(declaration, attribute_name=DEFAULT_ATTRIBUTE_NAME)

    assert extracted == Directive(
        lifetime=Lifetime.SINGLETON,
        pattern="Service$",
        assembly="Develop.Library",
        namespace="Develop.Library",
    )


def test_unknown_and_empty_named_arguments_are_ignored() -> None:
    declaration = registration_method(
        "AddServices",
        directive(
            2,
            "Repository$",
            extra=(("Key", "primary"), ("", "x"), ("Namespace", None)),
        ),
    )

    (extracted,) = extract_directives(declaration, attribute_name=DEFAULT_ATTRIBUTE_NAME)

    assert extracted == Directive(lifetime=Lifetime.SCOPED, pattern="Repository$")


def test_missing_pattern_value_becomes_empty_pattern() -> None:
    declaration = registration_method("AddServices", directive(1, None))

    (extracted,) = extract_directives(declaration, attribute_name=DEFAULT_ATTRIBUTE_NAME)

    assert extracted.pattern == ""


def test_other_attributes_are_not_directives() -> None:
    declaration = registration_method(
        "AddServices",
        directive(1, "Service$", class_name="System.ObsoleteAttribute"),
        directive(1, "Handler$"),
    )

    directives = extract_directives(declaration, attribute_name=DEFAULT_ATTRIBUTE_NAME)

    assert [item.pattern for item in directives] == ["Handler$"]
    assert has_directive(declaration, attribute_name=DEFAULT_ATTRIBUTE_NAME)
    assert not has_directive(declaration, attribute_name="Other.Attribute")
