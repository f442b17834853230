from __future__ import annotations

import pytest

from servicegen import Accessibility, Lifetime, ParameterSymbol
from servicegen._internal.validator import validate_declaration
from servicegen.diagnostics import (
    INVALID_METHOD_DEFINITION,
    INVALID_METHOD_PARAMETER,
    INVALID_METHOD_RETURN_TYPE,
    DiagnosticSeverity,
)
from tests.builders import CONTAINER, directive, registration_method


def test_valid_declaration_becomes_registration_function_without_directives() -> None:
    declaration = registration_method(
        "AddViews",
        directive(Lifetime.TRANSIENT, "View$"),
        namespace="Develop.App",
        class_name="Extensions",
        accessibility=Accessibility.INTERNAL,
        parameter_name="collection",
    )

    result = validate_declaration(declaration, container_type_name=CONTAINER)

    assert result.is_success
    assert result.value is not None
    assert result.value.namespace == "Develop.App"
    assert result.value.class_name == "Extensions"
    assert result.value.is_value_type is False
    assert result.value.accessibility is Accessibility.INTERNAL
    assert result.value.method_name == "AddViews"
    assert result.value.parameter_name == "collection"
    assert len(result.value.directives) == 0


@pytest.mark.parametrize(
    ("overrides", "descriptor"),
    [
        ({"is_static": False}, INVALID_METHOD_DEFINITION),
        ({"is_extension": False}, INVALID_METHOD_DEFINITION),
        ({"is_partial_definition": False}, INVALID_METHOD_DEFINITION),
        ({"accessibility": Accessibility.NOT_APPLICABLE}, INVALID_METHOD_DEFINITION),
        ({"parameter_type": "System.IServiceProvider"}, INVALID_METHOD_PARAMETER),
        ({"parameters": ()}, INVALID_METHOD_PARAMETER),
        (
            {
                "parameters": (
                    ParameterSymbol("services", CONTAINER),
                    ParameterSymbol("other", CONTAINER),
                ),
            },
            INVALID_METHOD_PARAMETER,
        ),
        ({"return_type": "void"}, INVALID_METHOD_RETURN_TYPE),
    ],
)
def test_invalid_declaration_reports_matching_diagnostic(
    overrides: dict[str, object],
    descriptor: object,
) -> None:
    declaration = registration_method(
        "AddServices",
        directive(1, "Service$"),
        line=42,
        **overrides,  # type: ignore[arg-type]
    )

    result = validate_declaration(declaration, container_type_name=CONTAINER)

    assert result.value is None
    assert result.error is not None
    assert result.error.descriptor is descriptor
    assert result.error.location == declaration.location
    assert result.error.arguments == ("AddServices",)
    assert result.error.severity is DiagnosticSeverity.WARNING


def test_first_failing_check_wins() -> None:
    declaration = registration_method(
        "AddServices",
        is_extension=False,
        parameter_type="object",
        return_type="void",
    )

    result = validate_declaration(declaration, container_type_name=CONTAINER)

    assert result.error is not None
    assert result.error.descriptor is INVALID_METHOD_DEFINITION


def test_parameter_check_precedes_return_type_check() -> None:
    declaration = registration_method("AddServices", parameter_type="object", return_type="void")

    result = validate_declaration(declaration, container_type_name=CONTAINER)

    assert result.error is not None
    assert result.error.descriptor is INVALID_METHOD_PARAMETER


def test_diagnostic_message_names_the_method() -> None:
    declaration = registration_method("AddThings", return_type="void")

    result = validate_declaration(declaration, container_type_name=CONTAINER)

    assert result.error is not None
    assert result.error.id == "SRG0003"
    assert result.error.message == (
        "Return type must be IServiceCollection. method=[AddThings]"
    )


def test_custom_container_type_name_is_honoured() -> None:
    declaration = registration_method(
        "AddServices",
        parameter_type="My.Registry",
        return_type="My.Registry",
    )

    assert validate_declaration(declaration, container_type_name="My.Registry").is_success
    assert not validate_declaration(declaration, container_type_name=CONTAINER).is_success
