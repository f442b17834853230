"""Tests for GeneratorOptions and diagnostics rendering."""

from __future__ import annotations

import pytest

from servicegen import (
    Diagnostic,
    DiagnosticSeverity,
    GeneratorOptions,
    Location,
    ServiceGenError,
    ServiceGenInvalidOptionsError,
)
from servicegen.defaults import IGNORE_INTERFACE_OPTION_KEY
from servicegen.diagnostics import (
    INVALID_METHOD_DEFINITION,
    INVALID_METHOD_PARAMETER,
    INVALID_METHOD_RETURN_TYPE,
)


class TestGeneratorOptions:
    @pytest.mark.parametrize(
        "field_name",
        ["attribute_name", "container_type_name", "hint_name_suffix"],
    )
    def test_empty_required_name_is_rejected(self, field_name: str) -> None:
        """Required names must not be empty."""
        with pytest.raises(ServiceGenInvalidOptionsError, match=field_name):
            GeneratorOptions(**{field_name: ""})

    def test_invalid_options_error_is_a_servicegen_error(self) -> None:
        assert issubclass(ServiceGenInvalidOptionsError, ServiceGenError)

    def test_default_ignore_list_contains_disposal_interfaces(self) -> None:
        ignored = GeneratorOptions().resolve_ignored_interfaces()

        assert "System.IDisposable" in ignored
        assert "System.IAsyncDisposable" in ignored
        assert "App.IService" not in ignored

    def test_build_property_is_split_and_stripped(self) -> None:
        """Entries are comma separated; surrounding whitespace is dropped."""
        ignored = GeneratorOptions().resolve_ignored_interfaces(
            {IGNORE_INTERFACE_OPTION_KEY: " App.IFirst ,App.ISecond,, "},
        )

        assert "App.IFirst" in ignored
        assert "App.ISecond" in ignored
        assert "" not in ignored
        assert "System.IDisposable" in ignored

    def test_custom_option_key_is_read(self) -> None:
        options = GeneratorOptions(ignore_interface_option_key="custom.ignore")

        ignored = options.resolve_ignored_interfaces(
            {
                "custom.ignore": "App.ICustom",
                IGNORE_INTERFACE_OPTION_KEY: "App.IDefault",
            },
        )

        assert "App.ICustom" in ignored
        assert "App.IDefault" not in ignored


class TestDiagnostics:
    @pytest.mark.parametrize(
        ("descriptor", "expected_id", "expected_message"),
        [
            (
                INVALID_METHOD_DEFINITION,
                "SRG0001",
                "Method must be partial extension. method=[Add]",
            ),
            (
                INVALID_METHOD_PARAMETER,
                "SRG0002",
                "Parameter type must be IServiceCollection. method=[Add]",
            ),
            (
                INVALID_METHOD_RETURN_TYPE,
                "SRG0003",
                "Return type must be IServiceCollection. method=[Add]",
            ),
        ],
    )
    def test_descriptor_formats_method_name(
        self,
        descriptor: object,
        expected_id: str,
        expected_message: str,
    ) -> None:
        diagnostic = Diagnostic(
            descriptor=descriptor,  # type: ignore[arg-type]
            location=Location(path="Registrations.cs", line=3, column=5),
            arguments=("Add",),
        )

        assert diagnostic.id == expected_id
        assert diagnostic.message == expected_message
        assert diagnostic.severity is DiagnosticSeverity.WARNING
        assert diagnostic.descriptor.category == "Usage"

    def test_str_includes_location_and_id(self) -> None:
        diagnostic = Diagnostic(
            descriptor=INVALID_METHOD_RETURN_TYPE,
            location=Location(path="Registrations.cs", line=3, column=5),
            arguments=("AddServices",),
        )

        assert str(diagnostic) == (
            "Registrations.cs(3,5): warning SRG0003: "
            "Return type must be IServiceCollection. method=[AddServices]"
        )
