"""Shared pytest fixtures for servicegen tests."""

import pytest

from servicegen import Compilation, MethodDeclaration, ServiceRegistrationGenerator
from tests.builders import develop_compilation, develop_declarations


@pytest.fixture()
def generator() -> ServiceRegistrationGenerator:
    """Generator with default options and empty caches."""
    return ServiceRegistrationGenerator()


@pytest.fixture()
def compilation() -> Compilation:
    """Application assembly referencing a service library."""
    return develop_compilation()


@pytest.fixture()
def declarations() -> list[MethodDeclaration]:
    """Registration functions declared by the application assembly."""
    return develop_declarations()
