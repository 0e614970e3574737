"""Shared test fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from serialized_form.assembler import PageAssembler
from serialized_form.messages import Messages
from tests.unit.fakes import FakeConfiguration, FakeLinkResolver, FakeNavigation, FakePrinter
from tests.unit.samples import BASE, CUSTOMER, ORDER


@pytest.fixture
def configuration() -> FakeConfiguration:
    """Configuration documenting the com.example.model classes only."""
    return FakeConfiguration(included={BASE, ORDER, CUSTOMER})


@pytest.fixture
def links() -> FakeLinkResolver:
    return FakeLinkResolver()


@pytest.fixture
def navigation() -> FakeNavigation:
    return FakeNavigation()


@pytest.fixture
def printer() -> FakePrinter:
    return FakePrinter()


@pytest.fixture
def make_assembler(
    configuration: FakeConfiguration,
    links: FakeLinkResolver,
    navigation: FakeNavigation,
    printer: FakePrinter,
) -> Callable[..., PageAssembler]:
    """Return a factory for assemblers wired to the shared fakes."""

    def _make(**overrides: Any) -> PageAssembler:
        config = overrides.pop("configuration", configuration)
        kwargs: dict[str, Any] = {
            "links": links,
            "navigation": navigation,
            "messages": Messages(),
            "printer": printer,
        }
        kwargs.update(overrides)
        return PageAssembler(config, **kwargs)

    return _make
