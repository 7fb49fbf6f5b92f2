"""Pytest configuration and shared fixtures for the fpalgebra test suite."""

import os

import pytest
from hypothesis import HealthCheck, settings

from fpalgebra import Absent, Failure, Present, Success

# Hypothesis profiles, selected with HYPOTHESIS_PROFILE
settings.register_profile("default", max_examples=100, deadline=None)
settings.register_profile(
    "ci",
    max_examples=500,
    deadline=None,
    derandomize=True,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


class CallRecorder:
    """Callable that records every argument tuple it is invoked with."""

    def __init__(self, return_value: object = None) -> None:
        self.calls: list[tuple[object, ...]] = []
        self.return_value = return_value

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self.return_value

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> CallRecorder:
    """A fresh call recorder for tap/match assertions."""
    return CallRecorder()


@pytest.fixture
def present_value() -> Present[int]:
    return Present(42)


@pytest.fixture
def absent_value() -> Absent[int]:
    return Absent()


@pytest.fixture
def success_value() -> Success[int, str]:
    return Success(5)


@pytest.fixture
def failure_value() -> Failure[int, str]:
    return Failure("bad")
