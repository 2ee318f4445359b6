"""Pytest configuration and shared fixtures for the eitherkit test suite."""

import logging
from collections.abc import Callable, Generator
from unittest.mock import Mock

import pytest

from eitherkit import Either, Left, Right


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "property: mark test as a hypothesis property-based test"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture
def double_if_positive() -> Callable[[int], Either[str, int]]:
    """Doubles positive numbers, fails with "neg" otherwise."""

    def f(x: int) -> Either[str, int]:
        return Right(x * 2) if x > 0 else Left("neg")

    return f


@pytest.fixture
def counting(
    double_if_positive: Callable[[int], Either[str, int]],
) -> Mock:
    """double_if_positive wrapped in a Mock to count invocations."""
    return Mock(wraps=double_if_positive)


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """Yield the eitherkit logger and restore its state afterwards."""
    logger = logging.getLogger("eitherkit")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate
