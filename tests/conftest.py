"""Pytest configuration and shared fixtures."""

import pytest

from car_factory.factories import FordFactory, MazdaFactory
from car_factory.logging.config import configure_logging
from car_factory.reporting import BaseReporter


class ListReporter(BaseReporter):
    """Keeps reported lines in memory."""

    def __init__(self, name: str = "memory"):
        super().__init__(name)
        self.lines: list[str] = []

    def emit(self, lines: list[str]) -> None:
        self.lines.extend(lines)

    def health_check(self) -> bool:
        return True


@pytest.fixture(scope="session", autouse=True)
def quiet_logging() -> None:
    """Configure structlog once so nothing is printed to stdout by default."""
    configure_logging(level="WARNING")


@pytest.fixture
def list_reporter() -> ListReporter:
    """In-memory reporter for capturing client output."""
    return ListReporter()


@pytest.fixture
def mazda_factory() -> MazdaFactory:
    return MazdaFactory()


@pytest.fixture
def ford_factory() -> FordFactory:
    return FordFactory()
