"""Base class for result reporters."""

from abc import ABC, abstractmethod
from typing import Any

import structlog


class BaseReporter(ABC):
    """Base class for the sinks that receive the client's result lines."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"car_factory.reporting.{name}")
        self._report_count = 0
        self._line_count = 0

    @abstractmethod
    def emit(self, lines: list[str]) -> None:
        """
        Write lines to the destination.

        Args:
            lines: Result lines, in output order
        """

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the destination is writable."""

    def report(self, lines: list[str]) -> None:
        """Emit lines and update statistics. Errors from `emit` propagate."""
        self.emit(lines)
        self._report_count += 1
        self._line_count += len(lines)
        self.logger.debug("Report emitted", reporter=self.name, line_count=len(lines))

    def get_stats(self) -> dict[str, Any]:
        """Get reporting statistics."""
        return {
            "name": self.name,
            "report_count": self._report_count,
            "line_count": self._line_count,
        }

    def reset_stats(self):
        """Reset reporting statistics."""
        self._report_count = 0
        self._line_count = 0
