"""Result reporters."""

from .base import BaseReporter
from .stdout_reporter import StdoutReporter

__all__ = ["BaseReporter", "StdoutReporter"]
