"""Standard output reporter."""

import sys

from .base import BaseReporter


class StdoutReporter(BaseReporter):
    """Prints each result line to standard output."""

    def __init__(self, name: str = "stdout"):
        super().__init__(name)

    def emit(self, lines: list[str]) -> None:
        for line in lines:
            print(line, file=sys.stdout, flush=True)

    def health_check(self) -> bool:
        """Check if stdout is available."""
        try:
            return sys.stdout.writable()
        except (AttributeError, ValueError):
            return False
