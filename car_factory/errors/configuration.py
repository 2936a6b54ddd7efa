"""Configuration errors raised before any factory is used."""

from typing import Any, List, Optional

from .assembly import AssemblyError


class ConfigurationError(AssemblyError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
