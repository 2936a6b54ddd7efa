"""
Error classification for factory and configuration assembly.

Product operations are total; the only failures happen while a factory,
a product or the configuration is being put together.
"""

from .assembly import (
    AssemblyError,
    CapabilityMismatchError,
    UnknownFactoryError,
)
from .configuration import ConfigurationError

__all__ = [
    "AssemblyError",
    "CapabilityMismatchError",
    "UnknownFactoryError",
    "ConfigurationError",
]
