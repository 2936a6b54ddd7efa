"""
Assembly-time errors raised while wiring factories and products together.

These are configuration-time failures: they are raised at the boundary where a
component is handed over, never while a price is being computed.
"""

from typing import Any, Dict, List, Optional


class AssemblyError(Exception):
    """Base class for errors raised while assembling factories or products."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class CapabilityMismatchError(AssemblyError):
    """A component does not provide the methods its capability requires."""

    def __init__(self, message: str, component: Optional[str] = None,
                 capability: Optional[str] = None,
                 missing_methods: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.component = component
        self.capability = capability
        self.missing_methods = missing_methods or []


class UnknownFactoryError(AssemblyError):
    """No factory is registered under the requested name."""

    def __init__(self, message: str, factory_name: Optional[str] = None,
                 available: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.factory_name = factory_name
        self.available = available or []
