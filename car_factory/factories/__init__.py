"""Factory capability, brand factories and the named registry."""

from .base import CarFactory, require_capability
from .brands import FordFactory, MazdaFactory
from .registry import available_factories, create_factory, register_factory, unregister_factory

__all__ = [
    "CarFactory",
    "require_capability",
    "MazdaFactory",
    "FordFactory",
    "register_factory",
    "unregister_factory",
    "available_factories",
    "create_factory",
]
