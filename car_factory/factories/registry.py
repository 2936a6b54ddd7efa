"""
Named factory registry.

Factories are checked when they are registered: the factory itself and both
products it makes must provide their capabilities. Products of different
brands are only reported, since brand compatibility is a convention.
"""

from typing import Callable

import structlog

from ..errors import UnknownFactoryError
from ..pricing import PriceFormat
from ..products.capabilities import FamilyCar, SportsCar
from .base import CarFactory, require_capability
from .brands import FordFactory, MazdaFactory

logger = structlog.get_logger(__name__)

FactoryConstructor = Callable[..., CarFactory]

_REGISTRY: dict[str, FactoryConstructor] = {}


def register_factory(name: str, factory_cls: FactoryConstructor) -> None:
    """
    Register a factory constructor under `name`.

    The constructor must accept a `price_format` keyword argument.

    Raises:
        CapabilityMismatchError: if the factory or its products lack a capability
    """
    key = name.lower()
    probe = require_capability(factory_cls(price_format=PriceFormat.PLAIN), CarFactory)
    sports_car = require_capability(probe.make_sports_car(), SportsCar)
    family_car = require_capability(probe.make_family_car(), FamilyCar)

    sports_brand = getattr(sports_car, "brand", None)
    family_brand = getattr(family_car, "brand", None)
    if sports_brand != family_brand:
        logger.warning(
            "Factory products belong to different brands",
            factory=key,
            sports_car_brand=getattr(sports_brand, "value", sports_brand),
            family_car_brand=getattr(family_brand, "value", family_brand),
        )

    if key in _REGISTRY:
        logger.info("Replacing registered factory", factory=key)
    _REGISTRY[key] = factory_cls


def unregister_factory(name: str) -> None:
    """Remove a factory; unknown names raise UnknownFactoryError."""
    key = name.lower()
    if key not in _REGISTRY:
        raise UnknownFactoryError(
            f"No factory registered as '{name}'",
            factory_name=name,
            available=available_factories(),
        )
    del _REGISTRY[key]


def available_factories() -> list[str]:
    """Registered factory names in registration order."""
    return list(_REGISTRY)


def create_factory(name: str, price_format: PriceFormat = PriceFormat.PLAIN) -> CarFactory:
    """
    Build the factory registered under `name`.

    Raises:
        UnknownFactoryError: if nothing is registered under `name`
    """
    key = name.lower()
    try:
        factory_cls = _REGISTRY[key]
    except KeyError:
        raise UnknownFactoryError(
            f"No factory registered as '{name}'",
            factory_name=name,
            available=available_factories(),
        ) from None
    return factory_cls(price_format=price_format)


register_factory("mazda", MazdaFactory)
register_factory("ford", FordFactory)
