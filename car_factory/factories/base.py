"""
Factory capability and assembly-time capability checks.

Capability mismatches are rejected when a component is handed over, so a
broken factory fails before any price is computed.
"""

from typing import Any, Protocol, runtime_checkable

from ..errors import CapabilityMismatchError
from ..products.capabilities import FamilyCar, SportsCar


@runtime_checkable
class CarFactory(Protocol):
    """Produces one matched pair of sports car and family car."""

    def make_sports_car(self) -> SportsCar:
        ...

    def make_family_car(self) -> FamilyCar:
        ...


# Methods each capability requires, used to report what is missing.
CAPABILITY_METHODS: dict[type, tuple[str, ...]] = {
    SportsCar: ("price",),
    FamilyCar: ("price", "upgrade_cost"),
    CarFactory: ("make_sports_car", "make_family_car"),
}


def missing_methods(component: Any, capability: type) -> list[str]:
    """Names of capability methods the component does not provide as callables."""
    return [
        name for name in CAPABILITY_METHODS[capability]
        if not callable(getattr(component, name, None))
    ]


def require_capability(component: Any, capability: type) -> Any:
    """
    Return `component` unchanged if it provides `capability`.

    Raises:
        CapabilityMismatchError: if any required method is missing
    """
    missing = missing_methods(component, capability)
    if missing:
        component_name = component.__name__ if isinstance(component, type) else type(component).__name__
        raise CapabilityMismatchError(
            f"{component_name} does not provide {capability.__name__}: "
            f"missing {', '.join(missing)}",
            component=component_name,
            capability=capability.__name__,
            missing_methods=missing,
        )
    return component
