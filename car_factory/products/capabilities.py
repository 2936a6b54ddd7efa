"""
Product capability sets.

Client code relies only on these protocols. Concrete variants implement them
structurally; they do not inherit from them.
"""

from enum import Enum
from typing import Protocol, runtime_checkable


class Brand(Enum):
    """Brand family a product variant belongs to."""
    MAZDA = "mazda"
    FORD = "ford"


@runtime_checkable
class SportsCar(Protocol):
    """Anything with a list price."""

    def price(self) -> float:
        ...


@runtime_checkable
class FamilyCar(Protocol):
    """A car with a list price that can price an upgrade to a sports car.

    Proper interaction is only expected with a sports car of the same brand,
    but any sports car is accepted.
    """

    def price(self) -> float:
        ...

    def upgrade_cost(self, other: SportsCar) -> str:
        ...
