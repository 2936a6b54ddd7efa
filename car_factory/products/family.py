"""
Family car variants.

Each variant is meant to collaborate with the sports car of its own brand, yet
`upgrade_cost` accepts any sports car and never checks the brand.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from ..pricing import PriceFormat, upgrade_message
from .capabilities import Brand, SportsCar


@dataclass(frozen=True)
class MazdaCX30:
    """Mazda compact crossover."""
    brand: ClassVar[Brand] = Brand.MAZDA
    model: ClassVar[str] = "CX-30"
    list_price: ClassVar[float] = 22050.0

    price_format: PriceFormat = field(default=PriceFormat.PLAIN, compare=False)

    def price(self) -> float:
        return self.list_price

    def upgrade_cost(self, other: SportsCar) -> str:
        """Price difference to `other`, may be negative."""
        return upgrade_message(other.price() - self.price(), self.price_format)


@dataclass(frozen=True)
class FordMondeo:
    """Ford mid-size saloon."""
    brand: ClassVar[Brand] = Brand.FORD
    model: ClassVar[str] = "Mondeo"
    list_price: ClassVar[float] = 22100.0

    price_format: PriceFormat = field(default=PriceFormat.PLAIN, compare=False)

    def price(self) -> float:
        return self.list_price

    def upgrade_cost(self, other: SportsCar) -> str:
        """Price difference to `other`, may be negative."""
        return upgrade_message(other.price() - self.price(), self.price_format)
