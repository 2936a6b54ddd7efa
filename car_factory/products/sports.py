"""Sports car variants."""

from dataclasses import dataclass, field
from typing import ClassVar

from ..pricing import PriceFormat
from .capabilities import Brand


@dataclass(frozen=True)
class MazdaMX5:
    """Mazda roadster."""
    brand: ClassVar[Brand] = Brand.MAZDA
    model: ClassVar[str] = "MX-5"
    list_price: ClassVar[float] = 26960.0

    price_format: PriceFormat = field(default=PriceFormat.PLAIN, compare=False)

    def price(self) -> float:
        return self.list_price


@dataclass(frozen=True)
class FordMustang:
    """Ford coupe."""
    brand: ClassVar[Brand] = Brand.FORD
    model: ClassVar[str] = "Mustang"
    list_price: ClassVar[float] = 27205.0

    price_format: PriceFormat = field(default=PriceFormat.PLAIN, compare=False)

    def price(self) -> float:
        return self.list_price
