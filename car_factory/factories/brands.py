"""Concrete factories, one per brand family."""

from dataclasses import dataclass

from ..logging.config import get_factory_logger, log_product_created
from ..pricing import PriceFormat
from ..products import FordMondeo, FordMustang, MazdaCX30, MazdaMX5

logger = get_factory_logger(__name__)


@dataclass(frozen=True)
class MazdaFactory:
    """Makes the MX-5 and the CX-30."""
    price_format: PriceFormat = PriceFormat.PLAIN

    def make_sports_car(self) -> MazdaMX5:
        car = MazdaMX5(price_format=self.price_format)
        log_product_created(logger, "mazda", car, "SportsCar")
        return car

    def make_family_car(self) -> MazdaCX30:
        car = MazdaCX30(price_format=self.price_format)
        log_product_created(logger, "mazda", car, "FamilyCar")
        return car


@dataclass(frozen=True)
class FordFactory:
    """Makes the Mustang and the Mondeo."""
    price_format: PriceFormat = PriceFormat.PLAIN

    def make_sports_car(self) -> FordMustang:
        car = FordMustang(price_format=self.price_format)
        log_product_created(logger, "ford", car, "SportsCar")
        return car

    def make_family_car(self) -> FordMondeo:
        car = FordMondeo(price_format=self.price_format)
        log_product_created(logger, "ford", car, "FamilyCar")
        return car
