"""
Client code for the car factories.

The client works with factories and products only through their capability
sets, so any factory can be passed in without changing its code path.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from .factories.base import CarFactory, require_capability
from .pricing import PriceFormat, format_amount
from .products.capabilities import FamilyCar, SportsCar
from .reporting import BaseReporter, StdoutReporter

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpgradeQuote:
    """Result lines produced for one factory."""
    family_car_price: str
    upgrade_message: str

    def lines(self) -> list[str]:
        return [self.family_car_price, self.upgrade_message]


class Client:
    """Requests a matched pair from a factory and reports the upgrade cost.

    The factory owns the price format: its products render the upgrade line
    with it, and the client renders the price line with the same one.
    Factories without a `price_format` attribute use the plain format.
    """

    def __init__(self, reporter: Optional[BaseReporter] = None) -> None:
        self.reporter = reporter or StdoutReporter()

    def quote(self, factory: CarFactory) -> UpgradeQuote:
        """Build the family car price and upgrade lines without reporting them."""
        factory = require_capability(factory, CarFactory)
        sports_car = require_capability(factory.make_sports_car(), SportsCar)
        family_car = require_capability(factory.make_family_car(), FamilyCar)
        price_format = getattr(factory, "price_format", PriceFormat.PLAIN)

        quote = UpgradeQuote(
            family_car_price=format_amount(family_car.price(), price_format),
            upgrade_message=family_car.upgrade_cost(sports_car),
        )
        logger.debug(
            "Upgrade quote computed",
            factory=type(factory).__name__,
            family_car_price=quote.family_car_price,
        )
        return quote

    def run(self, factory: CarFactory) -> None:
        """Quote the factory's pair and send both lines to the reporter."""
        self.reporter.report(self.quote(factory).lines())
