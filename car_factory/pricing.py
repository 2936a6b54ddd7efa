"""Price formatting shared by products and the client."""

from enum import Enum


class PriceFormat(Enum):
    """Rendering policy for prices and price differences."""
    PLAIN = "plain"        # 22050, 4910, 22050.50
    CURRENCY = "currency"  # 22,050.00
    RAW = "raw"            # 22050.0


UPGRADE_MESSAGE_TEMPLATE = "To upgrade it would to a sports car, it would cost ${delta}"


def format_amount(amount: float, fmt: PriceFormat = PriceFormat.PLAIN) -> str:
    """Render an amount using the given policy. Negative amounts keep their sign."""
    if fmt is PriceFormat.CURRENCY:
        return f"{amount:,.2f}"
    if fmt is PriceFormat.RAW:
        return str(float(amount))
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def upgrade_message(delta: float, fmt: PriceFormat = PriceFormat.PLAIN) -> str:
    """Sentence reporting what it costs to move from a family car to a sports car."""
    return UPGRADE_MESSAGE_TEMPLATE.format(delta=format_amount(delta, fmt))
