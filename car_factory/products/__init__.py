"""Product capabilities and their brand variants."""

from .capabilities import Brand, FamilyCar, SportsCar
from .family import FordMondeo, MazdaCX30
from .sports import FordMustang, MazdaMX5

__all__ = [
    "Brand",
    "SportsCar",
    "FamilyCar",
    "MazdaMX5",
    "FordMustang",
    "MazdaCX30",
    "FordMondeo",
]
