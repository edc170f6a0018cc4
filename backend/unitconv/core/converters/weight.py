"""Weight conversions."""

from __future__ import annotations

from unitconv.core.converters.base import CategoryConverter
from unitconv.utils.units import WEIGHT_ALIASES

POUNDS_PER_KG = 2.20462
GRAMS_PER_OUNCE = 28.3495


def kilograms_to_pounds(value: float) -> float:
    return value * POUNDS_PER_KG


def pounds_to_kilograms(value: float) -> float:
    return value / POUNDS_PER_KG


def grams_to_ounces(value: float) -> float:
    return value / GRAMS_PER_OUNCE


def ounces_to_grams(value: float) -> float:
    return value * GRAMS_PER_OUNCE


class WeightConverter(CategoryConverter):
    category = "weight"
    aliases = WEIGHT_ALIASES

    def formulas(self):
        return {
            ("kilograms", "pounds"): kilograms_to_pounds,
            ("pounds", "kilograms"): pounds_to_kilograms,
            ("grams", "ounces"): grams_to_ounces,
            ("ounces", "grams"): ounces_to_grams,
        }
