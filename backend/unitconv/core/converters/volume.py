"""Volume conversions (US liquid gallons, pints and cups)."""

from __future__ import annotations

from unitconv.core.converters.base import CategoryConverter
from unitconv.utils.units import VOLUME_ALIASES

GALLONS_PER_LITER = 0.264172
PINTS_PER_LITER = 2.11338
CUPS_PER_DECILITER = 0.422675


def liters_to_gallons(value: float) -> float:
    return value * GALLONS_PER_LITER


def gallons_to_liters(value: float) -> float:
    return value / GALLONS_PER_LITER


def liters_to_pints(value: float) -> float:
    return value * PINTS_PER_LITER


def pints_to_liters(value: float) -> float:
    return value / PINTS_PER_LITER


def deciliters_to_cups(value: float) -> float:
    return value * CUPS_PER_DECILITER


def cups_to_deciliters(value: float) -> float:
    return value / CUPS_PER_DECILITER


class VolumeConverter(CategoryConverter):
    category = "volume"
    aliases = VOLUME_ALIASES

    def formulas(self):
        return {
            ("liters", "gallons"): liters_to_gallons,
            ("gallons", "liters"): gallons_to_liters,
            ("liters", "pints"): liters_to_pints,
            ("pints", "liters"): pints_to_liters,
            ("deciliters", "cups"): deciliters_to_cups,
            ("cups", "deciliters"): cups_to_deciliters,
        }
