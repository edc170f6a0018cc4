"""Length conversions."""

from __future__ import annotations

from unitconv.core.converters.base import CategoryConverter
from unitconv.utils.units import LENGTH_ALIASES

FEET_PER_METER = 3.28084
CM_PER_INCH = 2.54


def meters_to_feet(value: float) -> float:
    return value * FEET_PER_METER


def feet_to_meters(value: float) -> float:
    return value / FEET_PER_METER


def centimeters_to_inches(value: float) -> float:
    return value / CM_PER_INCH


def inches_to_centimeters(value: float) -> float:
    return value * CM_PER_INCH


class LengthConverter(CategoryConverter):
    category = "length"
    aliases = LENGTH_ALIASES

    def formulas(self):
        return {
            ("meters", "feet"): meters_to_feet,
            ("feet", "meters"): feet_to_meters,
            ("centimeters", "inches"): centimeters_to_inches,
            ("inches", "centimeters"): inches_to_centimeters,
        }
