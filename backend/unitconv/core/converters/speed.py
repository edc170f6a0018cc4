"""Speed conversions."""

from __future__ import annotations

from unitconv.core.converters.base import CategoryConverter
from unitconv.utils.units import SPEED_ALIASES

MPH_PER_KMH = 0.621371
KMH_PER_MPS = 3.6


def kmh_to_mph(value: float) -> float:
    return value * MPH_PER_KMH


def mph_to_kmh(value: float) -> float:
    return value / MPH_PER_KMH


def mps_to_kmh(value: float) -> float:
    return value * KMH_PER_MPS


def kmh_to_mps(value: float) -> float:
    """Convert km/h to m/s."""
    return value / KMH_PER_MPS


class SpeedConverter(CategoryConverter):
    category = "speed"
    aliases = SPEED_ALIASES

    def formulas(self):
        return {
            ("kilometers_per_hour", "miles_per_hour"): kmh_to_mph,
            ("miles_per_hour", "kilometers_per_hour"): mph_to_kmh,
            ("meters_per_second", "kilometers_per_hour"): mps_to_kmh,
            ("kilometers_per_hour", "meters_per_second"): kmh_to_mps,
        }
