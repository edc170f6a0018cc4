"""Per-source-unit entry points: ``convert_from_<unit>(to_unit, value)``."""

from __future__ import annotations

from unitconv.core.converters.base import CategoryConverter
from unitconv.core.converters.length import LengthConverter
from unitconv.core.converters.speed import SpeedConverter
from unitconv.core.converters.temperature import TemperatureConverter
from unitconv.core.converters.volume import VolumeConverter
from unitconv.core.converters.weight import WeightConverter
from unitconv.core.validation.input_validator import (
    validate_input_type_number,
    validate_input_type_string,
)


class ConverterSelector:
    """Routes a fixed source unit to its category converter.

    Only argument types are checked here; negative values are not rejected.
    Use ConverterSystem for the non-negative guarantee.

    Usage:
        selector = ConverterSelector()
        selector.convert_from_celsius("fahrenheit", 18)   # 64.4
        selector.convert_from_liters("pints", 19)         # ~40.154
    """

    def __init__(self) -> None:
        self._temperature = TemperatureConverter()
        self._length = LengthConverter()
        self._weight = WeightConverter()
        self._volume = VolumeConverter()
        self._speed = SpeedConverter()

    @staticmethod
    def _convert(converter: CategoryConverter, unit: str, convert_to: str, value: float) -> float:
        validate_input_type_string(convert_to)
        validate_input_type_number(value)
        return converter.convert_from_unit(unit, convert_to, value)

    # ── Temperature ──────────────────────────────────────────────────────

    def convert_from_celsius(self, convert_to: str, value: float) -> float:
        return self._convert(self._temperature, "celsius", convert_to, value)

    def convert_from_fahrenheit(self, convert_to: str, value: float) -> float:
        return self._convert(self._temperature, "fahrenheit", convert_to, value)

    # ── Length ───────────────────────────────────────────────────────────

    def convert_from_meters(self, convert_to: str, value: float) -> float:
        return self._convert(self._length, "meters", convert_to, value)

    def convert_from_feet(self, convert_to: str, value: float) -> float:
        return self._convert(self._length, "feet", convert_to, value)

    def convert_from_centimeters(self, convert_to: str, value: float) -> float:
        return self._convert(self._length, "centimeters", convert_to, value)

    def convert_from_inches(self, convert_to: str, value: float) -> float:
        return self._convert(self._length, "inches", convert_to, value)

    # ── Weight ───────────────────────────────────────────────────────────

    def convert_from_kilograms(self, convert_to: str, value: float) -> float:
        return self._convert(self._weight, "kilograms", convert_to, value)

    def convert_from_pounds(self, convert_to: str, value: float) -> float:
        return self._convert(self._weight, "pounds", convert_to, value)

    def convert_from_grams(self, convert_to: str, value: float) -> float:
        return self._convert(self._weight, "grams", convert_to, value)

    def convert_from_ounces(self, convert_to: str, value: float) -> float:
        return self._convert(self._weight, "ounces", convert_to, value)

    # ── Volume ───────────────────────────────────────────────────────────

    def convert_from_liters(self, convert_to: str, value: float) -> float:
        return self._convert(self._volume, "liters", convert_to, value)

    def convert_from_gallons(self, convert_to: str, value: float) -> float:
        return self._convert(self._volume, "gallons", convert_to, value)

    def convert_from_pints(self, convert_to: str, value: float) -> float:
        return self._convert(self._volume, "pints", convert_to, value)

    def convert_from_deciliters(self, convert_to: str, value: float) -> float:
        return self._convert(self._volume, "deciliters", convert_to, value)

    def convert_from_cups(self, convert_to: str, value: float) -> float:
        return self._convert(self._volume, "cups", convert_to, value)

    # ── Speed ────────────────────────────────────────────────────────────

    def convert_from_kilometers_per_hour(self, convert_to: str, value: float) -> float:
        return self._convert(self._speed, "kilometers_per_hour", convert_to, value)

    def convert_from_miles_per_hour(self, convert_to: str, value: float) -> float:
        return self._convert(self._speed, "miles_per_hour", convert_to, value)

    def convert_from_meters_per_second(self, convert_to: str, value: float) -> float:
        return self._convert(self._speed, "meters_per_second", convert_to, value)
