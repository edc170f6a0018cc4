"""Temperature conversions between Celsius and Fahrenheit."""

from __future__ import annotations

from unitconv.core.converters.base import CategoryConverter
from unitconv.core.validation.input_validator import (
    validate_celsius_range,
    validate_fahrenheit_range,
)
from unitconv.utils.units import TEMPERATURE_ALIASES


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9 / 5 + 32


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) * 5 / 9


class TemperatureConverter(CategoryConverter):
    category = "temperature"
    aliases = TEMPERATURE_ALIASES

    def formulas(self):
        return {
            ("celsius", "fahrenheit"): celsius_to_fahrenheit,
            ("fahrenheit", "celsius"): fahrenheit_to_celsius,
        }

    def check_source(self, unit: str, value: float) -> None:
        # Nothing can be colder than absolute zero in the source scale.
        if unit == "celsius":
            validate_celsius_range(value)
        elif unit == "fahrenheit":
            validate_fahrenheit_range(value)
