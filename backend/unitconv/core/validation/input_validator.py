"""Input validation for conversion requests.

Each check raises on bad input and returns nothing otherwise, so checks can
be chained in the order a caller needs them.
"""

from __future__ import annotations

import math

ABSOLUTE_ZERO_C = -273.15
ABSOLUTE_ZERO_F = -459.67


def validate_input_type_number(value) -> None:
    """Reject anything that is not a finite int or float (bool included)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("Input must be a number")
    if not math.isfinite(value):
        raise TypeError("Input must be a number")


def validate_input_type_string(value) -> None:
    if not isinstance(value, str):
        raise TypeError("Input must be a string")


def validate_input_type_array(value) -> None:
    if not isinstance(value, (list, tuple)):
        raise TypeError("Input must be an array")


def validate_positive_number(value: float) -> None:
    # Zero is a valid magnitude.
    if value < 0:
        raise ValueError("Number must be positive")


def validate_celsius_range(value: float) -> None:
    if value < ABSOLUTE_ZERO_C:
        raise ValueError("Temperature must be greater than or equal to -273.15°C")


def validate_fahrenheit_range(value: float) -> None:
    if value < ABSOLUTE_ZERO_F:
        raise ValueError("Temperature must be greater than or equal to -459.67°F")


class InputValidator:
    """Method-style access to the module checks, held by the converter facade."""

    validate_input_type_number = staticmethod(validate_input_type_number)
    validate_input_type_string = staticmethod(validate_input_type_string)
    validate_input_type_array = staticmethod(validate_input_type_array)
    validate_positive_number = staticmethod(validate_positive_number)
    validate_celsius_range = staticmethod(validate_celsius_range)
    validate_fahrenheit_range = staticmethod(validate_fahrenheit_range)
