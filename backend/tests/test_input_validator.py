"""Tests for the input validation checks."""

import pytest

from unitconv.core.validation.input_validator import (
    InputValidator,
    validate_celsius_range,
    validate_fahrenheit_range,
    validate_input_type_array,
    validate_input_type_number,
    validate_input_type_string,
    validate_positive_number,
)


class TestNumberType:
    @pytest.mark.parametrize("value", ["string", float("nan"), None, float("inf"), float("-inf"), True])
    def test_rejects(self, value):
        with pytest.raises(TypeError, match="Input must be a number"):
            validate_input_type_number(value)

    @pytest.mark.parametrize("value", [0, 1.5, -3, 10**6])
    def test_accepts(self, value):
        validate_input_type_number(value)


class TestStringType:
    @pytest.mark.parametrize("value", [1, [], None])
    def test_rejects(self, value):
        with pytest.raises(TypeError, match="Input must be a string"):
            validate_input_type_string(value)

    def test_accepts_empty_string(self):
        validate_input_type_string("")


class TestArrayType:
    @pytest.mark.parametrize("value", ["1,2,3", {1: 2}, None, 5])
    def test_rejects(self, value):
        with pytest.raises(TypeError, match="Input must be an array"):
            validate_input_type_array(value)

    @pytest.mark.parametrize("value", [[], [1, 2], (1, 2)])
    def test_accepts(self, value):
        validate_input_type_array(value)


class TestRanges:
    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="Number must be positive"):
            validate_positive_number(-1)

    def test_zero_allowed(self):
        validate_positive_number(0)

    def test_below_absolute_zero_celsius(self):
        with pytest.raises(ValueError, match="greater than or equal to -273.15°C"):
            validate_celsius_range(-300)

    def test_absolute_zero_celsius_allowed(self):
        validate_celsius_range(-273.15)

    def test_below_absolute_zero_fahrenheit(self):
        with pytest.raises(ValueError, match="greater than or equal to -459.67°F"):
            validate_fahrenheit_range(-500)

    def test_absolute_zero_fahrenheit_allowed(self):
        validate_fahrenheit_range(-459.67)


class TestInputValidatorClass:
    def test_methods_delegate(self):
        validator = InputValidator()
        with pytest.raises(TypeError):
            validator.validate_input_type_number("1")
        with pytest.raises(ValueError):
            validator.validate_positive_number(-0.5)
