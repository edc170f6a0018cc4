"""Tests for the per-source-unit selector."""

import pytest

from unitconv.core.errors import ConversionNotAvailableError
from unitconv.core.selector import ConverterSelector

selector = ConverterSelector()


class TestTemperature:
    def test_from_celsius(self):
        assert selector.convert_from_celsius("fahrenheit", 18) == 64.4
        assert selector.convert_from_celsius("fahrenheit", -25) == -13
        with pytest.raises(ConversionNotAvailableError, match="Conversion not available"):
            selector.convert_from_celsius("kelvin", 21)

    def test_from_fahrenheit(self):
        assert selector.convert_from_fahrenheit("celsius", 68) == 20
        assert selector.convert_from_fahrenheit("celsius", -22) == -30
        with pytest.raises(ConversionNotAvailableError, match="Conversion not available"):
            selector.convert_from_fahrenheit("kelvin", 97)


class TestLength:
    def test_from_meters(self):
        assert selector.convert_from_meters("feet", 2) == pytest.approx(6.561, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_meters("in", 21)

    def test_from_feet(self):
        assert selector.convert_from_feet("meters", 23) == pytest.approx(7.010, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_feet("cm", 93)

    def test_from_centimeters(self):
        assert selector.convert_from_centimeters("inches", 70) == pytest.approx(27.559, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_centimeters("m", 55)

    def test_from_inches(self):
        assert selector.convert_from_inches("centimeters", 9) == pytest.approx(22.86, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_inches("feet", 24)


class TestWeight:
    def test_from_kilograms(self):
        assert selector.convert_from_kilograms("Pounds", 12) == pytest.approx(26.455, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_kilograms("grams", 12)

    def test_from_pounds(self):
        assert selector.convert_from_pounds("kg", 6) == pytest.approx(2.721, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_pounds("ounces", 2)

    def test_from_grams(self):
        assert selector.convert_from_grams("ounces", 56) == pytest.approx(1.975, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_grams("pounds", 101)

    def test_from_ounces(self):
        assert selector.convert_from_ounces("Grams", 7) == pytest.approx(198.446, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_ounces("kilograms", 3)


class TestVolume:
    def test_from_liters(self):
        assert selector.convert_from_liters("gallons", 12) == pytest.approx(3.170, abs=0.01)
        assert selector.convert_from_liters("pints", 19) == pytest.approx(40.154, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_liters("cups", 3)

    def test_from_gallons(self):
        assert selector.convert_from_gallons("liters", 6) == pytest.approx(22.712, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_gallons("dl", 8)

    def test_from_pints(self):
        assert selector.convert_from_pints("liters", 31) == pytest.approx(14.668, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_pints("cups", 28)

    def test_from_deciliters(self):
        assert selector.convert_from_deciliters("cups", 35) == pytest.approx(14.793, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_deciliters("liters", 62)

    def test_from_cups(self):
        assert selector.convert_from_cups("deciliters", 25) == pytest.approx(59.147, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_cups("liters", 17)


class TestSpeed:
    def test_from_kilometers_per_hour(self):
        assert selector.convert_from_kilometers_per_hour("mph", 100) == pytest.approx(62.137, abs=0.01)
        assert selector.convert_from_kilometers_per_hour("m/s", 36) == pytest.approx(10.0)

    def test_from_miles_per_hour(self):
        assert selector.convert_from_miles_per_hour("km/h", 60) == pytest.approx(96.56, abs=0.01)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_miles_per_hour("m/s", 60)

    def test_from_meters_per_second(self):
        assert selector.convert_from_meters_per_second("kph", 5) == pytest.approx(18.0)
        with pytest.raises(ConversionNotAvailableError):
            selector.convert_from_meters_per_second("mph", 5)


class TestInputTypes:
    def test_target_must_be_string(self):
        with pytest.raises(TypeError, match="Input must be a string"):
            selector.convert_from_meters(None, 1)

    def test_value_must_be_number(self):
        with pytest.raises(TypeError, match="Input must be a number"):
            selector.convert_from_celsius("fahrenheit", "18")

    def test_negative_values_pass_through(self):
        # Positivity is enforced by ConverterSystem, not the selector.
        assert selector.convert_from_meters("feet", -2) == pytest.approx(-6.56168)
