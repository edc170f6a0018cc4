"""Conversion facade — category dispatch plus batch, summary and rounding helpers.

Usage:
    system = ConverterSystem()
    system.convert_length("m", "ft", 2)                          # ~6.5617
    system.convert_multiple_values("weight", "kg", "lb", [1, 2])
    system.convert_with_summary("volume", "liters", "gallons", 12).to_dict()
    system.convert_and_round_up("temperature", "c", "f", 21.3, 1)  # 70.3
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Callable, Sequence

from unitconv.core.converters.base import CategoryConverter
from unitconv.core.converters.length import LengthConverter
from unitconv.core.converters.speed import SpeedConverter
from unitconv.core.converters.temperature import TemperatureConverter
from unitconv.core.converters.volume import VolumeConverter
from unitconv.core.converters.weight import WeightConverter
from unitconv.core.errors import ConversionNotAvailableError
from unitconv.core.validation.input_validator import InputValidator
from unitconv.utils.units import normalize_name

logger = logging.getLogger(__name__)

MAX_DECIMAL_PLACES = 100


@dataclass(frozen=True)
class ConversionSummary:
    conversion_type: str
    convert_from: str
    convert_to: str
    number_to_convert: float
    converted_number: float

    def to_dict(self) -> dict:
        return {
            "conversionType": self.conversion_type,
            "convertFrom": self.convert_from,
            "convertTo": self.convert_to,
            "numberToConvert": self.number_to_convert,
            "convertedNumber": self.converted_number,
        }


def round_half_away_from_zero(value: float, decimal_places: int) -> float:
    """Round the exact binary value of ``value`` (2.675 is stored below the tie -> 2.67)."""
    exact = Decimal(value)
    if exact.as_tuple().exponent >= -decimal_places:
        return float(value)
    quantum = Decimal(1).scaleb(-decimal_places)
    # Up to 309 integer digits plus MAX_DECIMAL_PLACES fraction digits.
    with localcontext() as ctx:
        ctx.prec = 500
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


class ConverterSystem:
    def __init__(self) -> None:
        self._input_validator = InputValidator()

        self._temperature_converter = TemperatureConverter()
        self._length_converter = LengthConverter()
        self._speed_converter = SpeedConverter()
        self._weight_converter = WeightConverter()
        self._volume_converter = VolumeConverter()

        self._conversion_methods: dict[str, Callable[[str, str, float], float]] = {
            "temperature": self.convert_temperature,
            "length": self.convert_length,
            "speed": self.convert_speed,
            "weight": self.convert_weight,
            "volume": self.convert_volume,
        }

    @property
    def converters(self) -> dict[str, CategoryConverter]:
        """Category name -> converter, in dispatch order."""
        return {
            "temperature": self._temperature_converter,
            "length": self._length_converter,
            "speed": self._speed_converter,
            "weight": self._weight_converter,
            "volume": self._volume_converter,
        }

    # ── Internal ─────────────────────────────────────────────────────────

    def _validate_inputs(self, convert_from, convert_to, number_to_convert) -> None:
        self._input_validator.validate_input_type_string(convert_from)
        self._input_validator.validate_input_type_string(convert_to)
        self._input_validator.validate_input_type_number(number_to_convert)

    def _choose_conversion_method(self, conversion_type: str) -> Callable[[str, str, float], float]:
        method = self._conversion_methods.get(normalize_name(conversion_type))
        if method is None:
            logger.debug("Unknown conversion type %r", conversion_type)
            raise ConversionNotAvailableError(conversion_type)
        return method

    def _resolve_decimal_places(self, decimal_places) -> int:
        """Truncate toward zero, then require 0..MAX_DECIMAL_PLACES (1.5 -> 1)."""
        self._input_validator.validate_input_type_number(decimal_places)
        places = int(decimal_places)
        if not 0 <= places <= MAX_DECIMAL_PLACES:
            raise ValueError(f"Decimal places must be between 0 and {MAX_DECIMAL_PLACES}")
        return places

    # ── Per-category conversion ──────────────────────────────────────────

    def convert_temperature(self, convert_from, convert_to, number_to_convert) -> float:
        """Convert a temperature. Below-absolute-zero inputs are rejected by the converter."""
        self._validate_inputs(convert_from, convert_to, number_to_convert)

        return self._temperature_converter.convert(convert_from, convert_to, number_to_convert)

    def convert_length(self, convert_from, convert_to, number_to_convert) -> float:
        self._validate_inputs(convert_from, convert_to, number_to_convert)
        self._input_validator.validate_positive_number(number_to_convert)

        return self._length_converter.convert(convert_from, convert_to, number_to_convert)

    def convert_speed(self, convert_from, convert_to, number_to_convert) -> float:
        self._validate_inputs(convert_from, convert_to, number_to_convert)
        self._input_validator.validate_positive_number(number_to_convert)

        return self._speed_converter.convert(convert_from, convert_to, number_to_convert)

    def convert_weight(self, convert_from, convert_to, number_to_convert) -> float:
        self._validate_inputs(convert_from, convert_to, number_to_convert)
        self._input_validator.validate_positive_number(number_to_convert)

        return self._weight_converter.convert(convert_from, convert_to, number_to_convert)

    def convert_volume(self, convert_from, convert_to, number_to_convert) -> float:
        self._validate_inputs(convert_from, convert_to, number_to_convert)
        self._input_validator.validate_positive_number(number_to_convert)

        return self._volume_converter.convert(convert_from, convert_to, number_to_convert)

    # ── Convenience operations ───────────────────────────────────────────

    def convert(self, conversion_type, convert_from, convert_to, number_to_convert) -> float:
        """Resolve ``conversion_type`` and convert a single value."""
        self._input_validator.validate_input_type_string(conversion_type)

        conversion_method = self._choose_conversion_method(conversion_type)
        return conversion_method(convert_from, convert_to, number_to_convert)

    def convert_multiple_values(
        self,
        conversion_type,
        convert_from,
        convert_to,
        numbers_to_convert: Sequence[float],
    ) -> list[float]:
        """Convert every value in order. The first invalid value aborts the whole batch."""
        self._input_validator.validate_input_type_string(conversion_type)
        self._input_validator.validate_input_type_array(numbers_to_convert)

        conversion_method = self._choose_conversion_method(conversion_type)
        logger.debug(
            "Batch %s conversion %s -> %s of %d values",
            conversion_type, convert_from, convert_to, len(numbers_to_convert),
        )
        return [conversion_method(convert_from, convert_to, number) for number in numbers_to_convert]

    def convert_with_summary(
        self, conversion_type, convert_from, convert_to, number_to_convert
    ) -> ConversionSummary:
        """Convert and echo every input alongside the result."""
        self._input_validator.validate_input_type_string(conversion_type)

        conversion_method = self._choose_conversion_method(conversion_type)
        converted_number = conversion_method(convert_from, convert_to, number_to_convert)

        return ConversionSummary(
            conversion_type=conversion_type,
            convert_from=convert_from,
            convert_to=convert_to,
            number_to_convert=number_to_convert,
            converted_number=converted_number,
        )

    def convert_and_round_up(
        self, conversion_type, convert_from, convert_to, number_to_convert, decimal_places
    ) -> float:
        """Convert, then round half away from zero to ``decimal_places``."""
        self._input_validator.validate_input_type_string(conversion_type)
        places = self._resolve_decimal_places(decimal_places)

        conversion_method = self._choose_conversion_method(conversion_type)
        converted_number = conversion_method(convert_from, convert_to, number_to_convert)

        return round_half_away_from_zero(converted_number, places)
