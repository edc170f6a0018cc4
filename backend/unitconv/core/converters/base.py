"""Shared dispatch for the per-category converters."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from unitconv.core.errors import ConversionNotAvailableError
from unitconv.utils.units import resolve_unit

logger = logging.getLogger(__name__)

Formula = Callable[[float], float]


class CategoryConverter(ABC):
    """Base class: subclasses set ``category``/``aliases`` and list their formulas.

    Only the ordered pairs returned by ``formulas()`` are convertible. Nothing
    is inferred from the reverse direction.
    """

    category: str = ""
    aliases: dict[str, str] = {}

    def __init__(self) -> None:
        self._formulas: dict[tuple[str, str], Formula] = self.formulas()

    @abstractmethod
    def formulas(self) -> dict[tuple[str, str], Formula]:
        """Return the supported (from, to) canonical pairs and their formulas."""

    def supported_pairs(self) -> list[tuple[str, str]]:
        return list(self._formulas)

    def units(self) -> set[str]:
        return set(self.aliases.values())

    def check_source(self, unit: str, value: float) -> None:
        """Hook run once the source unit is resolved. No-op by default."""

    def resolve_source(self, convert_from: str) -> str:
        unit = resolve_unit(self.aliases, convert_from)
        if unit is None:
            logger.debug("Unknown %s unit %r", self.category, convert_from)
            raise ConversionNotAvailableError(self.category, convert_from)
        return unit

    def convert_from_unit(self, unit: str, convert_to: str, value: float) -> float:
        """Convert from an already-resolved canonical source unit."""
        self.check_source(unit, value)

        target = resolve_unit(self.aliases, convert_to)
        formula = self._formulas.get((unit, target)) if target else None
        if formula is None:
            logger.debug("No %s formula for %s -> %r", self.category, unit, convert_to)
            raise ConversionNotAvailableError(self.category, unit, convert_to)

        result = formula(value)
        logger.debug("%s: %s %s -> %s %s", self.category, value, unit, result, target)
        return result

    def convert(self, convert_from: str, convert_to: str, value: float) -> float:
        return self.convert_from_unit(self.resolve_source(convert_from), convert_to, value)
