"""Unit alias tables. Every alias is matched after strip() + lower()."""

from __future__ import annotations

from typing import Optional

TEMPERATURE_ALIASES = {
    "celsius": "celsius",
    "c": "celsius",
    "fahrenheit": "fahrenheit",
    "f": "fahrenheit",
}

LENGTH_ALIASES = {
    "meters": "meters",
    "meter": "meters",
    "m": "meters",
    "feet": "feet",
    "foot": "feet",
    "ft": "feet",
    "centimeters": "centimeters",
    "centimeter": "centimeters",
    "cm": "centimeters",
    "inches": "inches",
    "inch": "inches",
    "in": "inches",
}

WEIGHT_ALIASES = {
    "kilograms": "kilograms",
    "kilogram": "kilograms",
    "kg": "kilograms",
    "pounds": "pounds",
    "pound": "pounds",
    "lb": "pounds",
    "lbs": "pounds",
    "grams": "grams",
    "gram": "grams",
    "g": "grams",
    "ounces": "ounces",
    "ounce": "ounces",
    "oz": "ounces",
}

VOLUME_ALIASES = {
    "liters": "liters",
    "liter": "liters",
    "l": "liters",
    "gallons": "gallons",
    "gallon": "gallons",
    "gal": "gallons",
    "pints": "pints",
    "pint": "pints",
    "pt": "pints",
    "deciliters": "deciliters",
    "deciliter": "deciliters",
    "dl": "deciliters",
    "cups": "cups",
    "cup": "cups",
}

SPEED_ALIASES = {
    "kilometers per hour": "kilometers_per_hour",
    "kilometers_per_hour": "kilometers_per_hour",
    "km/h": "kilometers_per_hour",
    "kmh": "kilometers_per_hour",
    "kph": "kilometers_per_hour",
    "miles per hour": "miles_per_hour",
    "miles_per_hour": "miles_per_hour",
    "mph": "miles_per_hour",
    "meters per second": "meters_per_second",
    "meters_per_second": "meters_per_second",
    "m/s": "meters_per_second",
    "mps": "meters_per_second",
}


def normalize_name(name: str) -> str:
    """Lower-case and strip a unit or category name for table lookup."""
    return name.strip().lower()


def resolve_unit(aliases: dict[str, str], name: str) -> Optional[str]:
    """Return the canonical unit id for ``name``, or None if it is unknown."""
    return aliases.get(normalize_name(name))


def aliases_by_unit(aliases: dict[str, str]) -> dict[str, list[str]]:
    """Invert an alias table: canonical id -> sorted list of its aliases."""
    grouped: dict[str, list[str]] = {}
    for alias, unit in aliases.items():
        grouped.setdefault(unit, []).append(alias)
    return {unit: sorted(names) for unit, names in grouped.items()}
