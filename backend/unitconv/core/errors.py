"""Exceptions raised by the conversion core."""

from __future__ import annotations

from typing import Optional

CONVERSION_NOT_AVAILABLE = "Conversion not available"


class ConversionNotAvailableError(LookupError):
    """Raised when a category, unit or unit pairing is not supported.

    The message is always the same regardless of which part of the request
    was rejected. The rejected values are kept as attributes for logging.
    """

    def __init__(
        self,
        category: Optional[str] = None,
        convert_from: Optional[str] = None,
        convert_to: Optional[str] = None,
    ) -> None:
        self.category = category
        self.convert_from = convert_from
        self.convert_to = convert_to
        super().__init__(CONVERSION_NOT_AVAILABLE)

    def __str__(self) -> str:
        return CONVERSION_NOT_AVAILABLE
