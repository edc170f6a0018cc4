"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from unitconv.config import settings


def _require_finite(v: float) -> float:
    if not math.isfinite(v):
        raise ValueError("Value must be a finite number")
    return v


class ConvertRequest(BaseModel):
    from_unit: str
    to_unit: str
    value: float

    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: float) -> float:
        return _require_finite(v)


class CategoryConvertRequest(ConvertRequest):
    category: str


class RoundRequest(CategoryConvertRequest):
    decimal_places: Optional[int] = Field(default=None, ge=0, le=100)


class BatchRequest(BaseModel):
    category: str
    from_unit: str
    to_unit: str
    values: list[float]

    @field_validator("values")
    @classmethod
    def check_values(cls, v: list[float]) -> list[float]:
        if len(v) > settings.max_batch_size:
            raise ValueError(f"At most {settings.max_batch_size} values per batch")
        return [_require_finite(x) for x in v]


class ConvertResponse(BaseModel):
    result: float


class BatchResponse(BaseModel):
    results: list[float]


class SummaryResponse(BaseModel):
    conversionType: str
    convertFrom: str
    convertTo: str
    numberToConvert: float
    convertedNumber: float
