"""Conversion endpoints — thin HTTP layer over ConverterSystem."""

import logging

from fastapi import APIRouter, HTTPException

from unitconv.config import settings
from unitconv.core.errors import ConversionNotAvailableError
from unitconv.core.system import ConverterSystem
from unitconv.models.schemas import (
    BatchRequest,
    BatchResponse,
    CategoryConvertRequest,
    ConvertRequest,
    ConvertResponse,
    RoundRequest,
    SummaryResponse,
)
from unitconv.utils.units import aliases_by_unit

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])

_system = ConverterSystem()


def _to_http_error(exc: Exception) -> HTTPException:
    """Translate core errors: unsupported conversion -> 404, bad input -> 422."""
    logger.info("Conversion rejected: %s", exc)
    status = 404 if isinstance(exc, ConversionNotAvailableError) else 422
    return HTTPException(status, detail=[{"message": str(exc)}])


@router.get("/conversions")
async def list_conversions():
    """List every supported (from, to) pair and the aliases of each unit, per category."""
    return {
        category: {
            "pairs": [{"from": a, "to": b} for a, b in converter.supported_pairs()],
            "aliases": aliases_by_unit(converter.aliases),
        }
        for category, converter in _system.converters.items()
    }


# Registered before /convert/{category} so the fixed paths win.

@router.post("/convert/batch", response_model=BatchResponse)
async def convert_batch(req: BatchRequest):
    """Convert a list of values; one bad value fails the whole request."""
    try:
        results = _system.convert_multiple_values(req.category, req.from_unit, req.to_unit, req.values)
    except (ConversionNotAvailableError, TypeError, ValueError) as exc:
        raise _to_http_error(exc)
    return {"results": results}


@router.post("/convert/summary", response_model=SummaryResponse)
async def convert_summary(req: CategoryConvertRequest):
    try:
        summary = _system.convert_with_summary(req.category, req.from_unit, req.to_unit, req.value)
    except (ConversionNotAvailableError, TypeError, ValueError) as exc:
        raise _to_http_error(exc)
    return summary.to_dict()


@router.post("/convert/round", response_model=ConvertResponse)
async def convert_round(req: RoundRequest):
    """Convert and round; ``decimal_places`` falls back to the configured default."""
    places = settings.default_decimal_places if req.decimal_places is None else req.decimal_places
    try:
        result = _system.convert_and_round_up(req.category, req.from_unit, req.to_unit, req.value, places)
    except (ConversionNotAvailableError, TypeError, ValueError) as exc:
        raise _to_http_error(exc)
    return {"result": result}


@router.post("/convert/{category}", response_model=ConvertResponse)
async def convert_single(category: str, req: ConvertRequest):
    """Convert one value within ``category``."""
    try:
        result = _system.convert(category, req.from_unit, req.to_unit, req.value)
    except (ConversionNotAvailableError, TypeError, ValueError) as exc:
        raise _to_http_error(exc)
    return {"result": result}
