"""Unit Converter — FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unitconv.config import settings
from unitconv.api.routes_convert import router as convert_router

__version__ = "0.1.0"

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Convert temperature, length, weight, volume and speed values between fixed unit pairs.",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(convert_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}
