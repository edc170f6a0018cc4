from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Unit Converter"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    log_level: str = "INFO"
    default_decimal_places: int = 2
    max_batch_size: int = 10_000  # values per /convert/batch request

    class Config:
        env_prefix = "UNITCONV_"


settings = Settings()
