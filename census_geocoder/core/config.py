from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from census_geocoder import __version__

DEFAULT_HOST = "geocoding.geo.census.gov/geocoder/locations/address"


class Settings(BaseSettings):
    host: str = Field(DEFAULT_HOST)
    min_interval: float = Field(0.0, ge=0)
    debug: bool = False
    timeout: Optional[float] = None

    # Default in-memory cache
    cache_ttl: float = Field(60 * 60 * 24, gt=0)
    cache_maxsize: int = Field(10_000, gt=0)

    user_agent: str = Field(f"census-geocoder/{__version__}")

    model_config = SettingsConfigDict(
        env_prefix="CENSUS_GEOCODER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
