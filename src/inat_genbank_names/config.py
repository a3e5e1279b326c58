"""
Application settings.

Values come from ``INAT_GB_*`` environment variables or a ``.env`` file,
falling back to the defaults below.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path  # noqa: TC003  pydantic resolves it at runtime

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

#: Page-size ceiling of the iNaturalist /observations endpoint.
MAX_BATCH_SIZE = 200


class Settings(BaseSettings):
    """Runtime configuration for a reconciliation run."""

    model_config = SettingsConfigDict(
        env_prefix="INAT_GB_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "inat-genbank-names"

    # iNaturalist
    inat_api_base: str = "https://api.inaturalist.org/v1"
    inat_web_base: str = "https://www.inaturalist.org"
    batch_size: int = Field(default=MAX_BATCH_SIZE, ge=1, le=MAX_BATCH_SIZE)
    batch_timeout: float = Field(default=60.0, gt=0)
    field_timeout: float = Field(default=30.0, gt=0)

    # Shared across every external call, iNaturalist and NCBI alike
    min_request_interval: float = Field(default=1.0, ge=0)

    # NCBI Entrez
    entrez_email: str | None = None
    entrez_api_key: str | None = None

    exceptions_file: Path | None = None
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
