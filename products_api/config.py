"""
Application settings.

Values come from environment variables prefixed with ``PRODUCTS_API_``
(or a local ``.env`` file) and are validated once at startup.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import UnsupportedApiVersionError
from .seed_data import MAX_SEED_ID
from .versioning import parse_api_version


class Settings(BaseSettings):
    """
    Attributes:
        app_title: Title shown in the OpenAPI document
        default_api_version: Version assumed when the URL carries none
        allowed_origins: Comma-separated CORS origins ("*" for any)
        id_strategy: How created products get their id ("random" or "counter")
        created_id_min: Lowest generated id (inclusive)
        created_id_max: Upper bound for random ids (exclusive)
        log_level: Level for the service logger
        host: Bind address for uvicorn
        port: Bind port for uvicorn
    """

    model_config = SettingsConfigDict(env_prefix="PRODUCTS_API_", env_file=".env", extra="ignore")

    app_title: str = "Products API (versioning demo)"
    default_api_version: str = "1.0"
    allowed_origins: str = "*"

    id_strategy: Literal["random", "counter"] = "random"
    created_id_min: int = 1000
    created_id_max: int = 9999

    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8085

    @field_validator("default_api_version")
    @classmethod
    def default_version_must_be_supported(cls, v: str) -> str:
        # normalizes "1" -> "1.0"
        try:
            return parse_api_version(v).value
        except UnsupportedApiVersionError as exc:
            raise ValueError(exc.message) from exc

    @field_validator("log_level")
    @classmethod
    def log_level_upper(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def id_range_is_valid(self) -> "Settings":
        if self.created_id_min <= MAX_SEED_ID:
            raise ValueError(f"created_id_min must be greater than {MAX_SEED_ID} (seed ids)")
        if self.created_id_min >= self.created_id_max:
            raise ValueError("created_id_min must be less than created_id_max")
        return self

    def get_allowed_origins_list(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
