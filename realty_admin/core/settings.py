# ==============================================================================
# SETTINGS CONFIGURATION - Environment Management
# ==============================================================================
# Pydantic Settings for the master data service. Every value can be set
# through the environment or a local .env file.
# ==============================================================================

from __future__ import annotations

import logging
import warnings
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Dict, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SECRET_KEY = "change-me-realty-admin-secret-key-0000"


class Environment(str, Enum):
    """Deployment environments."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Service configuration.

    Example:
        >>> from realty_admin.core.settings import settings
        >>> settings.USAGE_CHECK_COLLECTION
        'projects'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # --- service --------------------------------------------------------------
    APP_NAME: str = Field("Realty Admin Master Data Service", description="Display name")
    APP_VERSION: str = Field("1.0.0", description="Semantic version")
    DEBUG: bool = Field(False, description="Expose docs and error details")
    ENVIRONMENT: Environment = Field(Environment.DEVELOPMENT)

    API_V1_PREFIX: str = Field("/api/v1", description="Prefix of the v1 routers")
    API_TITLE: str = "Realty Admin API"
    API_DESCRIPTION: str = (
        "Back-office API for real-estate master data: amenities, property "
        "types, room configurations, cities and locations."
    )

    # --- document store -------------------------------------------------------
    MONGODB_URL: str = Field("mongodb://localhost:27017", description="MongoDB URI")
    MONGODB_DB: str = Field("realty_admin", description="Database holding the masters")
    DB_POOL_SIZE: int = Field(10, ge=1, le=100, description="Max Motor pool size")
    DB_POOL_TIMEOUT: int = Field(
        30, ge=1, le=300,
        description="Seconds before an idle pooled connection is closed",
    )
    DB_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        5000, ge=100,
        description="How long connect() waits for a reachable server",
    )

    # --- master data ----------------------------------------------------------
    USAGE_CHECK_COLLECTION: str = Field(
        "projects",
        description="Collection searched for references before a master is deleted",
    )

    # --- security -------------------------------------------------------------
    SECRET_KEY: str = Field(DEFAULT_SECRET_KEY, min_length=32, description="JWT signing key")
    ALGORITHM: str = Field("HS256", description="JWT signing algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(30, ge=1, le=1440)
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(7, ge=1, le=30)

    # --- http -----------------------------------------------------------------
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Comma separated list of allowed origins",
    )
    CORS_ALLOW_CREDENTIALS: bool = True

    # --- logging --------------------------------------------------------------
    LOG_LEVEL: str = Field("INFO", description="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    LOG_FORMAT: str = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    @property
    def mongo_client_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``AsyncIOMotorClient``."""
        return {
            "maxPoolSize": self.DB_POOL_SIZE,
            "minPoolSize": 1,
            "maxIdleTimeMS": self.DB_POOL_TIMEOUT * 1000,
            "serverSelectionTimeoutMS": self.DB_SERVER_SELECTION_TIMEOUT_MS,
            "tz_aware": True,
        }

    @field_validator("SECRET_KEY")
    @classmethod
    def warn_default_secret(cls, v: str) -> str:
        if v == DEFAULT_SECRET_KEY:
            warnings.warn(
                "SECRET_KEY is the built-in default; set a private key outside development",
                UserWarning,
            )
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Build the settings once per process."""
    return Settings()


settings = get_settings()
