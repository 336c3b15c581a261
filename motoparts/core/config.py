"""
Application configuration

Settings are read from the environment (and an optional .env file).
- STORAGE_BACKEND selects the in-memory or relational entity store
- DATABASE_URL is only required for the relational backend
- Runtime validation catches insecure production configurations
"""
import json
from typing import List, Union

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default CORS origins (Vite / CRA dev servers)
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5000",
    "http://127.0.0.1:5173",
]

STORAGE_BACKENDS = ("memory", "database")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # App
    APP_NAME: str = "MotoParts Storefront"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Entity store
    STORAGE_BACKEND: str = "memory"
    SEED_ON_STARTUP: bool = True

    # Database (relational backend only)
    DATABASE_URL: str = ""
    DB_AUTO_CREATE: bool = True
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600  # 1 hour

    @field_validator("STORAGE_BACKEND", mode="before")
    @classmethod
    def normalize_backend(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in STORAGE_BACKENDS:
            raise ValueError(f"STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}")
        return v

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def convert_database_url(cls, v):
        """Convert plain postgres:// URLs to the asyncpg driver."""
        if not v:
            return v
        if v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql+asyncpg://", 1)
        elif v.startswith("postgresql://") and "+asyncpg" not in v:
            v = v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # CORS - accepts JSON array or comma-separated string
    CORS_ORIGINS: Union[str, List[str]] = DEFAULT_CORS_ORIGINS

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            if not v or v.strip() == "":
                return DEFAULT_CORS_ORIGINS
            # Try JSON first
            if v.startswith("["):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            # Fallback to comma-separated
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "100/minute"
    RATE_LIMIT_CHECKOUT: str = "10/minute"

    # Cart totals (amounts in pesos)
    FREE_SHIPPING_THRESHOLD: float = 4999.0
    FLAT_SHIPPING_FEE: float = 499.0
    TAX_RATE: float = 0.07

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @model_validator(mode="after")
    def validate_configuration(self):
        errors = []

        if self.STORAGE_BACKEND == "database" and not self.DATABASE_URL:
            errors.append("DATABASE_URL is required when STORAGE_BACKEND=database")

        if self.TAX_RATE < 0 or self.FLAT_SHIPPING_FEE < 0 or self.FREE_SHIPPING_THRESHOLD < 0:
            errors.append("FREE_SHIPPING_THRESHOLD, FLAT_SHIPPING_FEE and TAX_RATE must be non-negative")

        if self.is_production:
            if self.DEBUG:
                errors.append("DEBUG=True is forbidden in production")
            if "*" in self.CORS_ORIGINS:
                errors.append("Wildcard '*' CORS origin is forbidden in production")

        if errors:
            raise ValueError(
                "CONFIGURATION ERRORS:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        return self


settings = Settings()
