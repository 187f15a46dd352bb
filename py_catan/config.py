"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CATAN_", extra="ignore")

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Generation
    default_enforce_constraint: bool = Field(
        default=True, description="Constraint flag used for fresh seeds"
    )
    max_generation_attempts: int = Field(
        default=1000, ge=1, description="Constrained rounds before falling back"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")


settings = Settings()
