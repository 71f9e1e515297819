"""Application settings using Pydantic."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    database_url: str = Field(
        default="sqlite:///deal_match.db",
        description="SQLAlchemy database URL for the key-value profile store",
    )
    buyers_key: str = Field(
        default="buyers",
        description="Storage key of the buyer profile collection",
    )
    sellers_key: str = Field(
        default="sellers",
        description="Storage key of the seller profile collection",
    )
    seed_demo_data: bool = Field(
        default=True,
        description="Populate never-initialized collections with example profiles",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[str] = Field(
        default="logs/dealmatch.log",
        description="Rotating log file path; empty disables file logging",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def project_root(self) -> Path:
        """Project root directory."""
        return self.config_dir.parent


# Global settings instance
settings = Settings()
