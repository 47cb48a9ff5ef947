"""Configuration management for fixture building.

Uses Pydantic Settings for environment-based configuration. Every value can
be overridden with a ``PIPELINE_FIXTURES_`` prefixed environment variable.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FixtureSettings(BaseSettings):
    """Defaults applied when a benchmark declaration leaves options out."""

    # Naming
    namespace: str = Field(default="Aggregation", description="Test case name prefix")
    db_placeholder: str = Field(default="#B_DB", description="Database namespace token")
    collection_placeholder: str = Field(
        default="#B_COLL", description="Collection namespace token"
    )
    default_tags: List[str] = Field(
        default_factory=lambda: ["aggregation", "regression"],
        description="Tags used when a declaration gives none",
    )

    # Data generation
    default_n_docs: int = Field(default=500, ge=0, description="Documents per collection")
    seed: int = Field(default=258, description="Seed for single-collection populators")
    lookup_seed: int = Field(
        default=0x5CA1AB1E, description="Seed for fan-out join populators"
    )
    string_pool_capacity: int = Field(
        default=12 * 1024 * 1024, gt=0, description="Filler string pool size"
    )

    # Pipeline normalization
    bypass_skip: int = Field(
        default=1_000_000_000, gt=0, description="Rows discarded by the bypass stage"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=True, description="Render logs as JSON")

    model_config = SettingsConfigDict(
        env_prefix="PIPELINE_FIXTURES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Namespace must be a non-empty dotless token."""
        if not v or "." in v:
            raise ValueError("namespace must be non-empty and contain no '.'")
        return v


@lru_cache()
def get_settings() -> FixtureSettings:
    """Get cached settings instance.

    Returns:
        FixtureSettings instance
    """
    return FixtureSettings()
