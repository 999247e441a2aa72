"""
Configuration management for neo-hashstore.

Settings for the Redis store connection and for logging, loaded from the
environment (prefix ``NEO_HASHSTORE_``) or an ``.env`` file.
"""
from typing import Any, Dict
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class HashStoreSettings(BaseSettings):
    """Settings for the hash repository and its Redis store."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_HASHSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Redis Store Configuration
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    redis_max_connections: int = Field(default=50, ge=1, description="Max pooled Redis connections")
    redis_health_check_interval: int = Field(default=30, ge=0, description="Seconds between connection health checks")
    redis_socket_timeout: float = Field(default=5.0, gt=0, description="Redis socket timeout in seconds")

    # Logging Configuration
    log_verbosity: str = Field(default="NORMAL", description="QUIET, NORMAL, VERBOSE or DEBUG")
    log_format: str = Field(default="simple", description="simple, detailed or json")

    @field_validator("redis_url")
    @classmethod
    def validate_redis_url(cls, v: str) -> str:
        """Only redis://, rediss:// and unix:// URLs are accepted."""
        if not v.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError(f"Invalid Redis URL: {v}. Expected redis://, rediss:// or unix://")
        return v

    @field_validator("log_verbosity")
    @classmethod
    def validate_log_verbosity(cls, v: str) -> str:
        value = v.upper()
        if value not in ("QUIET", "NORMAL", "VERBOSE", "DEBUG"):
            raise ValueError(f"Invalid log verbosity: {v}")
        return value

    def to_connection_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``redis.asyncio.ConnectionPool.from_url``."""
        return {
            "max_connections": self.redis_max_connections,
            "health_check_interval": self.redis_health_check_interval,
            "socket_timeout": self.redis_socket_timeout,
            # Hash fields and set members are handled as text
            "decode_responses": True,
        }


@lru_cache()
def get_settings() -> HashStoreSettings:
    """Get cached settings instance."""
    return HashStoreSettings()
