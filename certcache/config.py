import logging
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models.write_policy import WritePolicy


class Settings(BaseSettings):
    """Certificate cache configuration"""

    # Layer Settings - comma-separated, shallowest first (memory, sql, logger)
    layers: str = "memory,sql"
    write_policy: WritePolicy = WritePolicy.DEEP_FIRST

    # Memory layer - 0 keeps every entry
    memory_max_size: int = Field(0, ge=0)

    # SQL layer
    database_url: str = "sqlite:///./data/certcache.db"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CERTCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("write_policy", mode="before")
    @classmethod
    def _parse_write_policy(cls, value):
        try:
            return WritePolicy.parse(value)
        except ConfigurationError as e:
            raise ValueError(e.message) from e

    @property
    def layer_names(self) -> List[str]:
        """Configured layer names, lowercased, shallowest first"""
        return [name.strip().lower() for name in self.layers.split(",") if name.strip()]


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts and host applications"""
    logging.basicConfig(
        level=(level or Settings().log_level).upper(),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
