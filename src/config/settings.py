"""
Pip Stack - Application Settings

Loads configuration from environment variables using Pydantic Settings and
applies it to the standard logging setup.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @property
    def effective_log_level(self) -> int:
        """Numeric log level; debug mode always logs everything."""
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {self.log_level!r}.")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.effective_log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.effective_log_level)
