"""
Service configuration.

Defaults work out of the box. Environment variables are optional overrides:

    TIMEBASE_DB_PATH        SQLite file for saved framerates
    TIMEBASE_LOG_LEVEL      DEBUG | INFO | WARNING | ERROR
    TIMEBASE_CORS_ORIGINS   Comma separated list of allowed origins
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

# Environment variable overrides (optional)
ENV_DB_PATH = "TIMEBASE_DB_PATH"
ENV_LOG_LEVEL = "TIMEBASE_LOG_LEVEL"
ENV_CORS_ORIGINS = "TIMEBASE_CORS_ORIGINS"

DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)  # Vite dev server

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class ServiceConfig:
    """Immutable service configuration."""

    db_path: str = field(default_factory=lambda: str(Path.cwd() / "timebase.db"))
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        """Build configuration from environment variable overrides."""
        if environ is None:
            environ = os.environ

        defaults = cls()
        origins = environ.get(ENV_CORS_ORIGINS)

        return cls(
            db_path=environ.get(ENV_DB_PATH) or defaults.db_path,
            log_level=(environ.get(ENV_LOG_LEVEL) or defaults.log_level).upper(),
            cors_origins=(
                tuple(o.strip() for o in origins.split(",") if o.strip())
                if origins
                else defaults.cors_origins
            ),
        )


def configure_logging(config: ServiceConfig) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
