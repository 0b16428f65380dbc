#!/usr/bin/env python3
"""
Configuration Management for Pondo

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production).

The access token is deliberately not part of configuration: it is obtained
from the auth service at runtime and kept in the local store.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:5000/api"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class LedgerConfig:
    """Remote ledger and auth service settings."""

    base_url: str = DEFAULT_API_BASE_URL


@dataclass
class StorageConfig:
    """Local state storage settings."""

    state_dir: Path


@dataclass
class Config:
    """
    Main configuration class for Pondo.

    Loads configuration from environment variables with defaults suitable for
    a local development ledger.
    """

    environment: Environment

    # Core directories
    data_dir: Path

    # Component configurations
    ledger: LedgerConfig
    storage: StorageConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("PONDO_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_pondo"
            data_dir = Path(os.getenv("PONDO_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("PONDO_DATA_DIR", "./data")).expanduser().resolve()

        return cls(
            environment=env,
            data_dir=data_dir,
            ledger=LedgerConfig(
                base_url=os.getenv("PONDO_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            ),
            storage=StorageConfig(state_dir=data_dir / "state"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.ledger.base_url:
            errors.append("PONDO_API_BASE_URL must not be empty")
        else:
            parsed = urlparse(self.ledger.base_url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(f"PONDO_API_BASE_URL is not an http(s) URL: {self.ledger.base_url}")

        if self.log_level not in logging.getLevelNamesMapping():
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Request lines from the HTTP stack are noise outside development
        if self.environment != Environment.DEVELOPMENT:
            logging.getLogger("httpx").setLevel(logging.WARNING)
            logging.getLogger("httpcore").setLevel(logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        return {
            "environment": self.environment.value,
            "data_dir": str(self.data_dir),
            "ledger": {"base_url": self.ledger.base_url},
            "storage": {"state_dir": str(self.storage.state_dir)},
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
