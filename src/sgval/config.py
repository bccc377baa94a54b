"""Configuration management for sgval using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILE_NAME = ".sgval.json"


class BlockHandlerCountPolicy(str, Enum):
    """How the block handler limit counts handlers on a data source."""
    TOTAL = "total"  # every block handler counts, filtered or not
    CALL_FILTERED = "call_filtered"  # only call-filtered handlers count


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    block_handler_count_policy: BlockHandlerCountPolicy = Field(
        alias="blockHandlerCountPolicy", default=BlockHandlerCountPolicy.TOTAL
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(extra="forbid")


class SgvalConfig(BaseModel):
    """Complete sgval configuration model."""
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> SgvalConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .sgval.json

    Returns:
        SgvalConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return SgvalConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e

    return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .sgval.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> SgvalConfig:
    """Create default configuration.

    The default block handler policy reproduces the registrar's historical
    behaviour: more than one block handler of any kind is rejected.
    """
    return SgvalConfig()


def apply_logging_config(config: SgvalConfig) -> None:
    """Set the level of the ``sgval`` logger hierarchy.

    Handlers are left to the host application.
    """
    logging.getLogger("sgval").setLevel(_LOG_LEVELS[config.logging.level])
