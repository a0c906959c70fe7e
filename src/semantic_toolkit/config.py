"""
Configuration and logging setup.

A configuration file is a JSON object:

    {
        "prefixes": {
            "ex": "http://example.org/",
            "foaf": "http://xmlns.com/foaf/0.1/"
        },
        "split_cache_size": 4096,
        "log_level": "INFO",
        "log_file": null
    }

All keys are optional.

Usage:
    from semantic_toolkit.config import ToolkitConfig
    from semantic_toolkit import PrefixRegistry

    config = ToolkitConfig.from_file("toolkit.json")
    config.apply()
    registry = PrefixRegistry.from_config(config)
"""

import json
import logging
import os
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from .registry import validate_bindings
from .splitter import DEFAULT_SPLIT_CACHE_SIZE, configure_split_cache

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
PACKAGE_LOGGER = "semantic_toolkit"

logger = logging.getLogger(__name__)

# Handlers attached by setup_logging(), replaced on the next call
_installed_handlers: List[logging.Handler] = []


def _install_handler(package_logger: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    _installed_handlers.append(handler)


def setup_logging(
    level: LogLevel = "INFO",
    log_file: Optional[str] = None
) -> Optional[str]:
    """
    Configure the ``semantic_toolkit`` logger with a fallback log location.

    Only the package logger is touched; handlers the host application put on
    the root logger are left in place. Calling this again replaces the
    handlers installed by the previous call.

    If the requested log file cannot be created, the system temp directory
    is tried before falling back to console-only logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path. If None, logs to console only.

    Returns:
        The actual log file path used, or None if logging to console only.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(log_level)
    _install_handler(package_logger, logging.StreamHandler(sys.stderr))
    actual_log_file = None

    if log_file:
        log_filename = os.path.basename(log_file) or "semantic_toolkit.log"
        fallback_locations = [
            log_file,
            os.path.join(tempfile.gettempdir(), log_filename),
        ]

        for fallback_path in fallback_locations:
            try:
                log_dir = os.path.dirname(fallback_path)
                if log_dir and not os.path.exists(log_dir):
                    os.makedirs(log_dir, exist_ok=True)

                _install_handler(
                    package_logger, logging.FileHandler(fallback_path, encoding='utf-8')
                )
                actual_log_file = fallback_path
                break
            except OSError as e:
                logger.warning(f"Could not create log at {fallback_path}: {e}")
                continue

        if actual_log_file is None:
            logger.warning("Could not write log file to any location, logging to console only")

    if actual_log_file:
        logger.info(f"Logging to: {actual_log_file}")

    return actual_log_file


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary containing the configuration.

    Raises:
        ValueError: If config_path is empty or file contains invalid JSON.
        FileNotFoundError: If the configuration file doesn't exist.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config).__name__}")

    return config


@dataclass
class ToolkitConfig:
    """
    Toolkit settings.

    Attributes:
        prefixes: Extra prefix -> namespace bindings for new registries.
        split_cache_size: Maximum entries in the IRI split cache.
        log_level: Logging level name.
        log_file: Optional log file path.
    """
    prefixes: Dict[str, str] = field(default_factory=dict)
    split_cache_size: int = DEFAULT_SPLIT_CACHE_SIZE
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the settings."""
        self.prefixes = validate_bindings(self.prefixes)

        if (isinstance(self.split_cache_size, bool)
                or not isinstance(self.split_cache_size, int)
                or self.split_cache_size < 0):
            raise ValueError(
                f"split_cache_size must be a non-negative integer, got {self.split_cache_size!r}"
            )

        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{self.log_level}'. "
                f"Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        self.log_level = self.log_level.upper()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ToolkitConfig":
        """Create from a parsed configuration, ignoring unknown keys."""
        unknown = set(data) - {"prefixes", "split_cache_size", "log_level", "log_file"}
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

        return cls(
            prefixes=data.get("prefixes", {}),
            split_cache_size=data.get("split_cache_size", DEFAULT_SPLIT_CACHE_SIZE),
            log_level=data.get("log_level", "WARNING"),
            log_file=data.get("log_file"),
        )

    @classmethod
    def from_file(cls, config_path: str) -> "ToolkitConfig":
        return cls.from_dict(load_config(config_path))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "prefixes": dict(self.prefixes),
            "split_cache_size": self.split_cache_size,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    def apply(self) -> Optional[str]:
        """
        Apply process-wide settings: logging and split cache size.

        Returns:
            The log file actually used, if any.
        """
        log_file = setup_logging(self.log_level, self.log_file)
        configure_split_cache(self.split_cache_size)
        return log_file
