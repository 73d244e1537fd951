"""Python-standard logging configuration for svcgraph.

svcgraph modules only create loggers with logging.getLogger(__name__).
Applications that want the packaged configuration can call setup_logging(),
which applies a YAML file stored in svcgraph/config/ via
logging.config.dictConfig().
"""

from __future__ import annotations

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, cast

import yaml

CONFIG_DIR = Path(__file__).parent / "config"


class LoggingError(Exception):
    """Exception raised for logging configuration errors."""

    pass


def get_config_path(config_name: str | None = None) -> Path:
    """Get the path to a packaged logging configuration file.

    Args:
        config_name: Name of config file (without extension), defaults to "logging"

    Returns:
        Path to the logging configuration file

    Raises:
        LoggingError: If no suitable configuration file is found

    """
    config_path = CONFIG_DIR / f"{config_name or 'logging'}.yaml"

    if not config_path.exists():
        raise LoggingError(
            f"No logging configuration found. Expected at: {config_path}\n"
            f"Available configs: {sorted(p.name for p in CONFIG_DIR.glob('*.yaml'))}"
        )

    return config_path


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Logging configuration dictionary

    Raises:
        LoggingError: If configuration cannot be loaded or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise LoggingError(f"Invalid configuration format in {config_path}")

        return cast(dict[str, Any], config)

    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging using Python standard dictConfig.

    Falls back to basic console logging if the configuration cannot be
    loaded or applied.

    Args:
        config_path: Path to logging configuration file
        level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force_basic: Force basic console logging (fallback mode)

    """
    if force_basic:
        _setup_basic_logging(level or "INFO")
        return

    try:
        if isinstance(config_path, str):
            config_path = Path(config_path)
        elif config_path is None:
            config_path = get_config_path()

        config = load_config(config_path)

        if level:
            _apply_level_override(config, level)

        logging.config.dictConfig(config)

        logger = logging.getLogger(__name__)
        logger.info("Logging configured from: %s", config_path)

    except (LoggingError, ValueError, KeyError, TypeError) as e:
        fallback_level = level or "INFO"
        _setup_basic_logging(fallback_level)

        fallback_logger = logging.getLogger(__name__)
        fallback_logger.warning(
            "Failed to configure logging from file (%s), using basic console logging at %s level",
            e,
            fallback_level,
        )


def _apply_level_override(config: dict[str, Any], level: str) -> None:
    """Override the level of every logger, the root logger and quieter handlers."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise LoggingError(f"Invalid log level: {level}")
    level = level.upper()

    for logger_config in config.get("loggers", {}).values():
        logger_config["level"] = level

    if "root" in config:
        config["root"]["level"] = level

    # Only lower a handler's level; a more verbose handler is left alone
    for handler_config in config.get("handlers", {}).values():
        if isinstance(handler_config, dict) and "level" in handler_config:
            current_level = getattr(logging, str(handler_config["level"]), logging.INFO)
            if numeric_level < current_level:
                handler_config["level"] = level


def _setup_basic_logging(level: str) -> None:
    """Set up basic console logging as fallback."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
