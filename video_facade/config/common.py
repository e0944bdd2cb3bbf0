"""
Common configuration settings used throughout the application.

This module holds the settings shared by every layer of the video facade:
the logger format, the effective log level and the strict-format switch.
Values can be overridden from an optional 'config.user.yaml' file at the
project root, so behaviour can be adjusted without touching the source.

Example 'config.user.yaml':

    conversion:
      log_level: DEBUG
      strict_formats: true
"""
from pathlib import Path

import yaml
from loguru import logger

# --- User-Defined Configuration ---

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"


def load_user_config(config_path: Path = USER_CONFIG_PATH) -> dict:
    """
    Loads the 'conversion' section of a user YAML configuration file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        The contents of the 'conversion' section, or an empty dict when the
        file is missing, unreadable, or has no such section.
    """
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Using defaults.")
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return {}

    if not isinstance(user_config, dict):
        return {}
    conversion_config = user_config.get("conversion") or {}
    if not isinstance(conversion_config, dict):
        logger.warning(f"Ignoring malformed 'conversion' section in '{config_path}'.")
        return {}
    return conversion_config


_user_conversion_config = load_user_config()


# --- Logging Configuration ---

# The format string for the Loguru logger.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Loguru's built-in levels, accepted both from the user config and the CLI.
KNOWN_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level) -> str:
    """
    Normalises a configured log level, falling back to INFO if it is unknown.

    Args:
        level: The raw value from the user config (any case), or None.

    Returns:
        An upper-case level name from `KNOWN_LOG_LEVELS`.
    """
    if level is None:
        return DEFAULT_LOG_LEVEL
    level_name = str(level).upper()
    if level_name not in KNOWN_LOG_LEVELS:
        logger.warning(
            f"Unknown log level '{level}' in user config. Falling back to {DEFAULT_LOG_LEVEL}."
        )
        return DEFAULT_LOG_LEVEL
    return level_name


# Level used by the client when no --log-level argument is given.
LOG_LEVEL: str = resolve_log_level(_user_conversion_config.get("log_level"))


# --- Conversion Rules ---

# When True, the facade rejects source extensions and target formats it does
# not know instead of treating them as Ogg.
STRICT_FORMATS: bool = bool(_user_conversion_config.get("strict_formats", False))
