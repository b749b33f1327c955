"""
Centralized Configuration Module

Application constants, date defaults, and logging configuration.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logging.getLogger(__name__).info(f"Loaded environment from: {env_file}")
        else:
            logging.getLogger(__name__).warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv()


# Load default .env before the config classes read os.environ
load_environment()


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "commons-util"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Split hostnames and parse, convert and floor dates"

    DEFAULT_OUTPUT_FORMAT = os.getenv("COMMONS_OUTPUT_FORMAT", "list")

    @classmethod
    def reload(cls):
        """Re-read values from the environment (after load_environment)"""
        cls.DEFAULT_OUTPUT_FORMAT = os.getenv("COMMONS_OUTPUT_FORMAT", "list")


class DateConfig:
    """Date parsing defaults"""

    DEFAULT_PATTERN = os.getenv("COMMONS_DATE_PATTERN", "yyyy-MM-dd")
    DEFAULT_ZONE = os.getenv("COMMONS_DATE_ZONE", "UTC")

    @classmethod
    def reload(cls):
        """Re-read values from the environment (after load_environment)"""
        cls.DEFAULT_PATTERN = os.getenv("COMMONS_DATE_PATTERN", "yyyy-MM-dd")
        cls.DEFAULT_ZONE = os.getenv("COMMONS_DATE_ZONE", "UTC")

    @classmethod
    def get_zone(cls):
        """Get the default zone as a tzinfo"""
        from .utils.datetime_util import resolve_zone
        return resolve_zone(cls.DEFAULT_ZONE)


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    # Log Level
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Log Format
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # File Logging
    LOG_FILE = os.getenv("LOG_FILE")  # Optional
    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))

    @classmethod
    def reload(cls):
        """Re-read values from the environment (after load_environment)"""
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
        cls.LOG_FILE = os.getenv("LOG_FILE")
        cls.LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))
        cls.LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))


def reload_config():
    """Re-read every config class from the environment"""
    AppConfig.reload()
    DateConfig.reload()
    LogConfig.reload()


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )
    logging.getLogger().setLevel(log_level)

    if log_file or LogConfig.LOG_FILE:
        from logging.handlers import RotatingFileHandler

        file_path = log_file or LogConfig.LOG_FILE
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    logger.debug(f"Logging configured: level={logging.getLevelName(log_level)}")


# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Validation
# ============================================================================

def validate_config():
    """
    Validate configuration on startup.
    Raises ValueError if any default is unusable.
    """
    from .exceptions import InvalidFormatError
    from .parsers import DatePatternParser

    errors = []

    try:
        DatePatternParser.validate(DateConfig.DEFAULT_PATTERN)
    except InvalidFormatError as e:
        errors.append(f"COMMONS_DATE_PATTERN is invalid: {e}")

    try:
        DateConfig.get_zone()
    except InvalidFormatError as e:
        errors.append(f"COMMONS_DATE_ZONE is invalid: {e}")

    if AppConfig.DEFAULT_OUTPUT_FORMAT not in ("list", "json"):
        errors.append(f"COMMONS_OUTPUT_FORMAT must be 'list' or 'json', got '{AppConfig.DEFAULT_OUTPUT_FORMAT}'")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.debug(f"Configuration validated: pattern={DateConfig.DEFAULT_PATTERN}, zone={DateConfig.DEFAULT_ZONE}")


__all__ = [
    'AppConfig',
    'DateConfig',
    'LogConfig',
    'load_environment',
    'reload_config',
    'setup_logging',
    'validate_config',
]
