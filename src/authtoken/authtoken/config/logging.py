# ABOUTME: Loguru configuration for the token lifecycle library
# ABOUTME: Provides unified logging setup with console colorization, file output and value masking

import sys
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from authtoken.config.settings import get_settings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_serialize: bool = False
    console_backtrace: bool = True
    console_diagnose: bool = True

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/authtoken.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: str = "gz"

    # Structured logging for file output
    structured_enabled: bool = False
    structured_level: str = "DEBUG"
    structured_path: Union[str, Path] = "logs/authtoken-structured.jsonl"

    # Performance settings
    enqueue: bool = False
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """Logging settings that can be configured via environment variables."""

    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/authtoken.log")
    log_structured_enabled: bool = Field(default=False)
    log_console_colorize: bool = Field(default=True)

    model_config = {"env_prefix": "AUTHTOKEN_"}


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    Args:
        config: Logger configuration. If None, builds one from `LoggingSettings` (sink
                switches) and the library's `LOG_LEVEL` and `LOG_FORMAT` settings.
    """
    if config is None:
        env = LoggingSettings()
        settings = get_settings()
        config = LoggerConfig(
            console_level=settings.LOG_LEVEL,
            console_colorize=env.log_console_colorize,
            console_serialize=settings.LOG_FORMAT == "json",
            file_enabled=env.log_file_enabled,
            file_path=env.log_file_path,
            file_level=settings.LOG_LEVEL,
            structured_enabled=env.log_structured_enabled,
            structured_level=settings.LOG_LEVEL,
        )

    # Remove default handler
    logger.remove()

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            serialize=config.console_serialize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.structured_enabled:
        structured_path = Path(config.structured_path)
        structured_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.structured_path,
            level=config.structured_level,
            format="{message}",
            serialize=True,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def mask_token_value(value: str) -> str:
    """
    Mask a token value for log output.

    Keeps the first and last four characters of values longer than twelve
    characters and replaces everything else with asterisks. Returns the value
    untouched when `LOG_TOKEN_VALUES` is enabled.

    Args:
        value: The raw token value.

    Returns:
        The masked representation.
    """
    if get_settings().LOG_TOKEN_VALUES:
        return value
    if len(value) <= 12:
        return "*" * len(value)
    return f"{value[:4]}{'*' * (len(value) - 8)}{value[-4:]}"


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.add(
        sys.stdout,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )


def configure_for_production() -> None:
    """Configure logging for production environment."""
    config = LoggerConfig(
        console_level="INFO",
        console_colorize=False,
        console_serialize=True,
        console_backtrace=False,
        console_diagnose=False,
        file_enabled=True,
        file_level="INFO",
        structured_enabled=True,
        enqueue=True,
    )
    setup_logging(config)


def configure_for_development() -> None:
    """Configure logging for development environment."""
    config = LoggerConfig(
        console_level="DEBUG",
        console_colorize=True,
        console_backtrace=True,
        console_diagnose=True,
    )
    setup_logging(config)
