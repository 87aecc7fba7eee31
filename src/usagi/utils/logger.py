"""Logging configuration for Usagi using loguru."""
import sys
from typing import Optional
from loguru import logger

from usagi.config.settings import UsagiSettings, get_settings

# Remove default handler; nothing is logged until setup_logging() runs
logger.remove()

DETAILED_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> | "
    "<level>{extra}</level>"
)

SIMPLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def setup_logging(settings: Optional[UsagiSettings] = None) -> None:
    """Install the log sinks described by the settings.

    Safe to call more than once; previously installed sinks are replaced.

    Args:
        settings: Settings to configure from. Defaults to the cached settings.
    """
    settings = settings or get_settings()
    log_format = DETAILED_FORMAT if settings.LOG_FORMAT == "detailed" else SIMPLE_FORMAT

    logger.remove()
    logger.configure(extra={"name": "usagi"})

    if settings.LOG_TO_CONSOLE:
        logger.add(
            sys.stderr,
            format=log_format,
            level=settings.LOG_LEVEL,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )

    if settings.LOG_FILE:
        settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            settings.LOG_FILE,
            format=log_format,
            level=settings.LOG_LEVEL,
            rotation=f"{settings.LOG_ROTATION_SIZE_MB} MB",
            retention=f"{settings.LOG_RETENTION_DAYS} days",
            compression="zip",
            serialize=True,
            backtrace=True,
            diagnose=True,
        )


def get_logger(name: str):
    """Get a logger instance with the given name.

    Args:
        name: The name of the module/component requesting the logger.
            Should be the module's __name__ attribute.

    Returns:
        A logger instance bound with the given name.
    """
    # Ensure module name starts with usagi.
    if not name.startswith("usagi.") and name != "__main__":
        name = f"usagi.{name}"
    return logger.bind(name=name)
