"""Logging configuration and utilities using Loguru.

The library keeps its own log output disabled until the host application
opts in by calling :func:`setup_loguru_logger`, following Loguru's advice
for libraries.

Public API:
----------
setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru sinks and enable library output

get_logger(name: str) -> Logger
    Get a context-aware logger for your module
    Usage: logger = get_logger(__name__)

log_configuration() -> None
    Log the effective settings at debug level

@logged_operation(operation_name: str)
    Decorator that logs rejected arguments before re-raising
"""

import functools
import sys
from typing import Any

from loguru import logger

from .settings import settings

PACKAGE_NAME = "immutable_list"

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


def setup_loguru_logger(verbose: bool = False) -> None:
    """Configure Loguru logger for the library.

    Args:
        verbose: Enable verbose logging with debug level and detailed tracebacks

    Note:
        - Removes existing handlers and installs a console handler
        - Adds a rotating JSON file handler when ``log_file`` is configured
        - Enables log records emitted by this package
    """
    logger.remove()
    logger.configure(extra={"service": PACKAGE_NAME, "module": "root"})

    # -------------------------------------------------------------------------
    # Console Handler
    # -------------------------------------------------------------------------
    console_level = "DEBUG" if verbose else settings.logging.console_level
    logger.add(
        sink=sys.stderr,
        level=console_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
            "<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )

    # -------------------------------------------------------------------------
    # File Handler
    # -------------------------------------------------------------------------
    log_file = settings.logging.log_file
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            sink=str(log_file),
            level=settings.logging.file_level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {process}:{thread} | {extra[service]} | {extra[module]} | {name}:{function}:{line} | {message}",
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            backtrace=True,
            diagnose=True,
            enqueue=not settings.logging.real_time_debug,
            catch=True,
            serialize=True,
        )

    logger.enable(PACKAGE_NAME)


# =============================================================================
# LOGGER FACTORY
# =============================================================================


def get_logger(name: str) -> Any:  # Use Any for Loguru logger type
    """Get a pre-configured logger instance for the given module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Loguru logger bound with module context
    """
    return logger.bind(
        module=name,
        service=PACKAGE_NAME,
    )


def log_configuration() -> None:
    """Log every configuration group at debug level."""
    local_logger = get_logger(__name__)
    local_logger.debug("Configuration:")

    for section_name, section_values in settings.model_dump().items():
        local_logger.debug("  {}:", section_name.upper())
        for key, value in section_values.items():
            local_logger.debug("    {}: {}", key.upper(), value)


# =============================================================================
# ERROR HANDLING DECORATORS
# =============================================================================


def logged_operation(operation_name=None):
    """Decorator for operations that validate their arguments.

    Logs the rejected call at debug level and re-raises the original
    exception unchanged.

    Args:
        operation_name: Optional name for the operation (defaults to function name)

    Example:
        >>> @logged_operation("chunk")
        >>> def chunk(self, size):
        >>>     ...
    """

    def decorator(func):
        op_name = operation_name or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ValueError as e:
                logger.bind(module=func.__module__).debug(
                    f"Rejected {op_name}: {e!s}"
                )
                raise

        return wrapper

    return decorator
