"""Configuration module for immutable_list.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger and enable library output

log_configuration() -> None
    Log the effective settings at debug level

logged_operation(operation_name: str)
    Decorator that logs rejected arguments before re-raising

Usage:
------
```python
from immutable_list.config import get_logger, setup_loguru_logger

setup_loguru_logger(verbose=True)
logger = get_logger(__name__)
logger.debug("Starting operation")
```
"""

from .logging import (
    PACKAGE_NAME,
    get_logger,
    log_configuration,
    logged_operation,
    setup_loguru_logger,
)
from .settings import settings

__all__ = [
    "PACKAGE_NAME",
    "get_logger",
    "log_configuration",
    "logged_operation",
    "settings",
    "setup_loguru_logger",
]
