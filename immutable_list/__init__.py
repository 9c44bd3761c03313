"""Immutable, generic, ordered sequences with a functional API.

```python
from immutable_list import List

List.range(0, 10, 2).filter(lambda x: x > 2).to_list()  # [4, 6, 8, 10]
```
"""

from loguru import logger

from .config import PACKAGE_NAME, setup_loguru_logger
from .domain import (
    InvalidArgumentError,
    List,
    get_random,
    json_default,
    seed_random,
)

# Library output stays off until the application calls setup_loguru_logger()
logger.disable(PACKAGE_NAME)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "List",
    "get_random",
    "json_default",
    "seed_random",
    "setup_loguru_logger",
]
