"""Process-boundary handling for unresolvable configuration.

The core never exits the process. Host entry points wrap their main
function with exit_on_unresolvable to turn chain exhaustion into a loud
exit with diagnostic output.
"""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Callable
from typing import TypeVar

from confchain.domain.exceptions import ConfigUnresolvableError

logger = logging.getLogger(__name__)

EXIT_CONFIG_UNRESOLVABLE = 1

T = TypeVar("T")


def exit_on_unresolvable(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator for host entry points.

    Catches ConfigUnresolvableError, logs it at CRITICAL, writes the full
    diagnostic (key, chain positions, causes) to stderr, and exits with
    status 1. Other exceptions propagate unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigUnresolvableError as e:
            logger.critical("Unresolvable configuration: %s", e.message)
            print(f"fatal: {e.describe()}", file=sys.stderr)
            if e.hint:
                print(f"Hint: {e.hint}", file=sys.stderr)
            sys.exit(EXIT_CONFIG_UNRESOLVABLE)

    return wrapper
