"""Reusable decorators for model building utilities."""

import time
import functools
import logging
from typing import Callable

log = logging.getLogger(__name__)


def timed(phase: str) -> Callable[[Callable], Callable]:
    """
    Log how long ``phase`` took each time the decorated callable runs.

    Successful runs are logged at INFO; runs that raise are logged at WARNING
    with the exception type, and the exception propagates unchanged.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.warning(
                    f"{phase} failed after {time.perf_counter() - start:.3f} s "
                    f"({type(e).__name__})"
                )
                raise
            log.info(f"{phase} took {time.perf_counter() - start:.3f} s")
            return result

        return wrapper

    return decorator
