"""
Small helpers shared by the line-breaking modules.
"""
from functools import wraps
from io import StringIO
from typing import Callable
import cProfile
import logging
import os
import pstats

logger = logging.getLogger(__name__)

PROFILE_ENV_VAR = 'GREEDY_JUSTIFY_PROFILE'


def profiling_enabled() -> bool:
    return bool(os.environ.get(PROFILE_ENV_VAR))


def profile(sort_by:str='cumulative', limit:int=20) -> Callable:
    """
    Decorator that runs the wrapped function under cProfile and logs the
        `limit` most expensive entries (sorted by `sort_by`) at DEBUG level.

    Profiling only happens while the GREEDY_JUSTIFY_PROFILE environment
        variable is set to something non-empty, otherwise the function is
        just called.
    """
    def decorator(func:Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            if not profiling_enabled():
                return func(*args, **kwargs)

            profiler = cProfile.Profile()
            try:
                return profiler.runcall(func, *args, **kwargs)
            finally:
                stats_out = StringIO()
                pstats.Stats(profiler, stream=stats_out).sort_stats(sort_by).print_stats(limit)
                logger.debug(f'Profile of {func.__qualname__}:\n{stats_out.getvalue()}')
        return wrapper
    return decorator
