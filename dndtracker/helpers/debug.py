import functools
import logging

from dndtracker.config import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        logging.info(f"Calling {fn.__name__} {args} {kwargs}")
        return fn(*args, **kwargs)
    return __wrapped


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Set up root logging with the package format."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=DEFAULT_LOG_FORMAT)
