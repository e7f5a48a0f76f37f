from collections import defaultdict
from contextlib import contextmanager
import logging
import os
from typing import Iterator


LOG_FORMAT = '%(message)s'

def ntabs(n: int) -> str:
    return '\t' * n

class TabbedLoggerAdapter(logging.LoggerAdapter):
    def __init__(self, logger, extra):
        self.tabdepths = defaultdict(int)  # maps PIDs to tab depths
        super().__init__(logger, extra)
    def increment(self, n = 1):
        """Increments the level of tabbing on the current process."""
        self.tabdepths[os.getpid()] += n
    def decrement(self, n = 1):
        """Decrements the level of tabbing on the current process."""
        self.tabdepths[os.getpid()] -= n
    def process(self, msg, kwargs):
        return (ntabs(self.tabdepths[os.getpid()]) + msg, kwargs)

LOGGER = TabbedLoggerAdapter(logging.getLogger('makepw'), {})

@contextmanager
def tabbed(n: int = 1) -> Iterator[None]:
    """Increments the global logger's tabdepth counter at the beginning of the context, then decrements it at the end."""
    LOGGER.increment(n)
    try:
        yield
    finally:
        LOGGER.decrement(n)

@contextmanager
def loglevel(logger: logging.Logger, level: int) -> Iterator[None]:
    """Sets the level of a logger during the context."""
    old_level = logger.level
    logger.setLevel(level)
    try:
        yield
    finally:
        logger.setLevel(old_level)

def configure_logging() -> None:
    """Sends log messages (bare, without level prefixes) to stderr."""
    logging.basicConfig(format = LOG_FORMAT)
