"""Logging utility for geodetics"""

__all__ = ['LOGGER', 'WARNED_ONCE', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('geodetics')
LOGGER.setLevel(logging.WARNING)
if not LOGGER.handlers:
    _LOG_HANDLER = logging.StreamHandler()
    _LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    LOGGER.addHandler(_LOG_HANDLER)

# Messages already emitted through warn_once, by any logger in the package
WARNED_ONCE: Set[str] = set()


def warn_once(warning: str, *args, logger: logging.Logger = LOGGER):
    """
    Logs a warning the first time a given message is seen. Messages are matched
    before %-formatting, so pass variable parts as args.
    """
    if warning in WARNED_ONCE:
        return

    logger.warning(warning, *args)
    WARNED_ONCE.add(warning)
