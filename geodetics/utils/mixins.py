"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional

from geodetics.utils.logging import warn_once


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """Gives each instance a logger named after its module and class"""
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        name = f'{self.__class__.__module__}.{self.__class__.__qualname__}'
        if logstr:
            name += f'.{logstr}'

        self.logger = logging.getLogger(name)

    def warn_once(self, msg, *args):
        """Logs a warning only once per message, across the whole package"""
        warn_once(msg, *args, logger=self.logger)
