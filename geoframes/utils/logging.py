"""Logging utility for geoframes"""

__all__ = ['LOGGER', 'reset_warnings', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('geoframes')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS: Set[str] = set()


def warn_once(warning: str):
    """Logs a warning only the first time a given message is seen"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def reset_warnings():
    """Forgets previously emitted warnings, so warn_once will emit them again"""
    _WARNINGS.clear()
