import logging
import sys

from products_api.config import settings

_loggers = {}


def get_logger(name: str) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler the first time it is requested.
    Level starts at settings.LOG_LEVEL; set_log_level() changes it afterwards.
    """
    log = logging.getLogger(name)
    if name not in _loggers:
        log.setLevel(settings.LOG_LEVEL.upper())
        _loggers[name] = log
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[PRODUCTS] %(levelname)s %(name)s: %(message)s"))
        log.addHandler(h)
    return log


def set_log_level(level: str) -> None:
    """Apply level to every logger handed out by get_logger()."""
    for log in _loggers.values():
        log.setLevel(level.upper())
