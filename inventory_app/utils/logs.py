import logging
import sys

from inventory_app.config import settings


def get_logger(name: str, prefix: str) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler the first time.
    Repeated calls (module reloads, several importers) reuse the handler.
    """
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(f"[{prefix}] %(levelname)s %(message)s"))
        log.addHandler(h)
    return log
