import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None):
    """Configure root logging once for the service.

    The level comes from the argument, else ``LOG_LEVEL``, else INFO. A
    second call only adjusts the level so reloads don't stack handlers.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger(name: str):
    configure_logging()
    return logging.getLogger(name)
