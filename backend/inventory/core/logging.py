import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Install a console handler on the package logger

    Safe to call more than once: the handler is only added the first time.
    """
    logger = logging.getLogger("inventory")
    logger.setLevel(level)

    if not any(getattr(h, "_inventory_console", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._inventory_console = True
        logger.addHandler(handler)

    return logger
