import logging
import sys
import typing

LOGGER_NAME = "dts_to_cjs"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOGGER = None


def init_logger(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the shared logger once; later calls return it unchanged."""
    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    _LOGGER = logger
    return _LOGGER


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        init_logger()
    return typing.cast(logging.Logger, _LOGGER)
