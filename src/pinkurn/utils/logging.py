import logging
from typing import Union

PACKAGE_LOGGER = "pinkurn"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Emit pinkurn records at `level` and above.

    Only the package logger's level is changed. A stderr handler is installed on the
    root logger when the application has not configured one yet.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not logging.getLogger().handlers:
        logging.basicConfig(format=LOG_FORMAT)
    return logger
