import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] [%(module)-15s] - %(message)s"


def setup_logger(level=logging.WARNING):
    """
    Configure the root logger with a stdout handler.
    Calling it again replaces the handler installed by a previous call.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_tableau_simplex", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    handler._tableau_simplex = True
    logger.addHandler(handler)
    return logger
