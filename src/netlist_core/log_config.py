# src/netlist_core/log_config.py
import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO):
    """ Configures basic logging to stdout. `level` may be a number or a level name. """
    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()

    # Clear existing handlers so repeated calls never duplicate output.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    root_logger.addHandler(console_handler)
    logging.getLogger(__name__).debug("Logging configured at level %s.", logging.getLevelName(root_logger.level))
