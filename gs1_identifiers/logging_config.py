"""
Logging setup for command-line use.

Library modules only create loggers; handlers are configured here, by the CLI.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger."""
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    package_logger = logging.getLogger('gs1_identifiers')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(console_handler)
    package_logger.setLevel(level)

    return package_logger
