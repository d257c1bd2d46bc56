"""
Centralized logging configuration.
"""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "wifi_mirror"

NOISY_LIBRARIES = [
    "asyncio",
    "urllib3",
    "dotenv",
    "dotenv.main",
]


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False) -> None:
    """
    Configure package and third-party log levels.

    Args:
        verbose: If True, show package INFO/DEBUG output. If False, warnings only.
    """
    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        logger.handlers = [NullHandler()]

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler = RichHandler(show_path=verbose, rich_tracebacks=True, markup=False)
    package_logger.handlers = [handler]
    package_logger.propagate = False
