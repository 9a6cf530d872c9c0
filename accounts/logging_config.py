"""
Logging setup.

Single place where the root logger is configured. Modules only ever call
logging.getLogger(__name__).
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure the root logger.

    Args:
        level: Level name (e.g. "DEBUG") or numeric level
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
