"""
Logging configuration using loguru.

The library only emits records; nothing is configured on import. Applications
(and the ``cloud-detect`` CLI) call setup_logging() at startup, or just use
loguru directly. Probe checks log at TRACE, race timings at DEBUG.
"""

import sys

from loguru import logger

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
# DEBUG and below
VERBOSE_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> <level>[{level.name}]</level> <cyan>{name}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function} | {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Route cloud-detect records to stderr and optionally to a rotating file.

    Args:
        level: Minimum level name, case-insensitive. DEBUG and TRACE switch
            the console to the timestamped format.
        log_file: Extra file sink (``logging.file`` in the config).
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.

    Raises:
        ValueError: if *level* is not a loguru level.
    """
    level = level.upper()
    verbose = logger.level(level).no <= logger.level("DEBUG").no

    logger.remove()
    logger.add(sys.stderr, level=level, format=VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT)

    if log_file:
        logger.add(log_file, level=level, format=FILE_FORMAT, rotation=rotation, retention=retention)
