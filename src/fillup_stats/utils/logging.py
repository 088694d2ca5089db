"""Log file setup for the fillup-stats CLI.

Each run writes a fresh log file. Records coming from this package show
their source as a path inside the package; records from other libraries
show only the file name.
"""

import logging
from pathlib import Path

# Directory containing the fillup_stats package
SOURCE_ROOT = Path(__file__).resolve().parents[2]

LOG_FORMAT = "[%(levelname)7s] %(asctime)s (%(source)s:%(lineno)d) --- %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_HANDLER_NAME = "fillup-stats-file"


def source_location(pathname: str) -> str:
    """Return the short source location shown for a log record."""
    if not pathname:
        return "unknown"
    path = Path(pathname)
    try:
        return path.resolve().relative_to(SOURCE_ROOT).as_posix()
    except ValueError:
        return path.name


class SourceFormatter(logging.Formatter):
    """Formatter that fills the ``source`` field of LOG_FORMAT."""

    def format(self, record: logging.LogRecord) -> str:
        record.source = source_location(record.pathname)
        return super().format(record)


def setup_logging(log_file: Path, level: int = logging.DEBUG) -> logging.Handler:
    """Send log records of the whole process to a file.

    The file is truncated and its directory created if needed. Calling this
    again replaces the handler installed by the previous call.

    Args:
        log_file: Path to the log file
        level: Root logger level (default: DEBUG)

    Returns:
        The installed file handler
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == LOG_HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_handler.set_name(LOG_HANDLER_NAME)
    file_handler.setFormatter(SourceFormatter(LOG_FORMAT, LOG_DATE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.setLevel(level)
    return file_handler
