"""Root logger setup shared by the dashboard and the maintenance scripts.

Streamlit re-executes page scripts on every interaction, so setup runs once
per process: a root logger that already has handlers is left as it is.
"""
import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Third-party loggers kept at WARNING regardless of the configured level
QUIET_LOGGERS = ("sqlalchemy", "streamlit", "watchdog")


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def _file_handler(log_file: str) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Attach console (and optional rotating file) handlers to the root logger.

    Args:
        level: Level name such as "DEBUG" or "warning"; unknown names mean INFO
        log_file: Path of the rotating log file; None logs to the console only
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_level_number(level))

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(_file_handler(log_file))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
