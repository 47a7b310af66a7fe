import logging
from typing import Optional

from rich.logging import RichHandler

from src.core.constants import DEFAULT_LOG_BACKEND


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(backend)s | %(name)s | %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


class BackendFilter(logging.Filter):
    """Ensures %(backend)s is always present in log records to avoid KeyError in format."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "backend"):
            record.backend = DEFAULT_LOG_BACKEND
        return True


def setup_logging(
    level: int = logging.INFO,
    rich_tracebacks: bool = True,
    log_file: Optional[str] = None,
) -> None:
    """Initialize rich-based logging with a safe format that includes the backend field."""
    handler = RichHandler(rich_tracebacks=rich_tracebacks, markup=True)
    handler.addFilter(BackendFilter())
    handlers: list[logging.Handler] = [handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.addFilter(BackendFilter())
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FMT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FMT,
        handlers=handlers,
        force=True,
    )


def level_from_name(name: str, default: int = logging.INFO) -> int:
    """Resolve a level name like 'DEBUG' to its logging constant."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default
