import logging
import sys
from typing import Optional


DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def level_from_name(name: str, fallback: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else fallback


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Configure logging so that:

    - DEBUG/INFO go to stdout
    - WARNING/ERROR/CRITICAL go to stderr

    The checker prints its report on stdout, so compiler diagnostics at
    warning level and above stay visible when stdout is redirected.
    ``logger_name`` limits the setup to one logger tree; the root logger is
    configured when it is omitted.
    """

    target = logging.getLogger(logger_name)
    target.handlers.clear()
    target.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    target.addHandler(stdout_handler)
    target.addHandler(stderr_handler)
    return target
