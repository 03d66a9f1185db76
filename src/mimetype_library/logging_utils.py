"""
Logging setup and helpers shared by the library modules

Only the building of matchers logs (at DEBUG level). Running a matcher or
extracting a mime type never logs since both are on the request's hot path.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .settings import MimeTypeLibrarySettings

_logger = logging.getLogger(__name__)

LIBRARY_LOGGER_NAME: Final[str] = "mimetype_library"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_NORMAL: Final[str] = "\033[0m"

_LEVEL_COLORS: Final[dict[str, str]] = {
    "WARNING": "\033[1;33m",
    "INFO": "\033[0;32m",
    "DEBUG": "\033[0;37m",
    "CRITICAL": "\033[48;2;255;165;0m",
    "ERROR": "\033[0;31m",
}


class CustomFormatter(logging.Formatter):
    """Colors the level name in local-dev mode and escapes newlines otherwise
    so that every record stays in a single line of structured logs
    """

    def __init__(self, fmt: str, *, log_format_local_dev_enabled: bool) -> None:
        super().__init__(fmt)
        self.log_format_local_dev_enabled = log_format_local_dev_enabled

    def format(self, record) -> str:
        if self.log_format_local_dev_enabled:
            levelname = record.levelname
            if levelname in _LEVEL_COLORS:
                record.levelname = _LEVEL_COLORS[levelname] + levelname + _NORMAL
            return super().format(record)

        return super().format(record).replace("\n", "\\n")


# SEE https://docs.python.org/3/library/logging.html#logrecord-attributes
_DEFAULT_FORMATTING: Final[str] = " | ".join(
    [
        "log_level=%(levelname)s",
        "log_timestamp=%(asctime)s",
        "log_source=%(name)s:%(funcName)s(%(lineno)d)",
        "log_msg=%(message)s",
    ]
)

_LOCAL_FORMATTING: Final[str] = (
    "%(levelname)s: [%(asctime)s/%(processName)s] [%(name)s:%(funcName)s(%(lineno)d)]  -  %(message)s"
)


def _get_format_string(*, log_format_local_dev_enabled: bool) -> str:
    return _LOCAL_FORMATTING if log_format_local_dev_enabled else _DEFAULT_FORMATTING


def setup_loggers(settings: "MimeTypeLibrarySettings") -> logging.Logger:
    """
    Configures the library's logger from its settings

    Sets the level and installs a formatter on the logger's handlers. If it has
    none, a stream handler is added and records stop propagating to the root
    logger so that they are not emitted twice.

    Returns the configured library logger
    """
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    logger.setLevel(settings.log_level)

    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
        logger.propagate = False

    fmt = _get_format_string(
        log_format_local_dev_enabled=settings.MIMETYPE_LIBRARY_LOG_FORMAT_LOCAL_DEV_ENABLED
    )
    for handler in logger.handlers:
        handler.setFormatter(
            CustomFormatter(
                fmt,
                log_format_local_dev_enabled=settings.MIMETYPE_LIBRARY_LOG_FORMAT_LOCAL_DEV_ENABLED,
            )
        )

    _logger.debug(
        "Logging configured with %s", f"{settings.MIMETYPE_LIBRARY_LOGLEVEL=}"
    )
    return logger


def _un_capitalize(s: str) -> str:
    return s[:1].lower() + s[1:] if s else ""


@contextmanager
def log_context(
    logger: logging.Logger,
    level: int,
    msg: str,
    *args,
    log_duration: bool = False,
) -> Iterator[None]:
    # NOTE: preserves original signature https://docs.python.org/3/library/logging.html#logging.Logger.log
    start = datetime.now()  # noqa: DTZ005
    msg = _un_capitalize(msg.strip())

    stacklevel = 3  # NOTE: 1 => log_context, 2 => contextlib, 3 => caller
    logger.log(level, f"Starting {msg} ...", *args, stacklevel=stacklevel)
    yield
    duration = (
        f" in {(datetime.now() - start).total_seconds()}s"  # noqa: DTZ005
        if log_duration
        else ""
    )
    logger.log(level, f"Finished {msg}{duration}", *args, stacklevel=stacklevel)
