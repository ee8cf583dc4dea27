"""Logging configuration for the command line entry point."""

import logging
from logging.config import dictConfig

LEVEL_LABELS = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}

LEVEL_COLORS = {
    logging.DEBUG: "\033[0;36m",
    logging.INFO: "\033[0;34m",
    logging.WARNING: "\033[0;33m",
    logging.ERROR: "\033[0;31m",
    logging.CRITICAL: "\033[0;31m",
}

RESET = "\033[0m"


class LevelPrefixFormatter(logging.Formatter):
    """Prefix messages with ``[LEVEL]``, colored when ``color`` is set."""

    def __init__(self, *, color: bool = False) -> None:
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        label = LEVEL_LABELS.get(record.levelno, record.levelname)
        if self.color:
            label = f"{LEVEL_COLORS.get(record.levelno, '')}[{label}]{RESET}"
        else:
            label = f"[{label}]"
        return f"{label} {super().format(record)}"


class TerminalStreamHandler(logging.StreamHandler):
    """Stream handler that colors its output only when writing to a terminal."""

    def __init__(self) -> None:
        super().__init__()
        isatty = getattr(self.stream, "isatty", None)
        self.setFormatter(LevelPrefixFormatter(color=bool(isatty and isatty())))


def setup_logging(level: str = "INFO") -> None:
    """Configure logging to stderr.

    This function is idempotent and will not add duplicate handlers if
    called multiple times.
    """
    if logging.root.hasHandlers():
        logging.root.setLevel(level.upper())
        return

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {
                "console": {"()": TerminalStreamHandler},
            },
            "root": {
                "handlers": ["console"],
                "level": level.upper(),
            },
        }
    )
