"""Root logging configuration for the entry point."""

import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# Chatty libs to quiet down
NOISY_LOGGERS: tuple[str, ...] = (
    "PIL",
    "PIL.PngImagePlugin",
)

_configured = False  # guard against double-initialisation


def setup_logging(
    *,
    level: int = logging.INFO,
    console: bool = True,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
    file_max_bytes: int = 1_000_000,
    file_backup_count: int = 2,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configure root logging once. Call this from the entry point only;
    modules just use `logging.getLogger(__name__)`.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).debug("Logging initialised (level=%s)", logging.getLevelName(level))
