# src/tkit/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = __name__.partition(".")[0]
LOG_FILE_NAME = "tkit.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    The console shares stderr with the REPL, so only our own records pass at the
    console level; anything else (third-party, py.warnings) needs ERROR+.
    """

    def __init__(self, app_logger: str = APP_LOGGER) -> None:
        super().__init__()
        self._app = app_logger

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == self._app or name.startswith(self._app + "."):
            return True
        return record.levelno >= logging.ERROR


def resolve_level(name: str | None, default: int = logging.WARNING) -> int:
    """Map "info"/"DEBUG"/... to a logging level; unknown names give `default`."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    log_dir: str | Path = ".local/tkit",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_to_file: bool = True,
) -> Path | None:
    """
    Configure the root logger once, before the engine is created:
    - stderr handler at `console_level`, filtered by _ConsoleNoiseFilter
    - optional <log_dir>/tkit.log at `file_level`

    Returns the log file path, or None when file logging is off.
    """
    root = logging.getLogger()
    root.setLevel(min(console_level, file_level) if log_to_file else console_level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    log_file: Path | None = None
    if log_to_file:
        log_file = Path(log_dir) / LOG_FILE_NAME
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return log_file


def configure_from_settings(settings) -> Path | None:
    """setup_logging() driven by Settings (log_level, log_dir, log_to_file)."""
    return setup_logging(
        log_dir=settings.log_dir,
        console_level=resolve_level(settings.log_level),
        log_to_file=settings.log_to_file,
    )
