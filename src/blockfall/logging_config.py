import logging
import sys
import threading
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

DEFAULT_LOG_DIR = Path(__file__).parents[2] / "logs"

_FORMATTER = logging.Formatter(
    "%(asctime)s.%(msecs)03d - %(levelname)s - %(pathname)s:%(lineno)d - %(threadName)s - %(message)s",
    datefmt="%H:%M:%S",
)


def _rotating_handler(path: Path, level: int, *, when: str, interval: int, backup_count: int) -> logging.Handler:
    handler = TimedRotatingFileHandler(path, when=when, interval=interval, backupCount=backup_count, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(_FORMATTER)
    return handler


def configure_logging(log_dir: Path = DEFAULT_LOG_DIR, *, debug_log: bool = True) -> None:
    """Route all log records to rotating files inside `log_dir`.

    The terminal belongs to the UI while a game is running, so nothing is logged to stdout or stderr.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    handlers = [_rotating_handler(log_dir / "info.log", logging.INFO, when="H", interval=2, backup_count=7)]
    if debug_log:
        # every spawn and lock ends up here, so keep only the last few minutes
        handlers.append(_rotating_handler(log_dir / "debug.log", logging.DEBUG, when="S", interval=300, backup_count=1))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug_log else logging.INFO)
    root_logger.handlers = []
    for handler in handlers:
        root_logger.addHandler(handler)

    # Make sure uncaught exceptions are logged
    sys.excepthook = lambda exctype, value, traceback: root_logger.error(
        "Uncaught exception:", exc_info=(exctype, value, traceback)
    )
    threading.excepthook = lambda args: root_logger.error(
        "Uncaught exception in thread '%s':",
        args.thread.name if args.thread else "unknown",
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),  # type: ignore[arg-type]
    )
