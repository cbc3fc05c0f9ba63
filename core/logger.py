# core/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").strip().lower() == "true"


def _file_handler(path: str) -> logging.Handler:
    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(os.getenv("LOG_MAX_BYTES", str(1024 * 1024))),
        backupCount=int(os.getenv("LOG_BACKUPS", "3")),
    )


def setup_logging():
    """
    Configure the root logger once per process from LOG_* environment
    variables. Stdout is on by default; the rotating file log is opt-in
    with LOG_TO_FILE=true.
    """
    global _configured
    if _configured:
        return

    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    # Leave handlers installed by a host (e.g. a test runner) alone
    if not root.handlers:
        handlers = []
        if _env_flag("LOG_TO_STDOUT", True):
            handlers.append(logging.StreamHandler(sys.stdout))
        if _env_flag("LOG_TO_FILE", False):
            log_file = os.getenv("LOG_FILE", "shoe_alert.log")
            try:
                handlers.append(_file_handler(log_file))
            except OSError as e:
                root.warning("Failed to open log file %s: %s", log_file, e)

        formatter = logging.Formatter(LOG_FORMAT)
        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            root.addHandler(handler)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
