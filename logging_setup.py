import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
def setup_logging() -> logging.Logger:
    """Configure the root logger once per process.

    KANBAN_ENV=development logs to stdout, anything else to a rotating file
    at KANBAN_LOG_FILE.
    """
    level_name = os.getenv("KANBAN_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    if not any(getattr(h, "_kanban", False) for h in root.handlers):
        if os.getenv("KANBAN_ENV") == "development":
            handler: logging.Handler = logging.StreamHandler(sys.stdout)
        else:
            log_file = Path(os.getenv("KANBAN_LOG_FILE", "./shared/log.log"))
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=7, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler.setLevel(level)
        handler._kanban = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    logger = get_logger("kanban")
    logger.info("Logging initialized at %s", level_name)
    return logger
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
