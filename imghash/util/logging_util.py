"""Logging configuration for imghash."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from imghash.util.config import LOG_FILENAME


def setup_logging(log_dir: Optional[str] = None, level: str = "INFO") -> None:
    root_logger = logging.getLogger("imghash")
    root_logger.setLevel(logging.DEBUG)

    if root_logger.handlers:
        return

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    # StreamHandler defaults to stderr; stdout is reserved for hash output
    ch = logging.StreamHandler()
    ch.setLevel(getattr(logging, level.upper(), logging.INFO))
    ch.setFormatter(fmt)
    root_logger.addHandler(ch)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, LOG_FILENAME)
        fh = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root_logger.addHandler(fh)

