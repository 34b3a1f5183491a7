"""
Logging setup for the MusicLister API.

Records from the service are emitted under the ``musiclister_api``
logger hierarchy (the store logs every successful mutation there).
``setup_logging`` applies ``Settings.log_level`` to that hierarchy,
attaches a console handler to the root logger once per process and,
when ``Settings.log_file`` is set, mirrors the service's records into
that file.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "musiclister_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path
        for handler in logger.handlers
    )


def setup_logging(config: Settings) -> logging.Logger:
    """Configure logging from ``config`` and return the package logger.

    Safe to call repeatedly, e.g. once per ``create_app``: the level is
    re‑applied every time, handlers are only added when missing.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(level)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if config.log_file:
        log_path = Path(config.log_file).resolve()
        if not _has_file_handler(package_logger, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    return package_logger
