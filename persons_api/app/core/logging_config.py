"""
Logging setup for the service.

Records go to the console and, when ``LOG_FILE`` is configured, to a
file as well.  Handlers installed here are tagged by name, so calling
``setup_logging`` again (one call per ``create_app``) never duplicates
them, and handlers added by other tools such as pytest are left alone.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "persons_api.console"
FILE_HANDLER_PREFIX = "persons_api.file:"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``), case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File that additionally receives every record.  Each distinct
        resolved path gets one handler.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        name = f"{FILE_HANDLER_PREFIX}{log_path}"
        if not _has_handler(root, name):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(name)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
