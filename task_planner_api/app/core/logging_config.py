"""
Logging setup for the API process.

Records go to the console and, when ``LOG_FILE`` is configured, to a
file as well.  The console handler is only installed on an
unconfigured root logger so a host that set up logging itself (a
process manager, the test runner) keeps its own output.  The file
handler is attached either way, once per path.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == str(path)
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the API.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``; unknown names
        fall back to ``INFO``.  Only applied to an unconfigured root.
    logfile : Optional[str]
        File that receives a copy of every record.  Missing parent
        directories are created.
    """
    root = logging.getLogger()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).expanduser().resolve()
        if _has_file_handler(root, log_path):
            return
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.debug("Writing logs to %s", log_path)
