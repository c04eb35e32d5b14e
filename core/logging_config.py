from pathlib import Path
import logging
import sys
from typing import Optional, TextIO
from datetime import datetime


def setup_logging(
    logs_dir: Optional[str | Path] = None,
    log_file_name: str = "server.log",
    level: int | str = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure root logging to a console stream and a file under `logs_dir`.

    Idempotent: calling multiple times won't add duplicate handlers.
    Ensures a file handler writing to logs/<log_file_name> and a StreamHandler to `stream`
    (stdout by default; the stdio transport passes stderr because stdout carries the protocol).
    Returns a module-level logger for callers to use.
    """
    if logs_dir is None:
        logs_dir = Path(__file__).resolve().parent.parent / "logs"
    else:
        logs_dir = Path(logs_dir)
    if stream is None:
        stream = sys.stdout
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    # Ensure logs directory exists
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        # continue with console logging only if it cannot create logs dir
        pass

    # Add timestamp to the logfile name so each run writes to a timestamped file
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    base = Path(log_file_name).stem
    ext = Path(log_file_name).suffix or ".log"
    log_file = logs_dir / f"{base}_{timestamp}{ext}"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # formatter used by both handlers
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    # Add a FileHandler for the server log if not already present writing to the same file
    file_handler_exists = any(
        isinstance(h, logging.FileHandler)
        and Path(h.baseFilename).resolve() == log_file.resolve()
        for h in root_logger.handlers
    )

    if not file_handler_exists and logs_dir.is_dir():
        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            fh.setLevel(level)
            root_logger.addHandler(fh)
        except OSError:
            # If file handler cannot be created (permissions, etc), fall back to the console only
            pass

    # Ensure a StreamHandler to the requested stream exists (don't duplicate)
    stream_exists = any(
        type(h) is logging.StreamHandler and getattr(h, "stream", None) is stream
        for h in root_logger.handlers
    )

    if not stream_exists:
        sh = logging.StreamHandler(stream)
        sh.setFormatter(formatter)
        sh.setLevel(level)
        root_logger.addHandler(sh)

    # Return a logger for the current module
    return logging.getLogger(__name__)


def set_log_level(level: int | str) -> None:
    """Change the level of the root logger and every handler attached to it."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for h in root_logger.handlers:
        h.setLevel(level)

