"""Logging configuration: brief console output + per-session rotating log file"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Session log files kept on disk (older ones are removed at startup)
SESSION_LOGS_KEPT = 5
MAX_LOG_BYTES = 5 * 1024 * 1024

# Third-party loggers that are too chatty for the console
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def _prune_session_logs(log_dir: Path, stem: str, keep: int) -> None:
    """Delete old session logs so that at most `keep` remain after the new one is created"""
    existing = sorted(log_dir.glob(f"{stem}_*.log"), reverse=True)  # Newest first
    for old_log in existing[keep - 1:]:
        try:
            old_log.unlink()
        except OSError as e:
            print(f"WARNING: could not remove old log {old_log}: {e}", file=sys.stderr)


def setup_logging(
    log_file: Optional[str] = "logs/faq-search.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Optional[Path]:
    """
    Configure root logging.

    - Console: "LEVEL: message" at console_level
    - File: timestamped session file ({stem}_{YYYYmmdd_HHMMSS}.log) with
      module:line detail at file_level, rotated at 5MB

    Args:
        log_file: Base path of the log file; None disables file logging
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of the session log file (None if file logging is disabled)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers do the filtering
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    session_log = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _prune_session_logs(log_path.parent, log_path.stem, SESSION_LOGS_KEPT)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

        file_handler = RotatingFileHandler(
            session_log,
            mode='a',
            maxBytes=MAX_LOG_BYTES,
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log or 'disabled'} ({logging.getLevelName(file_level)})"
    )
    return session_log
