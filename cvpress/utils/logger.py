"""
Session logging for cvpress scripts.

Each context wraps this in its own logger.py with a message prefix.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(context_name: str, log_dir: Path, extra_provenance: dict = None) -> Path:
    """
    Route loguru output to a session log file and to stderr.

    The file gets DEBUG and up, the console INFO and up. stdout is left to
    the script's own output (rendered HTML, JSON). A provenance header is
    written first.

    Args:
        context_name: Log file stem, e.g. "template"
        log_dir: Session directory, created if missing
        extra_provenance: Extra header lines, e.g. {"Template": "v1"}

    Returns:
        Path to the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=LOG_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Log the invoking command line and interpreter, then any extra pairs."""
    logger.info("-" * 60)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("-" * 60)
