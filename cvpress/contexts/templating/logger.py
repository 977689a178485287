"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cvpress.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, template_id: str, language: str) -> Path:
    """
    Setup logger for templating context.

    Configures loguru with provenance tracking and templating-specific context.

    Args:
        log_dir: Directory for this templating session
        template_id: Catalog template id for provenance
        language: Template language for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Template": template_id, "Language": language},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_generation_start(template_id: str, language: str, num_chars: int) -> None:
    """Log start of HTML generation with context."""
    _log_info(f"Rendering template {template_id} ({language})")
    _log_debug(f"Source: {num_chars} characters of markdown")


def log_generation_result(template_id: str, result, elapsed_time: float) -> None:
    """
    Log HTML generation result.

    Args:
        template_id: Catalog template id
        result: GenerationResult from generate_html()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"{template_id}: render succeeded ({elapsed_time:.2f}s)")
        _log_debug(f"  HTML size: {len(result.html)} characters")
    else:
        _log_error(f"Failed to render {template_id} ({elapsed_time:.2f}s)")
        _log_error(f"  Error: {result.error}")
