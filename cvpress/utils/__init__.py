"""
Shared utilities for cvpress.

Common functionality used across contexts:
- Logging configuration
"""

from cvpress.utils.logger import log_provenance, setup_logger

__all__ = ["log_provenance", "setup_logger"]
