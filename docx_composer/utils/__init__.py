"""Helper utilities for DOCX Composer."""

from .logger import get_logger, configure_logging, set_log_level

__all__ = ["get_logger", "configure_logging", "set_log_level"]
