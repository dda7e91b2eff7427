"""
Logging configuration and utilities for the pricing engine.
"""
from .config import configure_logging, get_calculation_logger, get_logger, log_guarded_result

__all__ = ["configure_logging", "get_calculation_logger", "get_logger", "log_guarded_result"]
