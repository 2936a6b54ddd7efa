"""
Logging configuration and utilities for the car factory package.
"""
from .config import configure_logging, get_factory_logger, log_product_created

__all__ = ["configure_logging", "get_factory_logger", "log_product_created"]
