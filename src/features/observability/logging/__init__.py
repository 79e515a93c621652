"""Observability – structured logging helpers."""
from features.observability.logging.factory import JsonLoggerFactory
from features.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
