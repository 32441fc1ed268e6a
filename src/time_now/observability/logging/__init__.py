"""Observability – structured logging helpers."""
from time_now.observability.logging.factory import LoggerFactory
from time_now.observability.logging.processors import get_logger

__all__ = ["LoggerFactory", "get_logger"]
