"""Observability – logging setup shared by the library and the entry point."""
from time_now.observability.logging import LoggerFactory, get_logger

__all__ = ["LoggerFactory", "get_logger"]
