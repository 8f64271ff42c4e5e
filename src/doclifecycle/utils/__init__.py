"""
Utility helpers shared across doclifecycle packages.
"""

from .logging import configure_logging, correlation_scope, get_logger, time_call
from .naming import camel_to_snake, collection_name_for, pluralize

__all__ = [
    "camel_to_snake",
    "collection_name_for",
    "configure_logging",
    "correlation_scope",
    "get_logger",
    "pluralize",
    "time_call",
]
