"""
Schemas and the pre/post hook mechanism used by document models.
"""

from .hooks import OPERATIONS, PHASES, POST, PRE, HookContext, HookHandler, HookRegistry
from .schema import Schema

__all__ = [
    "HookContext",
    "HookHandler",
    "HookRegistry",
    "OPERATIONS",
    "PHASES",
    "POST",
    "PRE",
    "Schema",
]
