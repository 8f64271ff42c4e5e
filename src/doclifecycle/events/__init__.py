"""
Synchronous listener registries used by schemas and models.
"""

from .emitter import EventEmitter, Listener

__all__ = ["EventEmitter", "Listener"]
