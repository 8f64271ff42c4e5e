"""
Document models, their registry and in-memory storage.
"""

from .collection import Collection
from .document import Document, DocumentMeta
from .registry import ModelRegistry, registry

__all__ = ["Collection", "Document", "DocumentMeta", "ModelRegistry", "registry"]
