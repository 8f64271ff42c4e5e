"""
doclifecycle public package initialization.

Lifecycle events (before/after insert, update, save and remove) for
document models, delivered to listeners on the model class and on its
schema.
"""

from .config import LifecycleOptions  # noqa: F401
from .core import Collection, Document, ModelRegistry, registry  # noqa: F401
from .errors import (  # noqa: F401
    DocLifecycleError,
    HookRegistrationError,
    LifecycleConfigurationError,
    ModelConfigurationError,
    ModelNotRegisteredError,
)
from .events import EventEmitter  # noqa: F401
from .plugins import LIFECYCLE_EVENTS, LifecycleEvent, LifecycleNotifier, lifecycle_events_plugin  # noqa: F401
from .schema import HookContext, Schema  # noqa: F401

__all__ = [
    "Collection",
    "DocLifecycleError",
    "Document",
    "EventEmitter",
    "HookContext",
    "HookRegistrationError",
    "LIFECYCLE_EVENTS",
    "LifecycleConfigurationError",
    "LifecycleEvent",
    "LifecycleNotifier",
    "LifecycleOptions",
    "ModelConfigurationError",
    "ModelNotRegisteredError",
    "ModelRegistry",
    "Schema",
    "lifecycle_events_plugin",
    "registry",
]
