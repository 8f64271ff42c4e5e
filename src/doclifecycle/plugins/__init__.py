"""
Schema plugins shipped with doclifecycle.
"""

from .lifecycle import (
    AFTER_INSERT,
    AFTER_REMOVE,
    AFTER_SAVE,
    AFTER_UPDATE,
    BEFORE_INSERT,
    BEFORE_REMOVE,
    BEFORE_SAVE,
    BEFORE_UPDATE,
    LIFECYCLE_EVENTS,
    LifecycleEvent,
    LifecycleNotifier,
    lifecycle_events_plugin,
)

__all__ = [
    "AFTER_INSERT",
    "AFTER_REMOVE",
    "AFTER_SAVE",
    "AFTER_UPDATE",
    "BEFORE_INSERT",
    "BEFORE_REMOVE",
    "BEFORE_SAVE",
    "BEFORE_UPDATE",
    "LIFECYCLE_EVENTS",
    "LifecycleEvent",
    "LifecycleNotifier",
    "lifecycle_events_plugin",
]
