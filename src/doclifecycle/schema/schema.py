"""
Schema objects: per-model configuration carrying hooks and its own events.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from ..events import EventEmitter
from ..utils import get_logger
from .hooks import POST, PRE, HookHandler, HookRegistry

Plugin = Callable[..., Any]


class Schema(EventEmitter):
    """
    Configuration object shared by the document models built from it.

    A schema is itself an event emitter; listeners registered here are
    independent from the listeners registered on any model class.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__()
        self.name = name
        self.hooks = HookRegistry()
        self.plugins: List[Plugin] = []
        self.logger = get_logger("schema")

    def __repr__(self) -> str:
        label = self.name or hex(id(self))
        return f"<Schema {label}>"

    def pre(self, operation: str, hook: HookHandler) -> "Schema":
        self.hooks.register(PRE, operation, hook)
        return self

    def post(self, operation: str, hook: HookHandler) -> "Schema":
        self.hooks.register(POST, operation, hook)
        return self

    def remove_hook(self, phase: str, operation: str, hook: HookHandler) -> bool:
        return self.hooks.unregister(phase, operation, hook)

    def plugin(self, fn: Plugin, options: Any = None, *, deduplicate: bool = True) -> "Schema":
        """
        Apply ``fn`` to this schema.

        ``fn`` receives the schema, plus ``options`` when given. With
        ``deduplicate`` a function already applied to this schema is skipped.
        """

        if deduplicate and fn in self.plugins:
            self.logger.debug("Plugin %s already applied to %r; skipping", _plugin_name(fn), self)
            return self
        if options is None:
            fn(self)
        else:
            fn(self, options)
        self.plugins.append(fn)
        self.logger.debug("Applied plugin %s to %r", _plugin_name(fn), self)
        return self


def _plugin_name(fn: Plugin) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
