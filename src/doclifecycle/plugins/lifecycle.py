"""
Schema plugin emitting lifecycle events on the model class and the schema.

Usage::

    from doclifecycle import Document, Schema
    from doclifecycle.plugins import lifecycle_events_plugin

    book_schema = Schema("book")
    book_schema.plugin(lifecycle_events_plugin)

    class Book(Document):
        schema = book_schema

    @Book.on("beforeInsert")
    def stamp(book):
        book["created"] = True

Events fired, each with the document as the only argument:

- ``beforeSave`` / ``afterSave`` around every save
- ``beforeInsert`` / ``afterInsert`` around saves of new documents
- ``beforeUpdate`` / ``afterUpdate`` around saves of existing documents
- ``beforeRemove`` / ``afterRemove`` around every remove

Every event is delivered to the model's listeners first, then to the
schema's listeners.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

from ..config import LifecycleOptions
from ..schema import POST, PRE, HookContext
from ..utils import get_logger

if TYPE_CHECKING:
    from ..core.document import Document
    from ..schema import Schema


@dataclass(frozen=True)
class LifecycleEvent:
    name: str
    phase: str
    operation: str

    def __str__(self) -> str:
        return self.name


BEFORE_SAVE = LifecycleEvent("beforeSave", PRE, "save")
AFTER_SAVE = LifecycleEvent("afterSave", POST, "save")
BEFORE_INSERT = LifecycleEvent("beforeInsert", PRE, "save")
AFTER_INSERT = LifecycleEvent("afterInsert", POST, "save")
BEFORE_UPDATE = LifecycleEvent("beforeUpdate", PRE, "save")
AFTER_UPDATE = LifecycleEvent("afterUpdate", POST, "save")
BEFORE_REMOVE = LifecycleEvent("beforeRemove", PRE, "remove")
AFTER_REMOVE = LifecycleEvent("afterRemove", POST, "remove")

LIFECYCLE_EVENTS: Tuple[LifecycleEvent, ...] = (
    BEFORE_SAVE,
    AFTER_SAVE,
    BEFORE_INSERT,
    AFTER_INSERT,
    BEFORE_UPDATE,
    AFTER_UPDATE,
    BEFORE_REMOVE,
    AFTER_REMOVE,
)

ModelResolver = Callable[["Document"], Any]


def _default_resolver(document: "Document") -> Any:
    return document.get_model()


class LifecycleNotifier:
    """
    Translates a schema's save/remove hooks into named lifecycle events.
    """

    def __init__(
        self,
        schema: "Schema",
        *,
        options: Optional[LifecycleOptions] = None,
        resolve_model: Optional[ModelResolver] = None,
    ) -> None:
        self.schema = schema
        self.options = options or LifecycleOptions()
        self.resolve_model = resolve_model or _default_resolver
        self.logger = get_logger("plugins.lifecycle")
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> "LifecycleNotifier":
        if self._attached:
            return self
        self.schema.pre("save", self.before_save)
        self.schema.post("save", self.after_save)
        self.schema.pre("remove", self.before_remove)
        self.schema.post("remove", self.after_remove)
        self._attached = True
        self.logger.debug("Lifecycle events attached to %r", self.schema)
        return self

    def detach(self) -> "LifecycleNotifier":
        if not self._attached:
            return self
        self.schema.remove_hook(PRE, "save", self.before_save)
        self.schema.remove_hook(POST, "save", self.after_save)
        self.schema.remove_hook(PRE, "remove", self.before_remove)
        self.schema.remove_hook(POST, "remove", self.after_remove)
        self._attached = False
        self.logger.debug("Lifecycle events detached from %r", self.schema)
        return self

    # Hooks -------------------------------------------------------------
    def before_save(self, document: "Document", context: HookContext) -> None:
        model = self.resolve_model(document)
        self._notify(model, BEFORE_SAVE, document)
        was_new = bool(document.is_new)
        context.state[self.options.state_key] = was_new
        self._notify(model, BEFORE_INSERT if was_new else BEFORE_UPDATE, document)

    def after_save(self, document: "Document", context: HookContext) -> None:
        model = self.resolve_model(document)
        self._notify(model, AFTER_SAVE, document)
        # A missing flag means the before phase did not run for this call.
        was_new = context.state.pop(self.options.state_key, False)
        self._notify(model, AFTER_INSERT if was_new else AFTER_UPDATE, document)

    def before_remove(self, document: "Document", context: HookContext) -> None:
        self._notify(self.resolve_model(document), BEFORE_REMOVE, document)

    def after_remove(self, document: "Document", context: HookContext) -> None:
        self._notify(self.resolve_model(document), AFTER_REMOVE, document)

    def _notify(self, model: Any, event: LifecycleEvent, document: "Document") -> None:
        if self.options.trace:
            self.logger.log(
                self.options.trace_level,
                "%s %s on %r",
                event.name,
                getattr(model, "model_name", model),
                document,
                extra={"event": event.name, "document_id": getattr(document, "id", None)},
            )
        model.emit(event.name, document)
        self.schema.emit(event.name, document)


def lifecycle_events_plugin(
    schema: "Schema", options: Optional[LifecycleOptions] = None
) -> LifecycleNotifier:
    """
    Attach lifecycle events to ``schema`` and return the notifier.
    """

    return LifecycleNotifier(schema, options=options).attach()
