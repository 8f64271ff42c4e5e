"""
Document base classes and model metadata for doclifecycle.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar

from ..config import resolve_slow_operation_ms
from ..errors import ModelConfigurationError
from ..events import EventEmitter, Listener
from ..schema import POST, PRE, HookContext, Schema
from ..utils import collection_name_for, correlation_scope, get_logger, time_call
from .collection import Collection
from .registry import registry

logger = get_logger("core.document")

TDocument = TypeVar("TDocument", bound="Document")


class DocumentMeta(type):
    """
    Metaclass binding each concrete model to its schema, collection and events.
    """

    def __new__(mcls, name: str, bases: tuple[type, ...], attrs: Dict[str, Any]) -> "DocumentMeta":
        cls = super().__new__(mcls, name, bases, attrs)
        if not bases:
            cls._abstract = True
            return cls

        # Meta is read from the class body only, so abstract-ness is not inherited.
        meta = attrs.get("Meta")
        if getattr(meta, "abstract", False):
            cls._abstract = True
            return cls

        schema = getattr(cls, "schema", None)
        if not isinstance(schema, Schema):
            raise ModelConfigurationError(
                f"Model '{name}' must declare a 'schema' attribute holding a Schema instance"
            )

        cls._abstract = False
        cls.model_name = getattr(meta, "name", name)
        cls.collection_name = getattr(meta, "collection", collection_name_for(cls.model_name))
        cls._events = EventEmitter()
        cls.collection = Collection(cls.collection_name)
        registry.register(cls)
        logger.debug("Registered model %s (collection=%s)", cls.model_name, cls.collection_name)
        return cls


class Document(metaclass=DocumentMeta):
    """
    Base document. Concrete models declare ``schema = Schema(...)``.

    Each model class owns an event registry reachable through the
    ``on``/``once``/``off``/``emit`` class methods.
    """

    schema: Schema
    model_name: str
    collection_name: str
    collection: Collection
    _events: EventEmitter
    _abstract: bool

    def __init__(self, **data: Any) -> None:
        if type(self)._abstract:
            raise ModelConfigurationError(
                f"Cannot instantiate abstract model '{type(self).__name__}'"
            )
        self.id: Optional[str] = None
        self.is_new = True
        self._data: Dict[str, Any] = dict(data)

    def __repr__(self) -> str:
        parts = ", ".join(f"{key}={value!r}" for key, value in self._data.items())
        return f"<{type(self).__name__} id={self.id!r} {parts}>"

    # Data access -------------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **self._data}

    # Model resolution --------------------------------------------------
    def get_model(self) -> Type["Document"]:
        return self.model(type(self).model_name)

    @staticmethod
    def model(name: str) -> Type["Document"]:
        return registry.get(name)

    # Persistence -------------------------------------------------------
    def save(self: TDocument) -> TDocument:
        model = self._concrete_model()
        context = HookContext("save")
        with correlation_scope(context.invocation_id), time_call(
            f"{model.model_name}.save",
            logger,
            threshold_ms=resolve_slow_operation_ms(),
            model_name=model.model_name,
        ):
            model.schema.hooks.run(PRE, "save", self, context)
            if self.is_new or self.id is None:
                if self.id is None:
                    self.id = uuid.uuid4().hex
                model.collection.insert(self.id, self._data)
            else:
                model.collection.update(self.id, self._data)
            self.is_new = False
            model.schema.hooks.run(POST, "save", self, context)
        return self

    def remove(self: TDocument) -> TDocument:
        model = self._concrete_model()
        context = HookContext("remove")
        with correlation_scope(context.invocation_id), time_call(
            f"{model.model_name}.remove",
            logger,
            threshold_ms=resolve_slow_operation_ms(),
            model_name=model.model_name,
        ):
            model.schema.hooks.run(PRE, "remove", self, context)
            if self.id is not None:
                model.collection.delete(self.id)
            model.schema.hooks.run(POST, "remove", self, context)
        return self

    @classmethod
    def find_by_id(cls: Type[TDocument], document_id: str) -> Optional[TDocument]:
        data = cls._concrete_model().collection.get(document_id)
        if data is None:
            return None
        document = cls()
        document._data = data
        document.id = document_id
        document.is_new = False
        return document

    @classmethod
    def count(cls) -> int:
        return len(cls._concrete_model().collection)

    # Model-level events ------------------------------------------------
    @classmethod
    def on(cls, event: str, listener: Optional[Listener] = None):
        result = cls._model_events().on(event, listener)
        return cls if listener is not None else result

    @classmethod
    def once(cls, event: str, listener: Optional[Listener] = None):
        result = cls._model_events().once(event, listener)
        return cls if listener is not None else result

    @classmethod
    def off(cls, event: str, listener: Listener):
        cls._model_events().off(event, listener)
        return cls

    @classmethod
    def emit(cls, event: str, *args: Any, **kwargs: Any) -> bool:
        return cls._model_events().emit(event, *args, **kwargs)

    @classmethod
    def listeners(cls, event: str) -> List[Listener]:
        return cls._model_events().listeners(event)

    @classmethod
    def listener_count(cls, event: str) -> int:
        return cls._model_events().listener_count(event)

    @classmethod
    def remove_all_listeners(cls, event: Optional[str] = None):
        cls._model_events().remove_all_listeners(event)
        return cls

    @classmethod
    def _concrete_model(cls) -> Type["Document"]:
        if cls._abstract:
            raise ModelConfigurationError(f"Model '{cls.__name__}' is abstract")
        return cls

    @classmethod
    def _model_events(cls) -> EventEmitter:
        return cls._concrete_model()._events
