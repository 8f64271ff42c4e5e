"""
Registry resolving model names to document classes.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING, Dict, List, Type

from ..errors import ModelNotRegisteredError

if TYPE_CHECKING:
    from .document import Document


class ModelRegistry:
    def __init__(self) -> None:
        self.models: Dict[str, Type["Document"]] = {}
        self._lock = RLock()

    def register(self, model: Type["Document"]) -> None:
        # Re-declaring a model name replaces the previous class.
        with self._lock:
            self.models[model.model_name] = model

    def get(self, name: str) -> Type["Document"]:
        with self._lock:
            try:
                return self.models[name]
            except KeyError as exc:
                raise ModelNotRegisteredError(f"Model '{name}' has not been registered") from exc

    def names(self) -> List[str]:
        with self._lock:
            return list(self.models)

    def snapshot(self) -> Dict[str, Type["Document"]]:
        with self._lock:
            return dict(self.models)

    def restore(self, models: Dict[str, Type["Document"]]) -> None:
        with self._lock:
            self.models = dict(models)

    def clear(self) -> None:
        with self._lock:
            self.models.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self.models


registry = ModelRegistry()
