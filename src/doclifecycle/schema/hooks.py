"""
Pre/post hook registry run around document persistence operations.
"""

from __future__ import annotations

import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Tuple

from ..errors import HookRegistrationError

if TYPE_CHECKING:
    from ..core.document import Document


HookHandler = Callable[["Document", "HookContext"], None]

PRE = "pre"
POST = "post"
PHASES: Tuple[str, ...] = (PRE, POST)
OPERATIONS: Tuple[str, ...] = ("save", "remove")


@dataclass
class HookContext:
    """
    State shared by the pre and post hooks of one persistence call.

    A new context is built for every ``save()`` / ``remove()`` invocation,
    so values placed in ``state`` never outlive that invocation.
    """

    operation: str
    invocation_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    state: Dict[str, Any] = field(default_factory=dict)


class HookRegistry:
    """
    Stores hooks keyed by phase and operation.
    """

    def __init__(self) -> None:
        self._hooks: Dict[Tuple[str, str], List[HookHandler]] = defaultdict(list)

    def register(self, phase: str, operation: str, hook: HookHandler) -> None:
        self._validate(phase, operation)
        if not callable(hook):
            raise HookRegistrationError(
                f"Hook for {phase}('{operation}') must be callable, got {hook!r}"
            )
        self._hooks[(phase, operation)].append(hook)

    def unregister(self, phase: str, operation: str, hook: HookHandler) -> bool:
        self._validate(phase, operation)
        hooks = self._hooks.get((phase, operation), [])
        if hook in hooks:
            hooks.remove(hook)
            return True
        return False

    def hooks_for(self, phase: str, operation: str) -> List[HookHandler]:
        return list(self._hooks.get((phase, operation), []))

    def run(self, phase: str, operation: str, document: "Document", context: HookContext) -> None:
        for hook in self.hooks_for(phase, operation):
            hook(document, context)

    def clear(self) -> None:
        self._hooks.clear()

    @staticmethod
    def _validate(phase: str, operation: str) -> None:
        if phase not in PHASES:
            raise HookRegistrationError(f"Unknown hook phase '{phase}'; expected one of {PHASES}")
        if operation not in OPERATIONS:
            raise HookRegistrationError(
                f"Unsupported hook operation '{operation}'; expected one of {OPERATIONS}"
            )
