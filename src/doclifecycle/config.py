"""
Configuration for the lifecycle events plugin and the document host.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import LifecycleConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

SLOW_OPERATION_ENV = "DOCLIFECYCLE_SLOW_OPERATION_MS"


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise LifecycleConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_int(value: str, *, key: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise LifecycleConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc


def _parse_level(value: str, *, key: str) -> int:
    candidate = value.strip()
    if candidate.lstrip("-").isdigit():
        return int(candidate)
    level = logging.getLevelName(candidate.upper())
    if isinstance(level, int):
        return level
    raise LifecycleConfigurationError(f"Invalid log level for '{key}': {value!r}")


@dataclass(frozen=True)
class LifecycleOptions:
    """
    Options accepted by :func:`doclifecycle.plugins.lifecycle_events_plugin`.

    ``trace`` logs every emitted lifecycle event at ``trace_level``.
    ``state_key`` names the slot in the per-invocation hook state where the
    insert/update decision is kept between the before and after phases.
    """

    trace: bool = False
    trace_level: int = logging.DEBUG
    state_key: str = "lifecycle.was_new"

    @classmethod
    def from_env(
        cls, prefix: str = "DOCLIFECYCLE_", environ: Optional[Mapping[str, str]] = None
    ) -> "LifecycleOptions":
        """
        Build options from ``<prefix>TRACE`` and ``<prefix>TRACE_LEVEL``.
        """

        env = os.environ if environ is None else environ
        values = {}
        trace_key = f"{prefix}TRACE"
        if env.get(trace_key):
            values["trace"] = _parse_bool(env[trace_key], key=trace_key)
        level_key = f"{prefix}TRACE_LEVEL"
        if env.get(level_key):
            values["trace_level"] = _parse_level(env[level_key], key=level_key)
        return cls(**values)


def resolve_slow_operation_ms(
    default: int = 100,
    override: Optional[int] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Threshold above which save/remove timings are logged as warnings.
    """

    if override is not None:
        return override
    env = os.environ if environ is None else environ
    raw = env.get(SLOW_OPERATION_ENV)
    if not raw:
        return default
    return _parse_int(raw, key=SLOW_OPERATION_ENV)
