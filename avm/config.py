"""Runtime switches read from the environment when :mod:`avm` is imported.

``AVM_CHECK_PARAMS``
    Enables argument and bounds checking in every kernel (default on).
``AVM_ARRAY_BACKEND``
    ``list`` (default) or ``numpy``; selects what :func:`avm.array.new_array`
    allocates.
``AVM_EPSILON``
    Tolerance used by the almost-equality helpers (default ``1e-9``).
"""

from __future__ import annotations

import logging
import os
from typing import Dict

LOGGER = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-9
_BACKENDS = ("list", "numpy")


def _parse_bool_env(value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return None


def _read_check_params() -> bool:
    raw = os.getenv("AVM_CHECK_PARAMS")
    if raw is None:
        return True
    parsed = _parse_bool_env(raw)
    if parsed is None:
        LOGGER.warning("Ignoring AVM_CHECK_PARAMS=%r; parameter checks stay enabled", raw)
        return True
    return parsed


def _read_backend() -> str:
    preference = os.getenv("AVM_ARRAY_BACKEND", "list").strip().lower()
    if preference not in _BACKENDS:
        LOGGER.warning("Unknown AVM_ARRAY_BACKEND=%r; falling back to 'list'", preference)
        return "list"
    return preference


def _read_epsilon() -> float:
    raw = os.getenv("AVM_EPSILON")
    if raw is None:
        return DEFAULT_EPSILON
    try:
        value = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring AVM_EPSILON=%r; using %g", raw, DEFAULT_EPSILON)
        return DEFAULT_EPSILON
    if not value > 0.0:
        LOGGER.warning("AVM_EPSILON must be positive, got %r; using %g", raw, DEFAULT_EPSILON)
        return DEFAULT_EPSILON
    return value


CHECK_PARAMS = _read_check_params()
ARRAY_BACKEND = _read_backend()
EPSILON = _read_epsilon()

LOGGER.info(
    "avm configured: check_params=%s backend=%s epsilon=%g",
    CHECK_PARAMS,
    ARRAY_BACKEND,
    EPSILON,
)


def describe() -> Dict[str, object]:
    """Return the active settings."""

    return {
        "check_params": CHECK_PARAMS,
        "array_backend": ARRAY_BACKEND,
        "epsilon": EPSILON,
    }
