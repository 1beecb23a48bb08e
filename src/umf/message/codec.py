# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

"""Conversion between long and short form, plain dicts and JSON.

All functions return new objects; the source message is left untouched.
Only present fields survive a form conversion. ``None``, ``False``, ``""``
and ``0`` are treated as absent, the same rule the validator uses.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from umf.message.envelope import Message
from umf.message.fields import FIELDS, is_present, lookup

_log = logging.getLogger(__name__)

CIRCULAR = "[Circular]"
# Whole-document replacement when nesting exceeds the interpreter's stack.
TOO_DEEP = "[TooDeep]"

Serializer = Callable[[Any], str]


def to_short(message: Mapping[str, Any]) -> Message:
    """Copy the populated semantic fields into a short-form message."""
    converted = Message(short=True)
    for long_name, short_name in FIELDS:
        value = lookup(message, long_name)
        if is_present(value):
            converted[short_name] = value
    return converted


def to_long(message: Mapping[str, Any]) -> Message:
    """Copy the populated semantic fields into a long-form message."""
    converted = Message()
    for long_name, _short_name in FIELDS:
        value = lookup(message, long_name)
        if is_present(value):
            converted[long_name] = value
    return converted


def to_object(message: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow plain-dict copy of the fields as stored. No renaming."""
    return {key: message[key] for key in message}


def to_json(
    message: Mapping[str, Any], serializer: Serializer | None = None
) -> str:
    """Serialise the plain-dict projection of *message*."""
    dumps = serializer or safe_json_dumps
    return dumps(to_object(message))


def safe_json_dumps(value: Any) -> str:
    """``json.dumps`` that never raises.

    Cyclic references are replaced by :data:`CIRCULAR`, NaN and infinities
    by ``null``, non-string keys and non-JSON values by their ``str()``.
    Nesting too deep to walk yields the JSON string :data:`TOO_DEEP`.
    """
    fallbacks: list[str] = []
    try:
        sanitized = _sanitize(value, set(), fallbacks)
        encoded = json.dumps(sanitized, allow_nan=False)
    except RecursionError:
        _log.warning("value nested too deeply to serialise")
        return json.dumps(TOO_DEEP)
    if fallbacks:
        _log.warning(
            "substituted %d unserialisable value(s): %s",
            len(fallbacks),
            ", ".join(fallbacks),
        )
    return encoded


def _sanitize(value: Any, active: set[int], fallbacks: list[str]) -> Any:
    """Recursively copy *value* into something ``json.dumps`` accepts.

    *active* holds ids of the containers on the current path; a container
    seen again below itself is a cycle.
    """
    if isinstance(value, float) and not math.isfinite(value):
        fallbacks.append(repr(value))
        return None
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, Mapping | list | tuple):
        marker = id(value)
        if marker in active:
            fallbacks.append(CIRCULAR)
            return CIRCULAR
        active.add(marker)
        try:
            if isinstance(value, Mapping):
                return {
                    _sanitize_key(k, fallbacks): _sanitize(v, active, fallbacks)
                    for k, v in value.items()
                }
            return [_sanitize(item, active, fallbacks) for item in value]
        finally:
            active.discard(marker)
    fallbacks.append(type(value).__name__)
    return str(value)


def _sanitize_key(key: Any, fallbacks: list[str]) -> str | int | float | bool | None:
    if isinstance(key, float) and not math.isfinite(key):
        fallbacks.append(f"key:{key!r}")
        return str(key)
    if key is None or isinstance(key, str | int | float | bool):
        return key
    fallbacks.append(f"key:{type(key).__name__}")
    return str(key)

