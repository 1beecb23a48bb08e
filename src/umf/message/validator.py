# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

"""Presence checks for the fields a message needs before dispatch."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from umf.message.fields import is_present, lookup

UMF_INVALID_MESSAGE = 'UMF message requires "to", "from" and "body" fields'


class InvalidMessageError(ValueError):
    """Raised by :func:`ensure_valid` when a required field is missing."""


def validate_message(message: Any) -> bool:
    """True iff ``to``, ``from``/``frm`` and ``body``/``bdy`` are all present.

    Does not look inside ``to`` or ``body``. Never raises.
    """
    if not isinstance(message, Mapping):
        return False
    return (
        is_present(message.get("to"))
        and is_present(lookup(message, "from"))
        and is_present(lookup(message, "body"))
    )


def ensure_valid(message: Any) -> None:
    """Raise :class:`InvalidMessageError` if *message* fails validation."""
    if not validate_message(message):
        raise InvalidMessageError(UMF_INVALID_MESSAGE)


def get_message_body(message: Mapping[str, Any]) -> Any:
    """Shallow copy of the payload, or an empty dict when there is none."""
    body = lookup(message, "body")
    if not is_present(body):
        return {}
    if isinstance(body, Mapping):
        return dict(body)
    return copy.copy(body)
