# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

"""Long/short field-name tables.

Fixed at import time and never mutated. Fields not listed in the
rename tables (mid, rmid, to, via, for) share one name in both forms.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

SHORT_TO_LONG: Mapping[str, str] = MappingProxyType(
    {
        "frm": "from",
        "ts": "timestamp",
        "ver": "version",
        "bdy": "body",
    }
)
LONG_TO_SHORT: Mapping[str, str] = MappingProxyType(
    {v: k for k, v in SHORT_TO_LONG.items()}
)

# (long, short) pairs in wire order.
FIELDS: tuple[tuple[str, str], ...] = (
    ("to", "to"),
    ("from", "frm"),
    ("mid", "mid"),
    ("rmid", "rmid"),
    ("timestamp", "ts"),
    ("version", "ver"),
    ("via", "via"),
    ("for", "for"),
    ("body", "bdy"),
)


def resolve_key(name: str, short: bool) -> str:
    """Map *name* onto the physical key used by a message of the given form."""
    if short:
        return LONG_TO_SHORT.get(name, name)
    return SHORT_TO_LONG.get(name, name)


def is_present(value: Any) -> bool:
    """Presence rule shared by validation and conversion.

    None, False, empty string, zero and NaN are missing. Empty dicts and
    lists are present: a message with ``body={}`` is complete.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, int | float):
        # NaN != NaN
        return value == value and value != 0
    return True


def lookup(message: Mapping[str, Any], long_name: str) -> Any:
    """Read a semantic field under either of its names.

    The short name is tried whenever the long one is missing.
    """
    value = message.get(long_name)
    if is_present(value):
        return value
    return message.get(LONG_TO_SHORT.get(long_name, long_name))
