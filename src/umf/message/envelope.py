# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

"""UMF message envelope with transparent long/short field access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

from umf.message.fields import resolve_key


class Message(MutableMapping[str, Any]):
    """A UMF envelope stored in exactly one naming form.

    Every key is routed through the rename tables before touching
    storage, so ``msg["from"]`` and ``msg["frm"]`` address the same
    field whichever form the message is in. Iteration yields the
    physical keys only.
    """

    __slots__ = ("_fields", "_short")

    def __init__(
        self,
        fields: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        *,
        short: bool = False,
    ) -> None:
        self._fields: dict[str, Any] = {}
        self._short = short
        if fields is not None:
            # Normalise incoming keys so both names never coexist.
            self.update(fields)

    @property
    def short(self) -> bool:
        """True for short-form (``frm``/``ts``/``ver``/``bdy``) storage."""
        return self._short

    def __getitem__(self, name: str) -> Any:
        return self._fields[resolve_key(name, self._short)]

    def __setitem__(self, name: str, value: Any) -> None:
        self._fields[resolve_key(name, self._short)] = value

    def __delitem__(self, name: str) -> None:
        del self._fields[resolve_key(name, self._short)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Message({self._fields!r}, short={self._short})"

    def copy(self) -> Message:
        return Message(self._fields, short=self._short)


__all__ = ["Message"]
