# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

"""Message construction.

The factory stamps identity, time and protocol version, then lays the
caller's overrides on top. No validation happens here: callers supply
``to``/``from``/``body`` before or after creation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from umf import UMF_VERSION, now_iso
from umf.message.envelope import Message
from umf.message.ids import (
    Clock,
    IdFactory,
    create_message_id,
    create_short_message_id,
)


class MessageFactory:
    """Builds long- or short-form envelopes from injected generators."""

    def __init__(
        self,
        *,
        id_factory: IdFactory = create_message_id,
        short_id_factory: IdFactory = create_short_message_id,
        clock: Clock = now_iso,
        version: str = UMF_VERSION,
    ) -> None:
        self._id_factory = id_factory
        self._short_id_factory = short_id_factory
        self._clock = clock
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    def create_message(
        self,
        overrides: Mapping[str, Any] | None = None,
        short_format: bool = False,
    ) -> Message:
        """Return a new message; any field in *overrides* replaces its default."""
        if short_format:
            msg = Message(
                {
                    "mid": self._short_id_factory(),
                    "ts": self._clock(),
                    "ver": self._version,
                },
                short=True,
            )
        else:
            msg = Message(
                {
                    "mid": self._id_factory(),
                    "timestamp": self._clock(),
                    "version": self._version,
                }
            )
        if overrides:
            msg.update(overrides)
        return msg

    def create_message_short(
        self, overrides: Mapping[str, Any] | None = None
    ) -> Message:
        return self.create_message(overrides, short_format=True)


_default_factory = MessageFactory()


def create_message(
    overrides: Mapping[str, Any] | None = None,
    short_format: bool = False,
) -> Message:
    """Create a message with the default generators."""
    return _default_factory.create_message(overrides, short_format)


def create_message_short(overrides: Mapping[str, Any] | None = None) -> Message:
    """Shorthand for ``create_message(overrides, short_format=True)``."""
    return _default_factory.create_message_short(overrides)
