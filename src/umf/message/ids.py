# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

"""Identifier and clock collaborators used when stamping new messages."""

import secrets
from collections.abc import Callable
from uuid import uuid4

IdFactory = Callable[[], str]
Clock = Callable[[], str]

# 9 random bytes -> 12 url-safe characters.
_SHORT_ID_BYTES = 9


def create_message_id() -> str:
    """Full-form message id: a random UUID in canonical string form."""
    return str(uuid4())


def create_short_message_id() -> str:
    """Compact message id for short-form messages."""
    return secrets.token_urlsafe(_SHORT_ID_BYTES)
