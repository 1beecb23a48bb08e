# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

from umf.message.codec import safe_json_dumps, to_json, to_long, to_object, to_short
from umf.message.envelope import Message
from umf.message.factory import MessageFactory, create_message, create_message_short
from umf.message.fields import FIELDS, LONG_TO_SHORT, SHORT_TO_LONG
from umf.message.ids import create_message_id, create_short_message_id
from umf.message.validator import (
    UMF_INVALID_MESSAGE,
    InvalidMessageError,
    ensure_valid,
    get_message_body,
    validate_message,
)

__all__ = [
    "FIELDS",
    "InvalidMessageError",
    "LONG_TO_SHORT",
    "Message",
    "MessageFactory",
    "SHORT_TO_LONG",
    "UMF_INVALID_MESSAGE",
    "create_message",
    "create_message_id",
    "create_message_short",
    "create_short_message_id",
    "ensure_valid",
    "get_message_body",
    "safe_json_dumps",
    "to_json",
    "to_long",
    "to_object",
    "to_short",
    "validate_message",
]
