# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for validate_message, ensure_valid and get_message_body."""

from typing import Any

import pytest

from umf.message import (
    UMF_INVALID_MESSAGE,
    InvalidMessageError,
    Message,
    create_message,
    create_message_short,
    ensure_valid,
    get_message_body,
    validate_message,
)

_VALID: dict[str, Any] = {"to": "service:/", "from": "client:/", "body": {}}


class TestValidateMessage:
    def test_fresh_message_is_invalid(self) -> None:
        msg = create_message({})
        assert validate_message(msg) is False
        assert msg.get("from") is None
        assert msg.get("to") is None
        assert msg.get("body") is None

    def test_valid_long(self) -> None:
        assert validate_message(create_message(_VALID)) is True

    def test_valid_short(self) -> None:
        msg = create_message_short({"to": "service:/", "frm": "client:/", "bdy": {"a": 1}})
        assert validate_message(msg) is True

    def test_plain_dict_either_naming(self) -> None:
        assert validate_message({"to": "s:/", "frm": "c:/", "body": {"a": 1}}) is True
        assert validate_message({"to": "s:/", "from": "c:/", "bdy": [1]}) is True

    def test_empty_containers_count_as_present(self) -> None:
        assert validate_message({"to": "s:/", "from": "c:/", "body": {}}) is True
        assert validate_message({"to": "s:/", "frm": "c:/", "bdy": []}) is True

    @pytest.mark.parametrize("missing", ["to", "from", "body"])
    def test_each_required_field(self, missing: str) -> None:
        fields = {"to": "s:/", "from": "c:/", "body": {"k": 1}}
        del fields[missing]
        assert validate_message(fields) is False

    @pytest.mark.parametrize("falsy", ["", 0, 0.0, None, False])
    def test_falsy_counts_as_missing(self, falsy: Any) -> None:
        assert validate_message({"to": falsy, "from": "c:/", "body": {"k": 1}}) is False

    @pytest.mark.parametrize("value", [None, "to", 42, ["to"]])
    def test_non_mapping_never_raises(self, value: Any) -> None:
        assert validate_message(value) is False


class TestEnsureValid:
    def test_passes(self) -> None:
        ensure_valid({"to": "s:/", "from": "c:/", "body": "x"})

    def test_raises(self) -> None:
        with pytest.raises(InvalidMessageError, match="requires"):
            ensure_valid(create_message())
        assert '"to", "from" and "body"' in UMF_INVALID_MESSAGE


class TestGetMessageBody:
    def test_copy_of_mapping(self) -> None:
        body = {"a": 1}
        msg = create_message({"body": body})
        result = get_message_body(msg)
        assert result == {"a": 1}
        assert result is not body

    def test_short_form(self) -> None:
        msg = Message({"bdy": {"a": 1}}, short=True)
        assert get_message_body(msg) == {"a": 1}

    def test_absent(self) -> None:
        assert get_message_body(create_message()) == {}

    def test_list_body_is_copied(self) -> None:
        body = [1, 2]
        result = get_message_body({"body": body})
        assert result == [1, 2]
        assert result is not body

    def test_scalar_body(self) -> None:
        assert get_message_body({"body": "text"}) == "text"
