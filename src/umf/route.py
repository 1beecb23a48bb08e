# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

"""Parser for the ``to`` routing string.

Grammar, left to right::

    [instance[-subID]@]serviceName[:[VERB]apiRoute]

Pure function, no I/O. Malformed input is reported through
:attr:`RouteResult.error`, never raised.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

_log = logging.getLogger(__name__)

ERR_SEGMENTS = "route field has invalid number of routable segments"
ERR_HTTP_VERB = "route field has ill-formed HTTP method verb in segment"

# Canonical 8-4-4-4-12 UUID at the start of an instance segment.
_UUID_PREFIX = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}(?=-|$)",
    re.IGNORECASE,
)


class RoutingError(Exception):
    """Raised by :meth:`RouteResult.raise_for_error` for unroutable strings."""


@dataclass(frozen=True)
class RouteResult:
    """Components of a routing string.

    When ``error`` is set the other fields are partial and must not be
    used for routing. ``http_method`` is None when no ``[VERB]`` was given.
    """

    instance: str = ""
    sub_id: str = ""
    service_name: str = ""
    http_method: str | None = None
    api_route: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise RoutingError(self.error)

    def as_dict(self) -> dict[str, Any]:
        """camelCase record, as carried alongside UMF messages."""
        return {
            "instance": self.instance,
            "subID": self.sub_id,
            "serviceName": self.service_name,
            "httpMethod": self.http_method,
            "apiRoute": self.api_route,
            "error": self.error,
        }


def _split_instance(segment: str) -> tuple[str, str]:
    """Split ``instance[-subID]``. Tokens past the sub id are dropped.

    A leading canonical UUID is one token even though it contains dashes.
    """
    match = _UUID_PREFIX.match(segment)
    if match:
        rest = segment[match.end() + 1 :].split("-")
        return match.group(0), rest[0]
    tokens = segment.split("-")
    return tokens[0], tokens[1] if len(tokens) > 1 else ""


def parse_route(to_value: str) -> RouteResult:
    """Parse a ``to`` field into a :class:`RouteResult`."""
    instance = ""
    sub_id = ""
    remainder = to_value
    if "@" in remainder:
        segment, remainder = remainder.split("@", 1)
        instance, sub_id = _split_instance(segment)

    segments = remainder.split(":")
    # Guard only: str.split always returns at least one element.
    if not segments:
        _log.debug("unroutable %r: %s", to_value, ERR_SEGMENTS)
        return RouteResult(instance=instance, sub_id=sub_id, error=ERR_SEGMENTS)

    # Keep "http://host" / "https://host" together.
    if segments[0].startswith("http") and len(segments) > 1:
        segments[0:2] = [f"{segments[0]}:{segments[1]}"]
    service_name = segments[0]
    api_route = ":".join(segments[1:])

    http_method: str | None = None
    if api_route.startswith("["):
        close = api_route.find("]")
        if close < 0:
            _log.debug("unroutable %r: %s", to_value, ERR_HTTP_VERB)
            return RouteResult(
                instance=instance,
                sub_id=sub_id,
                service_name=service_name,
                api_route=api_route,
                error=ERR_HTTP_VERB,
            )
        http_method = api_route[1:close].lower()
        # An empty verb "[]" stays in the route.
        if http_method:
            api_route = api_route[close + 1 :]

    return RouteResult(
        instance=instance,
        sub_id=sub_id,
        service_name=service_name,
        http_method=http_method,
        api_route=api_route,
    )
