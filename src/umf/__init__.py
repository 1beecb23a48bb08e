# SPDX-FileCopyrightText: 2026 UMF authors
#
# SPDX-License-Identifier: Apache-2.0

from datetime import UTC, datetime

UMF_VERSION = "UMF/1.4.3"


def now_iso() -> str:
    return datetime.now(UTC).isoformat()
