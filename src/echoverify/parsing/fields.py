# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Field extraction for echo response bodies.

Echo instances report what they saw as ``Tag=value`` lines. Relayed outputs may
prefix each line (``[0 body] Host=a.com``), so patterns are searched anywhere in
the text rather than anchored to line start. Values run to end of line and are
kept as text; callers compare them as text.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

REQUEST_ID = "id"
VERSION = "version"
PORT = "port"
CODE = "code"
HOST = "host"
HOSTNAME = "hostname"

# The request id is echoed from a transport header, so its casing varies.
FIELD_PATTERNS: Mapping[str, re.Pattern[str]] = {
    REQUEST_ID: re.compile(r"X-Request-Id=(.*)", re.IGNORECASE),
    VERSION: re.compile(r"ServiceVersion=(.*)"),
    PORT: re.compile(r"ServicePort=(.*)"),
    CODE: re.compile(r"StatusCode=(.*)"),
    HOST: re.compile(r"Host=(.*)"),
    HOSTNAME: re.compile(r"Hostname=(.*)"),
}


def extract_field(text: str, field: str) -> str | None:
    """Return the first value tagged for ``field`` in ``text``, or None when absent."""
    pattern = FIELD_PATTERNS.get(field)
    if pattern is None:
        raise KeyError(f"Unknown echo field: {field}")
    match = pattern.search(text or "")
    if not match:
        return None
    return match.group(1)


def extract_fields(text: str) -> dict[str, str | None]:
    return {field: extract_field(text, field) for field in FIELD_PATTERNS}


__all__ = [
    "CODE",
    "FIELD_PATTERNS",
    "HOST",
    "HOSTNAME",
    "PORT",
    "REQUEST_ID",
    "VERSION",
    "extract_field",
    "extract_fields",
]
