# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parsed representation of a single echo response."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

CODE_OK = "200"


@dataclass(frozen=True)
class ParsedResponse:
    """
    One probe result as reported by the responding echo instance.

    ``body`` is always the raw text; every other field is None when the
    corresponding tag was missing from the body.
    """

    body: str
    id: str | None = None
    version: str | None = None
    port: str | None = None
    code: str | None = None
    host: str | None = None
    hostname: str | None = None

    def is_ok(self) -> bool:
        """Whether the status code denotes a successful request."""
        return self.code == CODE_OK

    def count(self, text: str) -> int:
        """Count non-overlapping occurrences of ``text`` within the body."""
        return self.body.count(text)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
