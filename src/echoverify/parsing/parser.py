# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn raw echo outputs into ParsedResponse records."""

from __future__ import annotations

from collections.abc import Iterable

from ..models.batch import ParsedResponses
from ..models.response import ParsedResponse
from .fields import CODE, HOST, HOSTNAME, PORT, REQUEST_ID, VERSION, extract_field


def parse_response(output: str) -> ParsedResponse:
    """Parse one raw output. Never fails; missing tags leave fields unset."""
    return ParsedResponse(
        body=output,
        id=extract_field(output, REQUEST_ID),
        version=extract_field(output, VERSION),
        port=extract_field(output, PORT),
        code=extract_field(output, CODE),
        host=extract_field(output, HOST),
        hostname=extract_field(output, HOSTNAME),
    )


def parse_responses(outputs: Iterable[str]) -> ParsedResponses:
    return ParsedResponses(parse_response(output) for output in outputs)


__all__ = ["parse_response", "parse_responses"]
