# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Echo response parsing exports."""

from .fields import FIELD_PATTERNS, extract_field, extract_fields
from .parser import parse_response, parse_responses

__all__ = [
    "FIELD_PATTERNS",
    "extract_field",
    "extract_fields",
    "parse_response",
    "parse_responses",
]
