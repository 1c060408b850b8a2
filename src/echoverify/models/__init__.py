# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for echoverify."""

from .batch import NO_RESPONSES, Check, ParsedResponses
from .request import ForwardEchoRequest
from .response import CODE_OK, ParsedResponse

__all__ = [
    "CODE_OK",
    "Check",
    "ForwardEchoRequest",
    "NO_RESPONSES",
    "ParsedResponse",
    "ParsedResponses",
]
