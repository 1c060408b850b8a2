# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
echoverify package entrypoint.

A verification client for integration tests that drive echo services: it asks
one echo instance to forward probes to a target, parses the replies into
ParsedResponse records and offers aggregating checks over the resulting batch.
The transport is abstracted behind an injectable interface.
"""

from .client import EchoClient
from .config import EchoSettings, load_echo_settings
from .errors import CheckError, EchoTransportError, ErrorCategory
from .log import setup_logging
from .models import CODE_OK, ForwardEchoRequest, ParsedResponse, ParsedResponses
from .parsing import extract_field, parse_response, parse_responses
from .transport import EchoTransport, HttpxEchoTransport, StubEchoTransport, create_default_transport
from .version import __version__

__all__ = [
    "CODE_OK",
    "CheckError",
    "EchoClient",
    "EchoSettings",
    "EchoTransport",
    "EchoTransportError",
    "ErrorCategory",
    "ForwardEchoRequest",
    "HttpxEchoTransport",
    "ParsedResponse",
    "ParsedResponses",
    "StubEchoTransport",
    "__version__",
    "create_default_transport",
    "extract_field",
    "load_echo_settings",
    "parse_response",
    "parse_responses",
    "setup_logging",
]
