# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport exports."""

from .adapters import StubEchoTransport
from .client import EchoTransport, create_default_transport
from .httpx_transport import HttpxEchoTransport, normalize_address

__all__ = [
    "EchoTransport",
    "HttpxEchoTransport",
    "StubEchoTransport",
    "create_default_transport",
    "normalize_address",
]
