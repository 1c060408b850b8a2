# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factory."""

from typing import Protocol

from ..config import EchoSettings, load_echo_settings
from ..models.request import ForwardEchoRequest


class EchoTransport(Protocol):
    """
    Minimal protocol for issuing forward calls to one echo instance.

    ``forward`` returns one raw text output per probe, in probe order, or raises
    ``EchoTransportError`` when the call itself fails.
    """

    def forward(self, request: ForwardEchoRequest, *, timeout: float | None = None) -> list[str]: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_transport(address: str, settings: EchoSettings | None = None) -> EchoTransport:
    """Factory for the default httpx-backed transport."""
    from .httpx_transport import HttpxEchoTransport

    return HttpxEchoTransport(address, settings or load_echo_settings())
