# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client for forwarding echo requests between echo applications."""

from __future__ import annotations

import logging

from .config import EchoSettings
from .errors import EchoTransportError
from .models.batch import ParsedResponses
from .models.request import ForwardEchoRequest
from .parsing.parser import parse_responses
from .transport.client import EchoTransport, create_default_transport

logger = logging.getLogger(__name__)


class EchoClient:
    """
    Owns one transport to a single echo instance.

    The transport is opened at construction and released by ``close``, which
    is safe to call more than once. Use the client as a context manager so the
    transport is released on every exit path.
    """

    def __init__(
        self,
        address: str,
        *,
        transport: EchoTransport | None = None,
        settings: EchoSettings | None = None,
    ):
        self.address = address
        self._transport: EchoTransport | None = transport or create_default_transport(address, settings)

    @property
    def closed(self) -> bool:
        return self._transport is None

    def forward_echo(self, request: ForwardEchoRequest, *, timeout: float | None = None) -> ParsedResponses:
        """
        Send ``request`` and parse every output.

        Only raises when the forward call fails; response content never causes
        an error. ``timeout`` is handed to the transport unchanged.
        """
        if self._transport is None:
            raise RuntimeError("EchoClient is closed")

        logger.debug("Forwarding %d request(s) from %s to %s", request.count, self.address, request.url)
        try:
            outputs = self._transport.forward(request, timeout=timeout)
        except EchoTransportError as exc:
            logger.warning("Forward from %s to %s failed: %s", self.address, request.url, exc)
            raise

        responses = parse_responses(outputs)
        logger.debug("Received %d response(s) from %s", len(responses), self.address)
        return responses

    def close(self) -> None:
        if self._transport is None:
            return
        transport, self._transport = self._transport, None
        transport.close()

    def __enter__(self) -> "EchoClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
