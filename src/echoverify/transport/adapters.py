# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process transports."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..errors import EchoTransportError
from ..models.request import ForwardEchoRequest
from .client import EchoTransport

Responder = Callable[[ForwardEchoRequest], Sequence[str]]


class StubEchoTransport(EchoTransport):
    """Deterministic, programmable EchoTransport for tests."""

    def __init__(
        self,
        outputs: Sequence[str] | None = None,
        *,
        responder: Responder | None = None,
        error: EchoTransportError | None = None,
    ):
        self._outputs = list(outputs or [])
        self._responder = responder
        self._error = error
        self.requests: list[ForwardEchoRequest] = []
        self.timeouts: list[float | None] = []
        self.close_calls = 0

    def forward(self, request: ForwardEchoRequest, *, timeout: float | None = None) -> list[str]:
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self._error is not None:
            raise self._error
        if self._responder is not None:
            return list(self._responder(request))
        return list(self._outputs)

    def close(self) -> None:
        self.close_calls += 1
