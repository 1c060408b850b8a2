# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Forward request model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ForwardEchoRequest:
    """
    Ask an echo instance to send ``count`` probes to ``url``.

    ``headers`` are attached to every probe (a ``Host`` entry selects the
    virtual host on the target). ``timeout`` bounds each individual probe on
    the forwarding instance and is unrelated to the timeout of the forward
    call itself.
    """

    url: str
    count: int = 1
    qps: int = 0
    timeout: float | None = None
    headers: dict[str, str] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("ForwardEchoRequest.url must not be empty")
        if self.count < 1:
            raise ValueError("ForwardEchoRequest.count must be at least 1")
        if self.qps < 0:
            raise ValueError("ForwardEchoRequest.qps must not be negative")

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"url": self.url, "count": self.count}
        if self.qps:
            payload["qps"] = self.qps
        if self.timeout is not None:
            payload["timeoutMicros"] = int(self.timeout * 1_000_000)
        if self.headers:
            payload["headers"] = [{"key": k, "value": v} for k, v in self.headers.items()]
        if self.message is not None:
            payload["message"] = self.message
        return payload
