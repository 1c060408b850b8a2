# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed EchoTransport implementation."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import EchoSettings, load_echo_settings
from ..errors import EchoTransportError, ErrorCategory
from ..models.request import ForwardEchoRequest
from .client import EchoTransport

logger = logging.getLogger(__name__)

ERROR_SNIPPET_CHARS = 200


def normalize_address(address: str) -> str:
    """Accept ``host:port`` as well as full URLs."""
    raw = (address or "").strip()
    if not raw:
        raise ValueError("echo address must not be empty")
    if "://" not in raw:
        raw = f"http://{raw}"
    return raw.rstrip("/")


def _outputs_from_payload(data: Any) -> list[str]:
    if not isinstance(data, dict):
        raise EchoTransportError("forward reply is not a JSON object", ErrorCategory.PROTOCOL_ERROR)
    output = data.get("output")
    if output is None:
        return []
    if not isinstance(output, list) or not all(isinstance(item, str) for item in output):
        raise EchoTransportError("forward reply 'output' is not a list of strings", ErrorCategory.PROTOCOL_ERROR)
    return list(output)


class HttpxEchoTransport(EchoTransport):
    """Synchronous httpx transport posting forward requests as JSON."""

    def __init__(self, address: str, settings: EchoSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_echo_settings()
        self.address = normalize_address(address)
        self.url = f"{self.address}{self.settings.forward_path}"
        try:
            httpx.URL(self.url)
        except httpx.InvalidURL as exc:
            raise ValueError(f"invalid echo address {address!r}: {exc}") from exc
        self._client: httpx.Client | None = client or httpx.Client(
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    @property
    def closed(self) -> bool:
        return self._client is None

    def forward(self, request: ForwardEchoRequest, *, timeout: float | None = None) -> list[str]:
        if self._client is None:
            raise RuntimeError("transport is closed")

        try:
            resp = self._client.post(
                self.url,
                json=request.to_payload(),
                headers={"User-Agent": self.settings.user_agent},
                timeout=timeout if timeout is not None else self.settings.timeout,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            snippet = exc.response.text[:ERROR_SNIPPET_CHARS]
            raise EchoTransportError(
                f"echo instance returned HTTP {exc.response.status_code}: {snippet}",
                ErrorCategory.REMOTE_ERROR,
            ) from exc
        except httpx.InvalidURL as exc:
            raise EchoTransportError(str(exc), ErrorCategory.PROTOCOL_ERROR) from exc
        except (httpx.HTTPError, OSError) as exc:
            logger.debug("Forward call to %s failed: %s", self.url, exc)
            raise EchoTransportError.from_exception(exc) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise EchoTransportError(f"forward reply is not JSON: {exc}", ErrorCategory.PROTOCOL_ERROR) from exc
        return _outputs_from_payload(data)

    def close(self) -> None:
        if self._client is None:
            return
        client, self._client = self._client, None
        client.close()
