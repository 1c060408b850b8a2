# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from collections.abc import Iterable
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    SSL_ERROR = "SSL_ERROR"
    DNS_ERROR = "DNS_ERROR"
    REMOTE_ERROR = "REMOTE_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.HTTPStatusError):
        return ErrorCategory.REMOTE_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Timed out waiting for the echo instance",
        ErrorCategory.CONNECTION_ERROR: "Could not reach the echo instance",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.REMOTE_ERROR: "Echo instance rejected the forward request",
        ErrorCategory.PROTOCOL_ERROR: "Unexpected reply from the echo instance",
        ErrorCategory.UNKNOWN_ERROR: "Forward request failed",
        None: "",
    }
    return mapping.get(category, "Forward request failed")


class EchoTransportError(Exception):
    """The forward call itself could not complete."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.message = message
        self.category = category

    @classmethod
    def from_exception(cls, exc: BaseException) -> "EchoTransportError":
        return cls(str(exc) or type(exc).__name__, categorize_exception(exc))

    @property
    def reason(self) -> str:
        return error_category_to_reason(self.category)

    def __str__(self) -> str:
        return f"{self.category.value}: {self.message}"


class CheckError(Exception):
    """
    Aggregated verification failure.

    Holds one message per violated record; a check pass collects every
    failure before raising or returning one of these.
    """

    def __init__(self, errors: Iterable[str]):
        self.errors: list[str] = [str(e) for e in errors]
        super().__init__(self._format())

    def _format(self) -> str:
        if len(self.errors) == 1:
            header = "1 error occurred:"
        else:
            header = f"{len(self.errors)} errors occurred:"
        lines = [header] + [f"\t* {e}" for e in self.errors]
        return "\n".join(lines)


__all__ = [
    "CheckError",
    "EchoTransportError",
    "ErrorCategory",
    "categorize_exception",
    "error_category_to_reason",
]
