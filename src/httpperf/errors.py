# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from collections.abc import Iterator
from enum import Enum

import httpcore
import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    DNS_ERROR = "DNS_ERROR"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class HttpPerfError(Exception):
    """Base class for check errors."""


class ConfigurationError(HttpPerfError):
    """Invalid or missing check input, detected before any network call."""

    def __init__(self, message: str, *, reason: str):
        super().__init__(message)
        self.reason = reason


class TransportError(HttpPerfError):
    """The probe request failed before a response arrived."""

    def __init__(self, message: str, *, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.category = category


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx re-raises transport failures with the original error chained, so the
    whole cause chain is inspected for resolver and TLS errors first. Hostnames
    the IDNA codec rejects surface as UnicodeError and count as DNS failures.
    """
    chain = list(_exception_chain(exc))

    if any(isinstance(item, (socket.gaierror, socket.herror, UnicodeError)) for item in chain):
        return ErrorCategory.DNS_ERROR

    if any(isinstance(item, (httpx.TimeoutException, httpcore.TimeoutException, TimeoutError)) for item in chain):
        return ErrorCategory.TIMEOUT

    if any(isinstance(item, (ssl.SSLError, ssl.CertificateError)) for item in chain):
        return ErrorCategory.SSL_ERROR

    if any(isinstance(item, (httpx.NetworkError, httpx.RemoteProtocolError, httpx.ProxyError, ConnectionError)) for item in chain):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "request timed out",
        ErrorCategory.DNS_ERROR: "DNS resolution failed",
        ErrorCategory.SSL_ERROR: "TLS handshake failed",
        ErrorCategory.CONNECTION_ERROR: "connection failed",
        ErrorCategory.UNKNOWN_ERROR: "request failed",
    }
    return mapping.get(category, "request failed")  # type: ignore[arg-type]


__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "HttpPerfError",
    "TransportError",
    "categorize_exception",
    "error_category_to_reason",
]
