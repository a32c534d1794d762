# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpcore network backend that timestamps DNS, connect, TLS and first-byte events."""

from __future__ import annotations

import ipaddress
import socket
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as LookupTimeout
from typing import Any

import httpcore

from .recorder import PhaseRecorder

Resolver = Callable[..., list[Any]]


class Deadline:
    """Overall request budget shared by every socket operation of one probe."""

    def __init__(self, recorder: PhaseRecorder, budget: float | None):
        self._recorder = recorder
        self._budget = budget

    def clamp(self, timeout: float | None, exc_class: type[Exception]) -> float | None:
        if self._budget is None:
            return timeout
        remaining = self._recorder.remaining(self._budget)
        if remaining is None:
            return timeout
        if remaining <= 0:
            raise exc_class("overall request timeout exceeded")
        return remaining if timeout is None else min(timeout, remaining)


class TimedNetworkStream(httpcore.NetworkStream):
    def __init__(self, stream: httpcore.NetworkStream, recorder: PhaseRecorder, deadline: Deadline, tls_timeout: float | None):
        self._stream = stream
        self._recorder = recorder
        self._deadline = deadline
        self._tls_timeout = tls_timeout

    def read(self, max_bytes: int, timeout: float | None = None) -> bytes:
        data = self._stream.read(max_bytes, timeout=self._deadline.clamp(timeout, httpcore.ReadTimeout))
        if data:
            self._recorder.mark("first_response_byte")
        return data

    def write(self, buffer: bytes, timeout: float | None = None) -> None:
        self._stream.write(buffer, timeout=self._deadline.clamp(timeout, httpcore.WriteTimeout))

    def close(self) -> None:
        self._stream.close()

    def start_tls(self, ssl_context, server_hostname: str | None = None, timeout: float | None = None) -> httpcore.NetworkStream:  # noqa: ANN001
        # the handshake has its own bound instead of the connect timeout
        handshake_timeout = self._tls_timeout if self._tls_timeout is not None else timeout
        self._recorder.mark("tls_start")
        stream = self._stream.start_tls(
            ssl_context,
            server_hostname=server_hostname,
            timeout=self._deadline.clamp(handshake_timeout, httpcore.ConnectTimeout),
        )
        self._recorder.mark("tls_done")
        return TimedNetworkStream(stream, self._recorder, self._deadline, self._tls_timeout)

    def get_extra_info(self, info: str) -> Any:
        return self._stream.get_extra_info(info)


def _is_ip_literal(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


class TimedNetworkBackend(httpcore.NetworkBackend):
    """
    Wraps the synchronous httpcore backend.

    Name resolution is done here rather than inside the socket connect so that
    DNS and TCP connect are timed separately. IP literals skip the DNS phase.
    """

    def __init__(
        self,
        recorder: PhaseRecorder,
        *,
        tls_timeout: float | None = None,
        request_timeout: float | None = None,
        backend: httpcore.NetworkBackend | None = None,
        resolver: Resolver | None = None,
    ):
        self._recorder = recorder
        self._tls_timeout = tls_timeout
        self._deadline = Deadline(recorder, request_timeout)
        self._backend = backend or httpcore.SyncBackend()
        self._resolver = resolver or socket.getaddrinfo

    def _lookup(self, host: str, port: int, timeout: float | None) -> list[Any]:
        """Run the resolver, giving up once ``timeout`` (already clamped to the deadline) expires."""
        if timeout is None:
            return self._resolver(host, port, type=socket.SOCK_STREAM)
        # getaddrinfo cannot be cancelled; an expired lookup is abandoned to its worker thread
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="http-perf-dns")
        try:
            future = executor.submit(self._resolver, host, port, type=socket.SOCK_STREAM)
            try:
                return future.result(timeout=timeout)
            except LookupTimeout as exc:
                raise httpcore.ConnectTimeout(f"lookup {host}: overall request timeout exceeded") from exc
        finally:
            executor.shutdown(wait=False)

    def _resolve(self, host: str, port: int, timeout: float | None = None) -> list[str]:
        if _is_ip_literal(host):
            return [host]
        self._recorder.mark("dns_start")
        try:
            infos = self._lookup(host, port, self._deadline.clamp(timeout, httpcore.ConnectTimeout))
        except (OSError, UnicodeError) as exc:
            # IDNA encoding rejects empty or over-long labels with UnicodeError
            raise httpcore.ConnectError(f"lookup {host}: {exc}") from exc
        self._recorder.mark("dns_done")
        addresses = list(dict.fromkeys(str(info[4][0]) for info in infos))
        if not addresses:
            raise httpcore.ConnectError(f"lookup {host}: no addresses found")
        return addresses

    def connect_tcp(
        self,
        host: str,
        port: int,
        timeout: float | None = None,
        local_address: str | None = None,
        socket_options: Iterable[Any] | None = None,
    ) -> httpcore.NetworkStream:
        addresses = self._resolve(host, port, timeout)
        options = list(socket_options) if socket_options is not None else None
        self._recorder.mark("connect_start")
        last_error: Exception = httpcore.ConnectError(f"connect {host}:{port}: no addresses to dial")
        for address in addresses:
            try:
                stream = self._backend.connect_tcp(
                    address,
                    port,
                    timeout=self._deadline.clamp(timeout, httpcore.ConnectTimeout),
                    local_address=local_address,
                    socket_options=options,
                )
            except (httpcore.ConnectError, httpcore.ConnectTimeout) as exc:
                last_error = exc
                continue
            self._recorder.mark("connect_done")
            return TimedNetworkStream(stream, self._recorder, self._deadline, self._tls_timeout)
        raise last_error

    def sleep(self, seconds: float) -> None:
        self._backend.sleep(seconds)
