# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx transport and client wiring for a single timed probe."""

from __future__ import annotations

from collections.abc import Callable

import httpcore
import httpx

from ..config import DEFAULT_DIAL_TIMEOUT, DEFAULT_USER_AGENT, CheckConfig
from .backend import TimedNetworkBackend
from .recorder import PhaseRecorder

ClientFactory = Callable[[CheckConfig, PhaseRecorder], httpx.Client]


class TimedTransport(httpx.HTTPTransport):
    """HTTPTransport whose connection pool dials through a custom network backend."""

    def __init__(self, network_backend: httpcore.NetworkBackend, *, verify: bool = True):
        super().__init__(verify=verify, retries=0)
        # httpx does not expose the backend, so the pool is rebuilt around it.
        # One connection, never kept alive: every probe pays the full setup cost.
        self._pool = httpcore.ConnectionPool(
            ssl_context=httpx.create_ssl_context(verify=verify),
            max_connections=1,
            max_keepalive_connections=0,
            retries=0,
            network_backend=network_backend,
        )


def build_client(config: CheckConfig, recorder: PhaseRecorder) -> httpx.Client:
    """Client for one probe: dial timeout, TLS timeout and overall request deadline applied."""
    backend = TimedNetworkBackend(
        recorder,
        tls_timeout=config.tls_timeout_seconds,
        request_timeout=config.timeout,
    )
    return httpx.Client(
        transport=TimedTransport(backend, verify=not config.insecure_skip_verify),
        timeout=httpx.Timeout(config.timeout, connect=DEFAULT_DIAL_TIMEOUT),
        follow_redirects=True,
        headers={"User-Agent": DEFAULT_USER_AGENT},
    )
