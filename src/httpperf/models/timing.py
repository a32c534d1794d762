# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Phase timestamps captured during one probe and the durations derived from them."""

from __future__ import annotations

from dataclasses import dataclass, fields

PHASES: tuple[str, ...] = (
    "start",
    "dns_start",
    "dns_done",
    "connect_start",
    "connect_done",
    "tls_start",
    "tls_done",
    "got_connection",
    "first_response_byte",
)


@dataclass
class PhaseTimestamps:
    """
    Write-once instants for one HTTP transaction.

    ``None`` means the event has not happened (or never applies, e.g. TLS on a
    plaintext URL). Each slot is written at most once; later marks are ignored.
    """

    start: float | None = None
    dns_start: float | None = None
    dns_done: float | None = None
    connect_start: float | None = None
    connect_done: float | None = None
    tls_start: float | None = None
    tls_done: float | None = None
    got_connection: float | None = None
    first_response_byte: float | None = None

    def mark(self, phase: str, at: float) -> bool:
        """Record ``at`` for ``phase`` unless already set. Returns True when recorded."""
        if phase not in PHASES:
            raise ValueError(f"unknown phase: {phase!r}")
        if getattr(self, phase) is not None:
            return False
        setattr(self, phase, at)
        return True

    def span(self, begin: str, end: str) -> float:
        """Seconds between two marks, or 0.0 when either one is unset."""
        started = getattr(self, begin)
        finished = getattr(self, end)
        if started is None or finished is None:
            return 0.0
        return finished - started

    def recorded(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


PERFDATA_KEYS: tuple[str, ...] = (
    "dns_duration",
    "tls_handshake_duration",
    "connect_duration",
    "first_byte_duration",
    "total_request_duration",
)


@dataclass(frozen=True)
class DurationMetrics:
    """The five reported durations, in seconds."""

    dns: float = 0.0
    tls_handshake: float = 0.0
    connect: float = 0.0
    first_byte: float = 0.0
    total: float = 0.0

    @classmethod
    def from_timestamps(cls, timestamps: PhaseTimestamps, total: float) -> DurationMetrics:
        # first byte is measured from connection acquisition, not from dispatch
        return cls(
            dns=timestamps.span("dns_start", "dns_done"),
            tls_handshake=timestamps.span("tls_start", "tls_done"),
            connect=timestamps.span("connect_start", "connect_done"),
            first_byte=timestamps.span("got_connection", "first_response_byte"),
            total=total,
        )

    def perfdata(self, output_in_ms: bool = False) -> dict[str, float]:
        """Perf-data key to value, in the configured output unit."""
        scale = 1000.0 if output_in_ms else 1.0
        values = (self.dns, self.tls_handshake, self.connect, self.first_byte, self.total)
        return {key: value * scale for key, value in zip(PERFDATA_KEYS, values)}
