# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Per-probe event recorder.

Transport callbacks may fire on whichever thread the HTTP stack uses internally.
Each slot is written at most once and only read after the blocking send has
returned on the caller's thread, so no locking is needed.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from ..models.timing import PhaseTimestamps

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

# httpcore trace events that mark the point a connection is handed to the request
_TRACE_PHASES: dict[str, str] = {
    "http11.send_request_headers.started": "got_connection",
    "http2.send_request_headers.started": "got_connection",
}


class PhaseRecorder:
    """Captures lifecycle instants for exactly one probe."""

    def __init__(self, clock: Clock | None = None):
        self.clock: Clock = clock or time.perf_counter
        self.timestamps = PhaseTimestamps()

    def mark(self, phase: str) -> None:
        at = self.clock()
        if self.timestamps.mark(phase, at):
            logger.debug("phase %s at %.6f", phase, at)

    def trace(self, event_name: str, info: dict[str, Any]) -> None:  # noqa: ARG002
        """httpcore ``trace`` extension callback."""
        phase = _TRACE_PHASES.get(event_name)
        if phase is not None:
            self.mark(phase)

    def elapsed(self) -> float:
        """Seconds since ``start`` was marked."""
        start = self.timestamps.start
        if start is None:
            raise RuntimeError("probe has not been dispatched")
        return self.clock() - start

    def remaining(self, budget: float) -> float | None:
        """Seconds left of ``budget`` counted from ``start``; None before dispatch."""
        start = self.timestamps.start
        if start is None:
            return None
        return budget - (self.clock() - start)
