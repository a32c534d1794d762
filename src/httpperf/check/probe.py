# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Timed probe executor: one GET, five durations, one verdict."""

from __future__ import annotations

import logging

import httpx

from ..config import CheckConfig
from ..errors import TransportError, categorize_exception, error_category_to_reason
from ..http.recorder import Clock, PhaseRecorder
from ..http.transport import ClientFactory, build_client
from ..models import CheckResult, CheckStatus, DurationMetrics
from .report import render_failure_line, render_report_line
from .thresholds import classify

logger = logging.getLogger(__name__)


def _transport_error(exc: Exception) -> TransportError:
    category = categorize_exception(exc)
    reason = error_category_to_reason(category)
    detail = str(exc)
    message = f"{reason}: {detail}" if detail else reason
    return TransportError(message, category=category)


def _dispatch(client: httpx.Client, recorder: PhaseRecorder, url: str) -> httpx.Response:
    try:
        request = client.build_request("GET", url, extensions={"trace": recorder.trace})
        recorder.mark("start")
        return client.send(request, stream=True)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise _transport_error(exc) from exc


def run_probe(
    config: CheckConfig,
    *,
    client_factory: ClientFactory | None = None,
    clock: Clock | None = None,
) -> CheckResult:
    """
    Send one GET to ``config.url`` and classify its total duration.

    Transport failures are always CRITICAL and carry no metrics. The HTTP status
    code of a response does not affect the verdict.
    """
    recorder = PhaseRecorder(clock=clock)
    factory = client_factory or build_client

    with factory(config, recorder) as client:
        try:
            response = _dispatch(client, recorder, config.url)
        except TransportError as exc:
            logger.warning("probe of %s failed (%s): %s", config.url, exc.category.value, exc)
            return CheckResult(
                status=CheckStatus.CRITICAL,
                output=render_failure_line(config.name, CheckStatus.CRITICAL, f"Error making request: {exc}"),
                error=str(exc),
            )
        try:
            total = recorder.elapsed()
            logger.debug("%s answered %s after %.6fs", config.url, response.status_code, total)
        finally:
            # the body is never needed, only the time it took to start arriving
            response.close()

    status = classify(total, config.warning, config.critical)
    metrics = DurationMetrics.from_timestamps(recorder.timestamps, total)
    return CheckResult(
        status=status,
        output=render_report_line(config.name, status, metrics, config.output_in_ms),
        metrics=metrics,
    )
