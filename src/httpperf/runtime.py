# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plugin lifecycle: validate, run, print one line, hand back an exit code."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .check import render_failure_line, run_probe, validate_config
from .config import CheckConfig, load_check_config
from .errors import ConfigurationError
from .http.recorder import Clock
from .http.transport import ClientFactory
from .models import CheckResult, CheckStatus

logger = logging.getLogger(__name__)


class HttpPerfCheck:
    """
    Convenience wrapper around one check invocation.

    Validation always runs first; an invalid config never reaches the network and
    is reported as WARNING.
    """

    def __init__(
        self,
        config: CheckConfig | None = None,
        *,
        client_factory: ClientFactory | None = None,
        clock: Clock | None = None,
    ):
        self.config = config or load_check_config()
        self.client_factory = client_factory
        self.clock = clock

    def validate(self) -> CheckResult | None:
        """Return a WARNING result for an invalid config, None when it may run."""
        try:
            validate_config(self.config)
        except ConfigurationError as exc:
            logger.warning("invalid configuration (%s): %s", exc.reason, exc)
            return CheckResult(
                status=CheckStatus.WARNING,
                output=render_failure_line(self.config.name, CheckStatus.WARNING, f"error validating input: {exc}"),
                error=str(exc),
            )
        return None

    def run(self) -> CheckResult:
        return run_probe(self.config, client_factory=self.client_factory, clock=self.clock)

    def execute(self, stream: TextIO | None = None) -> int:
        result = self.validate() or self.run()
        out = stream if stream is not None else sys.stdout
        out.write(result.output + "\n")
        out.flush()
        return result.exit_code
