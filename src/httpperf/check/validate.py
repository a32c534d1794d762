# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Input validation, run before any network activity."""

from __future__ import annotations

from ..config import CheckConfig
from ..errors import ConfigurationError


def validate_config(config: CheckConfig) -> None:
    """Raise ConfigurationError when the config must not reach the probe."""
    if not config.url or not config.url.strip():
        raise ConfigurationError("--url or CHECK_URL environment variable is required", reason="missing target")

    # warnings must be lower than criticals
    if config.warning > config.critical:
        raise ConfigurationError("warning threshold must be lower than critical threshold", reason="threshold ordering")

    if config.warning < 0:
        raise ConfigurationError("thresholds must not be negative", reason="invalid threshold")

    if config.timeout <= 0:
        raise ConfigurationError("request timeout must be greater than zero", reason="invalid timeout")

    if config.tls_timeout <= 0:
        raise ConfigurationError("TLS handshake timeout must be greater than zero", reason="invalid timeout")
