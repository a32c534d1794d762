# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for http-perf."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"http-perf/{__version__}"

# TCP connection establishment timeout, independent of the overall request timeout.
DEFAULT_DIAL_TIMEOUT = 30.0


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CheckConfig:
    """Settings for one latency check run."""

    name: str = "http-perf"
    url: str = "http://localhost:80/"
    timeout: float = 15
    tls_timeout: int = 1000
    warning: float = 1
    critical: float = 2
    output_in_ms: bool = False
    insecure_skip_verify: bool = False

    @property
    def tls_timeout_seconds(self) -> float:
        return self.tls_timeout / 1000.0

    @classmethod
    def from_env(cls) -> "CheckConfig":
        """Create a config from environment variables (evaluated at call time)."""
        return cls(
            name=os.getenv("CHECK_NAME", cls.name),
            url=os.getenv("CHECK_URL", cls.url),
            timeout=_float_env("CHECK_TIMEOUT", cls.timeout),
            tls_timeout=_int_env("CHECK_TLS_TIMEOUT", cls.tls_timeout),
            warning=_float_env("CHECK_WARNING", cls.warning),
            critical=_float_env("CHECK_CRITICAL", cls.critical),
            output_in_ms=_bool_env("CHECK_OUTPUT_IN_MS", cls.output_in_ms),
            insecure_skip_verify=_bool_env("CHECK_INSECURE_SKIP_VERIFY", cls.insecure_skip_verify),
        )


def load_check_config() -> CheckConfig:
    """Load the check config from environment with the plugin defaults."""
    return CheckConfig.from_env()
