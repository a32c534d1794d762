# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl
import sys

import httpcore
import httpx
import pytest

from httpperf import config
from httpperf.log import setup_logging
from httpperf.config import DEFAULT_USER_AGENT, CheckConfig
from httpperf.errors import (
    ConfigurationError,
    ErrorCategory,
    TransportError,
    categorize_exception,
    error_category_to_reason,
)


def test_check_config_env_overrides(monkeypatch):
    monkeypatch.setenv("CHECK_NAME", "edge-latency")
    monkeypatch.setenv("CHECK_URL", "https://example.com/health")
    monkeypatch.setenv("CHECK_TIMEOUT", "5")
    monkeypatch.setenv("CHECK_TLS_TIMEOUT", "250")
    monkeypatch.setenv("CHECK_WARNING", "0.5")
    monkeypatch.setenv("CHECK_CRITICAL", "1.5")
    monkeypatch.setenv("CHECK_OUTPUT_IN_MS", "true")
    monkeypatch.setenv("CHECK_INSECURE_SKIP_VERIFY", "1")

    settings = config.load_check_config()

    assert settings.name == "edge-latency"
    assert settings.url == "https://example.com/health"
    assert settings.timeout == 5.0
    assert settings.tls_timeout == 250
    assert settings.tls_timeout_seconds == 0.25
    assert settings.warning == 0.5
    assert settings.critical == 1.5
    assert settings.output_in_ms is True
    assert settings.insecure_skip_verify is True


def test_check_config_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("CHECK_TIMEOUT", "fifteen")
    monkeypatch.setenv("CHECK_TLS_TIMEOUT", "1.5")
    monkeypatch.setenv("CHECK_WARNING", "")
    monkeypatch.setenv("CHECK_OUTPUT_IN_MS", "nope")

    settings = config.load_check_config()

    assert settings.timeout == CheckConfig.timeout
    assert settings.tls_timeout == CheckConfig.tls_timeout
    assert settings.warning == CheckConfig.warning
    assert settings.output_in_ms is False


def test_check_config_defaults_match_plugin(monkeypatch):
    for name in ("CHECK_URL", "CHECK_TIMEOUT", "CHECK_WARNING", "CHECK_CRITICAL", "CHECK_TLS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_check_config()
    assert settings.url == "http://localhost:80/"
    assert settings.timeout == 15
    assert settings.tls_timeout == 1000
    assert (settings.warning, settings.critical) == (1, 2)
    assert DEFAULT_USER_AGENT.startswith("http-perf/")


def test_load_check_config_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("CHECK_CRITICAL", "3")
    assert config.load_check_config().critical == 3
    monkeypatch.setenv("CHECK_CRITICAL", "4")
    assert config.load_check_config().critical == 4


def test_check_config_is_immutable():
    settings = CheckConfig()
    with pytest.raises(AttributeError):
        settings.url = "http://other"  # type: ignore[misc]


def _chained(outer: Exception, inner: BaseException) -> Exception:
    try:
        try:
            raise inner
        except BaseException as exc:
            raise outer from exc
    except Exception as raised:
        return raised


def test_categorize_exception_walks_cause_chain():
    dns = _chained(httpx.ConnectError("lookup failed"), socket.gaierror(-2, "Name or service not known"))
    assert categorize_exception(dns) == ErrorCategory.DNS_ERROR

    tls = _chained(httpx.ConnectError("handshake"), ssl.SSLError("certificate verify failed"))
    assert categorize_exception(tls) == ErrorCategory.SSL_ERROR

    assert categorize_exception(httpx.ReadTimeout("timed out")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpcore.ConnectTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.RemoteProtocolError("bad")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.UnsupportedProtocol("ftp")) == ErrorCategory.UNKNOWN_ERROR


def test_error_types_carry_reason_and_category():
    err = ConfigurationError("warning threshold must be lower than critical threshold", reason="threshold ordering")
    assert err.reason == "threshold ordering"
    assert "critical" in str(err)

    transport = TransportError("request timed out", category=ErrorCategory.TIMEOUT)
    assert transport.category == ErrorCategory.TIMEOUT
    assert TransportError("x").category == ErrorCategory.UNKNOWN_ERROR


def test_error_category_to_reason_strings():
    assert error_category_to_reason(ErrorCategory.DNS_ERROR) == "DNS resolution failed"
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "request timed out"
    assert error_category_to_reason(None) == "request failed"


def test_categorize_exception_treats_idna_failure_as_dns():
    idna = _chained(httpx.ConnectError("lookup a..example.com"), UnicodeError("label empty or too long"))
    assert categorize_exception(idna) == ErrorCategory.DNS_ERROR


def test_setup_logging_writes_to_stderr_and_quiets_transport(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    try:
        setup_logging("info")
        assert captured["stream"] is sys.stderr
        assert captured["level"] == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

        setup_logging("debug")
        assert logging.getLogger("httpx").level == logging.DEBUG
    finally:
        logging.getLogger("httpx").setLevel(logging.NOTSET)
        logging.getLogger("httpcore").setLevel(logging.NOTSET)
