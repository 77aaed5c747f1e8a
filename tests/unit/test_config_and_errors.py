# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import dns.resolver
import httpx
import pytest

from viascan import config
from viascan.config import DEFAULT_USER_AGENT, DEFAULT_VIA, ScanSettings
from viascan.errors import ConfigurationError, ErrorCategory, ResolutionError, categorize_exception


def test_scan_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("VIASCAN_RESOLVER", "10.0.0.53:5353")
    monkeypatch.setenv("VIASCAN_WORKERS", "3")
    monkeypatch.setenv("VIASCAN_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("VIASCAN_DNS_TIMEOUT", "1.5")
    monkeypatch.setenv("VIASCAN_VIA", "1.1 probe")
    monkeypatch.setenv("VIASCAN_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("VIASCAN_HTTP_REDIRECTS", "yes")

    settings = config.load_settings()

    assert settings.resolver == "10.0.0.53:5353"
    assert settings.workers == 3
    assert settings.timeout == 2.5
    assert settings.dns_timeout == 1.5
    assert settings.via_value == "1.1 probe"
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is True


def test_scan_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("VIASCAN_WORKERS", "ten")
    monkeypatch.setenv("VIASCAN_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("VIASCAN_DNS_TIMEOUT", "")

    settings = config.load_settings()

    assert settings.workers == ScanSettings.workers
    assert settings.timeout == ScanSettings.timeout
    assert settings.dns_timeout == ScanSettings.dns_timeout
    assert settings.via_value == DEFAULT_VIA
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.allow_redirects is False


def test_load_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("VIASCAN_WORKERS", "4")
    assert config.load_settings().workers == 4
    monkeypatch.setenv("VIASCAN_WORKERS", "5")
    assert config.load_settings().workers == 5


def test_validate_rejects_non_positive_workers():
    with pytest.raises(ConfigurationError, match="positive"):
        ScanSettings(workers=0).validate()
    with pytest.raises(ConfigurationError):
        ScanSettings(workers=-3).validate()
    ScanSettings(workers=1).validate()


def test_validate_rejects_empty_resolver():
    with pytest.raises(ConfigurationError):
        ScanSettings(resolver="  ").validate()


def test_http_timeout_zero_means_unbounded():
    assert ScanSettings(timeout=0).http_timeout is None
    assert ScanSettings(timeout=-1).http_timeout is None
    assert ScanSettings(timeout=3.0).http_timeout == 3.0


def test_categorize_exception_maps_transport_failures():
    request = httpx.Request("GET", "http://origin.example/")
    assert categorize_exception(httpx.ConnectTimeout("slow", request=request)) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused", request=request)) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.RemoteProtocolError("garbage", request=request)) == ErrorCategory.PROTOCOL_ERROR
    assert categorize_exception(ConnectionRefusedError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("other")) == ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_maps_dns_failures():
    assert categorize_exception(dns.resolver.NXDOMAIN()) == ErrorCategory.DNS_ERROR
    assert categorize_exception(ResolutionError("nosuch.invalid", "NXDOMAIN")) == ErrorCategory.DNS_ERROR

    wrapped = httpx.ConnectError("Failed to get any IPs for nosuch.invalid")
    wrapped.__cause__ = ResolutionError("nosuch.invalid", "NXDOMAIN")
    assert categorize_exception(wrapped) == ErrorCategory.DNS_ERROR


def test_resolution_error_keeps_name_and_reason():
    exc = ResolutionError("nosuch.invalid", "NXDOMAIN")
    assert exc.name == "nosuch.invalid"
    assert exc.reason == "NXDOMAIN"
    assert "nosuch.invalid" in str(exc)
