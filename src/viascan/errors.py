# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
from enum import Enum

import dns.exception
import httpx


class ViaScanError(Exception):
    """Base class for viascan errors."""


class ConfigurationError(ViaScanError):
    """Startup configuration is unusable; the scan must not start."""


class ResolutionError(ViaScanError):
    """A name could not be resolved through the configured resolver."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


class InputLineError(ViaScanError, ValueError):
    """An input line is not a `host,origin` pair."""

    def __init__(self, line: str):
        super().__init__(f"Bad line: {line}")
        self.line = line


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map httpx/dnspython/socket exceptions to ErrorCategory.
    """
    if isinstance(exc, (httpx.TimeoutException, dns.exception.Timeout)):
        return ErrorCategory.TIMEOUT

    # Address selection failures are reported by the transport as ConnectError.
    if isinstance(exc, ResolutionError) or isinstance(exc.__cause__, ResolutionError):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.DecodingError)):
        return ErrorCategory.PROTOCOL_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror, dns.exception.DNSException)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "InputLineError",
    "ResolutionError",
    "ViaScanError",
    "categorize_exception",
]
