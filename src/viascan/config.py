# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for viascan."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError
from .version import __version__

DEFAULT_USER_AGENT = f"viascan/{__version__}"
DEFAULT_VIA = "viascan 1.0"


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


@dataclass
class ScanSettings:
    """Scan defaults shared by the CLI and library callers."""

    resolver: str = "127.0.0.1"
    workers: int = 10
    timeout: float = 10.0
    dns_timeout: float = 5.0
    via_value: str = DEFAULT_VIA
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = False

    @classmethod
    def from_env(cls) -> "ScanSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            resolver=os.getenv("VIASCAN_RESOLVER", cls.resolver),
            workers=_int_env("VIASCAN_WORKERS", cls.workers),
            timeout=_float_env("VIASCAN_HTTP_TIMEOUT", cls.timeout),
            dns_timeout=_float_env("VIASCAN_DNS_TIMEOUT", cls.dns_timeout),
            via_value=os.getenv("VIASCAN_VIA", cls.via_value),
            user_agent=os.getenv("VIASCAN_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("VIASCAN_HTTP_REDIRECTS", cls.allow_redirects),
        )

    @property
    def http_timeout(self) -> float | None:
        """Timeout handed to httpx; a non-positive value means wait forever."""
        return self.timeout if self.timeout > 0 else None

    def validate(self) -> None:
        if self.workers < 1:
            raise ConfigurationError("--workers must be a positive number")
        if not self.resolver.strip():
            raise ConfigurationError("--resolver must not be empty")
        if not self.via_value.strip():
            raise ConfigurationError("Via header value must not be empty")


def load_settings() -> ScanSettings:
    """Load scan settings from environment with sensible defaults."""
    return ScanSettings.from_env()
