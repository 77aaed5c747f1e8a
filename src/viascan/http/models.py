# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across viascan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None
    allow_redirects: bool | None = None

    def with_header(self, name: str, value: str) -> HttpRequest:
        """Return a copy carrying one extra header; the original is left untouched."""
        headers = dict(self.headers or {})
        headers[name] = value
        return HttpRequest(
            url=self.url,
            method=self.method,
            headers=headers,
            timeout=self.timeout,
            allow_redirects=self.allow_redirects,
        )

    def describe(self) -> str:
        headers = ", ".join(f"{k}: {v}" for k, v in (self.headers or {}).items())
        return f"{self.method} {self.url} ({headers})"


@dataclass
class HttpResponse:
    """Normalized HTTP response; `content` is the body exactly as received on the wire."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    meta: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.headers = {name.lower(): value for name, value in (self.headers or {}).items()}

    @property
    def body_size(self) -> int:
        return len(self.content or b"")

    def header(self, name: str) -> str:
        return self.headers.get(name.lower(), "").strip()
