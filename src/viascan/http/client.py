# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction and factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TextIO

from ..config import ScanSettings, load_settings
from .models import HttpRequest, HttpResponse

if TYPE_CHECKING:
    from ..resolver import Resolver


class HttpClient(Protocol):
    """Minimal protocol for issuing HTTP requests; failures come back as `ok=False`."""

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_http_client(
    settings: ScanSettings | None = None,
    resolver: Resolver | None = None,
    *,
    dump: TextIO | None = None,
) -> HttpClient:
    """Factory for the default httpx-backed client."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_settings(), resolver=resolver, dump=dump)
