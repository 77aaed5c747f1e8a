# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

import httpx

from ..config import ScanSettings, load_settings
from ..errors import categorize_exception
from ..resolver import Resolver, ResolverConfig
from .client import HttpClient
from .headers import first_values
from .models import HttpRequest, HttpResponse
from .transport import AddressPinningTransport

TransportFactory = Callable[[], httpx.BaseTransport]


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    Every request gets its own httpx.Client, closed once the body has been read,
    so no connection outlives the request that opened it. Bodies are read with
    `iter_raw()`: nothing is decompressed and the recorded size is the size on
    the wire.
    """

    def __init__(
        self,
        settings: ScanSettings | None = None,
        *,
        resolver: Resolver | None = None,
        transport_factory: TransportFactory | None = None,
        dump: TextIO | None = None,
    ):
        self.settings = settings or load_settings()
        self.resolver = resolver or Resolver(
            ResolverConfig.parse(self.settings.resolver, timeout=self.settings.dns_timeout)
        )
        self._transport_factory = transport_factory or httpx.HTTPTransport
        self._dump = dump

    def _new_client(self) -> httpx.Client:
        event_hooks: dict[str, list[Callable]] = {}
        if self._dump is not None:
            event_hooks = {"request": [self._dump_request], "response": [self._dump_response]}
        return httpx.Client(
            transport=AddressPinningTransport(self.resolver, self._transport_factory()),
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.http_timeout,
            event_hooks=event_hooks,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.http_timeout
        follow_redirects = (
            request.allow_redirects if request.allow_redirects is not None else self.settings.allow_redirects
        )

        try:
            with self._new_client() as client:
                with client.stream(
                    request.method,
                    request.url,
                    headers=headers,
                    timeout=timeout,
                    follow_redirects=follow_redirects,
                ) as resp:
                    content = bytearray()
                    for chunk in resp.iter_raw():
                        content.extend(chunk)

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=first_values(resp.headers),
                content=bytes(content),
                url=str(resp.url),
                meta={"http_version": resp.http_version},
            )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=categorize_exception(exc),
            )

    def _dump_request(self, request: httpx.Request) -> None:
        lines = [f"> {request.method} {request.url}"]
        lines.extend(f"> {name}: {value}" for name, value in request.headers.items())
        self._write_dump(lines)

    def _dump_response(self, response: httpx.Response) -> None:
        lines = [f"< {response.http_version} {response.status_code} {response.reason_phrase}"]
        lines.extend(f"< {name}: {value}" for name, value in response.headers.items())
        self._write_dump(lines)

    def _write_dump(self, lines: list[str]) -> None:
        # Single write per block so concurrent workers do not interleave lines.
        if self._dump is not None:
            self._dump.write("\n".join(lines) + "\n")
            self._dump.flush()

    def close(self) -> None:
        return None
