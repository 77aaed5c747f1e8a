# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx transport that picks the connection address through the scan resolver."""

from __future__ import annotations

import httpx

from ..errors import ResolutionError
from ..resolver import Resolver


def url_host(address: str) -> str:
    """Host component for a URL; IPv6 literals need brackets."""
    return f"[{address}]" if ":" in address else address


class AddressPinningTransport(httpx.BaseTransport):
    """
    Wraps a transport and rewrites the connection host of every request to the
    first address returned by the resolver.

    The Host header set on the request is kept, so the origin still sees the
    virtual host it was asked about.
    """

    def __init__(self, resolver: Resolver, transport: httpx.BaseTransport | None = None):
        self._resolver = resolver
        self._transport = transport or httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        try:
            address = self._resolver.select_address(host)
        except ResolutionError as exc:
            raise httpx.ConnectError(f"Failed to get any IPs for {host}: {exc.reason}", request=request) from exc

        if address != host:
            request.url = request.url.copy_with(host=url_host(address))
        return self._transport.handle_request(request)

    def close(self) -> None:
        self._transport.close()


__all__ = ["AddressPinningTransport", "url_host"]
