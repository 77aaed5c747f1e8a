# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Paired probe: GET / without a Via header, then the same GET with one."""

from __future__ import annotations

import logging

from ..config import DEFAULT_VIA
from ..errors import ResolutionError
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..http.transport import url_host
from ..log import origin_adapter
from ..models import PhaseResult, ProbeResult, ProbeTarget, TriState
from ..resolver import Resolver, is_ip_literal

# Requested explicitly; the transport never negotiates or decodes compression itself.
ACCEPT_ENCODING = "gzip,deflate"


class PairedProber:
    """Runs the two-phase comparison for one target. Safe to share between workers."""

    def __init__(
        self,
        resolver: Resolver,
        http_client: HttpClient,
        *,
        via_value: str = DEFAULT_VIA,
        origin_log: logging.Logger | None = None,
    ):
        self.resolver = resolver
        self.http_client = http_client
        self.via_value = via_value
        self.origin_log = origin_log

    def probe(self, target: ProbeTarget) -> ProbeResult:
        """Probe `target`; every failure is recorded in the result, never raised."""
        log = origin_adapter(target.origin, self.origin_log)

        if not is_ip_literal(target.origin):
            try:
                self.resolver.exists(target.origin)
            except ResolutionError as exc:
                log.info("Error resolving name: %s", exc.reason)
                return ProbeResult.for_target(target, resolved=TriState.FAILED)

        template = build_request(target)
        no_via = self._attempt(template, log)
        if no_via.outcome is TriState.FAILED:
            return ProbeResult.for_target(target, resolved=TriState.SUCCEEDED, no_via=no_via)

        via = self._attempt(template.with_header("Via", self.via_value), log)
        return ProbeResult.for_target(target, resolved=TriState.SUCCEEDED, no_via=no_via, via=via)

    def _attempt(self, request: HttpRequest, log: logging.LoggerAdapter) -> PhaseResult:
        response = self.http_client.request(request)
        if not response.ok:
            log.info(
                "HTTP request %s failed: %s %s",
                request.describe(),
                response.error_category.value,
                response.error_message,
            )
            return PhaseResult.failed()
        return phase_from_response(response)


def build_request(target: ProbeTarget) -> HttpRequest:
    return HttpRequest(
        url=f"http://{url_host(target.origin)}/",
        method="GET",
        headers={"Accept-Encoding": ACCEPT_ENCODING, "Host": target.host_header},
    )


def phase_from_response(response: HttpResponse) -> PhaseResult:
    return PhaseResult(
        outcome=TriState.SUCCEEDED,
        body_size=response.body_size,
        content_encoding=response.header("Content-Encoding"),
        server=response.header("Server"),
    )


__all__ = ["ACCEPT_ENCODING", "PairedProber", "build_request", "phase_from_response"]
