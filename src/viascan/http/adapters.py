# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable HttpClient used to drive the prober without a network."""

from __future__ import annotations

import threading
from collections.abc import Callable

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are served in the order they were added. A `handler` takes
    precedence and can answer based on the request itself.
    """

    def __init__(
        self,
        responses: list[HttpResponse] | None = None,
        *,
        handler: Callable[[HttpRequest], HttpResponse] | None = None,
    ):
        self._responses = list(responses or [])
        self._handler = handler
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []

    def add(self, response: HttpResponse) -> None:
        with self._lock:
            self._responses.append(response)

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
            if self._handler is None and self._responses:
                return self._responses.pop(0)
        if self._handler is not None:
            return self._handler(request)
        return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")

    def close(self) -> None:
        return None
