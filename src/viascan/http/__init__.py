# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import first_values
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .transport import AddressPinningTransport

__all__ = [
    "AddressPinningTransport",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "first_values",
    "create_default_http_client",
]
