# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
viascan package entrypoint.

viascan asks origin web servers for `/` twice, once plainly and once with an
HTTP Via header, and reports whether compression, body size or the Server
header changed. Name resolution goes through one configured DNS resolver, HTTP
behavior is abstracted behind an injectable client interface, and results are
modeled with typed dataclasses.
"""

from .config import ScanSettings, load_settings
from .errors import ConfigurationError, ErrorCategory, InputLineError, ResolutionError
from .log import setup_logging
from .resolver import Resolver, ResolverConfig
from .http import (
    AddressPinningTransport,
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    create_default_http_client,
)
from .models import PhaseResult, ProbeResult, ProbeTarget, TriState
from .report import CsvEmitter
from .scan import PairedProber, ScanRunner, ScanSummary, WorkerPool
from .runtime import ViaScan
from .version import __version__

__all__ = [
    "AddressPinningTransport",
    "ConfigurationError",
    "CsvEmitter",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "InputLineError",
    "PairedProber",
    "PhaseResult",
    "ProbeResult",
    "ProbeTarget",
    "ResolutionError",
    "Resolver",
    "ResolverConfig",
    "ScanRunner",
    "ScanSettings",
    "ScanSummary",
    "TriState",
    "ViaScan",
    "WorkerPool",
    "create_default_http_client",
    "load_settings",
    "setup_logging",
    "__version__",
]
