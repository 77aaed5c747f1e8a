# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for viascan."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import FIELD_NAMES, PhaseResult, ProbeResult, ProbeTarget, TriState

__all__ = [
    "FIELD_NAMES",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "PhaseResult",
    "ProbeResult",
    "ProbeTarget",
    "TriState",
]
