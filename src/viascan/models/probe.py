# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe target/result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

FIELD_NAMES: tuple[str, ...] = (
    "origin",
    "host",
    "resolves",
    "noVia",
    "via",
    "noViaSize",
    "viaSize",
    "noViaEncoding",
    "viaEncoding",
    "noViaServer",
    "viaServer",
)


class TriState(str, Enum):
    """Whether a step ran, and if so whether it worked."""

    NOT_RUN = "-"
    SUCCEEDED = "t"
    FAILED = "f"

    @property
    def attempted(self) -> bool:
        return self is not TriState.NOT_RUN

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProbeTarget:
    host_header: str
    origin: str


@dataclass(frozen=True)
class PhaseResult:
    """Outcome of one GET against the origin (with or without Via)."""

    outcome: TriState = TriState.NOT_RUN
    body_size: int = 0
    content_encoding: str = ""
    server: str = ""

    @classmethod
    def failed(cls) -> PhaseResult:
        return cls(outcome=TriState.FAILED)


@dataclass(frozen=True)
class ProbeResult:
    """
    Paired probe result for one target.

    Built once by the prober and never modified afterwards. A phase that did
    not run keeps the default PhaseResult (NOT_RUN, zero size, empty headers).
    """

    origin: str
    host_header: str
    resolved: TriState = TriState.NOT_RUN
    no_via: PhaseResult = field(default_factory=PhaseResult)
    via: PhaseResult = field(default_factory=PhaseResult)

    def __post_init__(self) -> None:
        if self.resolved is not TriState.SUCCEEDED and self.no_via.outcome.attempted:
            raise ValueError("HTTP attempts require a resolved origin")
        if self.no_via.outcome is not TriState.SUCCEEDED and self.via.outcome.attempted:
            raise ValueError("Via attempt requires a successful no-Via attempt")

    @classmethod
    def for_target(cls, target: ProbeTarget, **kwargs) -> ProbeResult:
        return cls(origin=target.origin, host_header=target.host_header, **kwargs)

    @property
    def no_via_outcome(self) -> TriState:
        return self.no_via.outcome

    @property
    def via_outcome(self) -> TriState:
        return self.via.outcome

    @property
    def no_via_body_size(self) -> int:
        return self.no_via.body_size

    @property
    def via_body_size(self) -> int:
        return self.via.body_size

    @property
    def no_via_content_encoding(self) -> str:
        return self.no_via.content_encoding

    @property
    def via_content_encoding(self) -> str:
        return self.via.content_encoding

    @property
    def no_via_server(self) -> str:
        return self.no_via.server

    @property
    def via_server(self) -> str:
        return self.via.server

    def as_row(self) -> list[str]:
        """Output fields in FIELD_NAMES order."""
        return [
            self.origin,
            self.host_header,
            str(self.resolved),
            str(self.no_via.outcome),
            str(self.via.outcome),
            str(self.no_via.body_size),
            str(self.via.body_size),
            self.no_via.content_encoding,
            self.via.content_encoding,
            self.no_via.server,
            self.via.server,
        ]
