# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level viascan facade wiring resolver, HTTP client, prober and pool."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import suppress
from typing import TextIO

from .config import ScanSettings, load_settings
from .http.client import HttpClient, create_default_http_client
from .models import ProbeResult, ProbeTarget
from .report import CsvEmitter
from .resolver import Resolver, ResolverConfig
from .scan.prober import PairedProber
from .scan.runner import RejectHandler, ScanRunner, ScanSummary


class ViaScan:
    """
    Convenience wrapper that builds the shared, read-only scan collaborators once.

    The resolver configuration is fixed at construction and handed to every
    worker by reference; nothing here is mutated once a scan is running.
    """

    def __init__(
        self,
        settings: ScanSettings | None = None,
        *,
        resolver: Resolver | None = None,
        http_client: HttpClient | None = None,
        origin_log: logging.Logger | None = None,
        dump: TextIO | None = None,
    ):
        self.settings = settings or load_settings()
        self.settings.validate()
        self.resolver = resolver or Resolver(
            ResolverConfig.parse(self.settings.resolver, timeout=self.settings.dns_timeout)
        )
        self.http_client = http_client or create_default_http_client(self.settings, self.resolver, dump=dump)
        self.prober = PairedProber(
            self.resolver,
            self.http_client,
            via_value=self.settings.via_value,
            origin_log=origin_log,
        )

    def probe(self, host_header: str, origin: str) -> ProbeResult:
        return self.prober.probe(ProbeTarget(host_header=host_header, origin=origin))

    def scan(
        self,
        lines: Iterable[str],
        stream: TextIO,
        *,
        fields: bool = False,
        on_rejected: RejectHandler | None = None,
    ) -> ScanSummary:
        runner = ScanRunner(
            self.prober,
            CsvEmitter(stream, fields=fields),
            workers=self.settings.workers,
            on_rejected=on_rejected,
        )
        return runner.run(lines)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> ViaScan:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
