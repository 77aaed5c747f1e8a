# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Drive a scan: parse input lines, feed the pool, hand results to an emitter."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from ..errors import InputLineError
from ..models import ProbeResult, ProbeTarget
from .pool import DEFAULT_WORKERS, WorkerPool
from .prober import PairedProber

logger = logging.getLogger(__name__)

RejectHandler = Callable[[str, InputLineError], None]


class ResultEmitter(Protocol):
    def emit(self, result: ProbeResult) -> None: ...


@dataclass
class ScanSummary:
    submitted: int = 0
    rejected: int = 0
    emitted: int = 0


def parse_target(line: str) -> ProbeTarget:
    """
    Parse one `host,origin` input line.

    Only the line terminator is stripped; anything other than exactly two
    comma-separated fields raises InputLineError.
    """
    text = line.rstrip("\r\n")
    parts = text.split(",")
    if len(parts) != 2:
        raise InputLineError(text)
    return ProbeTarget(host_header=parts[0], origin=parts[1])


def _log_rejected(line: str, error: InputLineError) -> None:
    logger.warning("%s", error)


class ScanRunner:
    """Coordinates the worker pool and a collector thread for one pass over the input."""

    def __init__(
        self,
        prober: PairedProber,
        emitter: ResultEmitter,
        *,
        workers: int = DEFAULT_WORKERS,
        on_rejected: RejectHandler | None = None,
    ):
        self.prober = prober
        self.emitter = emitter
        self.workers = workers
        self.on_rejected = on_rejected or _log_rejected

    def run(self, lines: Iterable[str]) -> ScanSummary:
        summary = ScanSummary()
        pool = WorkerPool(self.prober, self.workers)
        emit_errors: list[Exception] = []

        def collect() -> None:
            # Keep draining after an emit failure so workers never block on a full queue.
            for result in pool.results():
                if emit_errors:
                    continue
                try:
                    self.emitter.emit(result)
                except Exception as exc:  # noqa: BLE001
                    emit_errors.append(exc)
                    continue
                summary.emitted += 1

        collector = threading.Thread(target=collect, name="viascan-collector", daemon=True)
        collector.start()
        pool.start()
        try:
            for line in lines:
                try:
                    target = parse_target(line)
                except InputLineError as exc:
                    summary.rejected += 1
                    self.on_rejected(exc.line, exc)
                    continue
                pool.submit(target)
                summary.submitted += 1
        finally:
            # Results already queued are still emitted when reading the input fails.
            pool.close()
            collector.join()

        if emit_errors:
            raise emit_errors[0]

        logger.debug(
            "Scan finished: %d submitted, %d rejected, %d emitted",
            summary.submitted,
            summary.rejected,
            summary.emitted,
        )
        return summary


__all__ = ["ResultEmitter", "ScanRunner", "ScanSummary", "parse_target"]
