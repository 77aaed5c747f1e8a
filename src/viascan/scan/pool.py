# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Fixed-size worker pool between a job queue and a result queue.

Workers take targets until they see the close sentinel. `close()` is the
completion barrier: it returns once every worker has exited, after which the
result queue is closed and `results()` ends.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Iterator

from ..errors import ConfigurationError
from ..models import ProbeResult, ProbeTarget, TriState
from .prober import PairedProber

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 10

_CLOSED = object()


class WorkerPool:
    def __init__(self, prober: PairedProber, workers: int = DEFAULT_WORKERS):
        if workers < 1:
            raise ConfigurationError("--workers must be a positive number")
        self.prober = prober
        self.workers = workers
        # Bounded hand-offs: a producer or worker blocks instead of buffering the whole input.
        self._jobs: queue.Queue = queue.Queue(maxsize=workers)
        self._results: queue.Queue = queue.Queue(maxsize=workers)
        self._threads: list[threading.Thread] = []
        self._closed = False

    def start(self) -> None:
        if self._threads:
            return
        for index in range(self.workers):
            thread = threading.Thread(target=self._work, name=f"viascan-worker-{index}", daemon=True)
            thread.start()
            self._threads.append(thread)

    def submit(self, target: ProbeTarget) -> None:
        if self._closed:
            raise RuntimeError("WorkerPool is closed")
        self._jobs.put(target)

    def close(self) -> None:
        """Stop accepting jobs, wait for every worker, then close the result queue."""
        if self._closed:
            return
        self._closed = True
        for _ in self._threads:
            self._jobs.put(_CLOSED)
        for thread in self._threads:
            thread.join()
        self._results.put(_CLOSED)

    def results(self) -> Iterator[ProbeResult]:
        """Yield results in completion order until the pool is closed."""
        while True:
            item = self._results.get()
            if item is _CLOSED:
                return
            yield item

    def _work(self) -> None:
        while True:
            target = self._jobs.get()
            if target is _CLOSED:
                return
            try:
                result = self.prober.probe(target)
            except Exception:  # noqa: BLE001
                logger.exception("Probe of %s failed unexpectedly", target.origin)
                result = ProbeResult.for_target(target, resolved=TriState.FAILED)
            self._results.put(result)


__all__ = ["DEFAULT_WORKERS", "WorkerPool"]
