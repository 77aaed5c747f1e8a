# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan orchestration: paired prober, worker pool and input driver."""

from .pool import WorkerPool
from .prober import PairedProber
from .runner import ScanRunner, ScanSummary, parse_target

__all__ = ["PairedProber", "ScanRunner", "ScanSummary", "WorkerPool", "parse_target"]
