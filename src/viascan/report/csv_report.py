# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CSV rendering of probe results."""

from __future__ import annotations

import csv
import threading
from typing import TextIO

from ..models import FIELD_NAMES, ProbeResult


class CsvEmitter:
    """Writes one CSV line per result, optionally preceded by a header line."""

    def __init__(self, stream: TextIO, *, fields: bool = False):
        self._stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")
        self._fields = fields
        self._first = True
        self._lock = threading.Lock()

    def emit(self, result: ProbeResult) -> None:
        with self._lock:
            if self._fields and self._first:
                self._writer.writerow(FIELD_NAMES)
            self._first = False
            self._writer.writerow(result.as_row())
            self._stream.flush()


__all__ = ["CsvEmitter"]
