# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .csv_report import CsvEmitter

__all__ = ["CsvEmitter"]
