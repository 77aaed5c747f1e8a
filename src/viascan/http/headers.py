# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response header capture.

Responses are stored as lowercase-keyed dicts holding the first value of each field.
"""

from __future__ import annotations

import httpx


def first_values(headers: httpx.Headers) -> dict[str, str]:
    """Return a lowercase-keyed dict keeping only the first value of a repeated field."""
    out: dict[str, str] = {}
    for name, value in headers.multi_items():
        out.setdefault(name.lower(), value)
    return out


__all__ = ["first_values"]
