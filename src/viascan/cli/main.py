# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""viascan CLI.

Reads `host,origin` lines on stdin and writes one CSV line per valid input line:

    echo "www.example.com,example.com" | viascan --resolver 1.1.1.1 --fields
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from ..config import ScanSettings, load_settings
from ..errors import ConfigurationError, InputLineError
from ..log import close_origin_log, open_origin_log, setup_logging
from ..runtime import ViaScan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare origin responses to GET / with and without an HTTP Via header",
    )
    parser.add_argument("--resolver", help="DNS resolver address (default: 127.0.0.1)")
    parser.add_argument("--workers", type=int, help="Number of concurrent workers (default: 10)")
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Dump requests and responses to stderr for debugging",
    )
    parser.add_argument(
        "--fields",
        action="store_true",
        help="Output a header line containing field names",
    )
    parser.add_argument("--log", default="", help="File to write per-origin log information to")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request HTTP timeout in seconds; 0 waits forever (default: 10)",
    )
    return parser


def _apply_args(settings: ScanSettings, args: argparse.Namespace) -> ScanSettings:
    if args.resolver is not None:
        settings.resolver = args.resolver
    if args.workers is not None:
        settings.workers = args.workers
    if args.timeout is not None:
        settings.timeout = args.timeout
    return settings


def _report_bad_line(line: str, error: InputLineError) -> None:  # noqa: ARG001
    print(f"Bad line: {line}", file=sys.stderr)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    source = stdin if stdin is not None else sys.stdin
    sink = stdout if stdout is not None else sys.stdout

    settings = _apply_args(load_settings(), args)
    log_handler = None
    try:
        settings.validate()
        if args.log:
            log_handler = open_origin_log(args.log)
        scanner = ViaScan(settings, dump=sys.stderr if args.dump else None)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        if log_handler is not None:
            close_origin_log(log_handler)
        return 1

    try:
        with scanner:
            scanner.scan(source, sink, fields=args.fields, on_rejected=_report_bad_line)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading input: {exc}", file=sys.stderr)
        return 1
    finally:
        if log_handler is not None:
            close_origin_log(log_handler)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
