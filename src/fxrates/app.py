# src/fxrates/app.py
"""
Application Entry Point - Command-line Rate Table

This module is the composition root for the `fxrates` command. It wires
logging, settings, the ECB provider and the reader, runs one retrieval
cycle and prints the table to stdout.

Files that USE this module:
- fxrates.__main__ (python -m fxrates)
- the `fxrates` console script

Files that this module USES:
- fxrates.shared.logging_conf (setup_logging for logging configuration)
- fxrates.config (settings for configuration management)
- fxrates.application.reader (FxRatesReader)
- fxrates.adapters.sinks (ListRowSink)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command-line argument parsing
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import List, Optional

from fxrates.adapters.sinks import ListRowSink  # In-memory row sink
from fxrates.application.reader import FxRatesReader  # Host-facing reader
from fxrates.config import settings  # Settings for logging configuration
from fxrates.domain.errors import FxRatesError  # Base of all retrieval failures
from fxrates.domain.models import CURRENCY_FIELD, RATE_FIELD, RATE_DECIMALS
from fxrates.shared.logging_conf import setup_logging  # Configure logging with file rotation


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fxrates",
        description="Print today's ECB reference rates relative to a base currency.",
    )
    parser.add_argument("--base", help="Base currency (defaults to FXRATES_BASE_CURRENCY or USD)")
    parser.add_argument("--limit", type=int, help="Stop after this many rows")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one retrieval cycle and print the rate table.

    Returns:
        Process exit code (0 on success, 1 on any retrieval failure)
    """
    args = _build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_console=settings.log_console,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)

    try:
        reader = FxRatesReader(base_currency=args.base)
        sink = ListRowSink(max_rows=args.limit)
        reader.populate(sink)
    except (FxRatesError, ValueError) as e:
        logger.error("Rate retrieval failed: %s (type: %s)", e, type(e).__name__)
        return 1

    print(f"{CURRENCY_FIELD:<8}{RATE_FIELD:>14}")
    for row in sink.rows:
        print(f"{row[CURRENCY_FIELD]:<8}{row[RATE_FIELD]:>14.{RATE_DECIMALS}f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
