"""
Application Layer - Use Cases

This package contains the rates pipeline and its host-facing reader.
"""

from fxrates.application.rates_service import RatesService, conversion_rate, emit_rates
from fxrates.application.reader import FxRatesReader, RowSink

__all__ = [
    "RatesService",
    "conversion_rate",
    "emit_rates",
    "FxRatesReader",
    "RowSink",
]
