"""
FXRates - ECB Reference Rates for Tabular Pipelines

Fetches the ECB daily euro reference-rate feed, re-expresses it against a
configurable base currency and delivers sorted (Currency, Rate) rows to a
host pipeline.
"""

__version__ = "1.0.0"
