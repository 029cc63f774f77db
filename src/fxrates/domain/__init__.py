"""
Domain Layer - Pure Business Objects

This package contains domain models and errors with no I/O dependencies.
"""

from fxrates.domain.errors import (
    FxRatesError,
    InvalidCurrencyError,
    MissingCurrencyError,
    NetworkError,
    ParseError,
)
from fxrates.domain.models import (
    ANCHOR_CURRENCY,
    ANCHOR_RATE,
    CURRENCY_FIELD,
    RATE_DECIMALS,
    RATE_EPSILON,
    RATE_FIELD,
    ColumnSpec,
    OutputRecord,
    ProviderParameter,
    RateTable,
    RowStatus,
    TableSchema,
    default_schema,
)

__all__ = [
    "FxRatesError",
    "InvalidCurrencyError",
    "MissingCurrencyError",
    "NetworkError",
    "ParseError",
    "ANCHOR_CURRENCY",
    "ANCHOR_RATE",
    "CURRENCY_FIELD",
    "RATE_DECIMALS",
    "RATE_EPSILON",
    "RATE_FIELD",
    "ColumnSpec",
    "OutputRecord",
    "ProviderParameter",
    "RateTable",
    "RowStatus",
    "TableSchema",
    "default_schema",
]
