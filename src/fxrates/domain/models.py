# src/fxrates/domain/models.py
"""
Domain Models - Rate Table, Output Records and Schema

This module contains the value types that flow between the fetcher, the
normalizer and the host pipeline:
- The rate table and its anchor constants
- Normalized output records
- The default output schema
- Host interaction types (row status, provider parameters)

Files that USE this module:
- fxrates.adapters.providers.ecb (builds RateTable using the anchor constants)
- fxrates.application.* (emits OutputRecord, builds rows)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Enumerations for host signals
from typing import Dict, List, Optional  # Type hints

# Currency code -> rate relative to EUR
RateTable = Dict[str, float]

# The feed quotes everything against EUR and never lists EUR itself
ANCHOR_CURRENCY = "EUR"
ANCHOR_RATE = 1.0

# Rates whose magnitude does not exceed this are treated as absent (smallest subnormal double)
RATE_EPSILON = 5e-324

# Decimal places kept in normalized rates
RATE_DECIMALS = 4

CURRENCY_FIELD = "Currency"
RATE_FIELD = "Rate"


@dataclass(frozen=True)
class OutputRecord:
    """One normalized rate: units of `currency` per 1 unit of the base currency."""
    currency: str
    rate: float


@dataclass(frozen=True)
class ColumnSpec:
    """
    Description of one output column.

    Attributes:
        name: Column name
        data_type: Python type of the column values (str or float)
        allow_null: Whether the host may store nulls
        max_length: Maximum string length, or None if unbounded
        unique: Whether values are unique across rows
    """
    name: str
    data_type: type
    allow_null: bool = True
    max_length: Optional[int] = None
    unique: bool = False


@dataclass(frozen=True)
class TableSchema:
    """Named list of columns offered to the host."""
    name: str
    columns: List[ColumnSpec]

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]


def default_schema() -> TableSchema:
    """Return the schema of the FX rates table: Currency (key) and Rate."""
    return TableSchema(
        name="FXRates",
        columns=[
            ColumnSpec(CURRENCY_FIELD, str, allow_null=False, max_length=3, unique=True),
            ColumnSpec(RATE_FIELD, float, allow_null=False),
        ],
    )


class RowStatus(Enum):
    """Answer from a host row sink after a row is added."""
    CONTINUE = "continue"
    ABORT = "abort"


@dataclass(frozen=True)
class ProviderParameter:
    """A named configuration value exchanged with the host."""
    name: str
    value: str
