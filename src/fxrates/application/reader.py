# src/fxrates/application/reader.py
"""
FX Rates Reader - Host Pipeline Adapter

This module is the single seam between the rates pipeline and a generic
tabular host. The host configures the reader with provider parameters,
asks for its default schema, and hands it a row sink plus a mapping of
destination columns to the reader's semantic fields. The reader then runs
one retrieval cycle and writes rows until the feed is exhausted or the
sink answers ABORT.

Files that USE this module:
- fxrates.app (CLI entry point)
- tests.test_reader (unit tests)

Files that this module USES:
- fxrates.application.rates_service (RatesService)
- fxrates.config (default base currency)
- fxrates.shared.validators (currency code validation)
- fxrates.domain (schema, row status, parameters, errors)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol

from fxrates.application.rates_service import RatesService
from fxrates.config import settings
from fxrates.domain.errors import InvalidCurrencyError
from fxrates.domain.models import (
    CURRENCY_FIELD,
    RATE_FIELD,
    OutputRecord,
    ProviderParameter,
    RowStatus,
    TableSchema,
    default_schema,
)
from fxrates.shared.validators import normalize_currency_code

log = logging.getLogger(__name__)

BASE_CURRENCY_PARAM = "BaseCurrency"


class RowSink(Protocol):
    """Protocol for host row destinations."""
    def new_row(self) -> Dict[str, Any]:
        ...

    def add_row(self, row: Dict[str, Any]) -> RowStatus:
        ...


def _field_value(field: Optional[str], record: OutputRecord) -> Any:
    if field == CURRENCY_FIELD:
        return record.currency
    if field == RATE_FIELD:
        return record.rate
    return None


class FxRatesReader:
    """
    Read-only data source producing the (Currency, Rate) table.

    The base currency defaults to settings.base_currency and can be changed
    through initialize() before each read.
    """

    def __init__(self, service: Optional[RatesService] = None, base_currency: Optional[str] = None):
        """
        Args:
            service: RatesService to read from (defaults to one backed by EcbProvider)
            base_currency: Optional base currency (defaults to settings.base_currency)
        """
        self.service = service or RatesService()
        self.base_currency = settings.base_currency
        if base_currency is not None:
            self.set_base_currency(base_currency)

    def set_base_currency(self, code: str) -> None:
        """
        Raises:
            InvalidCurrencyError: If `code` is not a 3-letter currency code
        """
        try:
            self.base_currency = normalize_currency_code(code)
        except ValueError as e:
            raise InvalidCurrencyError(str(e)) from e

    def initialization_parameters(self) -> List[ProviderParameter]:
        """Return the reader's configuration as host parameters."""
        return [ProviderParameter(BASE_CURRENCY_PARAM, self.base_currency)]

    def initialize(self, parameters: Iterable[ProviderParameter]) -> None:
        """Apply host parameters; names the reader does not know are ignored."""
        for p in parameters:
            if p.name == BASE_CURRENCY_PARAM:
                self.set_base_currency(p.value)
            else:
                log.debug("Ignoring unknown parameter %s", p.name)

    def default_schema(self) -> TableSchema:
        return default_schema()

    def populate(self, sink: RowSink, column_map: Optional[Mapping[str, Optional[str]]] = None) -> int:
        """
        Run one retrieval cycle and write the rows into `sink`.

        Args:
            sink: Host row sink
            column_map: Destination column -> semantic field ("Currency" or
                "Rate"). Columns mapped to anything else are left untouched.
                Defaults to the identity mapping over the default schema.

        Returns:
            Number of rows handed to the sink

        Raises:
            NetworkError, ParseError, MissingCurrencyError: Before any row is added
        """
        if column_map is None:
            column_map = {name: name for name in default_schema().column_names}
        mapped = [(column, field) for column, field in column_map.items()
                  if field in (CURRENCY_FIELD, RATE_FIELD)]

        records = self.service.records(self.base_currency)

        count = 0
        for record in records:
            row = sink.new_row()
            for column, field in mapped:
                row[column] = _field_value(field, record)
            count += 1
            if sink.add_row(row) == RowStatus.ABORT:
                log.info("Sink aborted after %d rows", count)
                break

        log.info("Delivered %d rates relative to %s", count, self.base_currency)
        return count
