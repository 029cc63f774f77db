# src/fxrates/application/rates_service.py
"""
Rates Service - Base Currency Normalization

This module re-expresses a EUR-anchored RateTable against any base currency
and yields the result as sorted OutputRecord values.

Files that USE this module:
- fxrates.application.reader (FxRatesReader drives RatesService)
- fxrates.app (CLI entry point)
- tests.test_rates_service (unit tests)

Files that this module USES:
- fxrates.adapters.providers (RateProvider, EcbProvider)
- fxrates.domain (OutputRecord, MissingCurrencyError)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from typing import Iterator, Mapping, Optional

from fxrates.adapters.providers.base import RateProvider
from fxrates.adapters.providers.ecb import EcbProvider
from fxrates.domain.errors import MissingCurrencyError
from fxrates.domain.models import RATE_DECIMALS, OutputRecord

log = logging.getLogger(__name__)


def conversion_rate(rates: Mapping[str, float], base: str) -> float:
    """
    Factor that turns a EUR-relative rate into a `base`-relative one.

    Raises:
        MissingCurrencyError: If `base` is not in `rates`
    """
    if base not in rates:
        raise MissingCurrencyError(base)
    return 1 / rates[base]


def _generate(rates: Mapping[str, float], factor: float) -> Iterator[OutputRecord]:
    for code in sorted(rates):
        yield OutputRecord(code, round(rates[code] * factor, RATE_DECIMALS))


def emit_rates(rates: Mapping[str, float], base: str) -> Iterator[OutputRecord]:
    """
    Yield every rate re-expressed against `base`, sorted by currency code.

    The base currency is checked before the iterator is returned, so a
    missing base fails the call without producing any record. Rates are
    rounded with round(), i.e. half-to-even on the float's binary value.

    Args:
        rates: Currency -> rate relative to EUR
        base: Currency the output is expressed in

    Returns:
        Lazy iterator of OutputRecord; call again for a fresh pass

    Raises:
        MissingCurrencyError: If `base` is not in `rates`
    """
    factor = conversion_rate(rates, base)
    return _generate(dict(rates), factor)


class RatesService:
    """
    Fetch-then-normalize pipeline for one retrieval cycle.
    Each call to records() downloads the feed again.
    """
    def __init__(self, provider: Optional[RateProvider] = None):
        """
        Args:
            provider: RateProvider instance (defaults to EcbProvider)
        """
        self.provider = provider or EcbProvider()

    def records(self, base: str) -> Iterator[OutputRecord]:
        """
        Fetch the current rates and return them normalized to `base`.

        Raises:
            NetworkError: If the feed cannot be downloaded
            ParseError: If the feed cannot be parsed
            MissingCurrencyError: If `base` is not quoted in the feed
        """
        rates = self.provider.fetch_rates()
        try:
            return emit_rates(rates, base)
        except MissingCurrencyError:
            log.error("Base currency %s not in feed (%d currencies available)", base, len(rates))
            raise
