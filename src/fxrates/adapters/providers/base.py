# src/fxrates/adapters/providers/base.py
"""
Base Provider Interface for Reference Rate Feeds

This module defines the abstract base class for rate table providers.

Files that USE this module:
- fxrates.adapters.providers.ecb (EcbProvider implements RateProvider)
- fxrates.application.rates_service (uses RateProvider)

Files that this module USES:
- fxrates.domain.models (RateTable)
"""
from abc import ABC, abstractmethod

from fxrates.domain.models import RateTable


class RateProvider(ABC):
    @abstractmethod
    def fetch_rates(self) -> RateTable:
        """Return a fresh currency -> rate-relative-to-EUR table, EUR included."""
        raise NotImplementedError
