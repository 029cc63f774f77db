"""
Provider Adapters - Reference Rate Feed Clients

This package contains adapters for external rate feeds.
All providers implement the RateProvider interface.
"""

from fxrates.adapters.providers.base import RateProvider
from fxrates.adapters.providers.ecb import EcbProvider, parse_feed

__all__ = [
    "RateProvider",
    "EcbProvider",
    "parse_feed",
]
