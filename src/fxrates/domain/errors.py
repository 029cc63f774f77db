# src/fxrates/domain/errors.py
"""
Domain Errors - Retrieval and Normalization Exceptions

Every failure of a retrieval cycle surfaces as one of these types so the
host can pick its own retry or abort policy.
"""


class FxRatesError(Exception):
    """Base exception for fxrates errors."""
    pass


class NetworkError(FxRatesError):
    """Raised when the feed cannot be downloaded (connection, timeout, HTTP status)."""
    pass


class ParseError(FxRatesError):
    """Raised when the feed is not well-formed XML or carries an unparsable rate."""
    pass


class MissingCurrencyError(FxRatesError):
    """Raised when the base currency is absent from the fetched rate table."""

    def __init__(self, currency: str):
        super().__init__(f"Base currency {currency!r} not found in rate table")
        self.currency = currency


class InvalidCurrencyError(FxRatesError, ValueError):
    """Raised when a configured currency code is not a 3-letter code."""
    pass
