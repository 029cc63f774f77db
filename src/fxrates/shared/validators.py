# src/fxrates/shared/validators.py
"""
Input Validation Utilities

Validation helpers for configuration values and host-supplied parameters.

Files that USE this module:
- fxrates.config.settings (base currency field validator)
- fxrates.application.reader (BaseCurrency initialization parameter)

Files that this module USES:
- None (pure utility functions)
"""
import re

_CURRENCY_RE = re.compile(r'^[A-Z]{3}$')


def validate_currency_code(code: str) -> bool:
    """
    Validate an ISO-4217 style currency code.

    Args:
        code: Currency code to validate (e.g. "USD")

    Returns:
        True if the code is exactly three upper-case letters, False otherwise
    """
    if not code:
        return False
    return bool(_CURRENCY_RE.match(code))


def normalize_currency_code(code: str) -> str:
    """
    Strip and upper-case a currency code, then validate it.

    Raises:
        ValueError: If the result is not a three-letter code
    """
    normalized = (code or "").strip().upper()
    if not validate_currency_code(normalized):
        raise ValueError(f"currency code must be 3 letters, got {code!r}")
    return normalized
