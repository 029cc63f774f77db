"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from fxrates.shared.validators import normalize_currency_code, validate_currency_code
from fxrates.shared.logging_conf import setup_logging

__all__ = [
    "normalize_currency_code",
    "validate_currency_code",
    "setup_logging",
]
