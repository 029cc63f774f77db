# src/fxrates/adapters/providers/ecb.py
"""
ECB Euro Reference Rates Provider

This module downloads the European Central Bank daily reference-rate feed
and turns it into a RateTable. The XML body is scanned incrementally with a
pull parser as it streams in; only `Cube` elements carrying a `currency`
attribute contribute rates.

Files that USE this module:
- fxrates.application.rates_service (RatesService defaults to EcbProvider)
- fxrates.app (indirectly, through the default RatesService)
- tests.test_providers (unit tests)

Files that this module USES:
- fxrates.adapters.providers.base (RateProvider interface)
- fxrates.config (feed URL and HTTP timeout)
- fxrates.domain (anchor constants and error types)
"""
import logging
import math
import re
from typing import Iterable, Optional
from xml.etree import ElementTree

import requests

from fxrates.adapters.providers.base import RateProvider
from fxrates.config import settings
from fxrates.domain.errors import NetworkError, ParseError
from fxrates.domain.models import ANCHOR_CURRENCY, ANCHOR_RATE, RATE_EPSILON, RateTable

log = logging.getLogger(__name__)

CUBE_TAG = "cube"
CHUNK_SIZE = 8192
_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def _local_name(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on qualified tags."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _parse_rate(currency: str, raw: Optional[str]) -> float:
    """
    Convert a `rate` attribute to float.

    A missing attribute counts as zero so the entry is dropped by the
    epsilon filter rather than failing the whole feed.

    Raises:
        ParseError: If the value is not a finite decimal number
    """
    if raw is None:
        return 0.0
    text = raw.strip()
    if not _DECIMAL_RE.match(text):
        raise ParseError(f"Invalid rate {raw!r} for currency {currency!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ParseError(f"Non-finite rate {raw!r} for currency {currency!r}")
    return value


def parse_feed(chunks: Iterable[bytes]) -> RateTable:
    """
    Build a RateTable from the raw bytes of a reference-rate feed.

    Args:
        chunks: The XML document as an iterable of byte chunks, e.g. a
            response's iter_content() or a one-element list in tests

    Returns:
        Mapping of currency code to rate relative to EUR, EUR included at 1.0

    Raises:
        ParseError: If the XML is malformed or a rate cannot be parsed
    """
    rates: RateTable = {ANCHOR_CURRENCY: ANCHOR_RATE}
    parser = ElementTree.XMLPullParser(events=("start", "end"))

    def drain() -> None:
        for event, elem in parser.read_events():
            if event == "end":
                elem.clear()
                continue
            if _local_name(elem.tag).lower() != CUBE_TAG:
                continue
            currency = elem.get("currency")
            if currency is None:
                # date/wrapper cubes carry no currency
                continue
            rate = _parse_rate(currency, elem.get("rate"))
            if abs(rate) > RATE_EPSILON:
                rates[currency] = rate
            else:
                log.debug("Skipping zero rate for %s", currency)

    try:
        for chunk in chunks:
            if chunk:
                parser.feed(chunk)
                drain()
        parser.close()
        drain()
    except (ElementTree.ParseError, LookupError) as e:
        # LookupError: unknown encoding named in the XML declaration
        raise ParseError(f"Malformed rate feed XML: {e}") from e

    return rates


class EcbProvider(RateProvider):
    """
    Client for the ECB 'eurofxref-daily.xml' document.

    No caching: every call downloads the feed again.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize the ECB feed provider.

        Args:
            url: Optional feed URL (defaults to settings.feed_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.url = url or settings.feed_url
        self.timeout = timeout or settings.http_timeout_seconds

    def fetch_rates(self) -> RateTable:
        """
        Download and parse the reference-rate feed.

        Returns:
            RateTable keyed by currency code, EUR included at 1.0

        Raises:
            NetworkError: On connection failure, timeout or non-success HTTP status
            ParseError: If the body is not a valid rate feed
        """
        log.info("Fetching reference rates from %s", self.url)
        try:
            resp = requests.get(self.url, timeout=self.timeout, stream=True)
        except requests.exceptions.Timeout as e:
            log.warning("Rate feed timeout after %d seconds", self.timeout)
            raise NetworkError(f"Rate feed timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.warning("Rate feed request failed (network/connection error): %s", e)
            raise NetworkError(f"Rate feed request failed: {e}") from e

        try:
            try:
                resp.raise_for_status()
            except requests.exceptions.HTTPError as e:
                log.error("Rate feed HTTP error: %s", e)
                raise NetworkError(f"Rate feed HTTP error: {e}") from e

            try:
                rates = parse_feed(resp.iter_content(chunk_size=CHUNK_SIZE))
            except requests.exceptions.RequestException as e:
                log.warning("Rate feed stream interrupted: %s", e)
                raise NetworkError(f"Rate feed stream interrupted: {e}") from e
            except ParseError:
                log.error("Rate feed from %s could not be parsed", self.url)
                raise
        finally:
            resp.close()

        log.info("Fetched %d reference rates (EUR included)", len(rates))
        return rates
