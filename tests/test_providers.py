# tests/test_providers.py
"""
Provider Tests - Unit Tests for the ECB Feed Provider

This module contains unit tests for feed parsing and for EcbProvider's HTTP
handling: error translation, streaming and response cleanup.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxrates.adapters.providers.ecb (EcbProvider and parse_feed for testing)
- fxrates.domain.errors (expected error types)
- unittest.mock (Mock for API mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import patch  # Patching for testing without real HTTP calls
import requests  # HTTP library (used for mocking failures)

from fxrates.adapters.providers.ecb import EcbProvider, parse_feed  # Provider and parser to test
from fxrates.config import ECB_DAILY_FEED_URL
from fxrates.domain.errors import NetworkError, ParseError


class TestParseFeed:
    def test_parses_ecb_document(self, ecb_feed):
        rates = parse_feed([ecb_feed])

        assert rates == {
            "EUR": 1.0,
            "USD": 1.1,
            "JPY": 160.5,
            "GBP": 0.9,
            "CHF": 0.95,
        }

    def test_eur_seeded_even_for_empty_feed(self):
        assert parse_feed([b"<Envelope/>"]) == {"EUR": 1.0}

    def test_incremental_chunks(self, ecb_feed):
        chunks = [ecb_feed[i:i + 7] for i in range(0, len(ecb_feed), 7)]
        assert parse_feed(chunks) == parse_feed([ecb_feed])

    def test_empty_chunks_ignored(self):
        rates = parse_feed([b"", b"<Cube currency='USD' rate='1.2'/>", b""])
        assert rates == {"EUR": 1.0, "USD": 1.2}

    def test_tag_match_is_case_insensitive(self):
        body = b"<root><CUBE currency='USD' rate='1.1'/><cube currency='GBP' rate='0.9'/></root>"
        assert parse_feed([body]) == {"EUR": 1.0, "USD": 1.1, "GBP": 0.9}

    def test_other_elements_ignored(self):
        body = b"<root><Rate currency='USD' rate='1.1'/></root>"
        assert parse_feed([body]) == {"EUR": 1.0}

    def test_cube_without_currency_skipped(self):
        body = b"<Cube><Cube time='2026-10-16' rate='3.0'><Cube currency='USD' rate='1.1'/></Cube></Cube>"
        assert parse_feed([body]) == {"EUR": 1.0, "USD": 1.1}

    def test_zero_rate_excluded(self):
        body = b"<Cube><Cube currency='USD' rate='1.1'/><Cube currency='XAU' rate='0'/><Cube currency='XAG' rate='0.0'/></Cube>"
        rates = parse_feed([body])

        assert "XAU" not in rates
        assert "XAG" not in rates
        assert rates["USD"] == 1.1

    def test_missing_rate_excluded(self):
        body = b"<Cube><Cube currency='USD'/></Cube>"
        assert parse_feed([body]) == {"EUR": 1.0}

    def test_later_entry_overwrites(self):
        body = b"<Cube><Cube currency='USD' rate='1.1'/><Cube currency='USD' rate='1.2'/></Cube>"
        assert parse_feed([body])["USD"] == 1.2

    def test_feed_rate_overrides_eur_seed(self):
        body = b"<Cube><Cube currency='EUR' rate='1.5'/></Cube>"
        assert parse_feed([body]) == {"EUR": 1.5}

    def test_non_numeric_rate(self):
        body = b"<Cube><Cube currency='USD' rate='abc'/></Cube>"
        with pytest.raises(ParseError, match="Invalid rate 'abc' for currency 'USD'"):
            parse_feed([body])

    @pytest.mark.parametrize("raw", ["1_0", "inf", "nan", "0x1p0", "1.1.1", ""])
    def test_non_decimal_rate(self, raw):
        body = f"<Cube><Cube currency='USD' rate='{raw}'/></Cube>".encode()
        with pytest.raises(ParseError, match="Invalid rate"):
            parse_feed([body])

    def test_decimal_forms_accepted(self):
        body = b"<Cube><Cube currency='USD' rate=' 1.1 '/><Cube currency='JPY' rate='1.605E2'/><Cube currency='GBP' rate='.9'/></Cube>"
        assert parse_feed([body]) == {"EUR": 1.0, "USD": 1.1, "JPY": 160.5, "GBP": 0.9}

    def test_non_finite_rate(self):
        body = b"<Cube><Cube currency='USD' rate='1e999'/></Cube>"
        with pytest.raises(ParseError, match="Non-finite rate"):
            parse_feed([body])

    def test_unknown_encoding(self):
        body = b"<?xml version='1.0' encoding='bogus-enc'?><Cube/>"
        with pytest.raises(ParseError, match="Malformed rate feed XML"):
            parse_feed([body])

    def test_malformed_xml(self):
        with pytest.raises(ParseError, match="Malformed rate feed XML"):
            parse_feed([b"<Cube><Cube currency='USD' rate='1.1'></Cube>"])

    def test_truncated_xml(self, ecb_feed):
        with pytest.raises(ParseError):
            parse_feed([ecb_feed[:200]])


class TestEcbProvider:
    def test_init_with_defaults(self):
        provider = EcbProvider()
        assert provider.url == ECB_DAILY_FEED_URL
        assert provider.timeout == 30

    def test_init_with_custom_params(self):
        provider = EcbProvider(url="http://test.com/feed.xml", timeout=5)
        assert provider.url == "http://test.com/feed.xml"
        assert provider.timeout == 5

    @patch('fxrates.adapters.providers.ecb.requests.get')
    def test_fetch_rates_success(self, mock_get, feed_response):
        mock_response = feed_response()
        mock_get.return_value = mock_response

        provider = EcbProvider()
        rates = provider.fetch_rates()

        assert rates["EUR"] == 1.0
        assert rates["USD"] == 1.1
        assert len(rates) == 5
        mock_get.assert_called_once_with(ECB_DAILY_FEED_URL, timeout=30, stream=True)
        mock_response.close.assert_called_once()

    @patch('fxrates.adapters.providers.ecb.requests.get')
    def test_each_call_refetches(self, mock_get, feed_response):
        mock_get.side_effect = lambda *a, **kw: feed_response()

        provider = EcbProvider()
        provider.fetch_rates()
        provider.fetch_rates()

        assert mock_get.call_count == 2

    @patch('fxrates.adapters.providers.ecb.requests.get')
    def test_fetch_rates_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        provider = EcbProvider(timeout=3)
        with pytest.raises(NetworkError, match="Rate feed timeout after 3s"):
            provider.fetch_rates()

    @patch('fxrates.adapters.providers.ecb.requests.get')
    def test_fetch_rates_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("unreachable")

        provider = EcbProvider()
        with pytest.raises(NetworkError, match="Rate feed request failed"):
            provider.fetch_rates()

    @patch('fxrates.adapters.providers.ecb.requests.get')
    def test_fetch_rates_http_error(self, mock_get, feed_response):
        mock_response = feed_response()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("503 Server Error")
        mock_get.return_value = mock_response

        provider = EcbProvider()
        with pytest.raises(NetworkError, match="Rate feed HTTP error"):
            provider.fetch_rates()
        mock_response.iter_content.assert_not_called()
        mock_response.close.assert_called_once()

    @patch('fxrates.adapters.providers.ecb.requests.get')
    def test_fetch_rates_stream_interrupted(self, mock_get, feed_response):
        mock_response = feed_response()
        mock_response.iter_content.side_effect = requests.exceptions.ChunkedEncodingError("connection reset")
        mock_get.return_value = mock_response

        provider = EcbProvider()
        with pytest.raises(NetworkError, match="Rate feed stream interrupted"):
            provider.fetch_rates()
        mock_response.close.assert_called_once()

    @patch('fxrates.adapters.providers.ecb.requests.get')
    def test_fetch_rates_malformed_body(self, mock_get, feed_response):
        mock_response = feed_response(body=b"<html><body>maintenance</html>")
        mock_get.return_value = mock_response

        provider = EcbProvider()
        with pytest.raises(ParseError):
            provider.fetch_rates()
        mock_response.close.assert_called_once()
