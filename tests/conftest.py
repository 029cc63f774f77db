# tests/conftest.py
"""
Shared Test Fixtures

Feed fixtures shaped like the ECB daily document, plus a helper that builds
a mocked streaming HTTP response.

Files that USE this module:
- pytest (fixture discovery for every test module)
"""
from unittest.mock import Mock  # Mock objects for HTTP responses

import pytest  # Testing framework for writing and running tests

ECB_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
\t<gesmes:subject>Reference rates</gesmes:subject>
\t<gesmes:Sender>
\t\t<gesmes:name>European Central Bank</gesmes:name>
\t</gesmes:Sender>
\t<Cube>
\t\t<Cube time='2026-10-16'>
\t\t\t<Cube currency='USD' rate='1.1'/>
\t\t\t<Cube currency='JPY' rate='160.5'/>
\t\t\t<Cube currency='GBP' rate='0.9'/>
\t\t\t<Cube currency='CHF' rate='0.95'/>
\t\t</Cube>
\t</Cube>
</gesmes:Envelope>
"""


def make_response(body: bytes = ECB_FEED, chunk_size: int = 64) -> Mock:
    """Build a mocked requests.Response that streams `body` in chunks."""
    resp = Mock()
    resp.raise_for_status.return_value = None
    resp.iter_content.return_value = [body[i:i + chunk_size] for i in range(0, len(body), chunk_size)]
    return resp


@pytest.fixture
def ecb_feed() -> bytes:
    return ECB_FEED


@pytest.fixture
def simple_rates():
    return {"EUR": 1.0, "USD": 1.1, "GBP": 0.9}


@pytest.fixture
def feed_response():
    """Factory fixture: feed_response(body=..., chunk_size=...) -> mocked response."""
    return make_response
