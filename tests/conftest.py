"""Shared fixtures for Pwned Passwords tests."""

import pytest

from pwnedpasswords.exceptions import TransportFailure
from pwnedpasswords.transport import RangeResponse

# SHA-1("password")
PASSWORD_PREFIX = "5BAA6"
PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"
PASSWORD_LINE = f"{PASSWORD_SUFFIX}:3730471"


class FakeTransport:
    """In-memory RangeTransport recording every request."""

    def __init__(self, body: str = "", status: int = 200, error: Exception | None = None):
        self.body = body
        self.status = status
        self.error = error
        self.requests: list[tuple[str, bool]] = []
        self.closed = False

    async def issue_range_request(self, prefix: str, add_padding: bool) -> RangeResponse:
        self.requests.append((prefix, add_padding))
        if self.error is not None:
            raise self.error
        return RangeResponse(status=self.status, lines=self.body.splitlines())

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport():
    """Transport returning the well-known "password" line among others."""
    body = "\r\n".join([
        "0018A45C4D1DEF81644B54AB7F969B88D65:1",
        "00D4F6E8FA6EECAD2A3AA415EEC418D38EC:2",
        PASSWORD_LINE,
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF:0",
    ])
    return FakeTransport(body=body)


@pytest.fixture
def failing_transport():
    """Transport raising a connection failure."""
    return FakeTransport(error=TransportFailure("Request failed: connection refused"))
