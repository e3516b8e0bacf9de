"""
HTTP transport for the Pwned Passwords range API.

The client only depends on the RangeTransport protocol; any object with a
matching issue_range_request() coroutine can be used in place of the
aiohttp implementation below.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

import aiohttp

from pwnedpasswords.exceptions import TransportFailure
from pwnedpasswords.hashing import PREFIX_LENGTH, is_hex

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.pwnedpasswords.com"
DEFAULT_USER_AGENT = "PwnedPasswordsClient"
DEFAULT_TIMEOUT = 30.0  # seconds

PADDING_HEADER = "Add-Padding"


@dataclass
class RangeResponse:
    """Status and body lines of a range request."""

    status: int
    lines: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == 200


class RangeTransport(Protocol):
    """Anything that can fetch the candidate list for a hash prefix.

    An async close() method is optional and only called by clients that
    own the transport.
    """

    async def issue_range_request(self, prefix: str, add_padding: bool) -> RangeResponse:
        """Fetch /range/{prefix}.

        Args:
            prefix: 5 uppercase hex characters
            add_padding: Ask the server to pad the response

        Returns:
            RangeResponse with the status and body lines

        Raises:
            TransportFailure: On connection errors or timeouts
        """
        ...


class AiohttpRangeTransport:
    """RangeTransport backed by an aiohttp ClientSession.

    Safe for concurrent use from a single event loop. No retries are
    performed here.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        session: aiohttp.ClientSession | None = None,
    ):
        """Initialize transport.

        Args:
            base_url: Range API base address
            user_agent: User-Agent header for requests
            timeout: Total request timeout in seconds
            session: Existing session to use (not closed by this transport)
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session exists."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close HTTP session if this transport created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def __aenter__(self) -> "AiohttpRangeTransport":
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def range_url(self, prefix: str) -> str:
        """Build the range URL for a hash prefix."""
        return f"{self.base_url}/range/{prefix}"

    async def issue_range_request(self, prefix: str, add_padding: bool) -> RangeResponse:
        if not is_hex(prefix, PREFIX_LENGTH):
            raise ValueError(f"Range prefix must be {PREFIX_LENGTH} hex characters")
        prefix = prefix.upper()

        headers = {"User-Agent": self.user_agent}
        if add_padding:
            headers[PADDING_HEADER] = "true"

        session = await self._ensure_session()
        logger.debug(f"Requesting range {prefix} (padding={add_padding})")

        try:
            async with session.get(
                self.range_url(prefix),
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                status = response.status
                # Only a 200 body is parsed; undecodable bytes become malformed lines
                body = await response.read() if status == 200 else b""
        except asyncio.TimeoutError:
            raise TransportFailure("Request timeout", prefix=prefix) from None
        except aiohttp.ClientError as e:
            raise TransportFailure(f"Request failed: {e}", prefix=prefix) from e

        text = body.decode("utf-8", errors="replace")
        return RangeResponse(status=status, lines=text.splitlines())
