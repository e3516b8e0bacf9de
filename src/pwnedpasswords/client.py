"""
Pwned Passwords client.

Implements the k-anonymity range check: only the first 5 characters of
the SHA-1 hash are sent to the API, the remaining 35 are matched locally.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging

from pwnedpasswords.exceptions import TransportFailure
from pwnedpasswords.hashing import split, split_digest
from pwnedpasswords.models import PasswordCheckResult, PwnedPasswordsOptions
from pwnedpasswords.parsing import find_occurrences
from pwnedpasswords.transport import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    AiohttpRangeTransport,
    RangeTransport,
)

logger = logging.getLogger(__name__)


async def check(
    prefix: str,
    suffix: str,
    options: PwnedPasswordsOptions,
    transport: RangeTransport,
) -> PasswordCheckResult:
    """Look up a digest suffix in the range for its prefix.

    Args:
        prefix: First 5 hex characters of the SHA-1 digest (sent)
        suffix: Remaining 35 hex characters (kept local)
        options: Threshold and padding options
        transport: Range transport

    Returns:
        PasswordCheckResult

    Raises:
        TransportFailure: If the request fails or returns a non-200 status
    """
    response = await transport.issue_range_request(prefix, options.add_padding)

    if not response.ok:
        logger.warning(f"Range request for {prefix} returned HTTP {response.status}")
        raise TransportFailure(
            f"HTTP {response.status} from range API",
            status=response.status,
            prefix=prefix,
        )

    occurrences = find_occurrences(suffix, response.lines)

    return PasswordCheckResult(
        is_pwned=occurrences >= options.minimum_frequency_to_consider_pwned,
        occurrences=occurrences,
        hash_prefix=prefix,
    )


class PwnedPasswordsClient:
    """Client for the Pwned Passwords range API.

    Holds no per-check state, so one instance can serve concurrent checks.
    """

    def __init__(
        self,
        transport: RangeTransport | None = None,
        options: PwnedPasswordsOptions | None = None,
        close_transport: bool | None = None,
    ):
        """Initialize client.

        Args:
            transport: Range transport (default: AiohttpRangeTransport)
            options: Check options (default: threshold 1, no padding)
            close_transport: Close the transport in close() (default: only
                when the client created it)
        """
        self.options = options or PwnedPasswordsOptions()
        self._owns_transport = transport is None if close_transport is None else close_transport
        self.transport = transport or AiohttpRangeTransport()

    async def close(self) -> None:
        """Close the transport if this client created it."""
        close = getattr(self.transport, "close", None)
        if self._owns_transport and close is not None:
            await close()

    async def __aenter__(self) -> "PwnedPasswordsClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def check_password(self, password: str | bytes) -> PasswordCheckResult:
        """Check if a password has been exposed in data breaches.

        Args:
            password: Password to check (NOT stored or logged)

        Returns:
            PasswordCheckResult with exposure count

        Raises:
            TransportFailure: If the range API could not be queried
        """
        prefix, suffix = split(password)
        return await check(prefix, suffix, self.options, self.transport)

    async def check_password_hash(self, sha1_hash: str) -> PasswordCheckResult:
        """Check a pre-computed SHA-1 hash against Pwned Passwords.

        Raises:
            ValueError: If sha1_hash is not a SHA-1 hex digest
            TransportFailure: If the range API could not be queried
        """
        prefix, suffix = split_digest(sha1_hash)
        return await check(prefix, suffix, self.options, self.transport)

    async def is_pwned(self, password: str | bytes) -> bool:
        """Return True if the password meets the pwned threshold."""
        result = await self.check_password(password)
        return result.is_pwned

    async def get_occurrences(self, password: str | bytes) -> int:
        """Return how many times the password appears in the corpus."""
        result = await self.check_password(password)
        return result.occurrences


def create_client(
    minimum_frequency_to_consider_pwned: int = 1,
    add_padding: bool = False,
    base_url: str = DEFAULT_BASE_URL,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
) -> PwnedPasswordsClient:
    """Build a client for the public Pwned Passwords API.

    Args:
        minimum_frequency_to_consider_pwned: e.g. 20 means only passwords
            seen 20 times or more are considered pwned
        add_padding: Ask the API to pad responses with decoy entries
        base_url: Range API base address
        user_agent: User-Agent header for requests
        timeout: Request timeout in seconds

    Raises:
        InvalidConfiguration: If the threshold is below 1
    """
    options = PwnedPasswordsOptions(
        minimum_frequency_to_consider_pwned=minimum_frequency_to_consider_pwned,
        add_padding=add_padding,
    )
    transport = AiohttpRangeTransport(base_url=base_url, user_agent=user_agent, timeout=timeout)
    return PwnedPasswordsClient(transport=transport, options=options, close_transport=True)


# Convenience functions for synchronous usage
def check_password_sync(
    password: str | bytes,
    options: PwnedPasswordsOptions | None = None,
) -> PasswordCheckResult:
    """Synchronous wrapper for checking password exposure.

    Args:
        password: Password to check
        options: Check options

    Returns:
        PasswordCheckResult
    """
    async def _check():
        async with PwnedPasswordsClient(options=options) as client:
            return await client.check_password(password)

    return asyncio.run(_check())


def check_password_hash_sync(
    sha1_hash: str,
    options: PwnedPasswordsOptions | None = None,
) -> PasswordCheckResult:
    """Synchronous wrapper for checking a SHA-1 hash."""
    async def _check():
        async with PwnedPasswordsClient(options=options) as client:
            return await client.check_password_hash(sha1_hash)

    return asyncio.run(_check())
