"""
Exceptions raised by the Pwned Passwords client.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class PwnedPasswordsError(Exception):
    """Base class for all Pwned Passwords client errors."""


class TransportFailure(PwnedPasswordsError):
    """The range request could not be completed.

    Raised for connection errors, timeouts and non-success HTTP statuses.
    A transport failure is never a verdict: callers decide whether to
    fail open or fail closed.
    """

    def __init__(self, message: str, status: int | None = None, prefix: str | None = None):
        super().__init__(message)
        self.status = status
        self.prefix = prefix


class InvalidConfiguration(PwnedPasswordsError, ValueError):
    """Client options are out of range."""
