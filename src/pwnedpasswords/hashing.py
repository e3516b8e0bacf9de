"""
SHA-1 digest and prefix/suffix split for k-anonymity range queries.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import hashlib
import string

DIGEST_LENGTH = 40
PREFIX_LENGTH = 5
SUFFIX_LENGTH = DIGEST_LENGTH - PREFIX_LENGTH

_HEX_DIGITS = frozenset(string.hexdigits)


def digest(password: str | bytes) -> str:
    """Return the uppercase SHA-1 hex digest of a password.

    Strings are UTF-8 encoded. The empty password is valid input.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")
    return hashlib.sha1(password).hexdigest().upper()  # noqa: S324


def split(password: str | bytes) -> tuple[str, str]:
    """Hash a password and split the digest into (prefix, suffix).

    Only the prefix is ever sent to the range API.
    """
    password_hash = digest(password)
    return password_hash[:PREFIX_LENGTH], password_hash[PREFIX_LENGTH:]


def is_hex(value: str, length: int) -> bool:
    """Check that value is exactly `length` hexadecimal characters."""
    return len(value) == length and all(c in _HEX_DIGITS for c in value)


def split_digest(sha1_hash: str) -> tuple[str, str]:
    """Split a precomputed SHA-1 hex digest into (prefix, suffix).

    Args:
        sha1_hash: 40 hex characters, either case

    Returns:
        Uppercase (prefix, suffix)

    Raises:
        ValueError: If the value is not a SHA-1 hex digest
    """
    sha1_hash = sha1_hash.strip().upper()
    if not is_hex(sha1_hash, DIGEST_LENGTH):
        raise ValueError(f"Expected a {DIGEST_LENGTH}-character SHA-1 hex digest")
    return sha1_hash[:PREFIX_LENGTH], sha1_hash[PREFIX_LENGTH:]
