"""
Pwned Passwords k-anonymity client.

Checks passwords against the Have I Been Pwned Pwned Passwords corpus
by sending only a 5-character SHA-1 prefix to the range API.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "1.0.0"

from pwnedpasswords.exceptions import (
    InvalidConfiguration,
    PwnedPasswordsError,
    TransportFailure,
)
from pwnedpasswords.hashing import digest, split, split_digest
from pwnedpasswords.models import (
    PasswordCheckResult,
    PwnedPasswordsOptions,
    RiskLevel,
)
from pwnedpasswords.parsing import (
    MalformedLine,
    RangeEntry,
    find_occurrences,
    iter_range_entries,
    parse_range_line,
)
from pwnedpasswords.transport import (
    AiohttpRangeTransport,
    RangeResponse,
    RangeTransport,
)
from pwnedpasswords.client import (
    PwnedPasswordsClient,
    check,
    check_password_hash_sync,
    check_password_sync,
    create_client,
)

__all__ = [
    "PwnedPasswordsClient",
    "PwnedPasswordsOptions",
    "PasswordCheckResult",
    "RiskLevel",
    "RangeEntry",
    "MalformedLine",
    "RangeResponse",
    "RangeTransport",
    "AiohttpRangeTransport",
    "PwnedPasswordsError",
    "TransportFailure",
    "InvalidConfiguration",
    "check",
    "create_client",
    "check_password_sync",
    "check_password_hash_sync",
    "digest",
    "split",
    "split_digest",
    "parse_range_line",
    "iter_range_entries",
    "find_occurrences",
]
