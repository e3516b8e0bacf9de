"""
Data models for Pwned Passwords range queries.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import os
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any

from pwnedpasswords.exceptions import InvalidConfiguration


class RiskLevel(str, Enum):
    """Risk level based on password exposure."""

    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class PwnedPasswordsOptions:
    """Options applied to every password check.

    Validated once at construction; use with_overrides() for variations.
    """

    # Passwords seen fewer times than this are not considered pwned
    minimum_frequency_to_consider_pwned: int = 1
    # Ask the API to pad responses with decoy entries
    add_padding: bool = False

    def __post_init__(self) -> None:
        threshold = self.minimum_frequency_to_consider_pwned
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise InvalidConfiguration(
                f"minimum_frequency_to_consider_pwned must be an integer, got {threshold!r}"
            )
        if threshold < 1:
            raise InvalidConfiguration(
                f"minimum_frequency_to_consider_pwned must be at least 1, got {threshold}"
            )

    @classmethod
    def from_env(cls) -> "PwnedPasswordsOptions":
        """Load options from environment variables."""
        threshold_str = os.environ.get("PWNED_PASSWORDS_MIN_FREQUENCY") or "1"
        try:
            threshold = int(threshold_str)
        except ValueError:
            raise InvalidConfiguration(
                f"PWNED_PASSWORDS_MIN_FREQUENCY must be an integer, got {threshold_str!r}"
            ) from None

        return cls(
            minimum_frequency_to_consider_pwned=threshold,
            add_padding=os.environ.get("PWNED_PASSWORDS_ADD_PADDING", "").lower() in ("true", "yes", "1"),
        )

    def with_overrides(self, **changes: Any) -> "PwnedPasswordsOptions":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "minimum_frequency_to_consider_pwned": self.minimum_frequency_to_consider_pwned,
            "add_padding": self.add_padding,
        }


@dataclass
class PasswordCheckResult:
    """Result of checking a password against Pwned Passwords."""

    is_pwned: bool = False
    occurrences: int = 0
    # Never store the actual password or the suffix!
    hash_prefix: str = ""
    checked_at: datetime = field(default_factory=datetime.now)

    @property
    def risk_level(self) -> RiskLevel:
        """Determine risk level based on occurrences."""
        if self.occurrences == 0:
            return RiskLevel.SAFE
        elif self.occurrences < 10:
            return RiskLevel.LOW
        elif self.occurrences < 100:
            return RiskLevel.MEDIUM
        elif self.occurrences < 10000:
            return RiskLevel.HIGH
        else:
            return RiskLevel.CRITICAL

    @property
    def risk_description(self) -> str:
        """Get human-readable risk description."""
        descriptions = {
            RiskLevel.SAFE: "This password has not been found in any known data breaches.",
            RiskLevel.LOW: f"This password has been seen {self.occurrences} times in data breaches. Consider changing it.",
            RiskLevel.MEDIUM: f"This password has been seen {self.occurrences} times. You should change it.",
            RiskLevel.HIGH: f"This password has been seen {self.occurrences:,} times! Change it immediately.",
            RiskLevel.CRITICAL: f"This password has been seen {self.occurrences:,} times! It's extremely common and must be changed.",
        }
        return descriptions[self.risk_level]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "is_pwned": self.is_pwned,
            "occurrences": self.occurrences,
            "hash_prefix": self.hash_prefix,
            "risk_level": self.risk_level.value,
            "risk_description": self.risk_description,
            "checked_at": self.checked_at.isoformat(),
        }
