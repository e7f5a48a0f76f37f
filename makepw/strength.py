"""Qualitative password strength tiers.

There are two separate scales here:
    min_entropy: the floor used when a user asks for "at least this tier"
    from_entropy: the banding used to describe a password that has already been generated
These do not invert each other (e.g. 70 bits is requested for STRONG, but VERY_STRONG is reported from 81 bits)."""

from enum import Enum
from functools import total_ordering
import re


@total_ordering
class PasswordStrength(Enum):
    """Each member is (rank, minimum entropy, description)."""
    WEAK = (0, 30.0, 'Weak - easily crackable')
    MODERATE = (1, 50.0, 'Moderate - acceptable for non-critical accounts')
    STRONG = (2, 70.0, 'Strong - good for most purposes')
    VERY_STRONG = (3, 90.0, 'Very strong - suitable for sensitive accounts')
    EXTREME = (4, 120.0, 'Extremely strong - suitable for high-security applications')

    def __init__(self, rank: int, min_entropy: float, description: str) -> None:
        self.rank = rank
        self.min_entropy = min_entropy
        self.description = description

    def __lt__(self, other: object) -> bool:
        if isinstance(other, PasswordStrength):
            return (self.rank < other.rank)
        return NotImplemented

    @classmethod
    def from_entropy(cls, entropy: float) -> 'PasswordStrength':
        """Maps an entropy (in bits) to a tier.
        The entropy is truncated to an integer before banding, so 45.9 bits is still WEAK."""
        bits = int(entropy)
        if (bits <= 45):
            return cls.WEAK
        if (bits <= 60):
            return cls.MODERATE
        if (bits <= 80):
            return cls.STRONG
        if (bits <= 100):
            return cls.VERY_STRONG
        return cls.EXTREME

    @classmethod
    def from_name(cls, name: str) -> 'PasswordStrength':
        """Parses a tier name such as 'Strong', 'VeryStrong', 'very_strong' or 'very-strong'."""
        key = re.sub(r'[\s_-]', '', name).lower()
        for member in cls:
            if (member.name.replace('_', '').lower() == key):
                return member
        valid = ', '.join(member.title for member in cls)
        raise ValueError(f'invalid strength {name!r} (choose from {valid})')

    @property
    def title(self) -> str:
        """CamelCase name, e.g. 'VeryStrong'."""
        return ''.join(tok.capitalize() for tok in self.name.split('_'))

    def __str__(self) -> str:
        return self.title
