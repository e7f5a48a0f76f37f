"""Character classes a password may be built from."""

from enum import Enum
import string
from typing import List


SPECIAL_CHARS = '!@#$%^&*()-_=+[]{}|;:,.<>?'


def is_special(c: str) -> bool:
    """A character is special if it is not an ASCII letter or digit.
    This is broader than SPECIAL_CHARS: any other character (including non-ASCII letters) counts."""
    return not (c.isascii() and c.isalnum())


class CharacterClass(Enum):
    """Each member is (alphabet, entropy weight, label)."""
    UPPERCASE = (string.ascii_uppercase, 26, 'uppercase')
    LOWERCASE = (string.ascii_lowercase, 26, 'lowercase')
    DIGIT = (string.digits, 10, 'number')
    SPECIAL = (SPECIAL_CHARS, 32, 'special character')

    def __init__(self, alphabet: str, weight: int, label: str) -> None:
        self.alphabet = alphabet
        self.weight = weight
        self.label = label

    def matches(self, c: str) -> bool:
        """Returns True if the character belongs to this class (for detection purposes)."""
        if (self is CharacterClass.SPECIAL):
            return is_special(c)
        return (c in self.alphabet)

    @classmethod
    def classify(cls, c: str) -> 'CharacterClass':
        """Puts a character into exactly one class."""
        for char_class in (cls.UPPERCASE, cls.LOWERCASE, cls.DIGIT):
            if char_class.matches(c):
                return char_class
        return cls.SPECIAL


def select_classes(uppercase: bool = True, lowercase: bool = True, digits: bool = True, special: bool = True) -> List[CharacterClass]:
    """Returns the enabled classes, always in the order upper, lower, digit, special."""
    flags = (uppercase, lowercase, digits, special)
    return [char_class for (char_class, flag) in zip(CharacterClass, flags) if flag]
