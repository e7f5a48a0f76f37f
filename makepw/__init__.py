"""Secure password generation with entropy targets, validation and strength tiers."""

from makepw.charsets import CharacterClass
from makepw.makepw_strong import GeneratedPassword, PasswordValidation, calc_entropy, generate_secure_password, generate_with_min_entropy, validate_password
from makepw.strength import PasswordStrength

__all__ = [
    'CharacterClass',
    'GeneratedPassword',
    'PasswordStrength',
    'PasswordValidation',
    'calc_entropy',
    'generate_secure_password',
    'generate_with_min_entropy',
    'validate_password',
]
