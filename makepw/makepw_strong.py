#!/usr/bin/env python3

"""
Generates a strong password using a cryptographically secure random source.
The password draws from up to four character classes (uppercase, lowercase, numbers, special characters), with at least one character from each enabled class.
If a minimum entropy is requested, the password is lengthened until it meets the target (or the attempts run out).
"""

from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, ArgumentTypeError, BooleanOptionalAction, Namespace, RawDescriptionHelpFormatter
from dataclasses import dataclass
import json
import logging
from math import log2
import secrets
from typing import Any, Dict, List, Optional, Tuple

from makepw.charsets import CharacterClass, select_classes
from makepw.config import BOOLEAN_KEYS, DEFAULT_LENGTH, DEFAULT_SECTION, LENGTH_STEP, MAX_ATTEMPTS, MIN_LENGTH, load_config
from makepw.logutils import LOGGER, configure_logging, loglevel, tabbed
from makepw.strength import PasswordStrength


_RNG = secrets.SystemRandom()


##############
# GENERATION #
##############

def generate_secure_password(length: int, use_uppercase: bool = True, use_lowercase: bool = True, use_digits: bool = True, use_special: bool = True) -> str:
    """Makes a password of exactly the given length from the enabled character classes.
    One character is drawn from each enabled class (in order upper, lower, digit, special) while there is room, the rest are drawn from all the enabled classes combined, then the whole thing is shuffled.
    If length is less than the number of enabled classes, the later classes are not guaranteed to appear.
    Raises a ValueError if no class is enabled."""
    if (length < 0):
        raise ValueError(f'invalid password length {length}')
    classes = select_classes(use_uppercase, use_lowercase, use_digits, use_special)
    if (not classes):
        raise ValueError('at least one character class must be enabled')
    chars = []
    for char_class in classes:
        if (len(chars) < length):
            chars.append(secrets.choice(char_class.alphabet))
    pool = ''.join(char_class.alphabet for char_class in classes)
    chars += [secrets.choice(pool) for _ in range(length - len(chars))]
    # so the guaranteed characters are not always at the front
    _RNG.shuffle(chars)
    return ''.join(chars)


###########
# ENTROPY #
###########

def observed_classes(password: str) -> Tuple[CharacterClass, ...]:
    """Classes that actually occur in the password, in canonical order."""
    seen = {CharacterClass.classify(c) for c in password}
    return tuple(char_class for char_class in CharacterClass if (char_class in seen))

def charset_size(password: str) -> int:
    return sum(char_class.weight for char_class in observed_classes(password))

def calc_entropy(password: str) -> float:
    """Estimates the entropy (in bits) of a password as length * log2(alphabet size).
    The alphabet is inferred from the characters in the password itself, not from the classes that were requested."""
    size = charset_size(password)
    if (size == 0):  # empty password
        return 0.0
    return log2(size) * len(password)


##############
# VALIDATION #
##############

@dataclass(frozen = True)
class PasswordValidation:
    is_valid: bool
    missing_classes: Tuple[str, ...] = ()

def validate_password(password: str, check_uppercase: bool = True, check_lowercase: bool = True, check_digits: bool = True, check_special: bool = True) -> PasswordValidation:
    """Checks that the password contains at least one character from each requested class.
    Classes that were not requested are never reported as missing."""
    requested = select_classes(check_uppercase, check_lowercase, check_digits, check_special)
    missing = tuple(char_class.label for char_class in requested if not any(char_class.matches(c) for c in password))
    return PasswordValidation(len(missing) == 0, missing)


#######################
# ENTROPY-TARGET LOOP #
#######################

@dataclass(frozen = True)
class GeneratedPassword:
    password: str
    entropy: float
    validation: PasswordValidation
    requested_min_entropy: float
    met_min_entropy: bool
    attempts: int = 1
    @property
    def length(self) -> int:
        return len(self.password)
    @property
    def strength(self) -> PasswordStrength:
        return PasswordStrength.from_entropy(self.entropy)

def generate_with_min_entropy(length: int, use_uppercase: bool = True, use_lowercase: bool = True, use_digits: bool = True, use_special: bool = True, min_entropy: float = 0.0, max_attempts: int = MAX_ATTEMPTS, length_step: int = LENGTH_STEP) -> GeneratedPassword:
    """Generates passwords, increasing the length by length_step after each one that falls short of min_entropy, for at most max_attempts attempts.
    Running out of attempts is not an error: the last password is returned with met_min_entropy = False.
    Raises a ValueError if no class is enabled."""
    flags = (use_uppercase, use_lowercase, use_digits, use_special)
    if (not any(flags)):
        raise ValueError('at least one character class must be enabled')
    if (max_attempts < 1):
        raise ValueError('max_attempts must be at least 1')
    LOGGER.debug(f'Generating password (min entropy {min_entropy:.2f} bits)')
    for attempt in range(1, max_attempts + 1):
        password = generate_secure_password(length, *flags)
        entropy = calc_entropy(password)
        with tabbed():
            LOGGER.debug(f'attempt {attempt}: length {length}, entropy {entropy:.2f} bits')
        if (entropy >= min_entropy):
            break
        if (attempt < max_attempts):
            length += length_step
    validation = validate_password(password, *flags)
    return GeneratedPassword(password, entropy, validation, min_entropy, entropy >= min_entropy, attempt)


##########
# OUTPUT #
##########

def report_dict(password: str, entropy: float, validation: PasswordValidation) -> Dict[str, Any]:
    strength = PasswordStrength.from_entropy(entropy)
    return {
        'password' : password,
        'length' : len(password),
        'entropy' : round(entropy, 2),
        'strength' : strength.title,
        'description' : strength.description,
        'valid' : validation.is_valid,
        'missing' : list(validation.missing_classes)
    }

def result_dict(result: GeneratedPassword) -> Dict[str, Any]:
    d = report_dict(result.password, result.entropy, result.validation)
    d['min_entropy'] = result.requested_min_entropy
    d['met_min_entropy'] = result.met_min_entropy
    d['attempts'] = result.attempts
    return d

def report_lines(password: str, entropy: float, validation: PasswordValidation, heading: str = 'Generated password') -> List[str]:
    lines = [
        f'{heading}: {password}',
        f'Password length: {len(password)}',
        f'Estimated entropy: {entropy:.2f} bits',
        f'Password strength: {PasswordStrength.from_entropy(entropy).description}',
        'Validation: ' + ('PASSED ✓' if validation.is_valid else 'FAILED ✗')
    ]
    if (not validation.is_valid):
        lines.append('Missing character types: ' + ', '.join(validation.missing_classes))
    return lines

def warn_shortfall(result: GeneratedPassword) -> None:
    LOGGER.warning(f'Warning: Could not generate password with entropy of {result.requested_min_entropy:.2f} bits.')
    LOGGER.warning(f'Generated password with entropy of {result.entropy:.2f} bits instead.')


########
# MAIN #
########

def parse_strength(name: str) -> PasswordStrength:
    try:
        return PasswordStrength.from_name(name)
    except ValueError as e:
        raise ArgumentTypeError(str(e)) from e

def effective_min_entropy(min_entropy: Optional[float], strength: Optional[PasswordStrength]) -> float:
    """A requested strength tier raises the entropy floor to that tier's minimum."""
    floor = 0.0 if (min_entropy is None) else min_entropy
    if (strength is not None):
        floor = max(floor, strength.min_entropy)
    return floor

def make_parser() -> ArgumentParser:
    class Formatter(ArgumentDefaultsHelpFormatter, RawDescriptionHelpFormatter):
        pass
    p = ArgumentParser(prog = 'makepw', description = __doc__, formatter_class = Formatter)
    p.add_argument('-l', '--length', type = int, default = DEFAULT_LENGTH, help = f'length of password in characters (at least {MIN_LENGTH})')
    p.add_argument('-e', '--min-entropy', type = float, help = 'minimum entropy in bits')
    tiers = ', '.join(tier.title for tier in PasswordStrength)
    p.add_argument('-s', '--strength', type = parse_strength, help = f'minimum strength tier ({tiers})')
    class_gp = p.add_argument_group(title = 'character classes')
    for key in BOOLEAN_KEYS:
        class_gp.add_argument('--' + key, action = BooleanOptionalAction, default = True, help = f'include {key}')
    p.add_argument('-c', '--check', metavar = 'PASSWORD', help = 'analyze an existing password instead of generating one')
    p.add_argument('--json', action = 'store_true', help = 'print the report as JSON')
    p.add_argument('--config', help = 'INI file with default settings')
    p.add_argument('--section', default = DEFAULT_SECTION, help = 'section of the config file to use')
    p.add_argument('-v', '--verbose', action = 'store_true', help = 'log each generation attempt')
    return p

def parse_args(argv: Optional[List[str]] = None) -> Namespace:
    """Parses the command line, with config file settings (if any) replacing the built-in defaults."""
    p = make_parser()
    args = p.parse_args(argv)
    if args.config:
        try:
            settings = load_config(args.config, args.section)
        except ValueError as e:
            p.error(str(e))
        p.set_defaults(**settings)
        args = p.parse_args(argv)
    if (not any(getattr(args, key) for key in BOOLEAN_KEYS)):
        p.error('need at least 1 character class')
    if (args.min_entropy is not None) and (args.min_entropy < 0):
        p.error('minimum entropy cannot be negative')
    args.length = max(args.length, MIN_LENGTH)
    return args

def run_check(args: Namespace) -> None:
    password = args.check
    entropy = calc_entropy(password)
    validation = validate_password(password, args.uppercase, args.lowercase, args.numbers, args.special)
    if args.json:
        print(json.dumps(report_dict(password, entropy, validation), indent = 2))
    else:
        print('\n'.join(report_lines(password, entropy, validation, heading = 'Password')))

def run_generate(args: Namespace) -> GeneratedPassword:
    min_entropy = effective_min_entropy(args.min_entropy, args.strength)
    result = generate_with_min_entropy(args.length, args.uppercase, args.lowercase, args.numbers, args.special, min_entropy = min_entropy)
    if (not result.met_min_entropy):
        warn_shortfall(result)
    if args.json:
        print(json.dumps(result_dict(result), indent = 2))
    else:
        print('\n'.join(report_lines(result.password, result.entropy, result.validation)))
    return result

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging()
    with loglevel(LOGGER.logger, logging.DEBUG if args.verbose else logging.INFO):
        if (args.check is not None):
            run_check(args)
        else:
            run_generate(args)


if __name__ == "__main__":

    main()
