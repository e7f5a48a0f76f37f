"""Default settings, and loading of user overrides from an INI file.

Example config file:

    [makepw]
    length = 24
    strength = VeryStrong
    special = no
"""

from configparser import ConfigParser, Error as ConfigParserError
from pathlib import Path
from typing import Any, Dict, Union

from makepw.strength import PasswordStrength


DEFAULT_LENGTH = 32
MIN_LENGTH = 4  # the CLI never generates anything shorter
MAX_ATTEMPTS = 10
LENGTH_STEP = 2  # length increase after each attempt that misses the entropy target
DEFAULT_SECTION = 'makepw'

BOOLEAN_KEYS = ['uppercase', 'lowercase', 'numbers', 'special']
CONFIG_KEYS = ['length', 'min_entropy', 'strength'] + BOOLEAN_KEYS


def load_config(path: Union[str, Path], section: str = DEFAULT_SECTION) -> Dict[str, Any]:
    """Reads settings from the given section of an INI file.
    Returns a dict (keyed like the CLI arguments) containing only the settings present in the file."""
    cfg = ConfigParser()
    try:
        found = cfg.read(path)
    except ConfigParserError as e:
        raise ValueError(f'malformed config file {path}: {e}') from e
    if (not found):
        raise ValueError(f'could not read config file {path}')
    if (not cfg.has_section(section)):
        raise ValueError(f'config file {path} has no [{section}] section')
    params = cfg[section]
    unknown = sorted(set(params) - set(CONFIG_KEYS))
    if unknown:
        raise ValueError(f'unknown key(s) in [{section}]: {", ".join(unknown)}')
    settings: Dict[str, Any] = {}
    try:
        if ('length' in params):
            settings['length'] = params.getint('length')
        if ('min_entropy' in params):
            settings['min_entropy'] = params.getfloat('min_entropy')
        for key in BOOLEAN_KEYS:
            if (key in params):
                settings[key] = params.getboolean(key)
    except ValueError as e:
        raise ValueError(f'invalid value in [{section}]: {e}') from e
    if ('strength' in params):
        settings['strength'] = PasswordStrength.from_name(params['strength'])
    return settings
