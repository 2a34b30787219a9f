# src/focusnav/constants/key_codes.py

from enum import Enum
from typing import Dict
from focusnav.core.config import settings

class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    ENTER = "ENTER"
    # Matches any orientation
    ANY = "*"

# Browser, set-top-box and smart-TV remote codes
DEFAULT_KEY_CODES: Dict[int, str] = {
    4: 'LEFT', 21: 'LEFT', 37: 'LEFT', 214: 'LEFT', 205: 'LEFT', 218: 'LEFT',
    5: 'RIGHT', 22: 'RIGHT', 39: 'RIGHT', 213: 'RIGHT', 206: 'RIGHT', 217: 'RIGHT',
    29460: 'UP', 19: 'UP', 38: 'UP', 211: 'UP', 203: 'UP', 215: 'UP',
    29461: 'DOWN', 20: 'DOWN', 40: 'DOWN', 212: 'DOWN', 204: 'DOWN', 216: 'DOWN',
    29443: 'ENTER', 13: 'ENTER', 67: 'ENTER', 32: 'ENTER', 23: 'ENTER', 195: 'ENTER',
}

class KeyCodes:
    """
    The key-code to direction table consulted by the predicate library.

    Built once from DEFAULT_KEY_CODES and whatever extra codes the
    deployment configures (see focusnav.core.config).
    """
    codes: Dict[int, str] = {}

    @classmethod
    def configure(cls, extra: Dict[int, str], replace_defaults: bool = False) -> Dict[int, str]:
        base = {} if replace_defaults else dict(DEFAULT_KEY_CODES)
        base.update({int(code): direction for code, direction in extra.items()})
        cls.codes = base
        return cls.codes

    @classmethod
    def reset(cls) -> None:
        cls.configure(settings.KEY_CODES_EXTRA, settings.KEY_CODES_REPLACE_DEFAULTS)

KeyCodes.reset()
