"""Key name decoding for keyboard day navigation."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class KeyCode(Enum):
    """Keys the date picker reacts to, valued by their standard key names."""

    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ENTER = "Enter"
    SPACE = " "
    UNKNOWN = "unknown"


ARROW_KEYS = frozenset(
    {KeyCode.ARROW_LEFT, KeyCode.ARROW_RIGHT, KeyCode.ARROW_UP, KeyCode.ARROW_DOWN}
)

# Day offsets of each arrow key in a left-to-right locale
ARROW_OFFSETS = {
    KeyCode.ARROW_LEFT: -1,
    KeyCode.ARROW_RIGHT: 1,
    KeyCode.ARROW_UP: -7,
    KeyCode.ARROW_DOWN: 7,
}


def _parse_legacy_name(key: str) -> KeyCode:
    """Parse key names reported by older hosts.

    Args:
        key: Key name such as ``"Left"`` or ``"Spacebar"``

    Returns:
        Corresponding KeyCode
    """
    legacy_mappings = {
        "Left": KeyCode.ARROW_LEFT,
        "Right": KeyCode.ARROW_RIGHT,
        "Up": KeyCode.ARROW_UP,
        "Down": KeyCode.ARROW_DOWN,
        "Spacebar": KeyCode.SPACE,
    }
    return legacy_mappings.get(key, KeyCode.UNKNOWN)


def _parse_escape_sequence(sequence: str) -> KeyCode:
    """Parse a terminal escape sequence.

    Args:
        sequence: The escape sequence without the '\\x1b[' prefix

    Returns:
        Corresponding KeyCode
    """
    escape_mappings = {
        "A": KeyCode.ARROW_UP,
        "B": KeyCode.ARROW_DOWN,
        "C": KeyCode.ARROW_RIGHT,
        "D": KeyCode.ARROW_LEFT,
    }
    return escape_mappings.get(sequence, KeyCode.UNKNOWN)


def _parse_token(token: str) -> KeyCode:
    """Parse a friendly token as typed on the command line.

    Args:
        token: Token such as ``"left"``, ``"enter"`` or ``"space"``

    Returns:
        Corresponding KeyCode
    """
    token_mappings = {
        "left": KeyCode.ARROW_LEFT,
        "right": KeyCode.ARROW_RIGHT,
        "up": KeyCode.ARROW_UP,
        "down": KeyCode.ARROW_DOWN,
        "enter": KeyCode.ENTER,
        "return": KeyCode.ENTER,
        "space": KeyCode.SPACE,
    }
    return token_mappings.get(token.strip().lower(), KeyCode.UNKNOWN)


def parse_key(key: str) -> KeyCode:
    """Decode a key name into a KeyCode.

    Standard names (``"ArrowLeft"``, ``"Enter"``, ``" "``) are tried first, then
    legacy names, terminal escape sequences and command-line tokens.

    Args:
        key: Raw key name

    Returns:
        Corresponding KeyCode, UNKNOWN for anything unrecognised
    """
    if not key:
        return KeyCode.UNKNOWN

    for code in KeyCode:
        if code is not KeyCode.UNKNOWN and code.value == key:
            return code

    parsed = _parse_legacy_name(key)
    if parsed is KeyCode.UNKNOWN and key.startswith("\x1b["):
        parsed = _parse_escape_sequence(key[2:])
    if parsed is KeyCode.UNKNOWN and key in {"\r", "\n"}:
        parsed = KeyCode.ENTER
    if parsed is KeyCode.UNKNOWN:
        parsed = _parse_token(key)

    if parsed is KeyCode.UNKNOWN:
        logger.debug(f"Unrecognised key: {key!r}")
    return parsed


def arrow_offset(code: KeyCode, is_rtl: bool = False) -> int:
    """Return the day offset of an arrow key, mirroring left/right for RTL locales.

    Args:
        code: Arrow key code
        is_rtl: Whether the displayed locale reads right-to-left

    Returns:
        Signed number of days to move the focused date
    """
    offset = ARROW_OFFSETS[code]
    if is_rtl and code in (KeyCode.ARROW_LEFT, KeyCode.ARROW_RIGHT):
        return -offset
    return offset
