"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'tab')
    raw: str  # The raw key string from curtsies
    is_alt: bool = False
    is_ctrl: bool = False
    is_sequence: bool = False

    def is_special(self, *names: str) -> bool:
        """True if this is a special key named in ``names``."""
        return self.key_type == KeyType.SPECIAL and self.value in names


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'tab', 'page_up', 'page_down', 'insert',
}

# Single characters that terminals send for special keys
_RAW_SPECIALS = {
    '\t': 'tab',
    '\n': 'enter',
    '\r': 'enter',
    '\x7f': 'backspace',
    '\x08': 'backspace',
    '\x1b': 'escape',
}


class KeyboardHandler:
    """Turns raw terminal keys into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, or None if no key arrived."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies token (e.g. '<UP>', '<Ctrl-j>') or a raw character.

        Args:
            key: Key string or an object whose str() is the token

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_token(key_str)

        if key_str in _RAW_SPECIALS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=_RAW_SPECIALS[key_str], raw=key_str)

        # Remaining Ctrl-<letter> bytes
        if len(key_str) == 1 and 1 <= ord(key_str) <= 26:
            ch = chr(ord('a') + ord(key_str) - 1)
            return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1].lower().replace('+', '-')
        parts = name.split('-') if '-' in name else [name]
        base = parts[-1]
        mods = set(parts[:-1])
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')

        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
        if 'ctrl' in mods and len(base) == 1:
            # Terminals deliver Enter as Ctrl-J/Ctrl-M, Tab as Ctrl-I, Backspace as Ctrl-H
            if base in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str, is_sequence=True)
            if base == 'i':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str, is_sequence=True)
            if base == 'h':
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str, is_sequence=True)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
        if base in SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)
        if base in ('esc', 'escape'):
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
        # Unknown token (function keys etc.)
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)
