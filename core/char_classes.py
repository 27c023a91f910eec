"""Character classes and the per-byte classification policy.

Centralizes the character classes used for counting:
- which bytes are eligible at all (byte range pre-filter)
- which eligible bytes a class accepts, and their canonical form

IMPORTANT: Unknown class names raise UnsupportedCharClassError - never silently ignored!
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class CharClass(str, Enum):
    """Selectable character class (one per analysis)."""

    NONE = "none"
    ALPHA = "alpha"
    DIGIT = "digit"
    SYMBOL = "symbol"
    ALNUM = "alnum"
    ASCII = "ascii"

    @property
    def label(self) -> str:
        return _LABELS[self]


class ByteRange(str, Enum):
    """Eligibility pre-filter applied before class-specific logic."""

    # byte - ord("0") in [0, 127), i.e. bytes 48..174
    LEGACY = "legacy"
    # bytes 0..127
    ASCII = "ascii"

    def contains(self, byte: int) -> bool:
        if self is ByteRange.LEGACY:
            return 0 <= byte - ord("0") < 127
        return 0 <= byte <= 127


_LABELS = {
    CharClass.NONE: "None",
    CharClass.ALPHA: "Alpha",
    CharClass.DIGIT: "Numeric",
    CharClass.SYMBOL: "Symbol (non-alpha-numeric)",
    CharClass.ALNUM: "Alpha-numeric",
    CharClass.ASCII: "ASCII",
}

# Interactive menu order (1-based selection)
MENU_CHAR_CLASSES = [
    CharClass.ALPHA,
    CharClass.DIGIT,
    CharClass.ALNUM,
    CharClass.SYMBOL,
    CharClass.ASCII,
]

_ALIASES = {
    "numeric": CharClass.DIGIT,
    "number": CharClass.DIGIT,
    "digits": CharClass.DIGIT,
    "alphanumeric": CharClass.ALNUM,
    "alpha-numeric": CharClass.ALNUM,
    "symbols": CharClass.SYMBOL,
    "punct": CharClass.SYMBOL,
    "letters": CharClass.ALPHA,
    "all": CharClass.ASCII,
}

_LETTERS = frozenset(string.ascii_letters.encode("ascii"))
_DIGITS = frozenset(string.digits.encode("ascii"))


def _upper(byte: int) -> str:
    return chr(byte).upper()


def classify(
    byte: int,
    char_class: CharClass,
    byte_range: ByteRange = ByteRange.LEGACY,
) -> Optional[str]:
    """Classify a single byte.

    Args:
        byte: Raw byte value (0..255)
        char_class: Selected character class
        byte_range: Eligibility pre-filter

    Returns:
        Canonical one-character string, or None if the byte is rejected
    """
    if not byte_range.contains(byte):
        return None

    is_letter = byte in _LETTERS
    is_digit = byte in _DIGITS

    if char_class is CharClass.NONE:
        return None
    if char_class is CharClass.ALPHA:
        return _upper(byte) if is_letter else None
    if char_class is CharClass.DIGIT:
        return chr(byte) if is_digit else None
    if char_class is CharClass.SYMBOL:
        return None if (is_letter or is_digit) else chr(byte)
    if char_class is CharClass.ALNUM:
        if is_letter:
            return _upper(byte)
        return chr(byte) if is_digit else None
    # ASCII: every eligible byte
    return _upper(byte) if is_letter else chr(byte)


@dataclass(frozen=True)
class ClassificationPolicy:
    """A character class bound to a byte range."""
    char_class: CharClass = CharClass.ALPHA
    byte_range: ByteRange = ByteRange.LEGACY

    def canonical(self, byte: int) -> Optional[str]:
        return classify(byte, self.char_class, self.byte_range)

    def accepts(self, byte: int) -> bool:
        return self.canonical(byte) is not None


# === Lookup ===

class UnsupportedCharClassError(ValueError):
    """Raised when an unknown character class name is used."""

    def __init__(self, name: str, context: str = ""):
        self.name = name
        self.context = context
        supported = ", ".join(c.value for c in CharClass)
        message = f"Unsupported character class: '{name}'"
        if context:
            message += f" in {context}"
        message += f". Supported: {supported}"
        super().__init__(message)


class UnsupportedByteRangeError(ValueError):
    """Raised when an unknown byte range name is used."""

    def __init__(self, name: str, context: str = ""):
        self.name = name
        self.context = context
        supported = ", ".join(r.value for r in ByteRange)
        message = f"Unsupported byte range: '{name}'"
        if context:
            message += f" in {context}"
        message += f". Supported: {supported}"
        super().__init__(message)


def get_char_class(name: Union[str, CharClass]) -> Optional[CharClass]:
    """Get CharClass by name or alias.

    Examples:
        get_char_class("alpha") -> CharClass.ALPHA
        get_char_class("Numeric") -> CharClass.DIGIT (alias)
        get_char_class("vowels") -> None
    """
    if isinstance(name, CharClass):
        return name

    key = name.strip().lower()
    try:
        return CharClass(key)
    except ValueError:
        return _ALIASES.get(key)


def require_char_class(name: Union[str, CharClass], context: str = "") -> CharClass:
    """Get CharClass by name, raising UnsupportedCharClassError if not found."""
    char_class = get_char_class(name)
    if char_class is None:
        raise UnsupportedCharClassError(name, context)
    return char_class


def get_byte_range(name: Union[str, ByteRange]) -> Optional[ByteRange]:
    if isinstance(name, ByteRange):
        return name
    try:
        return ByteRange(name.strip().lower())
    except ValueError:
        return None


def require_byte_range(name: Union[str, ByteRange], context: str = "") -> ByteRange:
    """Get ByteRange by name, raising UnsupportedByteRangeError if not found."""
    byte_range = get_byte_range(name)
    if byte_range is None:
        raise UnsupportedByteRangeError(name, context)
    return byte_range
