"""Character classes used to derive the entropy base."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence


class CharClass(str, Enum):
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    REPLACE = "replace"
    SEPARATOR = "separator"
    OTHER_SPECIAL = "other_special"

    @property
    def symbols(self) -> str:
        return CLASS_SYMBOLS[self]

    @property
    def size(self) -> int:
        return len(CLASS_SYMBOLS[self])


LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARS = "0123456789"
# Symbols commonly substituted for letters (p@$$w0rd).
REPLACE_CHARS = "!@$&*"
SEPARATOR_CHARS = "_-., "
OTHER_SPECIAL_CHARS = "\"#%'()+/:;<=>?[\\]^{|}~"

CLASS_SYMBOLS: dict[CharClass, str] = {
    CharClass.LOWER: LOWER_CHARS,
    CharClass.UPPER: UPPER_CHARS,
    CharClass.DIGIT: DIGIT_CHARS,
    CharClass.REPLACE: REPLACE_CHARS,
    CharClass.SEPARATOR: SEPARATOR_CHARS,
    CharClass.OTHER_SPECIAL: OTHER_SPECIAL_CHARS,
}

MAX_BASE = sum(len(chars) for chars in CLASS_SYMBOLS.values())

_CLASS_BY_CODE: dict[int, CharClass] = {
    ord(ch): char_class for char_class, chars in CLASS_SYMBOLS.items() for ch in chars
}


def classify_symbol(code: int) -> CharClass | None:
    """Return the class of a single code point, or ``None`` if it has none."""
    return _CLASS_BY_CODE.get(code)


def present_classes(symbols: Sequence[int], length: int) -> frozenset[CharClass]:
    """Collect the classes represented in the first *length* symbols."""
    found: set[CharClass] = set()
    for index in range(length):
        char_class = _CLASS_BY_CODE.get(symbols[index])
        if char_class is not None:
            found.add(char_class)
            if len(found) == len(CLASS_SYMBOLS):
                break
    return frozenset(found)


def class_base(classes: Iterable[CharClass]) -> int:
    """Sum the cardinalities of *classes*."""
    return sum(char_class.size for char_class in set(classes))
