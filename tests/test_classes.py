from __future__ import annotations

from array import array

import pytest

from pw_entropy.classes import (
    CLASS_SYMBOLS,
    MAX_BASE,
    CharClass,
    class_base,
    classify_symbol,
    present_classes,
)


def _present(text: str) -> frozenset[CharClass]:
    symbols = array("L", map(ord, text))
    return present_classes(symbols, len(symbols))


def test_class_sizes() -> None:
    sizes = {char_class: char_class.size for char_class in CharClass}
    assert sizes == {
        CharClass.LOWER: 26,
        CharClass.UPPER: 26,
        CharClass.DIGIT: 10,
        CharClass.REPLACE: 5,
        CharClass.SEPARATOR: 5,
        CharClass.OTHER_SPECIAL: 22,
    }
    assert MAX_BASE == 94


def test_classes_are_disjoint() -> None:
    seen: set[str] = set()
    for symbols in CLASS_SYMBOLS.values():
        assert not seen & set(symbols)
        seen |= set(symbols)


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [
        ("q", CharClass.LOWER),
        ("Q", CharClass.UPPER),
        ("7", CharClass.DIGIT),
        ("@", CharClass.REPLACE),
        (" ", CharClass.SEPARATOR),
        (",", CharClass.SEPARATOR),
        ("?", CharClass.OTHER_SPECIAL),
        ("\\", CharClass.OTHER_SPECIAL),
        ("`", None),
        ("\t", None),
        ("é", None),
    ],
)
def test_classify_symbol(symbol: str, expected: CharClass | None) -> None:
    assert classify_symbol(ord(symbol)) is expected


def test_present_classes() -> None:
    assert _present("") == frozenset()
    assert _present("aA") == {CharClass.LOWER, CharClass.UPPER}
    assert _present("!_\"aA0") == frozenset(CharClass)


def test_present_classes_ignores_unrecognised_symbols() -> None:
    assert _present("`\tü") == frozenset()


def test_present_classes_stops_at_logical_length() -> None:
    symbols = array("L", map(ord, "abc123"))
    assert present_classes(symbols, 3) == {CharClass.LOWER}


def test_class_base() -> None:
    assert class_base([]) == 0
    assert class_base([CharClass.OTHER_SPECIAL]) == 22
    assert class_base([CharClass.LOWER, CharClass.UPPER]) == 52
    assert class_base(CharClass) == 94
