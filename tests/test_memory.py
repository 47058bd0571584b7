"""Tests for the symbol working buffer."""
from __future__ import annotations

from array import array

import pytest

from pw_entropy.memory import SymbolBuffer, mlock_available, secure_zeroize


def test_symbol_buffer_holds_code_points() -> None:
    with SymbolBuffer("pä$s") as buf:
        assert list(buf.symbols) == [ord("p"), ord("ä"), ord("$"), ord("s")]
        assert buf.length == buf.capacity == len(buf) == 4
        assert buf.text() == "pä$s"


def test_symbol_buffer_zeroes_on_close() -> None:
    buf = SymbolBuffer("secret_material!")
    with buf:
        buf.length = 6
    # The whole capacity is wiped, not only the logical part
    assert buf.symbols == array("L", [0] * 16)


def test_symbol_buffer_zeroes_on_error() -> None:
    buf = SymbolBuffer("hunter2")
    with pytest.raises(RuntimeError):
        with buf:
            raise RuntimeError("boom")
    assert not any(buf.symbols)


def test_symbol_buffer_keeps_contents_without_erase() -> None:
    buf = SymbolBuffer("keep", secure_erase=False)
    with buf:
        pass
    assert buf.text() == "keep"
    assert buf.secure_erase is False


def test_symbol_buffer_empty() -> None:
    with SymbolBuffer("") as buf:
        assert buf.capacity == 0
        assert buf.text() == ""


def test_symbol_buffer_length_only_shrinks() -> None:
    with SymbolBuffer("abc") as buf:
        buf.length = 2
        with pytest.raises(ValueError):
            buf.length = 3
        with pytest.raises(ValueError):
            buf.length = -1
        assert buf.text() == "ab"


def test_secure_zeroize_basic() -> None:
    data = bytearray(b"sensitive data here!")
    secure_zeroize(data)
    assert data == bytearray(len(data))

    codes = array("L", map(ord, "sensitive"))
    secure_zeroize(codes)
    assert codes == array("L", [0] * 9)


def test_secure_zeroize_none() -> None:
    # Should not raise
    secure_zeroize(None)


def test_mlock_available_returns_bool() -> None:
    result = mlock_available()
    assert isinstance(result, bool)
