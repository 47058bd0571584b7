"""Working buffer for password symbols.

The password is copied once into a fixed-capacity array of code points.
Reduction stages rewrite it in place and shrink a logical length; the
array itself is never resized. With secure erase enabled the buffer is
locked in memory where ``mlock`` is available and overwritten with zeros
when the ``with`` block exits, whichever way it exits.
"""
from __future__ import annotations

import ctypes
import ctypes.util
import logging
import platform
from array import array

logger = logging.getLogger(__name__)

_MLOCK_AVAILABLE = False
_libc: ctypes.CDLL | None = None

# Try to load libc for mlock/munlock
if platform.system() != "Windows":
    try:
        _libc_name = ctypes.util.find_library("c")
        if _libc_name:
            _libc = ctypes.CDLL(_libc_name, use_errno=True)
            _MLOCK_AVAILABLE = True
    except OSError:
        pass

# "L" is at least 32 bits wide, enough for any code point.
SYMBOL_TYPECODE = "L"


def mlock_available() -> bool:
    """Return True if mlock is available on this platform."""
    return _MLOCK_AVAILABLE


class SymbolBuffer:
    """A password held as code points with a shrinking logical length.

    Usage::

        with SymbolBuffer(password) as buf:
            buf.length = collapse_repeats(buf.symbols, buf.length)
            ...
        # Every slot is zeroed here when secure_erase is on

    ``length`` never exceeds ``capacity``.
    """

    def __init__(self, text: str, *, secure_erase: bool = True) -> None:
        self._symbols = array(SYMBOL_TYPECODE, map(ord, text))
        self._capacity = len(self._symbols)
        self._length = self._capacity
        self._secure_erase = secure_erase
        self._locked = False

        if secure_erase and self._capacity and _MLOCK_AVAILABLE and _libc is not None:
            address, nbytes = self._region()
            try:
                result = _libc.mlock(ctypes.c_void_p(address), ctypes.c_size_t(nbytes))
                if result == 0:
                    self._locked = True
                else:
                    errno = ctypes.get_errno()
                    logger.debug("mlock failed (errno=%d), proceeding without lock", errno)
            except (AttributeError, OSError):
                logger.debug("mlock unavailable, proceeding without lock")

    def __enter__(self) -> SymbolBuffer:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __len__(self) -> int:
        return self._length

    def _region(self) -> tuple[int, int]:
        address, count = self._symbols.buffer_info()
        return address, count * self._symbols.itemsize

    @property
    def symbols(self) -> array:
        return self._symbols

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        if not 0 <= value <= self._length:
            raise ValueError(f"logical length can only shrink: {value} not in [0, {self._length}]")
        self._length = value

    @property
    def secure_erase(self) -> bool:
        return self._secure_erase

    def text(self) -> str:
        """Return the current logical contents as a new string."""
        return "".join(chr(self._symbols[i]) for i in range(self._length))

    def close(self) -> None:
        """Zero the buffer if secure erase is on and unlock memory."""
        if self._secure_erase:
            secure_zeroize(self._symbols)

        # Munlock if we locked it
        if self._locked and _libc is not None:
            address, nbytes = self._region()
            try:
                _libc.munlock(ctypes.c_void_p(address), ctypes.c_size_t(nbytes))
            except (AttributeError, OSError):
                logger.debug("munlock failed, memory stays locked until release")
            self._locked = False


def secure_zeroize(data: array | bytearray | None) -> None:
    """Zero a mutable buffer in place, slot by slot.

    Writes through the existing storage instead of rebinding, so no copy
    of the old contents survives in a fresh object.
    """
    if data is None:
        return
    length = len(data)
    for i in range(length):
        data[i] = 0
    # Read back to create a data dependency the optimizer can't remove
    if length > 0:
        _ = data[0]
