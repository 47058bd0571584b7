"""In-place reductions applied to the working buffer before scoring.

Each stage takes a mutable sequence of code points and its logical length,
rewrites the sequence in place and returns the new (never larger) length.
Slots past the returned length are left as they are.
"""
from __future__ import annotations

from typing import MutableSequence, Sequence

from pw_entropy.sequences import COMMON_SEQUENCE_CODES


def collapse_repeats(symbols: MutableSequence[int], length: int) -> int:
    """Replace every run of an identical symbol with a single occurrence."""
    if length < 2:
        return length

    write = 1
    for read in range(1, length):
        if symbols[read] != symbols[write - 1]:
            symbols[write] = symbols[read]
            write += 1
    return write


def fold_palindrome(symbols: MutableSequence[int], length: int) -> int:
    """Keep only the first half of a buffer that is a palindrome.

    The whole logical buffer has to mirror itself; for odd lengths the
    middle symbol is dropped. Fewer than two symbols are never folded.
    """
    if length < 2:
        return length

    left, right = 0, length - 1
    while left < right:
        if symbols[left] != symbols[right]:
            return length
        left += 1
        right -= 1
    return length // 2


def _match_at(
    symbols: Sequence[int],
    length: int,
    position: int,
    sequences: Sequence[Sequence[int]],
) -> int:
    """Return the length of the first sequence found at *position*, or 0."""
    remaining = length - position
    for sequence in sequences:
        size = len(sequence)
        if size == 0 or size > remaining:
            continue
        for offset in range(size):
            if symbols[position + offset] != sequence[offset]:
                break
        else:
            return size
    return 0


def _remove_span(symbols: MutableSequence[int], length: int, position: int, size: int) -> int:
    for index in range(position, length - size):
        symbols[index] = symbols[index + size]
    return length - size


def _strip_pass(
    symbols: MutableSequence[int],
    length: int,
    sequences: Sequence[Sequence[int]],
) -> tuple[int, int]:
    removed = 0
    position = 0
    while position < length:
        size = _match_at(symbols, length, position, sequences)
        if size:
            length = _remove_span(symbols, length, position, size)
            removed += 1
            # Symbols slid into this position; test it again.
            continue
        position += 1
    return length, removed


def strip_common_sequences(
    symbols: MutableSequence[int],
    length: int,
    sequences: Sequence[Sequence[int]] = COMMON_SEQUENCE_CODES,
) -> int:
    """Remove known weak substrings until none is left.

    Scans left to right; at each position the first listed sequence that
    matches is cut out. Removals can join symbols into new matches, so whole
    scans repeat until one removes nothing. Every scan but the last removes
    at least one symbol, which bounds the scan count by ``length + 1``.
    """
    for _ in range(length + 1):
        length, removed = _strip_pass(symbols, length, sequences)
        if not removed:
            break
    return length
