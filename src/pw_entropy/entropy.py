"""Closed-form entropy estimate."""

from __future__ import annotations

import math


def entropy_bits(base: int, length: int) -> float:
    """Return ``length * log2(base)``, or ``0.0`` when either factor is zero.

    A non-empty password made only of unclassified symbols has ``base == 0``;
    it scores ``0.0`` instead of ``-inf``.
    """

    if base < 0 or length < 0:
        raise ValueError(f"base and length must be non-negative, got base={base}, length={length}")
    if base == 0 or length == 0:
        return 0.0
    return length * math.log2(base)
