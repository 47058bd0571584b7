import math

import pytest

from pw_entropy.entropy import entropy_bits


def test_entropy_bits() -> None:
    assert entropy_bits(26, 7) == pytest.approx(7 * math.log2(26))
    assert entropy_bits(52, 13) == pytest.approx(74.1057, abs=1e-4)


def test_entropy_zero_length() -> None:
    assert entropy_bits(94, 0) == 0.0
    assert entropy_bits(0, 0) == 0.0


def test_entropy_zero_base_is_clamped() -> None:
    assert entropy_bits(0, 42) == 0.0


def test_entropy_rejects_negative_arguments() -> None:
    with pytest.raises(ValueError):
        entropy_bits(-1, 3)
    with pytest.raises(ValueError):
        entropy_bits(26, -1)
