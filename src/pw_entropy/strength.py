"""Password entropy scoring and validation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from pw_entropy.classes import CharClass, class_base, present_classes
from pw_entropy.entropy import entropy_bits
from pw_entropy.errors import InvalidPasswordInput, WeakPasswordError
from pw_entropy.memory import SymbolBuffer
from pw_entropy.reduce import collapse_repeats, fold_palindrome, strip_common_sequences

logger = logging.getLogger(__name__)

DEFAULT_MIN_ENTROPY_BITS = 60.0
MIN_EFFECTIVE_LENGTH = 8

StrengthLevel = Literal["weak", "fair", "good", "strong"]

# Lower bounds in bits for each level above "weak".
_LEVEL_THRESHOLDS: tuple[tuple[float, StrengthLevel], ...] = (
    (60.0, "strong"),
    (36.0, "good"),
    (28.0, "fair"),
)

_CLASS_HINTS: dict[CharClass, str] = {
    CharClass.LOWER: "Add lowercase letters",
    CharClass.UPPER: "Add uppercase letters",
    CharClass.DIGIT: "Add digits",
    CharClass.REPLACE: "Add symbols such as '!', '@' or '$'",
    CharClass.SEPARATOR: "Add separators such as '-', '_' or spaces",
    CharClass.OTHER_SPECIAL: "Add symbols such as '#', '%' or '?'",
}


def strength_level(bits: float) -> StrengthLevel:
    """Map an entropy estimate to a coarse strength level."""
    for threshold, level in _LEVEL_THRESHOLDS:
        if bits >= threshold:
            return level
    return "weak"


@dataclass(frozen=True)
class PasswordEntropy:
    """Outcome of :func:`score`.

    ``base`` is the combined size of the character classes still present
    after reduction and ``effective_length`` the number of symbols left.
    """

    base: int
    effective_length: int
    classes: frozenset[CharClass] = frozenset()

    @property
    def entropy_bits(self) -> float:
        return entropy_bits(self.base, self.effective_length)

    @property
    def level(self) -> StrengthLevel:
        return strength_level(self.entropy_bits)

    @property
    def has_lower(self) -> bool:
        return CharClass.LOWER in self.classes

    @property
    def has_upper(self) -> bool:
        return CharClass.UPPER in self.classes

    @property
    def has_digit(self) -> bool:
        return CharClass.DIGIT in self.classes

    @property
    def has_replace(self) -> bool:
        return CharClass.REPLACE in self.classes

    @property
    def has_separator(self) -> bool:
        return CharClass.SEPARATOR in self.classes

    @property
    def has_other_special(self) -> bool:
        return CharClass.OTHER_SPECIAL in self.classes


def score(password: str, *, secure_erase: bool = True) -> PasswordEntropy:
    """Estimate the entropy of *password*.

    The password is copied into a :class:`SymbolBuffer` and reduced in place:
    common sequences are stripped, repeated symbols collapsed, a palindrome
    folded to its first half, and common sequences stripped once more. The
    first strip runs before collapsing so entries with doubled letters
    (``password``, ``000000``) are still recognised.

    With *secure_erase* the working copy is zeroed before returning.
    """
    if not isinstance(password, str):
        raise InvalidPasswordInput(f"password must be str, got {type(password).__name__}")

    with SymbolBuffer(password, secure_erase=secure_erase) as buf:
        original = buf.length
        buf.length = strip_common_sequences(buf.symbols, buf.length)
        buf.length = collapse_repeats(buf.symbols, buf.length)
        buf.length = fold_palindrome(buf.symbols, buf.length)
        buf.length = strip_common_sequences(buf.symbols, buf.length)

        classes = present_classes(buf.symbols, buf.length)
        result = PasswordEntropy(
            base=class_base(classes),
            effective_length=buf.length,
            classes=classes,
        )

    logger.debug(
        "reduced %d symbols to %d, base=%d, erase=%s",
        original,
        result.effective_length,
        result.base,
        secure_erase,
    )
    return result


def feedback_for(result: PasswordEntropy) -> list[str]:
    """Return hints explaining a low score."""
    feedback: list[str] = []

    if result.effective_length == 0:
        feedback.append("Nothing is left after removing repeats, palindromes and common sequences")
        return feedback

    if result.effective_length < MIN_EFFECTIVE_LENGTH:
        feedback.append(
            f"Only {result.effective_length} characters count after removing repeats, "
            f"palindromes and common sequences; use at least {MIN_EFFECTIVE_LENGTH}"
        )
    if result.base == 0:
        feedback.append("Use letters, digits or punctuation; other characters add no strength")

    for char_class, hint in _CLASS_HINTS.items():
        if char_class not in result.classes:
            feedback.append(hint)
    return feedback


def validate_password(
    password: str,
    *,
    min_entropy: float = DEFAULT_MIN_ENTROPY_BITS,
    secure_erase: bool = True,
) -> PasswordEntropy:
    """Score *password* and require at least *min_entropy* bits.

    Raises :exc:`WeakPasswordError` for an empty password or one that falls
    short of the threshold.
    """
    if password == "":
        raise WeakPasswordError(["Password cannot be empty"])

    result = score(password, secure_erase=secure_erase)
    if result.entropy_bits < min_entropy:
        reasons = [f"Estimated entropy {result.entropy_bits:.1f} bits is below the required {min_entropy:.1f} bits"]
        raise WeakPasswordError(reasons + feedback_for(result))
    return result
