"""pw-entropy: estimate password entropy in bits.

Usage::

    from pw_entropy import score

    result = score("ThisIsASecret")
    result.entropy_bits  # ~74.1
"""

from importlib.metadata import PackageNotFoundError, version

from pw_entropy.classes import CharClass
from pw_entropy.errors import InvalidPasswordInput, PwEntropyError, WeakPasswordError
from pw_entropy.strength import PasswordEntropy, score, validate_password

__all__ = [
    "CharClass",
    "InvalidPasswordInput",
    "PasswordEntropy",
    "PwEntropyError",
    "WeakPasswordError",
    "__version__",
    "score",
    "validate_password",
]

try:
    __version__ = version("pw-entropy")
except PackageNotFoundError:  # pragma: no cover - happens only from source checkout
    __version__ = "0.0.0-dev"
