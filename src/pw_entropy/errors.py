"""Custom exceptions for pw-entropy."""


class PwEntropyError(Exception):
    """Base exception for pw-entropy."""


class InvalidPasswordInput(PwEntropyError, TypeError):
    """Password is not a text string."""


class WeakPasswordError(PwEntropyError, ValueError):
    """Raised when a password does not reach the required entropy."""

    def __init__(self, feedback: list[str]) -> None:
        self.feedback = feedback
        super().__init__("; ".join(feedback))
