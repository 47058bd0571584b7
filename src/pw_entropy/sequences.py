"""Known weak substrings removed before scoring."""

from __future__ import annotations

# Matched case-sensitively and in this order: at a given position the first
# listed entry wins, even when a longer one would also match.
COMMON_SEQUENCES: tuple[str, ...] = (
    "asdf",
    "jkl;",
    ";lkj",
    "fdsa",
    "asdfghjkl",
    "asdf ;lkj",
    "0123456789",
    "qwertyuiop",
    "qwerty",
    "zxcvbnm",
    "abcdefghijklmnopqrstuvwxyz",
    "password1",
    "password!",
    "password",
    "Password",
    "assword",
    "picture1",
    "Picture1",
    "picture",
    "Picture",
    "asdf",
    "rty567",
    "senha",
    "abc123",
    "Million2",
    "000000",
    "1234",
    "iloveyou",
    "aaron431",
    "qqww1122",
    "123123",
)

COMMON_SEQUENCE_CODES: tuple[tuple[int, ...], ...] = tuple(
    tuple(ord(ch) for ch in sequence) for sequence in COMMON_SEQUENCES
)
