"""
Text handling shared by every cipher
====================================
Normalization strips input down to uppercase A-Z (optionally keeping
single spaces). Keys for Vigenère and Playfair go through
validate_alphabetic_key() on the raw string before they are normalized.

format_groups() is display-only: classic ciphertext is written in
five-letter blocks so it can be read back without losing your place.
"""

import string

from .errors import InvalidKey

ALPHABET   = string.ascii_uppercase
GROUP_SIZE = 5

_LETTERS = frozenset(string.ascii_letters)


def normalize(text: str, keep_spaces: bool = False) -> str:
    """Uppercase ASCII letters only. Spaces survive when keep_spaces is set."""
    out = []
    for ch in text:
        if ch in _LETTERS:
            out.append(ch.upper())
        elif keep_spaces and ch == " ":
            out.append(ch)
    return "".join(out)


def validate_alphabetic_key(key: str) -> str:
    """
    Reject empty or non-alphabetic keys, return the key uppercased.

    Surrounding whitespace is not trimmed here; a key of " KEY" fails.
    """
    if not key:
        raise InvalidKey("Key cannot be empty")
    if any(ch not in _LETTERS for ch in key):
        raise InvalidKey("Key must contain only alphabetic characters")
    return key.upper()


def format_groups(text: str, size: int = GROUP_SIZE) -> str:
    """Split text into blocks of `size` characters: KHOORZRUOG -> KHOOR ZRUOG."""
    if size < 1:
        raise ValueError("Group size must be at least 1.")
    return " ".join(text[i:i + size] for i in range(0, len(text), size))
