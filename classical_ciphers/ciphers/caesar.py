"""
Caesar / Shift Cipher
=====================
Every letter moves a fixed number of places down the alphabet.
With shift 3: A -> D, B -> E, ... X -> A.

Historical note: Suetonius records Julius Caesar using shift 3 for
military dispatches. Only 25 useful keys exist, so it falls to a
brute-force search by hand.

Shifts are taken modulo 26, negative values included: -1 and 25
are the same key.
"""

import logging

from ..text import ALPHABET, normalize

logger = logging.getLogger(__name__)


class CaesarCipher:
    """Fixed-shift substitution over A-Z."""

    MODULUS = len(ALPHABET)

    def __init__(self, shift: int):
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise TypeError(f"Caesar shift must be an integer, got {type(shift).__name__}.")
        self._shift = ((shift % self.MODULUS) + self.MODULUS) % self.MODULUS
        if self._shift != shift:
            logger.debug(f"Shift {shift} reduced to {self._shift}")

    @property
    def shift(self) -> int:
        return self._shift

    def encrypt(self, plaintext: str) -> str:
        """Normalize (spaces dropped) and shift each letter forward."""
        return self._apply(plaintext, self._shift)

    def decrypt(self, ciphertext: str) -> str:
        return self._apply(ciphertext, -self._shift)

    def _apply(self, text: str, shift: int) -> str:
        return "".join(
            ALPHABET[(ALPHABET.index(ch) + shift) % self.MODULUS]
            for ch in normalize(text)
        )


def caesar_encrypt(plaintext: str, shift: int) -> str:
    return CaesarCipher(shift).encrypt(plaintext)


def caesar_decrypt(ciphertext: str, shift: int) -> str:
    return CaesarCipher(shift).decrypt(ciphertext)
