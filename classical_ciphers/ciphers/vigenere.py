"""
Vigenère Polyalphabetic Cipher
==============================
Each plaintext letter is shifted by the alphabet value of the key
letter beneath it (A=0 ... Z=25). The key repeats cyclically to the
length of the text; a key longer than the text is simply cut short.

    plaintext  ATTACKATDAWN
    key        LEMONLEMONLE
    ciphertext LXFOPVEFRNHR

Historical note: described by Bellaso in 1553, later credited to
Blaise de Vigenère. Called "le chiffre indéchiffrable" until Kasiski
published a general attack in 1863.

Text and key are normalized with spaces dropped; the raw key is
validated before normalization.
"""

import logging

from ..errors import InvalidKey
from ..text import ALPHABET, normalize, validate_alphabetic_key

logger = logging.getLogger(__name__)


class VigenereCipher:
    """Vigenère cipher with a cyclically repeated key."""

    MODULUS = len(ALPHABET)

    def __init__(self, key: str):
        validate_alphabetic_key(key)
        cleaned = normalize(key)
        if not cleaned:
            raise InvalidKey("Key cannot be empty")
        self._key = cleaned
        logger.debug(f"Vigenère key period={len(cleaned)}")

    @property
    def key(self) -> str:
        return self._key

    def keystream(self, length: int) -> list:
        """Shift values (0-25) for the first `length` text positions."""
        period = len(self._key)
        return [ALPHABET.index(self._key[i % period]) for i in range(length)]

    def key_pattern(self, length: int) -> str:
        """Key letters as they line up under a text of `length` letters."""
        period = len(self._key)
        return "".join(self._key[i % period] for i in range(length))

    def encrypt(self, plaintext: str) -> str:
        """Normalize plaintext and add the keystream letter by letter."""
        text = normalize(plaintext)
        stream = self.keystream(len(text))
        return "".join(
            ALPHABET[(ALPHABET.index(ch) + k) % self.MODULUS]
            for ch, k in zip(text, stream)
        )

    def decrypt(self, ciphertext: str) -> str:
        """Normalize ciphertext and subtract the keystream."""
        text = normalize(ciphertext)
        stream = self.keystream(len(text))
        return "".join(
            ALPHABET[(ALPHABET.index(ch) - k + self.MODULUS) % self.MODULUS]
            for ch, k in zip(text, stream)
        )


def vigenere_encrypt(plaintext: str, key: str) -> str:
    return VigenereCipher(key).encrypt(plaintext)


def vigenere_decrypt(ciphertext: str, key: str) -> str:
    return VigenereCipher(key).decrypt(ciphertext)
