"""
classical_ciphers
=================
Three classical ciphers as pure text transformations.

Ciphers:
    CAESAR    — fixed shift over A-Z (Suetonius, 1st c. BC)
    VIGENÈRE  — repeating-key polyalphabetic shift (Bellaso, 1553)
    PLAYFAIR  — 5×5 key square digraph substitution (Wheatstone, 1854)

None of these offer any security today. They are here for teaching,
puzzles and historical reproduction.

Each cipher comes as a class bound to one key (key checked once) and
as a pair of free functions taking (text, key):

    >>> caesar_encrypt("HELLO WORLD", 3)
    'KHOORZRUOG'
    >>> vigenere_decrypt("LXFOPVEFRNHR", "LEMON")
    'ATTACKATDAWN'

Bad keys raise InvalidKey (a ValueError).
"""

__version__ = "1.0.0"

from .errors             import InvalidKey, SymbolNotFound
from .text               import normalize, validate_alphabetic_key, format_groups
from .ciphers.caesar     import CaesarCipher, caesar_encrypt, caesar_decrypt
from .ciphers.vigenere   import VigenereCipher, vigenere_encrypt, vigenere_decrypt
from .ciphers.playfair   import (
    PlayfairCipher,
    build_matrix,
    locate,
    prepare_text,
    render_matrix,
    playfair_encrypt,
    playfair_decrypt,
)

__all__ = [
    "InvalidKey",
    "SymbolNotFound",
    "normalize",
    "validate_alphabetic_key",
    "format_groups",
    "CaesarCipher",
    "caesar_encrypt",
    "caesar_decrypt",
    "VigenereCipher",
    "vigenere_encrypt",
    "vigenere_decrypt",
    "PlayfairCipher",
    "build_matrix",
    "locate",
    "prepare_text",
    "render_matrix",
    "playfair_encrypt",
    "playfair_decrypt",
]
