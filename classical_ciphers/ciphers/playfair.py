"""
Playfair Digraph Cipher
=======================
Encrypts letter pairs instead of single letters, using a 5×5 square
built from the key. I and J share a cell, so J never appears in the
square and is read as I everywhere.

Square construction (key PLAYFAIREXAMPLE):

      P L A Y F
      I R E X M
      B C D G H
      K N O Q S
      T U V W Z

Key letters first, in order of first appearance, then the rest of the
alphabet. Rules for a pair at (r1, c1), (r2, c2):

    same row      each letter -> the one to its right (wraps)
    same column   each letter -> the one below it (wraps)
    otherwise     corners of the rectangle: (r1, c2), (r2, c1)

Decryption moves left / up instead; the rectangle swap is its own
inverse.

Plaintext preparation: a letter followed by the same letter gets a
filler X between the two, and an odd-length result is padded with a
trailing X. Where the letter being split or padded is itself X, Q is
used so no pair is ever XX.

Decryption pairs the ciphertext as given. No fillers are inserted and
none are removed from the output; a lone trailing letter is ignored.

Historical note: invented by Charles Wheatstone in 1854, named for
Lord Playfair who promoted it. Used by British forces into WWI.
"""

import logging
from typing import List, Tuple

from ..errors import InvalidKey, SymbolNotFound
from ..text import ALPHABET, normalize, validate_alphabetic_key

logger = logging.getLogger(__name__)

SIZE       = 5
FILLER     = "X"
ALT_FILLER = "Q"
MERGED     = ("J", "I")   # J is written as I

Matrix  = Tuple[Tuple[str, ...], ...]
Digraph = Tuple[str, str]


def _merge(letter: str) -> str:
    return MERGED[1] if letter == MERGED[0] else letter


def _filler_for(letter: str) -> str:
    return ALT_FILLER if letter == FILLER else FILLER


def build_matrix(key: str) -> Matrix:
    """
    Build the 5×5 key square.

    Raises InvalidKey for an empty or non-alphabetic key.
    """
    validate_alphabetic_key(key)
    cleaned = normalize(key)
    if not cleaned:
        raise InvalidKey("Key cannot be empty")

    symbols = []
    for ch in cleaned + ALPHABET:
        ch = _merge(ch)
        if ch not in symbols:
            symbols.append(ch)

    matrix = tuple(
        tuple(symbols[row * SIZE:(row + 1) * SIZE]) for row in range(SIZE)
    )
    logger.debug(f"Playfair square: {''.join(symbols)}")
    return matrix


def locate(matrix: Matrix, letter: str) -> Tuple[int, int]:
    """(row, col) of `letter` in the square. J is looked up as I."""
    letter = _merge(letter)
    for r, row in enumerate(matrix):
        for c, cell in enumerate(row):
            if cell == letter:
                return r, c
    raise SymbolNotFound(f"{letter!r} is not in the Playfair square.")


def prepare_text(text: str) -> List[Digraph]:
    """Normalize plaintext and split it into fillered digraphs."""
    cleaned = "".join(_merge(ch) for ch in normalize(text))

    prepared = []
    for i, ch in enumerate(cleaned):
        prepared.append(ch)
        if i + 1 < len(cleaned) and cleaned[i + 1] == ch:
            prepared.append(_filler_for(ch))

    if len(prepared) % 2:
        prepared.append(_filler_for(prepared[-1]))

    return list(zip(prepared[0::2], prepared[1::2]))


def render_matrix(matrix: Matrix) -> str:
    """Square as text with column and row indices."""
    lines = ["  " + " ".join(str(c) for c in range(len(matrix[0])))]
    for r, row in enumerate(matrix):
        lines.append(f"{r} " + " ".join(row))
    return "\n".join(lines)


class PlayfairCipher:
    """Playfair cipher bound to one key square."""

    def __init__(self, key: str):
        self._matrix = build_matrix(key)

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    def locate(self, letter: str) -> Tuple[int, int]:
        return locate(self._matrix, letter)

    def render(self) -> str:
        return render_matrix(self._matrix)

    def encrypt(self, plaintext: str) -> str:
        digraphs = prepare_text(plaintext)
        logger.debug(f"Encrypting {len(digraphs)} digraphs")
        return "".join(self._substitute(a, b, 1) for a, b in digraphs)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt pair by pair. Filler letters stay in the output."""
        cleaned = normalize(ciphertext)
        if len(cleaned) % 2:
            logger.debug(f"Ignoring unpaired trailing letter {cleaned[-1]!r}")
        pairs = zip(cleaned[0::2], cleaned[1::2])
        return "".join(self._substitute(a, b, -1) for a, b in pairs)

    # ── helpers ──────────────────────────────────────────────────────────────

    def _substitute(self, first: str, second: str, step: int) -> str:
        """Apply the row / column / rectangle rule. step=1 encrypts, -1 decrypts."""
        m = self._matrix
        r1, c1 = self.locate(first)
        r2, c2 = self.locate(second)

        if r1 == r2:
            return m[r1][(c1 + step) % SIZE] + m[r2][(c2 + step) % SIZE]
        if c1 == c2:
            return m[(r1 + step) % SIZE][c1] + m[(r2 + step) % SIZE][c2]
        return m[r1][c2] + m[r2][c1]


def playfair_encrypt(plaintext: str, key: str) -> str:
    return PlayfairCipher(key).encrypt(plaintext)


def playfair_decrypt(ciphertext: str, key: str) -> str:
    return PlayfairCipher(key).decrypt(ciphertext)
