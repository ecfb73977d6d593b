"""
classical_ciphers — Live Demo: Caesar, Vigenère, Playfair
=========================================================
Run:  python examples/demo_all_ciphers.py [-v]

Runs each cipher over its textbook vector and prints the intermediate
state a reader would want to see: reduced shift, key pattern, key
square and prepared digraphs.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_ciphers import (
    InvalidKey,
    CaesarCipher,
    VigenereCipher,
    PlayfairCipher,
    prepare_text,
    format_groups,
)

LINE = "═" * 70


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def main():
    print(f"\n{LINE}")
    print("  classical_ciphers — Demo")
    print(LINE)

    # ── CAESAR ──────────────────────────────────────────────────────────────
    header("CAESAR — fixed shift")
    msg = "HELLO WORLD"
    c   = CaesarCipher(3)
    ct  = c.encrypt(msg)
    ok("Plaintext", msg)
    ok("Shift",     str(c.shift))
    ok("Encrypted", ct)
    ok("Formatted", format_groups(ct))
    ok("Decrypted", c.decrypt(ct))
    ok("Shift -1 is shift", str(CaesarCipher(-1).shift))

    # ── VIGENÈRE ────────────────────────────────────────────────────────────
    header("VIGENÈRE — repeating key")
    msg = "ATTACK AT DAWN"
    v   = VigenereCipher("LEMON")
    ct  = v.encrypt(msg)
    ok("Plaintext",   msg)
    ok("Key pattern", v.key_pattern(len(ct)))
    ok("Encrypted",   ct)
    ok("Formatted",   format_groups(ct))
    ok("Decrypted",   v.decrypt(ct))

    # ── PLAYFAIR ────────────────────────────────────────────────────────────
    header("PLAYFAIR — 5×5 key square")
    msg = "HIDETHEGOLDINTHETREESTUMP"
    p   = PlayfairCipher("PLAYFAIREXAMPLE")
    print()
    for line in p.render().splitlines():
        print(f"     {line}")
    print()
    prepared = " ".join(a + b for a, b in prepare_text(msg))
    ct = p.encrypt(msg)
    ok("Plaintext", msg)
    ok("Prepared",  prepared)
    ok("Encrypted", ct)
    ok("Formatted", format_groups(ct))
    ok("Decrypted", p.decrypt(ct) + "  (fillers kept)")

    # ── BAD KEY ─────────────────────────────────────────────────────────────
    header("KEY VALIDATION")
    for key in ("", "abc123"):
        try:
            VigenereCipher(key)
        except InvalidKey as e:
            ok(f"Rejected {key!r}", str(e))

    print(f"\n{LINE}\n")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO,
                        format=' %(message)s')
    main()
