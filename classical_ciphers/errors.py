"""
Exceptions raised by the cipher library.
"""


class InvalidKey(ValueError):
    """Key is empty or contains characters outside A-Z / a-z."""


class SymbolNotFound(LookupError):
    """A letter has no cell in a Playfair matrix. Internal invariant violation."""
