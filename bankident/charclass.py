"""Character classes used in SWIFT expressions (``n``, ``a``, ``c``, ``e``)."""

from __future__ import annotations

import string
from enum import Enum
from typing import Optional


class CharacterClass(Enum):
    """
    A character representation of the SWIFT expression language.

    Only ASCII characters are accepted: ``"٣".isdigit()`` is true in Python
    but such characters never appear in bank identifiers.
    """

    DIGITS = ("n", "[0-9]", string.digits)
    UPPER_CASE_LETTERS = ("a", "[A-Z]", string.ascii_uppercase)
    ALPHANUMERICS = ("c", "[A-Za-z0-9]", string.digits + string.ascii_lowercase + string.ascii_uppercase)
    SPACES = ("e", "[ ]", " ")

    def __init__(self, qualifier: str, regex: str, alphabet: str) -> None:
        self.qualifier = qualifier
        self.regex = regex
        self.alphabet = alphabet
        self._members = frozenset(alphabet)

    @classmethod
    def from_qualifier(cls, qualifier: str) -> Optional["CharacterClass"]:
        for characters in cls:
            if characters.qualifier == qualifier:
                return characters
        return None

    def has(self, c: str) -> bool:
        return c in self._members


_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(s: str) -> str:
    """Upper-case ASCII letters only. ``str.upper`` maps ``ß`` to ``SS`` and ``ı`` to ``I``."""
    return s.translate(_ASCII_UPPER)
