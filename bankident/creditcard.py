"""
Payment card numbers (ISO/IEC 7812).

Visa and Mastercard numbers are recognised. A number is valid when it
follows the issuer prefix and length rules and passes the Luhn checksum:

    >>> CreditCard("4779 4434 2971 7849").type
    <CreditCardType.VISA: 'Visa'>
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional, Tuple

from bankident.errors import CreditCardFormatError

logger = logging.getLogger(__name__)

# Visa: 13 or 16 digits starting with 4. Mastercard: 16 digits, 51-55.
_PATTERN = re.compile(r"(?P<visa>4[0-9]{12}(?:[0-9]{3})?)|(?P<mastercard>5[1-5][0-9]{14})")
_DIGITS = re.compile(r"[0-9]+")
# spaces and hyphens, as printed on cards
_SEPARATORS = re.compile(r"[\s-]+")


class CreditCardType(Enum):
    VISA = "Visa"
    MASTERCARD = "Mastercard"


def luhn_is_valid(number: str) -> bool:
    """Luhn (mod 10) checksum of an ASCII digit string. Never raises."""
    if not isinstance(number, str) or not _DIGITS.fullmatch(number):
        return False
    total = 0
    for i, c in enumerate(reversed(number)):
        n = ord(c) - 48
        if i % 2:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def _compact(value: str) -> str:
    return _SEPARATORS.sub("", value)


def card_type(number: str) -> Optional[CreditCardType]:
    """The issuer of ``number`` from its prefix and length, without the checksum."""
    if not isinstance(number, str):
        return None
    m = _PATTERN.fullmatch(_compact(number))
    return CreditCardType[m.lastgroup.upper()] if m else None


def _parse(value: str) -> Tuple[str, CreditCardType]:
    if value is None:
        raise TypeError("the card number argument cannot be None")
    if not isinstance(value, str):
        raise TypeError(f"the card number argument must be a string, got {type(value).__name__}")

    number = _compact(value)
    m = _PATTERN.fullmatch(number)
    if m is None:
        raise CreditCardFormatError.for_not_well_formed(value)
    if not luhn_is_valid(number):
        raise CreditCardFormatError.for_incorrect_check_digit(value)
    return number, CreditCardType[m.lastgroup.upper()]


class CreditCard:
    """An immutable, valid Visa or Mastercard number."""

    __slots__ = ("_number", "_type")

    def __init__(self, value: str) -> None:
        number, type_ = _parse(value)
        object.__setattr__(self, "_number", number)
        object.__setattr__(self, "_type", type_)

    @staticmethod
    def is_valid(value: Optional[str]) -> bool:
        """Return True if ``value`` is a valid card number. Never raises."""
        try:
            _parse(value)
        except TypeError:
            return False
        except CreditCardFormatError as exc:
            logger.debug("card number rejected: %s", exc.reason.value)
            return False
        return True

    def __setattr__(self, name, value):
        raise AttributeError("CreditCard is immutable")

    def __delattr__(self, name):
        raise AttributeError("CreditCard is immutable")

    @property
    def number(self) -> str:
        return self._number

    @property
    def type(self) -> CreditCardType:
        return self._type

    def __str__(self) -> str:
        return self._number

    def __repr__(self) -> str:
        # never the full number
        return f"CreditCard({self._type.value}, '...{self._number[-4:]}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreditCard):
            return NotImplemented
        return self._number == other._number

    def __hash__(self) -> int:
        return hash(self._number)

    def __reduce__(self):
        return (CreditCard, (self._number,))
