"""
International Bank Account Number (ISO 13616).

An IBAN is made of a two-letter ISO 3166-1 country code, two check digits
(ISO 7064 MOD 97-10) and a country specific BBAN:

    >>> iban = Iban("fr14 2004 1010 0505 0001 3m02 606")
    >>> str(iban), iban.bank_identifier
    ('FR1420041010050500013M02606', '20041')
"""

from __future__ import annotations

import logging
import re
from functools import total_ordering
from typing import Optional

from bankident import bban as bban_registry
from bankident.bban import BbanStructure, Range
from bankident.charclass import ascii_upper
from bankident.checkdigit import IBAN_CHECK_DIGIT
from bankident.countries import CountryLike, alpha2_code, country_from_alpha2
from bankident.errors import IbanFormatError

logger = logging.getLogger(__name__)

# Coarse pre-filter: no country, structure or check digit verification.
REGEX = r"[A-Za-z]{2}[0-9]{2}[A-Za-z0-9]{11,30}"

_BASIC_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]+")
_WHITESPACE = re.compile(r"\s+")

_COUNTRY_CODE_INDEX = 0
_CHECK_DIGIT_INDEX = 2
_BBAN_INDEX = 4
_PRINTABLE_GROUP_SIZE = 4


def _normalize(s: str) -> str:
    return ascii_upper(_WHITESPACE.sub("", s))


def _parse(value: str) -> str:
    """Run every check on ``value`` and return its normalized form."""
    if value is None:
        raise TypeError("the iban argument cannot be None")
    if not isinstance(value, str):
        raise TypeError(f"the iban argument must be a string, got {type(value).__name__}")

    normalized = _normalize(value)
    if not _BASIC_PATTERN.fullmatch(normalized):
        raise IbanFormatError.for_not_well_formed(value)

    country_code = normalized[_COUNTRY_CODE_INDEX:_CHECK_DIGIT_INDEX]
    if country_from_alpha2(country_code) is None:
        raise IbanFormatError.for_unknown_country(value)

    structure = bban_registry.for_country(country_code)
    if structure is None:
        raise IbanFormatError.for_unsupported_country(value, country_code)

    if not structure.is_bban_valid(normalized[_BBAN_INDEX:]):
        raise IbanFormatError.for_invalid_structure(value, structure.country)

    if not IBAN_CHECK_DIGIT.validate(normalized):
        raise IbanFormatError.for_incorrect_check_digit(value)

    return normalized


@total_ordering
class Iban:
    """An immutable, valid IBAN. Equality is defined on the normalized form."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        object.__setattr__(self, "_value", _parse(value))

    @classmethod
    def from_parts(cls, country: CountryLike, bban: str) -> "Iban":
        """
        Build an IBAN from a country and a BBAN, computing the check digits.

        Args:
            country: iso3166.Country or alpha-2 code.
            bban:    the national account number, spaces are ignored.

        Raises:
            TypeError:       country or bban is None.
            IbanFormatError: unknown or unsupported country, invalid BBAN.
        """
        if country is None:
            raise TypeError("the country argument cannot be None")
        if bban is None:
            raise TypeError("the bban argument cannot be None")
        if not isinstance(bban, str):
            raise TypeError(f"the bban argument must be a string, got {type(bban).__name__}")

        country_code = alpha2_code(country)
        if country_from_alpha2(country_code) is None:
            raise IbanFormatError.for_unknown_country(country_code)

        structure = bban_registry.for_country(country_code)
        if structure is None:
            raise IbanFormatError.for_unsupported_country(bban, country_code)

        normalized_bban = _normalize(bban)
        if not structure.is_bban_valid(normalized_bban):
            raise IbanFormatError.for_invalid_structure(bban, structure.country)

        check_digit = IBAN_CHECK_DIGIT.calculate(country_code + "00" + normalized_bban)
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_value", country_code + check_digit + normalized_bban)
        return instance

    @staticmethod
    def is_valid(value: Optional[str]) -> bool:
        """Return True if ``value`` is a valid IBAN. Never raises."""
        try:
            _parse(value)
        except TypeError:
            return False
        except IbanFormatError as exc:
            logger.debug("IBAN rejected: %s", exc.reason.value)
            return False
        return True

    def __setattr__(self, name, value):
        raise AttributeError("Iban is immutable")

    def __delattr__(self, name):
        raise AttributeError("Iban is immutable")

    # ------------------------------------------------------------------

    @property
    def country_code(self) -> str:
        return self._value[_COUNTRY_CODE_INDEX:_CHECK_DIGIT_INDEX]

    @property
    def check_digit(self) -> str:
        return self._value[_CHECK_DIGIT_INDEX:_BBAN_INDEX]

    @property
    def bban(self) -> str:
        return self._value[_BBAN_INDEX:]

    @property
    def structure(self) -> BbanStructure:
        # never None: the country was checked on construction
        return bban_registry.for_country(self.country_code)

    def _field(self, r: Optional[Range]) -> Optional[str]:
        return r.slice(self.bban) if r is not None else None

    @property
    def bank_identifier(self) -> Optional[str]:
        return self._field(self.structure.bank_identifier)

    @property
    def branch_identifier(self) -> Optional[str]:
        return self._field(self.structure.branch_identifier)

    @property
    def national_check_digit(self) -> Optional[str]:
        return self._field(self.structure.national_check_digit)

    @property
    def account_number(self) -> Optional[str]:
        return self._field(self.structure.account_number)

    def to_printable_string(self) -> str:
        """The IBAN in groups of four characters, e.g. ``FR14 2004 1010 …``."""
        v = self._value
        return " ".join(v[i:i + _PRINTABLE_GROUP_SIZE] for i in range(0, len(v), _PRINTABLE_GROUP_SIZE))

    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Iban({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Iban):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Iban):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self):
        return (Iban, (self._value,))
