"""
Business Identifier Codes (ISO 9362), also known as SWIFT codes.

A BIC is made of a 4 letter institution code, an ISO 3166-1 country code,
a 2 character location code and an optional 3 character branch code.
BIC8 inputs are completed with the primary office branch code ``XXX``.
"""

from __future__ import annotations

import logging
import re
from functools import total_ordering
from typing import Optional

from bankident.charclass import ascii_upper
from bankident.countries import country_from_alpha2
from bankident.errors import BicFormatError

logger = logging.getLogger(__name__)

# Coarse pre-filter: the country code is not verified.
REGEX = r"[A-Za-z]{4}[A-Za-z]{2}[A-Za-z0-9]{2}([A-Za-z0-9]{3})?"
_PATTERN = re.compile(REGEX)

PRIMARY_OFFICE_BRANCH_CODE = "XXX"
TEST_BIC_INDICATOR = "0"

_BIC8_LENGTH = 8
_INSTITUTION_CODE = slice(0, 4)
_COUNTRY_CODE = slice(4, 6)
_LOCATION_CODE = slice(6, 8)
_BRANCH_CODE = slice(8, 11)
_TEST_INDICATOR_INDEX = 7


def _parse(value: str) -> str:
    if value is None:
        raise TypeError("the bic argument cannot be None")
    if not isinstance(value, str):
        raise TypeError(f"the bic argument must be a string, got {type(value).__name__}")

    normalized = ascii_upper(value.strip())
    if not _PATTERN.fullmatch(normalized):
        raise BicFormatError.for_not_well_formed(value)

    if country_from_alpha2(normalized[_COUNTRY_CODE]) is None:
        raise BicFormatError.for_unknown_country(value)

    if len(normalized) == _BIC8_LENGTH:
        normalized += PRIMARY_OFFICE_BRANCH_CODE
    return normalized


@total_ordering
class Bic:
    """An immutable, valid BIC, always stored in its 11 character form."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        object.__setattr__(self, "_value", _parse(value))

    @staticmethod
    def is_valid(value: Optional[str]) -> bool:
        """Return True if ``value`` is a valid BIC8 or BIC11. Never raises."""
        try:
            _parse(value)
        except TypeError:
            return False
        except BicFormatError as exc:
            logger.debug("BIC rejected: %s", exc.reason.value)
            return False
        return True

    def __setattr__(self, name, value):
        raise AttributeError("Bic is immutable")

    def __delattr__(self, name):
        raise AttributeError("Bic is immutable")

    @property
    def institution_code(self) -> str:
        return self._value[_INSTITUTION_CODE]

    @property
    def country_code(self) -> str:
        return self._value[_COUNTRY_CODE]

    @property
    def location_code(self) -> str:
        return self._value[_LOCATION_CODE]

    @property
    def branch_code(self) -> str:
        return self._value[_BRANCH_CODE]

    @property
    def is_primary_office(self) -> bool:
        return self.branch_code == PRIMARY_OFFICE_BRANCH_CODE

    @property
    def is_test_bic(self) -> bool:
        """Test BICs have a ``0`` as the second character of their location code."""
        return self._value[_TEST_INDICATOR_INDEX] == TEST_BIC_INDICATOR

    @property
    def is_live_bic(self) -> bool:
        return not self.is_test_bic

    def as_test_bic(self) -> "Bic":
        if self.is_test_bic:
            return self
        v = self._value
        return Bic(v[:_TEST_INDICATOR_INDEX] + TEST_BIC_INDICATOR + v[_TEST_INDICATOR_INDEX + 1:])

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Bic({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bic):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bic):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self):
        return (Bic, (self._value,))
