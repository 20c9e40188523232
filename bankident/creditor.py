"""
SEPA Creditor Identifiers.

A creditor identifier is made of a country code, two check digits, a three
character creditor business code and a national identifier. The business
code is freely chosen by the creditor (``ZZZ`` by default) and is excluded
from the check digit computation, so that several business codes can share
the same national identifier.
"""

from __future__ import annotations

import logging
import re
from functools import total_ordering
from typing import Optional

from bankident.agreement import Agreement
from bankident.charclass import ascii_upper
from bankident.checkdigit import IBAN_CHECK_DIGIT
from bankident.countries import CountryLike, alpha2_code, country_from_alpha2
from bankident.errors import CreditorIdentifierFormatError

logger = logging.getLogger(__name__)

# Coarse pre-filter: no country or check digit verification.
REGEX = r"[A-Za-z]{2}[0-9]{2}[A-Za-z0-9]{3}[A-Za-z0-9]{1,28}"
_PATTERN = re.compile(REGEX)
_BUSINESS_CODE_PATTERN = re.compile(r"[A-Z0-9]{3}")
_WHITESPACE = re.compile(r"\s+")

DEFAULT_BUSINESS_CODE = "ZZZ"

_COUNTRY_CODE = slice(0, 2)
_CHECK_DIGIT = slice(2, 4)
_BUSINESS_CODE = slice(4, 7)
_NATIONAL_ID_INDEX = 7


def _normalize(s: str) -> str:
    return ascii_upper(_WHITESPACE.sub("", s))


def _without_business_code(creditor_id: str) -> str:
    return creditor_id[:_BUSINESS_CODE.start] + creditor_id[_NATIONAL_ID_INDEX:]


def _check_country(input_string: str, country_code: str) -> None:
    if country_from_alpha2(country_code) is None:
        raise CreditorIdentifierFormatError.for_unknown_country(input_string)
    if not Agreement.SINGLE_EURO_PAYMENTS_AREA.includes(country_code):
        raise CreditorIdentifierFormatError.for_unsupported_country(input_string, country_code)


def _parse(value: str) -> str:
    if value is None:
        raise TypeError("the creditor identifier argument cannot be None")
    if not isinstance(value, str):
        raise TypeError(f"the creditor identifier argument must be a string, got {type(value).__name__}")

    normalized = _normalize(value)
    if not _PATTERN.fullmatch(normalized):
        raise CreditorIdentifierFormatError.for_not_well_formed(value)

    _check_country(value, normalized[_COUNTRY_CODE])

    if not IBAN_CHECK_DIGIT.validate(_without_business_code(normalized)):
        raise CreditorIdentifierFormatError.for_incorrect_check_digit(value)

    return normalized


@total_ordering
class CreditorIdentifier:
    """An immutable, valid SEPA creditor identifier."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        object.__setattr__(self, "_value", _parse(value))

    @classmethod
    def from_parts(
        cls,
        country: CountryLike,
        business_code: str,
        national_id: str,
    ) -> "CreditorIdentifier":
        """
        Build a creditor identifier, computing its check digits.

        Raises:
            TypeError:                     an argument is None.
            CreditorIdentifierFormatError: malformed parts, unknown or
                                           non-SEPA country.
        """
        if country is None:
            raise TypeError("the country argument cannot be None")
        if business_code is None:
            raise TypeError("the business code argument cannot be None")
        if national_id is None:
            raise TypeError("the national id argument cannot be None")

        country_code = alpha2_code(country)
        normalized_business_code = _normalize(business_code)
        normalized_national_id = _normalize(national_id)

        if not _BUSINESS_CODE_PATTERN.fullmatch(normalized_business_code):
            raise CreditorIdentifierFormatError.for_not_well_formed(business_code)

        assembled = country_code + "00" + normalized_business_code + normalized_national_id
        if not _PATTERN.fullmatch(assembled):
            raise CreditorIdentifierFormatError.for_not_well_formed(national_id)

        _check_country(national_id, country_code)

        check_digit = IBAN_CHECK_DIGIT.calculate(_without_business_code(assembled))
        instance = cls.__new__(cls)
        object.__setattr__(
            instance,
            "_value",
            country_code + check_digit + normalized_business_code + normalized_national_id,
        )
        return instance

    @staticmethod
    def is_valid(value: Optional[str]) -> bool:
        """Return True if ``value`` is a valid creditor identifier. Never raises."""
        try:
            _parse(value)
        except TypeError:
            return False
        except CreditorIdentifierFormatError as exc:
            logger.debug("creditor identifier rejected: %s", exc.reason.value)
            return False
        return True

    def __setattr__(self, name, value):
        raise AttributeError("CreditorIdentifier is immutable")

    def __delattr__(self, name):
        raise AttributeError("CreditorIdentifier is immutable")

    @property
    def country_code(self) -> str:
        return self._value[_COUNTRY_CODE]

    @property
    def check_digit(self) -> str:
        return self._value[_CHECK_DIGIT]

    @property
    def business_code(self) -> str:
        return self._value[_BUSINESS_CODE]

    @property
    def national_identifier(self) -> str:
        return self._value[_NATIONAL_ID_INDEX:]

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"CreditorIdentifier({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreditorIdentifier):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CreditorIdentifier):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self):
        return (CreditorIdentifier, (self._value,))
