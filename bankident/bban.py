"""
BBAN (Basic Bank Account Number) structures from the SWIFT IBAN registry.

Each structure holds the compiled SWIFT expression of a country's BBAN and
the position of its sub-fields. Some countries issue IBANs with the BBAN
structure of another country (French overseas territories use the French
structure under their own country code): they are registered as
subdivisions and resolve to the parent structure.

The registry is built once at import time and is read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from bankident import pattern
from bankident.countries import CountryLike, alpha2_code

_COUNTRY_CODE_LENGTH = 2
_CHECK_DIGIT_LENGTH = 2


@dataclass(frozen=True)
class Range:
    """A ``[start, end)`` range of BBAN positions."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end:
            raise ValueError(f"invalid range [{self.start}, {self.end})")

    def slice(self, s: str) -> str:
        return s[self.start:self.end]


@dataclass(frozen=True)
class BbanStructure:
    country: str
    pattern: pattern.Pattern
    subdivisions: FrozenSet[str] = frozenset()
    bank_identifier: Optional[Range] = None
    branch_identifier: Optional[Range] = None
    national_check_digit: Optional[Range] = None
    account_number: Optional[Range] = None

    def __post_init__(self) -> None:
        for name in ("bank_identifier", "branch_identifier", "national_check_digit", "account_number"):
            r = getattr(self, name)
            if r is not None and r.end > self.pattern.length:
                raise ValueError(
                    f"{self.country}: {name} [{r.start}, {r.end}) exceeds BBAN length {self.pattern.length}"
                )

    @property
    def bban_length(self) -> int:
        return self.pattern.length

    @property
    def iban_length(self) -> int:
        return _COUNTRY_CODE_LENGTH + _CHECK_DIGIT_LENGTH + self.pattern.length

    def is_bban_valid(self, bban: str) -> bool:
        if bban is None:
            raise TypeError("the bban argument cannot be None")
        return self.pattern.matches(bban)


# (country, expression, bank, branch, national check digit, account, subdivisions)
_Row = Tuple[str, str, Optional[Tuple[int, int]], Optional[Tuple[int, int]],
             Optional[Tuple[int, int]], Optional[Tuple[int, int]], Tuple[str, ...]]

_FRENCH_TERRITORIES = ("GF", "GP", "MQ", "RE", "PF", "TF", "YT", "NC", "BL", "MF", "PM", "WF")

_REGISTRY_ROWS: List[_Row] = [
    ("AD", "4!n4!n12!c", (0, 4), (4, 8), None, (8, 20), ()),
    ("AE", "3!n16!n", (0, 3), None, None, (3, 19), ()),
    ("AL", "8!n16!c", (0, 3), (3, 7), (7, 8), (8, 24), ()),
    ("AT", "5!n11!n", (0, 5), None, None, (5, 16), ()),
    ("AZ", "4!a20!c", (0, 4), None, None, (4, 24), ()),
    ("BA", "3!n3!n8!n2!n", (0, 3), (3, 6), (14, 16), (6, 14), ()),
    ("BE", "3!n7!n2!n", (0, 3), None, (10, 12), (3, 10), ()),
    ("BG", "4!a4!n2!n8!c", (0, 4), (4, 8), None, (8, 18), ()),
    ("BH", "4!a14!c", (0, 4), None, None, (4, 18), ()),
    ("BI", "5!n5!n11!n2!n", (0, 5), (5, 10), (21, 23), (10, 21), ()),
    ("BR", "8!n5!n10!n1!a1!c", (0, 8), (8, 13), None, (13, 23), ()),
    ("BY", "4!c4!n16!c", (0, 4), None, None, (8, 24), ()),
    ("CH", "5!n12!c", (0, 5), None, None, (5, 17), ()),
    ("CR", "4!n14!n", (0, 4), None, None, (4, 18), ()),
    ("CY", "3!n5!n16!c", (0, 3), (3, 8), None, (8, 24), ()),
    ("CZ", "4!n6!n10!n", (0, 4), None, None, (4, 20), ()),
    ("DE", "8!n10!n", (0, 8), None, None, (8, 18), ()),
    ("DJ", "5!n5!n11!n2!n", (0, 5), (5, 10), (21, 23), (10, 21), ()),
    ("DK", "4!n9!n1!n", (0, 4), None, (13, 14), (4, 13), ()),
    ("DO", "4!c20!n", (0, 4), None, None, (4, 24), ()),
    ("EE", "2!n2!n11!n1!n", (0, 2), None, (15, 16), (2, 15), ()),
    ("EG", "4!n4!n17!n", (0, 4), (4, 8), None, (8, 25), ()),
    ("ES", "4!n4!n1!n1!n10!n", (0, 4), (4, 8), (8, 10), (10, 20), ()),
    ("FI", "6!n7!n1!n", (0, 3), None, (13, 14), (3, 13), ("AX",)),
    ("FK", "2!a12!n", (0, 2), None, None, (2, 14), ()),
    ("FO", "4!n9!n1!n", (0, 4), None, (13, 14), (4, 13), ()),
    ("FR", "5!n5!n11!c2!n", (0, 5), (5, 10), (21, 23), (10, 21), _FRENCH_TERRITORIES),
    ("GB", "4!a6!n8!n", (0, 4), (4, 10), None, (10, 18), ("GG", "IM", "JE")),
    ("GE", "2!a16!n", (0, 2), None, None, (2, 18), ()),
    ("GI", "4!a15!c", (0, 4), None, None, (4, 19), ()),
    ("GL", "4!n9!n1!n", (0, 4), None, (13, 14), (4, 13), ()),
    ("GR", "3!n4!n16!c", (0, 3), (3, 7), None, (7, 23), ()),
    ("GT", "4!c20!c", (0, 4), None, None, (4, 24), ()),
    ("HR", "7!n10!n", (0, 7), None, None, (7, 17), ()),
    ("HU", "3!n4!n1!n15!n1!n", (0, 3), (3, 7), (23, 24), (8, 23), ()),
    ("IE", "4!a6!n8!n", (0, 4), (4, 10), None, (10, 18), ()),
    ("IL", "3!n3!n13!n", (0, 3), (3, 6), None, (6, 19), ()),
    ("IQ", "4!a3!n12!n", (0, 4), (4, 7), None, (7, 19), ()),
    ("IS", "4!n2!n6!n10!n", (0, 2), (2, 4), None, (4, 12), ()),
    ("IT", "1!a5!n5!n12!c", (1, 6), (6, 11), (0, 1), (11, 23), ()),
    ("JO", "4!a4!n18!c", (0, 4), (4, 8), None, (8, 26), ()),
    ("KW", "4!a22!c", (0, 4), None, None, (4, 26), ()),
    ("KZ", "3!n13!c", (0, 3), None, None, (3, 16), ()),
    ("LB", "4!n20!c", (0, 4), None, None, (4, 24), ()),
    ("LC", "4!a24!c", (0, 4), None, None, (4, 28), ()),
    ("LI", "5!n12!c", (0, 5), None, None, (5, 17), ()),
    ("LT", "5!n11!n", (0, 5), None, None, (5, 16), ()),
    ("LU", "3!n13!c", (0, 3), None, None, (3, 16), ()),
    ("LV", "4!a13!c", (0, 4), None, None, (4, 17), ()),
    ("LY", "3!n3!n15!n", (0, 3), (3, 6), None, (6, 21), ()),
    ("MC", "5!n5!n11!c2!n", (0, 5), (5, 10), (21, 23), (10, 21), ()),
    ("MD", "2!c18!c", (0, 2), None, None, (2, 20), ()),
    ("ME", "3!n13!n2!n", (0, 3), None, (16, 18), (3, 16), ()),
    ("MK", "3!n10!c2!n", (0, 3), None, (13, 15), (3, 13), ()),
    ("MN", "4!n12!n", (0, 4), None, None, (4, 16), ()),
    ("MR", "5!n5!n11!n2!n", (0, 5), (5, 10), (21, 23), (10, 21), ()),
    ("MT", "4!a5!n18!c", (0, 4), (4, 9), None, (9, 27), ()),
    ("MU", "4!a2!n2!n12!n3!n3!a", (0, 6), (6, 8), None, (8, 20), ()),
    ("NI", "4!a20!n", (0, 4), None, None, (4, 24), ()),
    ("NL", "4!a10!n", (0, 4), None, None, (4, 14), ()),
    ("NO", "4!n6!n1!n", (0, 4), None, (10, 11), (4, 10), ()),
    ("OM", "3!n16!c", (0, 3), None, None, (3, 19), ()),
    ("PK", "4!a16!c", (0, 4), None, None, (4, 20), ()),
    ("PL", "8!n16!n", (0, 3), (3, 7), (7, 8), (8, 24), ()),
    ("PS", "4!a21!c", (0, 4), None, None, (4, 25), ()),
    ("PT", "4!n4!n11!n2!n", (0, 4), (4, 8), (19, 21), (8, 19), ()),
    ("QA", "4!a21!c", (0, 4), None, None, (4, 25), ()),
    ("RO", "4!a16!c", (0, 4), None, None, (4, 20), ()),
    ("RS", "3!n13!n2!n", (0, 3), None, (16, 18), (3, 16), ()),
    ("RU", "9!n5!n15!c", (0, 9), (9, 14), None, (14, 29), ()),
    ("SA", "2!n18!c", (0, 2), None, None, (2, 20), ()),
    ("SC", "4!a2!n2!n16!n3!a", (0, 6), (6, 8), None, (8, 24), ()),
    ("SD", "2!n12!n", (0, 2), None, None, (2, 14), ()),
    ("SE", "3!n16!n1!n", (0, 3), None, (19, 20), (3, 19), ()),
    ("SI", "5!n8!n2!n", (0, 2), (2, 5), (13, 15), (5, 13), ()),
    ("SK", "4!n6!n10!n", (0, 4), None, None, (4, 20), ()),
    ("SM", "1!a5!n5!n12!c", (1, 6), (6, 11), (0, 1), (11, 23), ()),
    ("SO", "4!n3!n12!n", (0, 4), (4, 7), None, (7, 19), ()),
    ("ST", "4!n4!n11!n2!n", (0, 4), (4, 8), (19, 21), (8, 19), ()),
    ("SV", "4!a20!n", (0, 4), None, None, (4, 24), ()),
    ("TL", "3!n14!n2!n", (0, 3), None, (17, 19), (3, 17), ()),
    ("TN", "2!n3!n13!n2!n", (0, 2), (2, 5), (18, 20), (5, 18), ()),
    ("TR", "5!n1!n16!c", (0, 5), None, None, (6, 22), ()),
    ("UA", "6!n19!c", (0, 6), None, None, (6, 25), ()),
    ("VA", "3!n15!n", (0, 3), None, None, (3, 18), ()),
    ("VG", "4!a16!n", (0, 4), None, None, (4, 20), ()),
]


def _range(bounds: Optional[Tuple[int, int]]) -> Optional[Range]:
    return Range(*bounds) if bounds is not None else None


def _build(rows: List[_Row]) -> Mapping[str, BbanStructure]:
    by_country: Dict[str, BbanStructure] = {}
    for country, expression, bank, branch, check, account, subdivisions in rows:
        structure = BbanStructure(
            country=country,
            pattern=pattern.compile(expression),
            subdivisions=frozenset(subdivisions),
            bank_identifier=_range(bank),
            branch_identifier=_range(branch),
            national_check_digit=_range(check),
            account_number=_range(account),
        )
        for code in (country, *subdivisions):
            if code in by_country:
                raise ValueError(f"duplicate BBAN structure for {code}")
            by_country[code] = structure
    return MappingProxyType(by_country)


_BY_COUNTRY = _build(_REGISTRY_ROWS)


def for_country(country: Optional[CountryLike]) -> Optional[BbanStructure]:
    """Return the BBAN structure used in ``country``, or None if it does not use IBANs."""
    if country is None:
        return None
    return _BY_COUNTRY.get(alpha2_code(country))


def supported_countries() -> FrozenSet[str]:
    """Alpha-2 codes of every country issuing IBANs, subdivisions included."""
    return frozenset(_BY_COUNTRY)


def structures() -> Tuple[BbanStructure, ...]:
    """Every distinct structure, in registry order."""
    return tuple(dict.fromkeys(_BY_COUNTRY.values()))
