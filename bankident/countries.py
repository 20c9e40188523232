"""ISO 3166-1 country lookups backed by the ``iso3166`` package."""

from __future__ import annotations

from typing import Optional, Union

from iso3166 import Country, countries_by_alpha2

from bankident.charclass import ascii_upper

CountryLike = Union[str, Country]


def country_from_alpha2(code: str) -> Optional[Country]:
    """Return the country for an alpha-2 code (case-insensitive), or None."""
    if not isinstance(code, str) or len(code) != 2:
        return None
    return countries_by_alpha2.get(ascii_upper(code))


def alpha2_code(country: CountryLike) -> str:
    """
    Return the upper-case alpha-2 code of ``country``.

    Strings are only normalized, not checked against the ISO table.
    """
    if isinstance(country, Country):
        return country.alpha2
    if isinstance(country, str):
        return ascii_upper(country.strip())
    raise TypeError(f"expected an iso3166.Country or an alpha-2 code, got {type(country).__name__}")
