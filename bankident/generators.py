"""Random but valid identifiers, for tests and fixtures."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from iso3166 import countries_by_alpha2

from bankident import bban as bban_registry
from bankident.bic import Bic, TEST_BIC_INDICATOR
from bankident.charclass import CharacterClass
from bankident.countries import CountryLike, alpha2_code
from bankident.iban import Iban

_LETTERS = CharacterClass.UPPER_CASE_LETTERS.alphabet
_LETTERS_AND_DIGITS = _LETTERS + CharacterClass.DIGITS.alphabet


def random_bban(structure: bban_registry.BbanStructure, rng: Optional[random.Random] = None) -> str:
    """A BBAN matching ``structure``, drawn from each group's alphabet."""
    rng = rng or random.Random()
    return "".join(
        rng.choice(group.characters.alphabet)
        for group in structure.pattern.groups
        for _ in range(group.length)
    )


def random_iban(
    countries: Optional[Sequence[CountryLike]] = None,
    rng: Optional[random.Random] = None,
) -> Iban:
    """
    Generate a valid IBAN for one of ``countries`` (any supported country by default).

    Raises:
        ValueError: a requested country does not issue IBANs.
    """
    rng = rng or random.Random()
    if countries:
        code = alpha2_code(rng.choice(list(countries)))
        structure = bban_registry.for_country(code)
        if structure is None:
            raise ValueError(f"no BBAN structure could be found for country '{code}'")
    else:
        code = None
        structure = rng.choice(bban_registry.structures())
    return Iban.from_parts(code or structure.country, random_bban(structure, rng))


def random_bic(
    countries: Optional[Sequence[CountryLike]] = None,
    test: bool = False,
    rng: Optional[random.Random] = None,
) -> Bic:
    """Generate a valid BIC11, optionally a test BIC."""
    rng = rng or random.Random()
    if countries:
        code = alpha2_code(rng.choice(list(countries)))
    else:
        code = rng.choice(sorted(countries_by_alpha2))

    chars = [rng.choice(_LETTERS) for _ in range(4)]
    chars.append(code)
    chars.extend(rng.choice(_LETTERS_AND_DIGITS) for _ in range(5))
    if test:
        chars[6] = TEST_BIC_INDICATOR
    return Bic("".join(chars))
