"""International agreements relevant to bank identifiers (EEA, EU, SEPA…)."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet

from bankident.countries import CountryLike, alpha2_code

_EU = (
    "AT", "BE", "BG", "HR", "CY", "CZ", "DK", "EE", "FI", "FR", "DE", "GR", "HU", "IE",
    "IT", "LV", "LT", "LU", "MT", "NL", "PL", "PT", "RO", "SK", "SI", "ES", "SE",
)


class Agreement(Enum):
    EUROPEAN_ECONOMIC_AREA = _EU + ("IS", "LI", "NO")
    EUROPEAN_FREE_TRADE_ASSOCIATION = ("IS", "LI", "NO", "CH")
    EUROPEAN_UNION = _EU
    SEPA_COM_PACIFIQUE = ("PF", "NC", "WF")
    SINGLE_EURO_PAYMENTS_AREA = _EU + (
        # EEA
        "IS", "LI", "NO",
        # non-EEA
        "AD", "MC", "SM", "CH", "GB", "VA",
        # through Finland
        "AX",
        # through France
        "GF", "GP", "MQ", "YT", "RE", "BL", "MF", "PM",
        # through the United Kingdom
        "GI", "GG", "JE", "IM",
    )

    @property
    def participants(self) -> FrozenSet[str]:
        return frozenset(self.value)

    def includes(self, country: CountryLike) -> bool:
        return alpha2_code(country) in self.value
