"""Boundary helpers turning identifier errors into ValidationResult values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from bankident import Bic, CreditCard, CreditorIdentifier, FormatError, Iban
from utils.logger import logger, mask

Identifier = Union[Iban, Bic, CreditorIdentifier, CreditCard]

_ERROR_TEXTS: Dict[str, str] = {
    "not_well_formed": "Format ungueltig.",
    "unknown_country": "Unbekannter Laendercode.",
    "unsupported_country": "Land wird fuer diesen Identifikator nicht unterstuetzt.",
    "invalid_structure": "Struktur passt nicht zum Land.",
    "incorrect_check_digit": "Pruefziffer ungueltig.",
}


@dataclass
class ValidationResult:
    valid: bool
    masked: str
    error: str = ""
    reason: Optional[str] = None
    identifier: Optional[Identifier] = None


def _validate(kind: str, factory: Callable[[str], Identifier], raw: Optional[str]) -> ValidationResult:
    if raw is None:
        return ValidationResult(False, "", f"{kind} fehlt.", "missing")
    try:
        identifier = factory(raw)
    except FormatError as exc:
        reason = exc.reason.value
        masked = mask(raw.strip())
        logger.debug("%s ungueltig (%s): %s", kind, reason, masked)
        return ValidationResult(False, masked, _ERROR_TEXTS[reason], reason)
    return ValidationResult(True, mask(str(identifier)), identifier=identifier)


def validate_iban(raw: Optional[str]) -> ValidationResult:
    """Validate an IBAN string (ISO 13616). Returns ValidationResult."""
    return _validate("IBAN", Iban, raw)


def validate_bic(raw: Optional[str]) -> ValidationResult:
    """Validate a BIC8 or BIC11 string. Returns ValidationResult."""
    return _validate("BIC", Bic, raw)


def validate_creditor_id(raw: Optional[str]) -> ValidationResult:
    """Validate a SEPA creditor identifier. Returns ValidationResult."""
    return _validate("Glaeubiger-ID", CreditorIdentifier, raw)


def validate_card(raw: Optional[str]) -> ValidationResult:
    """Validate a Visa or Mastercard number (Luhn). Returns ValidationResult."""
    return _validate("Kartennummer", CreditCard, raw)


VALIDATORS: Dict[str, Callable[[Optional[str]], ValidationResult]] = {
    "iban": validate_iban,
    "bic": validate_bic,
    "creditor_id": validate_creditor_id,
    "card": validate_card,
}
