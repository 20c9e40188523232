"""
bankident – validation and construction of bank identifiers.

    Iban                IBAN (ISO 13616), with BBAN sub-fields
    Bic                 BIC / SWIFT code (ISO 9362)
    CreditorIdentifier  SEPA creditor identifier
    CreditCard          Visa / Mastercard number (Luhn)
"""

from __future__ import annotations

from bankident.agreement import Agreement
from bankident.bban import BbanStructure, Range
from bankident.bic import Bic
from bankident.charclass import CharacterClass
from bankident.checkdigit import IBAN_CHECK_DIGIT, IbanCheckDigit
from bankident.creditcard import CreditCard, CreditCardType
from bankident.creditor import CreditorIdentifier
from bankident.errors import (
    BicFormatError,
    CreditCardFormatError,
    CreditorIdentifierFormatError,
    FormatError,
    FormatErrorReason,
    IbanFormatError,
)
from bankident.iban import Iban
from bankident.pattern import Pattern, PatternGroup, PatternSyntaxError

__all__ = [
    "Agreement",
    "BbanStructure",
    "Bic",
    "BicFormatError",
    "CharacterClass",
    "CreditCard",
    "CreditCardFormatError",
    "CreditCardType",
    "CreditorIdentifier",
    "CreditorIdentifierFormatError",
    "FormatError",
    "FormatErrorReason",
    "IBAN_CHECK_DIGIT",
    "Iban",
    "IbanCheckDigit",
    "IbanFormatError",
    "Pattern",
    "PatternGroup",
    "PatternSyntaxError",
    "Range",
]
