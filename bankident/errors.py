"""Exceptions raised when a string cannot be turned into a bank identifier."""

from __future__ import annotations

from enum import Enum


class FormatErrorReason(Enum):
    """Why an input was rejected, in the order the checks run."""

    NOT_WELL_FORMED = "not_well_formed"
    UNKNOWN_COUNTRY = "unknown_country"
    UNSUPPORTED_COUNTRY = "unsupported_country"
    INVALID_STRUCTURE = "invalid_structure"
    INCORRECT_CHECK_DIGIT = "incorrect_check_digit"


class FormatError(ValueError):
    """Base class of all identifier format errors."""

    kind = "identifier"
    article = "an"

    def __init__(self, input_string: str, reason: FormatErrorReason, message: str) -> None:
        super().__init__(message)
        self.input_string = input_string
        self.reason = reason

    @classmethod
    def for_not_well_formed(cls, input_string: str) -> "FormatError":
        return cls(
            input_string,
            FormatErrorReason.NOT_WELL_FORMED,
            f"'{input_string}' format is not appropriate for {cls.article} {cls.kind}",
        )

    @classmethod
    def for_unknown_country(cls, input_string: str) -> "FormatError":
        return cls(
            input_string,
            FormatErrorReason.UNKNOWN_COUNTRY,
            f"'{input_string}' country code is not an ISO 3166-1-alpha-2 code",
        )

    @classmethod
    def for_unsupported_country(cls, input_string: str, country: str) -> "FormatError":
        return cls(
            input_string,
            FormatErrorReason.UNSUPPORTED_COUNTRY,
            f"'{country}' country does not support {cls.kind}",
        )

    @classmethod
    def for_invalid_structure(cls, input_string: str, country: str) -> "FormatError":
        return cls(
            input_string,
            FormatErrorReason.INVALID_STRUCTURE,
            f"'{input_string}' structure is not valid against the {cls.kind} structure used in {country}",
        )

    @classmethod
    def for_incorrect_check_digit(cls, input_string: str) -> "FormatError":
        return cls(
            input_string,
            FormatErrorReason.INCORRECT_CHECK_DIGIT,
            f"'{input_string}' check digits are incorrect",
        )


class IbanFormatError(FormatError):
    kind = "IBAN"


class BicFormatError(FormatError):
    kind = "BIC"
    article = "a"


class CreditorIdentifierFormatError(FormatError):
    kind = "creditor identifier"
    article = "a"


class CreditCardFormatError(FormatError):
    kind = "card number"
    article = "a"
