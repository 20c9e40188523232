"""ISO 7064 MOD 97-10 check digits, as used by IBANs and SEPA creditor identifiers."""

from __future__ import annotations

_CHECK_DIGIT_INDEX = 2
_BBAN_INDEX = 4

_MAX_TOTAL = 999_999_999
_MODULUS = 97
_REMAINDER = 1

# Reserved values that never denote a valid identifier
_INVALID_CHECK_DIGITS = frozenset({"00", "01", "99"})


def _digit(c: str) -> int:
    """Base-36 value of an ASCII alphanumeric, -1 for anything else."""
    if "0" <= c <= "9":
        return ord(c) - 48
    if "A" <= c <= "Z":
        return ord(c) - 55
    if "a" <= c <= "z":
        return ord(c) - 87
    return -1


class IbanCheckDigit:
    """
    Computes and validates MOD 97-10 check digits.

    The input always has the IBAN layout: two country letters, two check
    digits, then the body. The running total is reduced modulo 97 as soon
    as it exceeds nine digits so the arithmetic stays within a machine word.
    """

    def validate(self, value: str) -> bool:
        """Return True if ``value`` carries correct check digits. Never raises."""
        if not isinstance(value, str) or len(value) <= _BBAN_INDEX:
            return False
        if value[_CHECK_DIGIT_INDEX:_BBAN_INDEX] in _INVALID_CHECK_DIGITS:
            return False
        try:
            return self._modulus(value) == _REMAINDER
        except ValueError:
            return False

    def calculate(self, value: str) -> str:
        """
        Return the two check digits for ``value``.

        The characters at the check digit positions are ignored.

        Raises:
            TypeError:  value is not a string.
            ValueError: value is too short or contains non-alphanumerics.
        """
        if not isinstance(value, str):
            raise TypeError("the value argument must be a string")
        if len(value) <= _BBAN_INDEX:
            raise ValueError(f"the value argument size must be greater than {_BBAN_INDEX}")

        placeholder = value[:_CHECK_DIGIT_INDEX] + "00" + value[_BBAN_INDEX:]
        return f"{98 - self._modulus(placeholder):02d}"

    @staticmethod
    def _modulus(value: str) -> int:
        rotated = value[_BBAN_INDEX:] + value[:_BBAN_INDEX]
        total = 0
        for c in rotated:
            n = _digit(c)
            if n < 0:
                raise ValueError(f"'{c}' is not an alphanumeric character")
            total = (total * 100 if n > 9 else total * 10) + n
            if total > _MAX_TOTAL:
                total %= _MODULUS
        return total % _MODULUS


IBAN_CHECK_DIGIT = IbanCheckDigit()
