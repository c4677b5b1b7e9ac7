"""
Digit <-> value mapping for the 0-9a-z alphabet used by every radix from 2 to 36.
"""
from config import ALPHABET, DIGIT_VALUES
from errors import InvalidDigit, InvalidDigitForRadix


def digit_to_value(digit: str, radix: int) -> int:
    """
    Returns the numeric value of a single lower-case digit in the given radix.

    Alphabet membership is checked first, so an unknown character always
    raises InvalidDigit and never InvalidDigitForRadix.
    """
    value = DIGIT_VALUES.get(digit)
    if value is None:
        raise InvalidDigit(digit)
    if value >= radix:
        raise InvalidDigitForRadix(digit, radix)
    return value


def value_to_digit(value: int) -> str:
    """Inverse of digit_to_value for values in [0, 35]."""
    if not 0 <= value < len(ALPHABET):
        raise ValueError(f"Digit value out of range: {value}")
    return ALPHABET[value]
