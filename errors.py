"""
Error taxonomy for digit-string conversion.

Every failure is a value: an exception instance carrying a kind tag and the
offending radix and/or digit. A Converter stores the instance it hit during
parsing and raises it only when a caller asks for the magnitude or a rendering.
Human-readable text is layered on top through `description` and `str()`.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_RADIX = "invalid_radix"
    INVALID_DIGIT = "invalid_digit"
    INVALID_DIGIT_FOR_RADIX = "invalid_digit_for_radix"
    NUMBER_OVERFLOW = "number_overflow"


DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.INVALID_RADIX: "invalid base",
    ErrorKind.INVALID_DIGIT: "invalid digit",
    ErrorKind.INVALID_DIGIT_FOR_RADIX: "invalid base for digit",
    ErrorKind.NUMBER_OVERFLOW: "number overflow",
}


class NumStringError(ValueError):
    """Base class for all conversion failures."""
    kind: Optional[ErrorKind] = None

    def __init__(self, radix: Optional[int] = None, digit: Optional[str] = None):
        self.radix = radix
        self.digit = digit
        super().__init__(self.message)

    @property
    def description(self) -> str:
        return DESCRIPTIONS.get(self.kind, "conversion error")

    @property
    def message(self) -> str:
        return "Conversion failed."

    def _payload(self) -> tuple:
        """Positional arguments that rebuild this error through its constructor."""
        return (self.radix, self.digit)

    def __reduce__(self):
        return (type(self), self._payload())

    def _key(self):
        return (self.kind, self.radix, self.digit)

    def __eq__(self, other):
        if not isinstance(other, NumStringError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self) -> str:
        fields = []
        if self.digit is not None:
            fields.append(repr(self.digit))
        if self.radix is not None:
            fields.append(str(self.radix))
        return f"{type(self).__name__}({', '.join(fields)})"
class InvalidRadix(NumStringError):
    """Radix outside the supported range; reported before any digit is read."""
    kind = ErrorKind.INVALID_RADIX

    def __init__(self, radix: int):
        super().__init__(radix=radix)

    def _payload(self) -> tuple:
        return (self.radix,)

    @property
    def message(self) -> str:
        return f"Invalid base: {self.radix}."


class InvalidDigit(NumStringError):
    """Character that is not part of the 0-9a-z alphabet at all."""
    kind = ErrorKind.INVALID_DIGIT

    def __init__(self, digit: str):
        super().__init__(digit=digit)

    def _payload(self) -> tuple:
        return (self.digit,)

    @property
    def message(self) -> str:
        return f"Invalid digit: {self.digit}."


class InvalidDigitForRadix(NumStringError):
    """Alphabet character whose value is too large for the radix."""
    kind = ErrorKind.INVALID_DIGIT_FOR_RADIX

    def __init__(self, digit: str, radix: int):
        super().__init__(radix=radix, digit=digit)

    def _payload(self) -> tuple:
        return (self.digit, self.radix)

    @property
    def message(self) -> str:
        return f"Invalid base: {self.radix} for digit: {self.digit}."


class NumberOverflow(NumStringError):
    kind = ErrorKind.NUMBER_OVERFLOW

    def __init__(self):
        super().__init__()

    def _payload(self) -> tuple:
        return ()

    @property
    def message(self) -> str:
        return "Number to convert is too big."
