"""
The Converter value: a digit string parsed once in its source radix, then
queried for validity, its magnitude, or a rendering in any target radix.
"""
import copy
from typing import Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from core_logic import check_radix, logger, parse_magnitude, render_magnitude
from errors import NumStringError
from schemas import ConversionResult, ConversionSnapshot, ErrorDetail

# Private attributes filled once by model_post_init
PARSED_STATE = ('_magnitude', '_error')


class Converter(BaseModel):
    """
    Immutable parse of `digits` in `source_radix`.

    Construction never raises for bad input: the first failure (radix first,
    then digits left to right, then overflow) is stored and raised again by
    `magnitude()` and `render()`. `digits` keeps the input lower-cased, invalid
    characters included.
    """
    model_config = ConfigDict(frozen=True)

    digits: str
    source_radix: int

    _magnitude: Optional[int] = PrivateAttr(default=None)
    _error: Optional[NumStringError] = PrivateAttr(default=None)

    def __init__(self, digits: str, source_radix: int):
        super().__init__(digits=digits, source_radix=source_radix)

    @field_validator('digits')
    def normalize_digits(cls, value):
        return value.lower()

    def model_post_init(self, __context) -> None:
        try:
            magnitude = parse_magnitude(self.digits, self.source_radix)
        except NumStringError as e:
            logger.debug(f"Parse of {self.digits!r} in radix {self.source_radix} failed: {e}")
            # Stored without the traceback of the failed parse
            BaseModel.__setattr__(self, '_error', copy.copy(e))
        else:
            BaseModel.__setattr__(self, '_magnitude', magnitude)

    def __setattr__(self, name, value):
        if name in PARSED_STATE:
            raise AttributeError(f"{name} is computed at construction and cannot be reassigned")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if name in PARSED_STATE:
            raise AttributeError(f"{name} is computed at construction and cannot be deleted")
        super().__delattr__(name)

    def model_copy(self, *, update=None, deep: bool = False) -> "Converter":
        """Copies keep their parse; an update re-parses from the merged fields."""
        if update:
            fields = {'digits': self.digits, 'source_radix': self.source_radix}
            fields.update(update)
            return type(self)(**fields)
        return super().model_copy(deep=deep)

    @property
    def error(self) -> Optional[NumStringError]:
        """The stored parse error, or None when parsing succeeded."""
        return self._error

    def is_valid(self) -> bool:
        return self._error is None

    def magnitude(self) -> int:
        """Returns the parsed value, or raises a copy of the stored parse error."""
        if self._error is not None:
            raise copy.copy(self._error)
        return self._magnitude

    def render(self, target_radix: int) -> str:
        """
        Renders the magnitude in `target_radix`.

        The target radix is validated first; after that the stored parse error
        is raised with its kind and payload unchanged.
        """
        try:
            check_radix(target_radix)
        except NumStringError as e:
            logger.debug(f"Render of {self.digits!r} into radix {target_radix} failed: {e}")
            raise
        return render_magnitude(self.magnitude(), target_radix)
    def convert(self, target_radix: int) -> ConversionResult:
        converted = self.render(target_radix)
        return ConversionResult(
            input=self.digits,
            source_radix=self.source_radix,
            target_radix=target_radix,
            magnitude=self._magnitude,
            converted=converted,
        )

    def snapshot(self) -> ConversionSnapshot:
        return ConversionSnapshot(
            digits=self.digits,
            source_radix=self.source_radix,
            magnitude=self._magnitude,
            error=ErrorDetail.from_error(self._error) if self._error is not None else None,
        )

    def __repr__(self) -> str:
        outcome = repr(self._error) if self._error is not None else self._magnitude
        return f"Converter(digits={self.digits!r}, source_radix={self.source_radix}, magnitude={outcome})"


def convert_digits(digits: str, source_radix: int, target_radix: int) -> str:
    """One-shot conversion of a digit string between two radices."""
    return Converter(digits, source_radix).render(target_radix)
