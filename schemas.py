from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

import config
from errors import ErrorKind, NumStringError

Uint64 = Annotated[int, Field(ge=0, le=config.MAX_MAGNITUDE)]
Radix = Annotated[int, Field(ge=config.MIN_RADIX, le=config.MAX_RADIX)]


class ErrorDetail(BaseModel):
    """Serializable view of a conversion error."""
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    radix: Optional[int] = None
    digit: Optional[str] = None
    description: str
    message: str

    @classmethod
    def from_error(cls, error: NumStringError) -> "ErrorDetail":
        return cls(
            kind=error.kind,
            radix=error.radix,
            digit=error.digit,
            description=error.description,
            message=error.message,
        )


class ConversionSnapshot(BaseModel):
    """Parsed state of a Converter: exactly one of magnitude / error is set."""
    model_config = ConfigDict(frozen=True)

    digits: str
    source_radix: int
    magnitude: Optional[Uint64] = None
    error: Optional[ErrorDetail] = None


class ConversionResult(BaseModel):
    """Schema for a successful conversion into a target radix."""
    model_config = ConfigDict(frozen=True)

    input: str
    source_radix: Radix
    target_radix: Radix
    magnitude: Uint64
    converted: str = Field(..., min_length=1)
