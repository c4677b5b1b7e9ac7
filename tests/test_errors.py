import pytest
import copy
import pickle
import os
import sys

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from errors import (
    ErrorKind,
    InvalidDigit,
    InvalidDigitForRadix,
    InvalidRadix,
    NumberOverflow,
    NumStringError,
)


@pytest.mark.parametrize("error, kind, description, message", [
    (InvalidRadix(37), ErrorKind.INVALID_RADIX, "invalid base", "Invalid base: 37."),
    (InvalidDigit("*"), ErrorKind.INVALID_DIGIT, "invalid digit", "Invalid digit: *."),
    (InvalidDigitForRadix("2", 2), ErrorKind.INVALID_DIGIT_FOR_RADIX,
     "invalid base for digit", "Invalid base: 2 for digit: 2."),
    (NumberOverflow(), ErrorKind.NUMBER_OVERFLOW, "number overflow", "Number to convert is too big."),
])
def test_error_presentation(error, kind, description, message):
    """Each error carries its kind, a short description and a full message."""
    assert error.kind is kind
    assert error.description == description
    assert str(error) == message
    assert isinstance(error, NumStringError)
    assert isinstance(error, ValueError)


def test_error_payloads():
    assert InvalidRadix(0).radix == 0
    assert InvalidRadix(0).digit is None
    assert InvalidDigitForRadix("z", 10).digit == "z"
    assert InvalidDigitForRadix("z", 10).radix == 10
    assert NumberOverflow().radix is None


def test_error_equality():
    """Errors compare by kind and payload."""
    assert InvalidRadix(37) == InvalidRadix(37)
    assert InvalidRadix(37) != InvalidRadix(38)
    assert InvalidDigit("a") != InvalidDigitForRadix("a", 10)
    assert NumberOverflow() == NumberOverflow()
    assert len({InvalidDigit("*"), InvalidDigit("*"), NumberOverflow()}) == 2


def test_error_repr():
    assert repr(InvalidDigitForRadix("2", 2)) == "InvalidDigitForRadix('2', 2)"
    assert repr(NumberOverflow()) == "NumberOverflow()"


@pytest.mark.parametrize("error", [
    InvalidRadix(37),
    InvalidDigit("*"),
    InvalidDigitForRadix("2", 2),
    NumberOverflow(),
])
def test_errors_survive_copy_and_pickle(error):
    """Errors rebuild through their constructors with kind, payload and message intact."""
    for clone in (copy.copy(error), copy.deepcopy(error), pickle.loads(pickle.dumps(error))):
        assert type(clone) is type(error)
        assert clone == error
        assert str(clone) == str(error)
        assert clone.__traceback__ is None


def test_base_error_is_constructible():
    """The base class carries a generic message and no kind."""
    error = NumStringError()
    assert error.kind is None
    assert error.description == "conversion error"
    assert str(error) == "Conversion failed."
    assert pickle.loads(pickle.dumps(NumStringError(radix=3))) == NumStringError(radix=3)
