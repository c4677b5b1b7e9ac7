import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable, List

import config
from alphabet import digit_to_value, value_to_digit
from errors import InvalidRadix, NumberOverflow

# --- LOGGING SETUP ---

def setup_logging() -> logging.Logger:
    """Configure the library logger, with rotation when a log file is configured"""
    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(config.LOG_LEVEL)

    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.LOG_LEVEL)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if config.LOG_FILE:
            log_dir = os.path.dirname(config.LOG_FILE)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                config.LOG_FILE,
                maxBytes=config.LOG_FILE_MAX_BYTES,
                backupCount=config.LOG_FILE_BACKUP_COUNT
            )
            file_handler.setLevel(config.LOG_LEVEL)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger

logger = setup_logging()

# --- RADIX VALIDATION ---

def check_radix(radix: int) -> int:
    """Returns the radix unchanged if it lies in [MIN_RADIX, MAX_RADIX], else raises InvalidRadix."""
    if not config.MIN_RADIX <= radix <= config.MAX_RADIX:
        raise InvalidRadix(radix)
    return radix

# --- PARSE PATH (digits -> magnitude) ---

def digits_to_values(digits: Iterable[str], radix: int) -> List[int]:
    """Maps digits left to right; the first bad digit aborts the whole sequence."""
    check_radix(radix)
    return [digit_to_value(digit, radix) for digit in digits]


def values_to_magnitude(values: Iterable[int], radix: int) -> int:
    """
    Horner accumulation into an unsigned 64-bit magnitude.

    Python ints never wrap, so each step is range-checked against
    MAX_MAGNITUDE: the multiplication first, then the addition.
    """
    total = 0
    for value in values:
        total *= radix
        if total > config.MAX_MAGNITUDE:
            raise NumberOverflow()
        total += value
        if total > config.MAX_MAGNITUDE:
            raise NumberOverflow()
    return total


def parse_magnitude(digits: Iterable[str], radix: int) -> int:
    return values_to_magnitude(digits_to_values(digits, radix), radix)

# --- RENDER PATH (magnitude -> digits) ---

def magnitude_to_values(magnitude: int, radix: int) -> List[int]:
    """Digit values least-significant first; zero yields a single 0."""
    values = []
    while True:
        magnitude, remainder = divmod(magnitude, radix)
        values.append(remainder)
        if magnitude == 0:
            break
    return values


def values_to_digits(values: Iterable[int]) -> str:
    return "".join(value_to_digit(value) for value in values)


def render_magnitude(magnitude: int, radix: int) -> str:
    """Renders a magnitude most-significant digit first, no sign, no separators."""
    check_radix(radix)
    return values_to_digits(reversed(magnitude_to_values(magnitude, radix)))


def max_value_digits(radix: int) -> str:
    """Digits of the largest representable magnitude (2**64 - 1) in the given radix."""
    return render_magnitude(config.MAX_MAGNITUDE, radix)
