import os
import logging

# ============================================================================
# CONFIGURATION CLASS
# ============================================================================

class Config:
    """Centralized configuration with validation"""

    # Core Constants
    MIN_RADIX: int = 2
    MAX_RADIX: int = 36
    ALPHABET: str = "0123456789abcdefghijklmnopqrstuvwxyz"

    # Magnitude ceiling (unsigned 64-bit)
    MAGNITUDE_BITS: int = 64
    MAX_MAGNITUDE: int = 2**64 - 1

    # Logging
    LOGGER_NAME: str = "numstring"
    LOG_LEVEL: str = os.getenv("NUMSTRING_LOG_LEVEL", "WARNING").upper()
    LOG_FILE: str | None = os.getenv("NUMSTRING_LOG_FILE")
    LOG_FILE_MAX_BYTES: int = 10_485_760
    LOG_FILE_BACKUP_COUNT: int = 5

    @classmethod
    def validate(cls):
        """Validate configuration on startup"""
        if cls.MIN_RADIX < 2:
            raise ValueError("MIN_RADIX must be at least 2")
        if cls.MAX_RADIX < cls.MIN_RADIX:
            raise ValueError("MAX_RADIX must not be below MIN_RADIX")
        if len(cls.ALPHABET) < cls.MAX_RADIX:
            raise ValueError("ALPHABET must provide a digit for every value below MAX_RADIX")
        if len(set(cls.ALPHABET)) != len(cls.ALPHABET):
            raise ValueError("ALPHABET must not repeat characters")
        if cls.MAX_MAGNITUDE != 2**cls.MAGNITUDE_BITS - 1:
            raise ValueError("MAX_MAGNITUDE must match MAGNITUDE_BITS")
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Unknown LOG_LEVEL: {cls.LOG_LEVEL}")

# ============================================================================
# SINGLETON INSTANCE & DERIVED CONSTANTS
# ============================================================================

config = Config()
config.validate()

# --- Expose class attributes as module constants for convenience ---
for attr in [a for a in dir(config) if not a.startswith('__') and not callable(getattr(config, a))]:
    globals()[attr] = getattr(config, attr)

# Digit -> value lookup, derived once from the alphabet
DIGIT_VALUES: dict[str, int] = {digit: value for value, digit in enumerate(ALPHABET)}
