"""
Core math modules

Конвертация чисел между позиционными системами счисления.
"""

# Radix (base 2..19)
from src.core.math.radix import (
    # Constants
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    # Exceptions
    InvalidDigitError,
    InvalidInputError,
    OutOfRangeError,
    RadixError,
    # Validation
    digit_value,
    is_valid_numeral,
    validate_base,
    # Conversion
    decode,
    decode_base7,
    decode_base19,
    encode,
    encode_base7,
    encode_base19,
    transcode,
)

__all__ = [
    # Radix — Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # Radix — Exceptions
    "InvalidDigitError",
    "InvalidInputError",
    "OutOfRangeError",
    "RadixError",
    # Radix — Validation
    "digit_value",
    "is_valid_numeral",
    "validate_base",
    # Radix — Conversion
    "decode",
    "decode_base7",
    "decode_base19",
    "encode",
    "encode_base7",
    "encode_base19",
    "transcode",
]
