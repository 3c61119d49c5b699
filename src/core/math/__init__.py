"""
Core math modules

Персистентная последовательность цифр base 2^32, арифметика magnitude
и конверсия текста для оснований 2^k.
"""

# Digit Sequence
from src.core.math.digit_sequence import (
    # Digit constants
    DIGIT_BASE,
    DIGIT_BITS,
    MAX_DIGIT,
    # Types
    DigitSequence,
    DigitSequenceBuilder,
    # Functions
    is_normalized,
    normalize,
    validate_digit,
)

# Digit Arithmetic
from src.core.math.digit_arithmetic import (
    SUPERDIGIT_BITS,
    inverse_digit,
    magnitude_add,
    magnitude_compare,
    magnitude_less_than,
    magnitude_subtract,
)

# Radix Codec
from src.core.math.radix_codec import (
    MAX_BASE,
    MIN_BASE,
    SUPPORTED_BASES,
    TextCodecConfig,
    format_pow2,
    is_pow2,
    log2_pow2,
    parse_pow2,
    split_sign,
    validate_base,
)

__all__ = [
    # Digit Sequence - Constants
    "DIGIT_BASE",
    "DIGIT_BITS",
    "MAX_DIGIT",
    # Digit Sequence - Types
    "DigitSequence",
    "DigitSequenceBuilder",
    # Digit Sequence - Functions
    "is_normalized",
    "normalize",
    "validate_digit",
    # Digit Arithmetic
    "SUPERDIGIT_BITS",
    "inverse_digit",
    "magnitude_add",
    "magnitude_compare",
    "magnitude_less_than",
    "magnitude_subtract",
    # Radix Codec - Constants
    "MAX_BASE",
    "MIN_BASE",
    "SUPPORTED_BASES",
    # Radix Codec - Config
    "TextCodecConfig",
    # Radix Codec - Functions
    "format_pow2",
    "is_pow2",
    "log2_pow2",
    "parse_pow2",
    "split_sign",
    "validate_base",
]
