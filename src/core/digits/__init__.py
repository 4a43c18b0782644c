"""
Core digit-vector modules

Десятичные цифровые векторы: примитивы, арифметика, конверсия.
"""

# Primitives
from src.core.digits.primitives import (
    DIGIT_BASE,
    ZERO_DIGITS,
    Digits,
    Ordering,
    compare_magnitude,
    is_zero,
    next_power_of_two,
    normalize,
    pad_to_length,
    scale_by_power_of_ten,
    split_half,
)

# Decimal Arithmetic
from src.core.digits.arithmetic import (
    DigitUnderflowError,
    add,
    checked_subtract,
    saturating_subtract,
    subtract,
)

# Conversion
from src.core.digits.conversion import (
    DECIMAL_CHARS,
    DigitValidationError,
    from_native,
    from_text,
    to_display_string,
    to_native,
    validate_digits,
)

__all__ = [
    # Primitives — Constants
    "DIGIT_BASE",
    "ZERO_DIGITS",
    # Primitives — Types
    "Digits",
    "Ordering",
    # Primitives — Functions
    "compare_magnitude",
    "is_zero",
    "next_power_of_two",
    "normalize",
    "pad_to_length",
    "scale_by_power_of_ten",
    "split_half",
    # Arithmetic — Exceptions
    "DigitUnderflowError",
    # Arithmetic — Functions
    "add",
    "checked_subtract",
    "saturating_subtract",
    "subtract",
    # Conversion — Constants
    "DECIMAL_CHARS",
    # Conversion — Exceptions
    "DigitValidationError",
    # Conversion — Functions
    "from_native",
    "from_text",
    "to_display_string",
    "to_native",
    "validate_digits",
]
