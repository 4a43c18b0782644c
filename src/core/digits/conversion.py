"""
Conversion Layer — граница между нативными целыми, текстом и цифровыми векторами

Внутренние примитивы предполагают корректные цифровые векторы и не
перепроверяют их на каждом вызове. Вся валидация выполняется здесь,
на границе: некорректный вход → DigitValidationError.
"""

from typing import Any, Final, Sequence

from src.core.digits.primitives import DIGIT_BASE, Digits, normalize

# Допустимые символы текстового представления
DECIMAL_CHARS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DigitValidationError(ValueError):
    """Некорректный вход на границе конверсии (не цифра, отрицательное число, пустой вектор)."""

    pass


# =============================================================================
# VALIDATION
# =============================================================================


def validate_digits(vec: Any) -> Digits:
    """
    Проверка цифрового вектора на корректность.

    Требования:
    - Последовательность (не строка), непустая
    - Каждый элемент — int (не bool) в диапазоне 0-9

    Args:
        vec: Проверяемое значение

    Returns:
        Копия вектора как list[int] (без нормализации)

    Raises:
        DigitValidationError: если вектор некорректен
    """
    if isinstance(vec, (str, bytes)) or not isinstance(vec, Sequence):
        raise DigitValidationError(
            f"Digit vector must be a sequence of ints, got {type(vec).__name__}"
        )

    if len(vec) == 0:
        raise DigitValidationError("Digit vector must not be empty")

    for position, digit in enumerate(vec):
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise DigitValidationError(
                f"Digit at position {position} must be int, got {type(digit).__name__}"
            )
        if not 0 <= digit < DIGIT_BASE:
            raise DigitValidationError(
                f"Digit at position {position} out of range 0-9: {digit}"
            )

    return list(vec)


# =============================================================================
# NATIVE INTEGERS
# =============================================================================


def from_native(value: int) -> Digits:
    """
    Конверсия неотрицательного int в нормализованный цифровой вектор.

    Examples:
        >>> from_native(0)
        [0]
        >>> from_native(9801)
        [9, 8, 0, 1]

    Raises:
        DigitValidationError: если value не int или отрицательно
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise DigitValidationError(
            f"Expected non-negative int, got {type(value).__name__}"
        )
    if value < 0:
        raise DigitValidationError(f"Negative numbers are not supported: {value}")

    if value == 0:
        return [0]

    digits: Digits = []
    while value > 0:
        value, digit = divmod(value, DIGIT_BASE)
        digits.append(digit)

    digits.reverse()
    return digits


def to_native(vec: Sequence[int]) -> int:
    """Конверсия цифрового вектора обратно в int (ведущие нули игнорируются)."""
    value = 0
    for digit in vec:
        value = value * DIGIT_BASE + digit
    return value


# =============================================================================
# TEXT
# =============================================================================


def from_text(text: str) -> Digits:
    """
    Разбор десятичной строки в нормализованный цифровой вектор.

    Допускаются пробельные символы по краям; знак, разделители групп
    и не-ASCII цифры запрещены.

    Examples:
        >>> from_text("  007 ")
        [7]

    Raises:
        DigitValidationError: если строка пустая или содержит не-цифры
    """
    if not isinstance(text, str):
        raise DigitValidationError(f"Expected str, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise DigitValidationError("Empty decimal string")

    for position, char in enumerate(stripped):
        if char not in DECIMAL_CHARS:
            raise DigitValidationError(
                f"Invalid decimal character {char!r} at position {position}"
            )

    return normalize([DECIMAL_CHARS.index(char) for char in stripped])


def to_display_string(vec: Sequence[int]) -> str:
    """
    Строковое представление вектора: цифры подряд, старший разряд первым.

    Без знака и разделителей групп. Вектор не нормализуется.
    """
    return "".join(DECIMAL_CHARS[digit] for digit in vec)
