"""
Decimal Arithmetic — сложение и вычитание цифровых векторов

Школьные алгоритмы с переносом (carry) и заёмом (borrow):
операнды выравниваются по младшему разряду, обработка идёт
от младшего разряда к старшему.

Политика вычитания:
- subtract / saturating_subtract: при a < b возвращают [0]
  (отрицательные числа не представимы)
- checked_subtract: при a < b поднимает DigitUnderflowError

Насыщающее вычитание скрывает ошибки в вызывающем коде, поэтому
внутри движка Karatsuba используется только checked_subtract.
"""

from typing import Sequence

from src.core.digits.primitives import (
    DIGIT_BASE,
    Digits,
    Ordering,
    compare_magnitude,
    normalize,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class DigitUnderflowError(ArithmeticError):
    """
    Уменьшаемое меньше вычитаемого при checked_subtract.

    Результат был бы отрицательным, а отрицательные числа не представимы.
    """

    pass


# =============================================================================
# ADDITION
# =============================================================================


def add(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Сложение двух цифровых векторов.

    Операнды выравниваются по правому краю; при остаточном переносе
    добавляется старший разряд. Результат нормализован.

    Examples:
        >>> add([9, 9], [1])
        [1, 0, 0]
        >>> add([0, 0], [0])
        [0]
    """
    max_len = max(len(a), len(b))
    result: Digits = []
    carry = 0

    for i in range(max_len):
        digit_a = a[len(a) - 1 - i] if i < len(a) else 0
        digit_b = b[len(b) - 1 - i] if i < len(b) else 0

        total = digit_a + digit_b + carry
        result.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE

    if carry > 0:
        result.append(carry)

    result.reverse()
    return normalize(result)


# =============================================================================
# SUBTRACTION
# =============================================================================


def _subtract_unchecked(a: Sequence[int], b: Sequence[int]) -> Digits:
    """Вычитание с заёмом; требует a >= b по модулю."""
    max_len = max(len(a), len(b))
    result: Digits = []
    borrow = 0

    for i in range(max_len):
        digit_a = a[len(a) - 1 - i] if i < len(a) else 0
        digit_b = b[len(b) - 1 - i] if i < len(b) else 0

        diff = digit_a - digit_b - borrow
        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    result.reverse()
    return normalize(result)


def saturating_subtract(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Беззнаковое насыщающее вычитание: max(a - b, 0).

    ВАЖНО: при a < b возвращается [0], а не ошибка. Не использовать там,
    где нужна настоящая разность — для этого есть checked_subtract.

    Examples:
        >>> saturating_subtract([1, 0, 0], [1])
        [9, 9]
        >>> saturating_subtract([1], [5])
        [0]
    """
    if compare_magnitude(a, b) is Ordering.LESS:
        return [0]
    return _subtract_unchecked(a, b)


# Вычитание по умолчанию — насыщающее
subtract = saturating_subtract


def checked_subtract(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Вычитание с проверкой: a - b при a >= b.

    Args:
        a: Уменьшаемое
        b: Вычитаемое

    Returns:
        Нормализованная разность

    Raises:
        DigitUnderflowError: если a < b по модулю
    """
    if compare_magnitude(a, b) is Ordering.LESS:
        raise DigitUnderflowError(
            f"Subtraction underflow: minuend has {len(normalize(a))} digits, "
            f"subtrahend has {len(normalize(b))} digits and is larger"
        )
    return _subtract_unchecked(a, b)
