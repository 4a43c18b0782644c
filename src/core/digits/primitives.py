"""
Digit-Vector Primitives — базовые операции над десятичными векторами цифр

Цифровой вектор (digit vector) — последовательность цифр 0-9,
старший разряд первым. Представляет неотрицательное целое в base 10.

Модуль содержит:
- Нормализацию (удаление незначащих ведущих нулей)
- Дополнение слева нулями до заданной длины
- Округление длины до степени двойки
- Умножение на 10^k (дописывание нулей справа)
- Сравнение по модулю

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализованный вектор не имеет ведущих нулей, ноль — это ровно [0]
2. Все функции чистые: входной вектор никогда не мутируется
3. Результат всегда новый list (value semantics, без aliasing)
"""

from enum import Enum
from typing import Final, Sequence

# =============================================================================
# CONSTANTS
# =============================================================================

# Основание системы счисления (фиксированное)
DIGIT_BASE: Final[int] = 10

# Каноническое представление нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


Digits = list[int]


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(str, Enum):
    """Результат сравнения двух векторов по модулю."""

    LESS = "LESS"
    EQUAL = "EQUAL"
    GREATER = "GREATER"


# =============================================================================
# LENGTH HELPERS
# =============================================================================


def next_power_of_two(n: int) -> int:
    """
    Наименьшая степень двойки >= n.

    Args:
        n: Натуральное число (длина операнда)

    Returns:
        1 если n <= 1, иначе наименьшая степень двойки >= n

    Examples:
        >>> next_power_of_two(0)
        1
        >>> next_power_of_two(3)
        4
        >>> next_power_of_two(8)
        8
    """
    power = 1
    while power < n:
        power *= 2
    return power


def pad_to_length(vec: Sequence[int], length: int) -> Digits:
    """
    Дополнение вектора ведущими нулями до длины length.

    Никогда не обрезает: если len(vec) >= length, возвращается копия.

    Args:
        vec: Цифровой вектор
        length: Целевая длина

    Returns:
        Новый вектор длины max(len(vec), length)
    """
    missing = length - len(vec)
    if missing <= 0:
        return list(vec)
    return [0] * missing + list(vec)


def split_half(vec: Sequence[int]) -> tuple[Digits, Digits]:
    """
    Разбиение вектора чётной длины на старшую и младшую половины.

    Args:
        vec: Цифровой вектор чётной длины (после padding)

    Returns:
        (high, low), каждая половина длины len(vec) // 2

    Raises:
        ValueError: если длина нечётная
    """
    n = len(vec)
    if n % 2 != 0:
        raise ValueError(f"Cannot split vector of odd length {n}")

    half = n // 2
    return list(vec[:half]), list(vec[half:])


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize(vec: Sequence[int]) -> Digits:
    """
    Удаление ведущих нулей.

    Пустой или полностью нулевой вектор схлопывается в [0].

    Examples:
        >>> normalize([0, 0, 4, 2])
        [4, 2]
        >>> normalize([0, 0, 0])
        [0]
    """
    start = 0
    while start < len(vec) and vec[start] == 0:
        start += 1

    if start == len(vec):
        return list(ZERO_DIGITS)
    return list(vec[start:])


def is_zero(vec: Sequence[int]) -> bool:
    """Проверка, что вектор нормализуется к нулю."""
    return all(d == 0 for d in vec)


# =============================================================================
# SCALING
# =============================================================================


def scale_by_power_of_ten(vec: Sequence[int], k: int) -> Digits:
    """
    Умножение на 10^k: дописывание k нулей справа.

    Ведущие нули удаляются; ноль остаётся [0] без хвостовых нулей.

    Args:
        vec: Цифровой вектор
        k: Показатель степени (>= 0)

    Returns:
        Новый вектор vec * 10^k

    Raises:
        ValueError: если k < 0
    """
    if k < 0:
        raise ValueError(f"Power of ten must be non-negative, got {k}")

    if is_zero(vec):
        return list(ZERO_DIGITS)
    return normalize(vec) + [0] * k


# =============================================================================
# COMPARISON
# =============================================================================


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> Ordering:
    """
    Сравнение двух векторов по модулю.

    Оба операнда нормализуются, затем сравниваются:
    1. По длине (короче = меньше)
    2. Лексикографически, начиная со старшего разряда

    Returns:
        Ordering.LESS / Ordering.EQUAL / Ordering.GREATER
    """
    a_clean = normalize(a)
    b_clean = normalize(b)

    if len(a_clean) != len(b_clean):
        return Ordering.LESS if len(a_clean) < len(b_clean) else Ordering.GREATER

    for digit_a, digit_b in zip(a_clean, b_clean):
        if digit_a < digit_b:
            return Ordering.LESS
        if digit_a > digit_b:
            return Ordering.GREATER

    return Ordering.EQUAL
