"""
Karatsuba Engine — рекурсивное умножение цифровых векторов

Алгоритм (операнды дополнены до длины n = 2^k):
    n == 1:  x * y вычисляется напрямую (не более двух цифр)
    n > 1:   x = a·10^(n/2) + b,  y = c·10^(n/2) + d
             p = a + b,  q = c + d
             ac = a·c,  bd = b·d,  pq = p·q      (три рекурсивных умножения)
             adbc = pq - (ac + bd)               (= a·d + b·c)
             x·y = ac·10^n + adbc·10^(n/2) + bd

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. На каждом уровне рекурсии длина операндов — степень двойки
2. pq >= ac + bd; нарушение → DigitUnderflowError (а не молчаливый 0)
3. Результат нормализован: без ведущих нулей, ноль — это [0]
4. Нет разделяемого изменяемого состояния: движок реентерабелен

Опционально три умножения верхнего уровня выполняются параллельно
в ThreadPoolExecutor с join перед комбинированием.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence

from src.core.digits.arithmetic import add, checked_subtract
from src.core.digits.conversion import validate_digits
from src.core.digits.primitives import (
    DIGIT_BASE,
    Digits,
    next_power_of_two,
    normalize,
    pad_to_length,
    scale_by_power_of_ten,
    split_half,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class KaratsubaConfig:
    """Конфигурация движка Karatsuba.

    Все параметры имеют значения по умолчанию; по умолчанию движок
    однопоточный и валидирует операнды на входе.
    """

    # Параллельный fan-out трёх умножений верхнего уровня
    parallel_top_level: bool = False

    # Размер пула потоков для fan-out
    max_workers: int = 3

    # Минимальная дополненная длина операндов для fan-out
    parallel_min_length: int = 64

    # Проверка операндов (цифры 0-9, непустой вектор) на границе движка
    validate_inputs: bool = True

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.parallel_min_length < 2:
            raise ValueError(
                f"parallel_min_length must be >= 2, got {self.parallel_min_length}"
            )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class KaratsubaResult:
    """Результат умножения со статистикой рекурсии."""

    product: tuple[int, ...]

    # Общая длина операндов после padding верхнего уровня
    padded_length: int

    # Статистика рекурсии
    recursive_calls: int
    base_case_calls: int
    max_depth: int

    # Был ли использован параллельный fan-out
    parallel: bool


@dataclass
class _RecursionStats:
    """Счётчики одного дерева рекурсии (локальны для вызова)."""

    calls: int = 0
    base_cases: int = 0
    max_depth: int = 0

    def record(self, depth: int, base_case: bool) -> None:
        self.calls += 1
        if base_case:
            self.base_cases += 1
        self.max_depth = max(self.max_depth, depth)

    def merge(self, other: "_RecursionStats") -> None:
        self.calls += other.calls
        self.base_cases += other.base_cases
        self.max_depth = max(self.max_depth, other.max_depth)


@dataclass(frozen=True)
class _SplitLevel:
    """Подзадачи одного уровня: три пары операндов для умножения."""

    n: int
    operands: tuple[tuple[Digits, Digits], ...]


# =============================================================================
# ENGINE
# =============================================================================


class KaratsubaEngine:
    """Движок умножения произвольной точности по алгоритму Karatsuba.

    Порядок вычисления:
    1. Валидация операндов (если включена)
    2. Padding обоих операндов до общей длины 2^k
    3. Рекурсия до однозначных операндов
    4. Нормализация результата
    """

    def __init__(self, config: KaratsubaConfig | None = None):
        """Инициализация движка.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or KaratsubaConfig()

    def multiply(self, x: Sequence[int], y: Sequence[int]) -> Digits:
        """Произведение x * y как нормализованный цифровой вектор."""
        return list(self.evaluate(x, y).product)

    def evaluate(self, x: Sequence[int], y: Sequence[int]) -> KaratsubaResult:
        """Умножение с возвратом статистики рекурсии.

        Args:
            x: первый множитель (цифры 0-9, старший разряд первым)
            y: второй множитель

        Returns:
            KaratsubaResult с нормализованным произведением

        Raises:
            DigitValidationError: если операнд некорректен (при validate_inputs)
        """
        if self.config.validate_inputs:
            x_digits = validate_digits(x)
            y_digits = validate_digits(y)
        else:
            x_digits = list(x)
            y_digits = list(y)

        n = next_power_of_two(max(len(x_digits), len(y_digits)))
        x_padded = pad_to_length(x_digits, n)
        y_padded = pad_to_length(y_digits, n)

        stats = _RecursionStats()
        parallel = (
            self.config.parallel_top_level and n >= self.config.parallel_min_length
        )

        if parallel:
            logger.debug(
                "Karatsuba fan-out: padded_length=%d, max_workers=%d",
                n,
                self.config.max_workers,
            )
            product = self._multiply_parallel(x_padded, y_padded, stats)
        else:
            product = _multiply_padded(x_padded, y_padded, 0, stats)

        product = normalize(product)

        logger.debug(
            "Karatsuba multiply: padded_length=%d, calls=%d, base_cases=%d, depth=%d",
            n,
            stats.calls,
            stats.base_cases,
            stats.max_depth,
        )

        return KaratsubaResult(
            product=tuple(product),
            padded_length=n,
            recursive_calls=stats.calls,
            base_case_calls=stats.base_cases,
            max_depth=stats.max_depth,
            parallel=parallel,
        )

    def _multiply_parallel(
        self, x: Digits, y: Digits, stats: _RecursionStats
    ) -> Digits:
        """Верхний уровень: ac, bd, pq считаются в пуле потоков, затем join."""
        stats.record(0, base_case=False)
        level = _split_level(x, y)

        branch_stats = [_RecursionStats() for _ in level.operands]
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = [
                executor.submit(_multiply_padded, left, right, 1, branch)
                for (left, right), branch in zip(level.operands, branch_stats)
            ]
            ac, bd, pq = [future.result() for future in futures]

        for branch in branch_stats:
            stats.merge(branch)

        return _combine(level.n, ac, bd, pq)


# =============================================================================
# RECURSION
# =============================================================================


def _split_level(x: Digits, y: Digits) -> _SplitLevel:
    """Разбиение операндов длины n на три пары для ac, bd, pq."""
    a, b = split_half(x)
    c, d = split_half(y)

    p = add(a, b)
    q = add(c, d)

    # p, q могут получить лишнюю цифру переноса
    pq_len = next_power_of_two(max(len(p), len(q)))
    p_padded = pad_to_length(p, pq_len)
    q_padded = pad_to_length(q, pq_len)

    return _SplitLevel(n=len(x), operands=((a, c), (b, d), (p_padded, q_padded)))


def _combine(n: int, ac: Digits, bd: Digits, pq: Digits) -> Digits:
    """ac·10^n + (pq - ac - bd)·10^(n/2) + bd."""
    adbc = checked_subtract(pq, add(ac, bd))

    term_high = scale_by_power_of_ten(ac, n)
    term_mid = scale_by_power_of_ten(adbc, n // 2)
    return normalize(add(add(term_high, term_mid), bd))


def _multiply_padded(
    x: Digits, y: Digits, depth: int, stats: _RecursionStats
) -> Digits:
    """Рекурсивный шаг; x и y одной длины, равной степени двойки."""
    n = len(x)

    if n == 1:
        stats.record(depth, base_case=True)
        high, low = divmod(x[0] * y[0], DIGIT_BASE)
        return normalize([high, low])

    stats.record(depth, base_case=False)
    level = _split_level(x, y)
    ac, bd, pq = [
        _multiply_padded(left, right, depth + 1, stats)
        for left, right in level.operands
    ]
    return _combine(n, ac, bd, pq)


# =============================================================================
# MODULE API
# =============================================================================


_DEFAULT_ENGINE = KaratsubaEngine()


def multiply(x: Sequence[int], y: Sequence[int]) -> Digits:
    """
    Точное произведение двух неотрицательных десятичных чисел.

    Args:
        x: цифры 0-9, старший разряд первым
        y: цифры 0-9, старший разряд первым

    Returns:
        Произведение без ведущих нулей ([0] для нуля)

    Examples:
        >>> multiply([1, 2, 3, 4], [5, 6, 7, 8])
        [7, 0, 0, 6, 6, 5, 2]
        >>> multiply([9, 9], [9, 9])
        [9, 8, 0, 1]
    """
    return _DEFAULT_ENGINE.multiply(x, y)
