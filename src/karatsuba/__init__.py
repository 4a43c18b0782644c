"""Karatsuba — умножение произвольной точности над десятичными цифровыми векторами.

Алгоритм divide-and-conquer: три рекурсивных умножения вместо четырёх
на каждом уровне, O(n^log2(3)) вместо O(n^2).
"""

from .engine import (
    KaratsubaConfig,
    KaratsubaEngine,
    KaratsubaResult,
    multiply,
)

__all__ = [
    "KaratsubaConfig",
    "KaratsubaEngine",
    "KaratsubaResult",
    "multiply",
]
