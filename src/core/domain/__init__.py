"""
Domain models and value objects.

Contains boundary value objects: DigitVector, MultiplicationRecord.
"""

from src.core.domain.digit_vector import (
    DigitVector,
    MultiplicationRecord,
    multiply_request,
    multiply_vectors,
)

__all__ = [
    "DigitVector",
    "MultiplicationRecord",
    "multiply_request",
    "multiply_vectors",
]
