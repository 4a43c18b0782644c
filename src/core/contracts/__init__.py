"""
Contract Validation Module

Модуль для валидации JSON контрактов умножения.
"""

from .validators import (
    ContractValidator,
    MultiplicationRequestValidator,
    MultiplicationResultValidator,
    SchemaLoader,
    validate_multiplication_request,
    validate_multiplication_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MultiplicationRequestValidator",
    "MultiplicationResultValidator",
    # Functions
    "validate_multiplication_request",
    "validate_multiplication_result",
]
