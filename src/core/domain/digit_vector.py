"""
DigitVector — Immutable value objects для границы библиотеки

Pydantic модели для передачи чисел и результатов умножения
встраивающему коду. Полная совместимость с JSON Schema
(contracts/schema/multiplication_request.json, multiplication_result.json).

Валидация выполняется при создании модели; внутренние примитивы
работают с уже проверенными list[int].
"""

from pydantic import BaseModel, Field, StrictInt, field_validator

from src.core.contracts.validators import (
    validate_multiplication_request,
    validate_multiplication_result,
)
from src.core.digits.conversion import (
    from_native,
    from_text,
    to_display_string,
    to_native,
)
from src.core.digits.primitives import DIGIT_BASE, normalize
from src.karatsuba.engine import KaratsubaConfig, KaratsubaEngine, KaratsubaResult


# =============================================================================
# DIGIT VECTOR
# =============================================================================


class DigitVector(BaseModel):
    """
    Неотрицательное целое как вектор десятичных цифр.

    Цифры хранятся в нормализованном виде (без ведущих нулей).
    """

    digits: tuple[StrictInt, ...] = Field(
        ..., min_length=1, description="Цифры 0-9, старший разряд первым"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка диапазона 0-9 и нормализация"""
        for position, digit in enumerate(v):
            if not 0 <= digit < DIGIT_BASE:
                raise ValueError(f"digit at position {position} out of range 0-9: {digit}")
        return tuple(normalize(v))

    @classmethod
    def from_int(cls, value: int) -> "DigitVector":
        return cls(digits=tuple(from_native(value)))

    @classmethod
    def from_str(cls, text: str) -> "DigitVector":
        return cls(digits=tuple(from_text(text)))

    def to_int(self) -> int:
        return to_native(self.digits)

    def __str__(self) -> str:
        return to_display_string(self.digits)

    def __len__(self) -> int:
        return len(self.digits)


# =============================================================================
# MULTIPLICATION RECORD
# =============================================================================


class MultiplicationRecord(BaseModel):
    """
    Запись результата умножения: операнды, произведение, статистика рекурсии.

    Сериализуется в multiplication_result контракт.
    """

    x: DigitVector
    y: DigitVector
    product: DigitVector

    padded_length: int = Field(..., ge=1, description="Длина операндов после padding (2^k)")
    recursive_calls: int = Field(..., ge=1, description="Число рекурсивных вызовов")
    base_case_calls: int = Field(..., ge=1, description="Число однозначных умножений")
    max_depth: int = Field(..., ge=0, description="Глубина рекурсии")
    parallel: bool = Field(default=False, description="Использован fan-out верхнего уровня")

    model_config = {"frozen": True}

    @field_validator("padded_length")
    @classmethod
    def validate_power_of_two(cls, v: int) -> int:
        """padded_length должен быть степенью двойки"""
        if v & (v - 1) != 0:
            raise ValueError(f"padded_length must be a power of two, got {v}")
        return v

    @classmethod
    def from_result(
        cls, x: DigitVector, y: DigitVector, result: KaratsubaResult
    ) -> "MultiplicationRecord":
        return cls(
            x=x,
            y=y,
            product=DigitVector(digits=result.product),
            padded_length=result.padded_length,
            recursive_calls=result.recursive_calls,
            base_case_calls=result.base_case_calls,
            max_depth=result.max_depth,
            parallel=result.parallel,
        )

    def to_contract(self) -> dict:
        """Представление для multiplication_result JSON Schema (числа строками)."""
        return {
            "x": str(self.x),
            "y": str(self.y),
            "product": str(self.product),
            "stats": {
                "padded_length": self.padded_length,
                "recursive_calls": self.recursive_calls,
                "base_case_calls": self.base_case_calls,
                "max_depth": self.max_depth,
                "parallel": self.parallel,
            },
        }


def multiply_vectors(
    x: DigitVector, y: DigitVector, engine: KaratsubaEngine | None = None
) -> MultiplicationRecord:
    """Умножение двух DigitVector с полной записью результата."""
    engine = engine or KaratsubaEngine()
    result = engine.evaluate(x.digits, y.digits)
    return MultiplicationRecord.from_result(x, y, result)


def _decimal_from_contract(value: str | list[int]) -> DigitVector:
    if isinstance(value, str):
        return DigitVector.from_str(value)
    return DigitVector(digits=tuple(value))


def multiply_request(data: dict) -> dict:
    """
    Обработка multiplication_request → multiplication_result.

    Оба контракта проверяются по JSON Schema.

    Raises:
        jsonschema.ValidationError: Если запрос не соответствует схеме
    """
    validate_multiplication_request(data)

    engine = KaratsubaEngine(KaratsubaConfig(parallel_top_level=data.get("parallel", False)))
    record = multiply_vectors(
        _decimal_from_contract(data["x"]), _decimal_from_contract(data["y"]), engine
    )

    result = record.to_contract()
    validate_multiplication_result(result)
    return result
