"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (pattern/minimum/maximum)
- Интеграция с Pydantic моделями
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    MultiplicationRequestValidator,
    MultiplicationResultValidator,
    SchemaLoader,
    validate_multiplication_request,
    validate_multiplication_result,
)
from src.core.domain import DigitVector, multiply_vectors


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный multiplication_request."""
    return {"x": "1234", "y": [5, 6, 7, 8]}


@pytest.fixture
def valid_result():
    """Валидный multiplication_result."""
    return {
        "x": "99",
        "y": "99",
        "product": "9801",
        "stats": {
            "padded_length": 2,
            "recursive_calls": 7,
            "base_case_calls": 5,
            "max_depth": 2,
            "parallel": False,
        },
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize(
        "schema_name", ["multiplication_request", "multiplication_result"]
    )
    def test_schemas_are_valid(self, schema_name: str) -> None:
        schema = SchemaLoader().load_schema(schema_name)
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == schema_name

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("multiplication_request") is loader.load_schema(
            "multiplication_request"
        )

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "not-a-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# MULTIPLICATION REQUEST
# =============================================================================


class TestMultiplicationRequestContract:
    """Тесты multiplication_request контракта"""

    def test_valid(self, valid_request) -> None:
        validate_multiplication_request(valid_request)

    def test_with_parallel_flag(self, valid_request) -> None:
        valid_request["parallel"] = True
        assert MultiplicationRequestValidator().is_valid(valid_request)

    def test_missing_operand(self, valid_request) -> None:
        del valid_request["y"]
        with pytest.raises(ValidationError, match="'y' is a required property"):
            validate_multiplication_request(valid_request)

    @pytest.mark.parametrize(
        "operand", ["", "-1", "1.5", " 12", [], [10], [-1], [True], 42]
    )
    def test_invalid_operand(self, valid_request, operand) -> None:
        valid_request["x"] = operand
        assert not MultiplicationRequestValidator().is_valid(valid_request)

    def test_collects_all_errors(self) -> None:
        errors = list(MultiplicationRequestValidator().iter_errors({"x": 1, "y": "z"}))
        assert len(errors) == 2


# =============================================================================
# MULTIPLICATION RESULT
# =============================================================================


class TestMultiplicationResultContract:
    """Тесты multiplication_result контракта"""

    def test_valid(self, valid_result) -> None:
        validate_multiplication_result(valid_result)

    @pytest.mark.parametrize("product", ["007", "", "-1", "1e3"])
    def test_non_normalized_product_rejected(self, valid_result, product) -> None:
        valid_result["product"] = product
        with pytest.raises(ValidationError):
            validate_multiplication_result(valid_result)

    def test_zero_product_allowed(self, valid_result) -> None:
        valid_result["product"] = "0"
        validate_multiplication_result(valid_result)

    def test_missing_stats_field(self, valid_result) -> None:
        del valid_result["stats"]["max_depth"]
        assert not MultiplicationResultValidator().is_valid(valid_result)

    def test_pydantic_record_matches_contract(self) -> None:
        record = multiply_vectors(
            DigitVector.from_str("12345678901234567890"), DigitVector.from_int(987654321)
        )
        validate_multiplication_result(record.to_contract())
