"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и диапазонов limbs
- Интеграция с BigInteger / Rational.to_dict
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from exactarith import BigInteger, Rational
from exactarith.core.contracts import (
    BigIntegerValidator,
    RationalValidator,
    SchemaLoader,
    validate_big_integer,
    validate_rational,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_big_integer():
    """Валидный big_integer."""
    return {"negative": True, "limbs": [6789, 2345, 1]}


@pytest.fixture
def valid_rational():
    """Валидный rational (-5/6)."""
    return {
        "numerator": {"negative": True, "limbs": [5]},
        "denominator": {"negative": False, "limbs": [6]},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    @pytest.mark.parametrize("schema_name", ["big_integer", "rational"])
    def test_schemas_are_valid(self, schema_name: str) -> None:
        schema = SchemaLoader().load_schema(schema_name)
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == schema_name

    def test_cache_returns_same_object(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("rational") is loader.load_schema("rational")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_file(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# BIG INTEGER CONTRACT
# =============================================================================


class TestBigIntegerContract:
    """Контракт big_integer"""

    def test_valid(self, valid_big_integer) -> None:
        validate_big_integer(valid_big_integer)
        assert BigIntegerValidator().is_valid(valid_big_integer)

    def test_to_dict_is_valid(self) -> None:
        validate_big_integer(BigInteger("-98765432109876543210").to_dict())

    @pytest.mark.parametrize("field", ["negative", "limbs"])
    def test_missing_required(self, valid_big_integer, field: str) -> None:
        del valid_big_integer[field]
        with pytest.raises(ValidationError):
            validate_big_integer(valid_big_integer)

    @pytest.mark.parametrize("limbs", [[], [10000], [-1], [1.5], ["1"], [True]])
    def test_bad_limbs(self, valid_big_integer, limbs) -> None:
        valid_big_integer["limbs"] = limbs
        assert not BigIntegerValidator().is_valid(valid_big_integer)

    def test_extra_property_rejected(self, valid_big_integer) -> None:
        valid_big_integer["base"] = 10000
        with pytest.raises(ValidationError):
            validate_big_integer(valid_big_integer)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(BigIntegerValidator().iter_errors({"negative": "yes", "limbs": [10000, -1]}))
        assert len(errors) == 3


# =============================================================================
# RATIONAL CONTRACT
# =============================================================================


class TestRationalContract:
    """Контракт rational"""

    def test_valid(self, valid_rational) -> None:
        validate_rational(valid_rational)
        assert RationalValidator().is_valid(valid_rational)

    def test_to_dict_is_valid(self) -> None:
        validate_rational(Rational(-10, 4).to_dict())

    def test_negative_denominator_rejected(self, valid_rational) -> None:
        valid_rational["denominator"]["negative"] = True
        with pytest.raises(ValidationError):
            validate_rational(valid_rational)

    def test_missing_denominator(self, valid_rational) -> None:
        del valid_rational["denominator"]
        with pytest.raises(ValidationError):
            validate_rational(valid_rational)

    def test_nested_limb_range(self, valid_rational) -> None:
        valid_rational["numerator"]["limbs"] = [12345]
        assert not RationalValidator().is_valid(valid_rational)
