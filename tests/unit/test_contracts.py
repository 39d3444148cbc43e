"""
Tests for Range Contracts

Проверяет:
- JSON Schema контракты диапазонов (range_schema, record_schema)
- Валидность схем всех bounded типов (meta-validation)
- RangeContractValidator / RecordContractValidator
- Bounded типы как поля Pydantic моделей (валидация, сериализация,
  JSON Schema)
"""

import sys

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.fixwidth.contracts import (
    JSON_SCHEMA_DIALECT,
    RangeContractValidator,
    RecordContractValidator,
    SchemaRegistry,
    range_schema,
    record_schema,
    validate_range,
    validate_record,
)
from src.fixwidth.domain import (
    Biggest,
    Float,
    Float32,
    Float64,
    Int,
    Int8,
    Int64,
    Int128,
    Uint,
    Uint8,
    Uint16,
    Uint64,
)

ALL_TYPES = [Int, Int8, Int64, Int128, Uint, Uint8, Uint16, Uint64, Float, Float32, Float64, Biggest]


class Packet(BaseModel):
    """Модель с bounded полями."""

    port: Uint16
    delta: Int8
    ratio: Float32


# =============================================================================
# ТЕСТЫ СХЕМ
# =============================================================================


class TestRangeSchema:
    """range_schema и record_schema"""

    def test_integer_schema(self):
        assert range_schema(0, 255, integral=True) == {
            "type": "integer",
            "minimum": 0,
            "maximum": 255,
        }

    def test_open_bounds(self):
        assert range_schema(None, None, integral=False) == {"type": "number"}

    def test_title(self):
        assert range_schema(0, None, True, title="Uint")["title"] == "Uint"

    def test_record_schema(self):
        schema = record_schema({"b": {"type": "integer"}, "a": {"type": "number"}})

        assert schema["$schema"] == JSON_SCHEMA_DIALECT
        assert schema["required"] == ["a", "b"]
        assert schema["additionalProperties"] is False


class TestTypeSchemas:
    """json_schema() bounded типов"""

    @pytest.mark.parametrize("number_type", ALL_TYPES, ids=lambda t: t.__name__)
    def test_schema_is_valid(self, number_type):
        """Схема каждого типа проходит meta-validation"""
        Draft202012Validator.check_schema(number_type.json_schema())

    def test_integer_bounds(self):
        schema = Uint8.json_schema()
        assert schema["type"] == "integer"
        assert schema["minimum"] == 0
        assert schema["maximum"] == 255
        assert schema["title"] == "Uint8"

    def test_float_bounds(self):
        schema = Float64.json_schema()
        assert schema["type"] == "number"
        assert schema["maximum"] == sys.float_info.max

    def test_unbounded_types(self):
        assert "maximum" not in Int.json_schema()
        assert "minimum" not in Int.json_schema()
        assert Uint.json_schema()["minimum"] == 0
        assert "maximum" not in Biggest.json_schema()


# =============================================================================
# ТЕСТЫ ВАЛИДАТОРОВ
# =============================================================================


class TestSchemaRegistry:
    """SchemaRegistry"""

    def test_adds_dialect(self):
        registry = SchemaRegistry()
        assert registry.schema_for(Int8)["$schema"] == JSON_SCHEMA_DIALECT

    def test_cached(self):
        registry = SchemaRegistry()
        first = registry.schema_for(Uint64)

        assert Uint64 in registry
        assert registry.schema_for(Uint64) is first
        assert Int8 not in registry


class TestRangeContractValidator:
    """RangeContractValidator и validate_range"""

    def test_bounds(self):
        validator = RangeContractValidator(Int8)

        assert validator.is_valid(-128)
        assert validator.is_valid(127)
        assert not validator.is_valid(128)
        assert not validator.is_valid(-129)

    def test_text_rejected_by_schema(self):
        """Схема не разбирает текст, в отличие от конструктора"""
        assert not RangeContractValidator(Int8).is_valid("5")

    def test_float_type(self):
        validator = RangeContractValidator(Float32)

        assert validator.is_valid(1.5)
        assert not validator.is_valid(1e39)

    def test_iter_errors(self):
        errors = list(RangeContractValidator(Uint8).iter_errors(-1))
        assert len(errors) == 1
        assert errors[0].validator == "minimum"

    def test_validate_range(self):
        validate_range(255, Uint8)

        with pytest.raises(ValidationError):
            validate_range(256, Uint8)


class TestRecordContractValidator:
    """RecordContractValidator и validate_record"""

    FIELDS = {"port": Uint16, "delta": Int8}

    def test_valid_payload(self):
        validate_record({"port": 80, "delta": -5}, self.FIELDS)

    def test_out_of_range_field(self):
        with pytest.raises(ValidationError):
            validate_record({"port": 70000, "delta": 0}, self.FIELDS)

    def test_missing_field(self):
        assert not RecordContractValidator(self.FIELDS).is_valid({"port": 80})

    def test_extra_field(self):
        validator = RecordContractValidator(self.FIELDS)
        assert not validator.is_valid({"port": 80, "delta": 0, "extra": 1})

    def test_all_errors_reported(self):
        validator = RecordContractValidator(self.FIELDS)
        errors = list(validator.iter_errors({"port": -1, "delta": 500}))
        assert len(errors) == 2


# =============================================================================
# ТЕСТЫ PYDANTIC
# =============================================================================


class TestPydanticFields:
    """Bounded типы как поля BaseModel"""

    def test_valid_model(self):
        packet = Packet(port=80, delta=-5, ratio=0.5)

        assert type(packet.port) is Uint16
        assert packet.port == 80
        assert type(packet.delta) is Int8
        assert packet.ratio == 0.5

    def test_text_source(self):
        assert Packet(port="443", delta="1", ratio="0.25").port == 443

    def test_bounded_instance_passthrough(self):
        port = Uint16(8080)
        assert Packet(port=port, delta=0, ratio=0.5).port is port

    def test_out_of_range_is_validation_error(self):
        with pytest.raises(PydanticValidationError, match="Uint16 value must be <= 65535"):
            Packet(port=70000, delta=0, ratio=0.5)

    def test_wrong_kind_is_validation_error(self):
        with pytest.raises(PydanticValidationError):
            Packet(port=80, delta=1.5, ratio=0.5)
        with pytest.raises(PydanticValidationError):
            Packet(port=80, delta=1, ratio=1)

    def test_dump(self):
        packet = Packet(port=80, delta=-5, ratio=0.5)

        assert packet.model_dump() == {"port": 80, "delta": -5, "ratio": 0.5}
        assert type(packet.model_dump()["port"]) is int

    def test_json_round_trip(self):
        packet = Packet(port=80, delta=-5, ratio=0.5)
        restored = Packet.model_validate_json(packet.model_dump_json())

        assert restored == packet

    def test_model_json_schema(self):
        properties = Packet.model_json_schema()["properties"]

        assert properties["port"]["minimum"] == 0
        assert properties["port"]["maximum"] == 65535
        assert properties["delta"]["minimum"] == -128
        assert properties["ratio"]["type"] == "number"
