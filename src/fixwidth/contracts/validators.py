"""
Range Contract Validators

Валидация внешних данных (значения, dict payload-ы) против JSON Schema
контрактов диапазонов bounded типов. Использует библиотеку jsonschema
(Draft 2020-12).

Полезно для вызывающих, которые проверяют диапазоны сами, не создавая
экземпляры bounded типов (например, входящий JSON целиком).

ВАЖНО: JSON Schema не различает "3" и 3 так же, как конструкторы:
текст всегда отвергается схемой, а целочисленный float (3.0)
принимается как "integer".
"""

from typing import Any, Dict, Iterator, Mapping, Protocol

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.fixwidth.contracts.schemas import JSON_SCHEMA_DIALECT, record_schema


class NumberType(Protocol):
    """Тип с JSON Schema контрактом (любой bounded класс)."""

    __name__: str

    @classmethod
    def json_schema(cls) -> Dict[str, Any]: ...


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр JSON Schema контрактов bounded типов.

    Схемы строятся один раз на тип, проходят meta-validation
    и кэшируются.
    """

    def __init__(self):
        self._schemas: Dict[Any, Dict[str, Any]] = {}

    def schema_for(self, number_type: NumberType) -> Dict[str, Any]:
        """
        JSON Schema для bounded типа.

        Args:
            number_type: Bounded класс (Int8, Uint64, Float32, ...)

        Returns:
            Схема как dict (с $schema)

        Raises:
            ValueError: Если построенная схема невалидна
        """
        name = number_type.__name__

        if number_type in self._schemas:
            return self._schemas[number_type]

        schema = {"$schema": JSON_SCHEMA_DIALECT, **number_type.json_schema()}

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema for {name}: {e}")

        self._schemas[number_type] = schema
        return schema

    def __contains__(self, number_type: object) -> bool:
        return number_type in self._schemas


# Глобальный экземпляр реестра
_SCHEMA_REGISTRY = SchemaRegistry()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class RangeContractValidator:
    """
    Валидатор одного значения против контракта bounded типа.

    Examples:
        >>> from src.fixwidth import Uint8
        >>> RangeContractValidator(Uint8).is_valid(300)
        False
    """

    def __init__(self, number_type: NumberType):
        self.number_type = number_type
        self.schema = _SCHEMA_REGISTRY.schema_for(number_type)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, value: Any) -> None:
        """
        Raises:
            ValidationError: Если значение нарушает контракт
        """
        self.validator.validate(value)

    def is_valid(self, value: Any) -> bool:
        return self.validator.is_valid(value)

    def iter_errors(self, value: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(value)


class RecordContractValidator:
    """
    Валидатор dict payload-а: каждое поле — свой bounded тип.

    Все поля обязательны, лишние поля запрещены.
    """

    def __init__(self, fields: Mapping[str, NumberType]):
        """
        Args:
            fields: Имя поля → bounded класс
        """
        self.fields = dict(fields)
        self.schema = record_schema(
            {name: tp.json_schema() for name, tp in self.fields.items()}
        )
        Draft202012Validator.check_schema(self.schema)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если payload нарушает контракт
        """
        self.validator.validate(dict(data))

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self.validator.is_valid(dict(data))

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(dict(data))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_range(value: Any, number_type: NumberType) -> None:
    """
    Валидация значения против контракта bounded типа.

    Raises:
        ValidationError: Если значение нарушает контракт
    """
    RangeContractValidator(number_type).validate(value)


def validate_record(data: Mapping[str, Any], fields: Mapping[str, NumberType]) -> None:
    """
    Валидация dict payload-а.

    Raises:
        ValidationError: Если payload нарушает контракт
    """
    RecordContractValidator(fields).validate(data)
