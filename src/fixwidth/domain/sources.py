"""
Sources — приведение входных значений к канонической форме

Входы bounded конструкторов разнородны: текст, int, float, другой
bounded экземпляр. Тип входа определяется ОДИН раз на границе
(classify → NumericSource), дальше логика работает с одним
каноническим представлением:
- to_integer → int
- to_real → float
- resolve_word → int (слово composite-пары, hex-текст)

Также здесь определён BoundedValue — общая база Int/Uint/Float/Biggest
(сравнение, хеширование, pydantic/JSON Schema хуки).
"""

import functools
import math
import numbers
import operator
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, ClassVar, Dict, Final, Optional, Type

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.fixwidth.contracts.schemas import range_schema
from src.fixwidth.domain.errors import (
    AboveMaximum,
    BelowMinimum,
    InvalidNumber,
    NotAnInteger,
    NotANumber,
    ReceivedFloat,
)
from src.fixwidth.math.bounds import MAX_INTEGER_TEXT_DIGITS

# Маркер hex-строки для слов composite-пары: "#ff00"
HEX_MARKER: Final[str] = "#"


# =============================================================================
# BOUNDED VALUE (общая база)
# =============================================================================


@functools.total_ordering
class BoundedValue:
    """
    База всех bounded значений.

    Хранит одно значение (int или float) и не даёт его изменить:
    все операции возвращают новый экземпляр.
    """

    __slots__ = ("_value",)

    # Целочисленный ли тип (для JSON Schema: "integer" vs "number")
    INTEGRAL: ClassVar[bool] = True
    MIN_VALUE: ClassVar[Optional[Any]] = None
    MAX_VALUE: ClassVar[Optional[Any]] = None

    _value: Any

    @property
    def value(self) -> Any:
        """Хранимое значение (int или float)."""
        return self._value

    def parse(self) -> Any:
        """Значение как нативное число Python."""
        return self._value

    @classmethod
    def type_name(cls) -> str:
        return cls.__name__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __format__(self, format_spec: str) -> str:
        """
        Форматирование как у нативного числа.

        Examples:
            >>> f"{Float64('3.75'):.1f}"
            '3.8'
            >>> f"{Uint16(48879):#x}"
            '0xbeef'
        """
        return format(self._value, format_spec)

    def __eq__(self, other: object) -> bool:
        other_value = _comparable(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self._value == other_value

    def __lt__(self, other: object) -> bool:
        other_value = _comparable(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self._value < other_value

    # -------------------------------------------------------------------------
    # Контракты (JSON Schema / pydantic)
    # -------------------------------------------------------------------------

    @classmethod
    def json_schema(cls) -> Dict[str, Any]:
        """JSON Schema контракт диапазона этого типа."""
        return range_schema(cls.MIN_VALUE, cls.MAX_VALUE, cls.INTEGRAL, title=cls.__name__)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate_field,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_value, info_arg=False
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return cls.json_schema()

    @classmethod
    def _validate_field(cls, value: Any) -> "BoundedValue":
        if type(value) is cls:
            return value
        return cls(value)


def _serialize_value(value: "BoundedValue") -> Any:
    return value.parse()


def _comparable(other: object) -> Any:
    if isinstance(other, BoundedValue):
        return other._value
    if isinstance(other, bool):
        return NotImplemented
    if isinstance(other, (int, float)):
        return other
    return NotImplemented


# =============================================================================
# NUMERIC SOURCE (tagged variant)
# =============================================================================


class SourceKind(str, Enum):
    """Вид входного значения."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOUNDED = "bounded"


@dataclass(frozen=True)
class NumericSource:
    """
    Входное значение после классификации.

    raw — нативное значение: str для TEXT, int для INTEGER, float для FLOAT,
    развёрнутое значение (int или float) для BOUNDED.
    """

    kind: SourceKind
    raw: Any


def classify(
    value: object,
    type_name: str = "value",
    error: Type[InvalidNumber] = NotANumber,
) -> NumericSource:
    """
    Классификация входного значения.

    Args:
        value: Входное значение
        type_name: Имя целевого типа (для сообщения об ошибке)
        error: Класс ошибки для неподдерживаемого типа

    Returns:
        NumericSource

    Raises:
        error: Если тип значения не поддерживается (включая bool)
    """
    if isinstance(value, BoundedValue):
        return NumericSource(SourceKind.BOUNDED, value.parse())

    if isinstance(value, bool):
        raise error(
            f"{type_name} does not accept bool, got {value!r}",
            value=value,
            type_name=type_name,
        )

    if isinstance(value, str):
        return NumericSource(SourceKind.TEXT, value)

    if isinstance(value, float):
        return NumericSource(SourceKind.FLOAT, value)

    if isinstance(value, numbers.Integral):
        return NumericSource(SourceKind.INTEGER, operator.index(value))

    raise error(
        f"{type_name} expects a numeric string, int, float or bounded value, "
        f"got {type(value).__name__}",
        value=value,
        type_name=type_name,
    )


def to_integer(
    value: object,
    type_name: str = "value",
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """
    Приведение входного значения к int.

    Args:
        value: Текст, int, целый float или bounded значение
        type_name: Имя целевого типа (для сообщения об ошибке)
        minimum, maximum: Диапазон типа; текст с экспонентой
            ("1e999999999") проверяется по нему до построения int

    Returns:
        Значение как int

    Raises:
        NotAnInteger: Если значение не число или не конечно
        ReceivedFloat: Если значение дробное ("3.5", 3.5)
        BelowMinimum / AboveMaximum: Текст вне [minimum, maximum]
            или длиннее MAX_INTEGER_TEXT_DIGITS цифр

    Examples:
        >>> to_integer("42")
        42
        >>> to_integer(" 1e3 ")
        1000
        >>> to_integer(7.0)
        7
    """
    source = classify(value, type_name, error=NotAnInteger)

    if source.kind is SourceKind.TEXT:
        return _parse_integer_text(source.raw, type_name, minimum, maximum)

    if isinstance(source.raw, float):
        return _integral_float(source.raw, value, type_name)

    return source.raw


def to_real(value: object, type_name: str = "value") -> float:
    """
    Приведение входного значения к float.

    int, не помещающийся во float, превращается в ±inf: проверку
    диапазона делает вызывающий тип.

    Raises:
        NotANumber: Если значение не число
    """
    source = classify(value, type_name)

    if source.kind is SourceKind.TEXT:
        try:
            return float(source.raw.strip())
        except ValueError:
            raise NotANumber(
                f"{type_name} expects a numeric string, got {source.raw!r}",
                value=value,
                type_name=type_name,
            ) from None

    if isinstance(source.raw, float):
        return source.raw

    try:
        return float(source.raw)
    except OverflowError:
        return math.inf if source.raw > 0 else -math.inf


def _integral_float(number: float, value: object, type_name: str) -> int:
    if not math.isfinite(number):
        raise NotAnInteger(
            f"{type_name} must be a finite integer, got {number}",
            value=value,
            type_name=type_name,
        )

    if not number.is_integer():
        raise ReceivedFloat(
            f"{type_name} received a float, not an integer: {number}",
            value=value,
            type_name=type_name,
        )

    return int(number)


def _parse_integer_text(
    text: str,
    type_name: str,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    stripped = text.strip()

    # int() отвергает текст длиннее sys.int_info.default_max_str_digits,
    # такой текст идёт через Decimal с проверкой диапазона
    try:
        return int(stripped)
    except ValueError:
        pass

    # "1e3", "3.0", "3.5": точный разбор через Decimal, без потерь double
    try:
        number = Decimal(stripped)
    except InvalidOperation:
        raise NotAnInteger(
            f"{type_name} expects an integer string, got {text!r}",
            value=text,
            type_name=type_name,
        ) from None

    if not number.is_finite():
        raise NotAnInteger(
            f"{type_name} must be a finite integer, got {text!r}",
            value=text,
            type_name=type_name,
        )

    if number != number.to_integral_value():
        raise ReceivedFloat(
            f"{type_name} received a float, not an integer: {text!r}",
            value=text,
            type_name=type_name,
        )

    # Диапазон проверяется до int(): "1e999999999" не материализуется
    if minimum is not None and number < minimum:
        raise BelowMinimum(
            f"{type_name} value must be >= {minimum}, got {text!r}",
            value=text,
            bound=minimum,
            type_name=type_name,
        )

    if maximum is not None and number > maximum:
        raise AboveMaximum(
            f"{type_name} value must be <= {maximum}, got {text!r}",
            value=text,
            bound=maximum,
            type_name=type_name,
        )

    if not number.is_zero() and number.adjusted() >= MAX_INTEGER_TEXT_DIGITS:
        error = AboveMaximum if number > 0 else BelowMinimum
        raise error(
            f"{type_name} text value must have at most "
            f"{MAX_INTEGER_TEXT_DIGITS} digits, got {text!r}",
            value=text,
            type_name=type_name,
        )

    return int(number)


# =============================================================================
# COMPOSITE WORDS
# =============================================================================


def resolve_word(word: object, type_name: str = "composite") -> int:
    """
    Приведение слова composite-пары (high или low) к int.

    Текст трактуется как hex, маркер '#' необязателен: "#ff", "ff", "0xff".

    Raises:
        NotAnInteger: Если текст не hex или значение не целое
        ReceivedFloat: Если значение дробное

    Examples:
        >>> resolve_word("#ff")
        255
        >>> resolve_word(16)
        16
    """
    if isinstance(word, str):
        text = word.strip()
        if text.startswith(HEX_MARKER):
            text = text[len(HEX_MARKER):]
        try:
            return int(text, 16)
        except ValueError:
            raise NotAnInteger(
                f"{type_name} word must be a hexadecimal string, got {word!r}",
                value=word,
                type_name=type_name,
            ) from None

    return to_integer(word, type_name)


def combine_words(high: int, low: int, shift: int) -> int:
    """
    Сборка значения из пары слов: (high << shift) + low.

    Raises:
        ValueError: Если shift < 0
    """
    if shift < 0:
        raise ValueError(f"shift must be non-negative, got {shift}")

    return (high << shift) + low
