"""
Bounded Floats — float с фиксированным диапазоном

Типы:
- Float32: [-3.4e38, 3.4e38]
- Float64: [-sys.float_info.max, sys.float_info.max]
- Float: любой конечный float

Значение хранится как float (double) Python для всех разрядностей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение конечно (не NaN, не Inf) и в диапазоне разрядности
2. Конструктор отвергает целые значения (ReceivedInteger), кроме
   |value| > MAX_SAFE_INTEGER — такие принимаются как float
3. Результаты арифметики проверяются только на конечность и диапазон:
   1.5 + 1.5 = 3.0 допустимо
4. trunc()/ceil() возвращают обобщённый Int, не конкретную разрядность
"""

import math
from typing import ClassVar, Dict, Optional, Type, Union

from src.fixwidth.domain.errors import (
    AboveMaximum,
    BelowMinimum,
    DivisionByZero,
    InvalidNumber,
    NotANumber,
    ReceivedInteger,
)
from src.fixwidth.domain.integers import Int
from src.fixwidth.domain.sources import BoundedValue, to_real
from src.fixwidth.math.bounds import (
    FLOAT_WIDTHS,
    MAX_FLOAT_64,
    MAX_SAFE_INTEGER,
    MIN_FLOAT_64,
    float_bounds,
    normalize_width,
)

_FLOAT_TYPES: Dict[int, Type["BoundedFloat"]] = {}


# =============================================================================
# ОБОБЩЁННЫЙ ДВИЖОК
# =============================================================================


class BoundedFloat(BoundedValue):
    """Float с диапазоном, заданным разрядностью."""

    __slots__ = ()

    INTEGRAL: ClassVar[bool] = False
    WIDTH: ClassVar[Optional[int]] = None
    MIN_VALUE: ClassVar[Optional[float]] = None
    MAX_VALUE: ClassVar[Optional[float]] = None

    def __init_subclass__(cls, width: Optional[int] = None, **kwargs):
        super().__init_subclass__(**kwargs)

        if width is not None:
            cls.WIDTH = width
            cls.MIN_VALUE, cls.MAX_VALUE = float_bounds(width)
            _FLOAT_TYPES.setdefault(width, cls)

    def __init__(self, value: object):
        """
        Args:
            value: Текст, float, int (> MAX_SAFE_INTEGER) или bounded значение

        Raises:
            NotANumber: Не число, NaN или Inf
            ReceivedInteger: Целое значение в пределах MAX_SAFE_INTEGER
            BelowMinimum / AboveMaximum: Вне диапазона разрядности
        """
        number = to_real(value, self.type_name())

        # ±inf как значение ("inf", float("inf")) невалиден; конечное число вне
        # double ("1e400", 10**400) превращается в ±inf и проверяется как диапазон
        if math.isnan(number) or (math.isinf(number) and _is_infinity_literal(value)):
            raise NotANumber(
                f"{self.type_name()} must be a finite float, got {value!r}",
                value=value,
                type_name=self.type_name(),
            )

        if number.is_integer() and abs(number) <= MAX_SAFE_INTEGER:
            raise ReceivedInteger(
                f"{self.type_name()} received an integer, not a float: {value!r}",
                value=value,
                type_name=self.type_name(),
            )

        self._value = self._check_range(number, value)

    @classmethod
    def _check_range(cls, number: float, value: object) -> float:
        # Float без разрядности ограничен конечными double
        minimum = cls.MIN_VALUE if cls.MIN_VALUE is not None else MIN_FLOAT_64
        maximum = cls.MAX_VALUE if cls.MAX_VALUE is not None else MAX_FLOAT_64

        if number < minimum:
            raise BelowMinimum(
                f"{cls.__name__} value must be >= {minimum}, got {value!r}",
                value=value,
                bound=minimum,
                type_name=cls.__name__,
            )

        if number > maximum:
            raise AboveMaximum(
                f"{cls.__name__} value must be <= {maximum}, got {value!r}",
                value=value,
                bound=maximum,
                type_name=cls.__name__,
            )

        return number

    @classmethod
    def _from_result(cls, number: float) -> "BoundedFloat":
        """Экземпляр из результата арифметики (без проверки на целое)."""
        if math.isnan(number):
            raise NotANumber(
                f"{cls.__name__} arithmetic produced NaN",
                value=number,
                type_name=cls.__name__,
            )

        instance = cls.__new__(cls)
        instance._value = cls._check_range(number, number)
        return instance

    # -------------------------------------------------------------------------
    # Классификация и диспетчеризация
    # -------------------------------------------------------------------------

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Примет ли конструктор значение (без exception)."""
        try:
            cls(value)
        except InvalidNumber:
            return False
        return True

    @classmethod
    def from_value(cls, value: object, width: Union[int, str, None] = None) -> "BoundedFloat":
        """
        Диспетчер по разрядности: "32", "64", "double" или None.

        Examples:
            >>> Float.from_value("2.5", "double")
            Float64(2.5)
        """
        if width is None:
            return cls(value)
        return float_type(width)(value)

    # -------------------------------------------------------------------------
    # Арифметика (value semantics)
    # -------------------------------------------------------------------------

    def _operand(self, other: object) -> float:
        return to_real(other, self.type_name())

    def add(self, other: object) -> "BoundedFloat":
        return self._from_result(self._value + self._operand(other))

    def subtract(self, other: object) -> "BoundedFloat":
        return self._from_result(self._value - self._operand(other))

    def multiply(self, other: object) -> "BoundedFloat":
        return self._from_result(self._value * self._operand(other))

    def divide(self, other: object) -> "BoundedFloat":
        """
        Деление.

        Raises:
            DivisionByZero: Если делитель равен 0
        """
        divisor = self._operand(other)

        if divisor == 0:
            raise DivisionByZero(
                f"{self.type_name()} division by zero: {self._value} / 0",
                value=self._value,
                type_name=self.type_name(),
            )

        return self._from_result(self._value / divisor)

    # -------------------------------------------------------------------------
    # Дробная часть и округление
    # -------------------------------------------------------------------------

    def fract(self) -> "BoundedFloat":
        """
        Дробная часть: value - floor(value), того же типа.

        Examples:
            >>> Float64("3.75").fract()
            Float64(0.75)
            >>> Float64("-3.25").fract()
            Float64(0.75)
        """
        return self._from_result(self._value - math.floor(self._value))

    def trunc(self) -> Int:
        """Отбрасывание дробной части → обобщённый Int."""
        return Int.from_value(math.trunc(self._value))

    def ceil(self) -> Int:
        """Округление вверх → обобщённый Int."""
        return Int.from_value(math.ceil(self._value))

    # -------------------------------------------------------------------------
    # Протокол чисел Python
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BoundedFloat":
        if not _is_real_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "BoundedFloat":
        if not _is_real_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "BoundedFloat":
        if not _is_real_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "BoundedFloat":
        if not _is_real_operand(other):
            return NotImplemented
        return self._from_result(self._operand(other) - self._value)

    def __mul__(self, other: object) -> "BoundedFloat":
        if not _is_real_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> "BoundedFloat":
        if not _is_real_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "BoundedFloat":
        if not _is_real_operand(other):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "BoundedFloat":
        return self._from_result(-self._value)

    def __abs__(self) -> "BoundedFloat":
        return self._from_result(abs(self._value))


def _is_infinity_literal(value: object) -> bool:
    if isinstance(value, float):
        return math.isinf(value)
    if isinstance(value, str):
        return value.strip().lstrip("+-").lower() in ("inf", "infinity")
    return False


def _is_real_operand(other: object) -> bool:
    if isinstance(other, bool):
        return False
    return isinstance(other, (int, float, BoundedValue))


def float_type(width: Union[int, str]) -> Type[BoundedFloat]:
    """
    Класс float по разрядности (32, 64, "double").

    Raises:
        ValueError: Если разрядность не поддерживается
    """
    return _FLOAT_TYPES[normalize_width(width, FLOAT_WIDTHS)]


# =============================================================================
# ТИПЫ
# =============================================================================


class Float(BoundedFloat):
    """Любой конечный float без ограничения разрядности."""

    __slots__ = ()


class Float32(Float, width=32):
    __slots__ = ()


class Float64(Float, width=64):
    __slots__ = ()


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_float(value: object, width: Union[int, str, None] = None) -> bool:
    """
    Является ли значение float (и помещается ли в разрядность).

    Истинно, если значение конечно, не целое (или |value| > MAX_SAFE_INTEGER)
    и, при заданной width, в диапазоне разрядности.

    Examples:
        >>> is_float(3.14)
        True
        >>> is_float(3)
        False
    """
    if width is None:
        return Float.is_valid(value)
    return float_type(width).is_valid(value)


def is_float32(value: object) -> bool:
    return Float32.is_valid(value)


def is_float64(value: object) -> bool:
    return Float64.is_valid(value)


is_double = is_float64
