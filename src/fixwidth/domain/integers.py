"""
Bounded Integers — знаковые и беззнаковые целые фиксированной разрядности

Типы:
- Int8, Int16, Int32, Int64, Int128   (signed)
- Uint8, Uint16, Uint32, Uint64, Uint128 (unsigned)
- Int, Uint — обобщённые контейнеры без разрядности
  (Int без границ, Uint только value >= 0)
- Long — автоматический выбор Int32 или Int64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. MIN_VALUE <= value <= MAX_VALUE для каждого живого экземпляра
2. is_valid(v) == True тогда и только тогда, когда конструктор принимает v
3. Арифметика возвращает НОВЫЙ экземпляр того же типа, получатель не меняется
4. Переполнение → BelowMinimum / AboveMaximum, никогда не wraparound
5. Деление на ноль → DivisionByZero

Все разрядности реализованы одним обобщённым движком (BoundedInteger),
конкретный класс задаёт только width и signed:

    class Int8(Int, width=8): ...
"""

import abc
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, Union

from src.fixwidth.domain.errors import (
    AboveMaximum,
    BelowMinimum,
    DivisionByZero,
    InvalidNumber,
    OutOfRange,
)
from src.fixwidth.domain.sources import BoundedValue, to_integer
from src.fixwidth.math.bigmath import big_abs, big_pow, big_sign, big_trunc_div
from src.fixwidth.math.bounds import (
    MAX_INT_128,
    MIN_INT_128,
    INTEGER_WIDTHS,
    integer_bounds,
    normalize_width,
)

# (width, signed) → конкретный класс
_INTEGER_TYPES: Dict[Tuple[int, bool], Type["BoundedInteger"]] = {}


# =============================================================================
# ОБОБЩЁННЫЙ ДВИЖОК
# =============================================================================


class BoundedInteger(BoundedValue):
    """
    Целое с диапазоном, заданным разрядностью и знаковостью.

    Конкретные типы объявляются через аргументы класса:
    signed= задаёт знаковость семейства (Int/Uint),
    width= задаёт разрядность и вычисляет MIN_VALUE/MAX_VALUE
    по таблице bounds.
    """

    __slots__ = ()

    WIDTH: ClassVar[Optional[int]] = None
    SIGNED: ClassVar[bool] = True
    MIN_VALUE: ClassVar[Optional[int]] = None
    MAX_VALUE: ClassVar[Optional[int]] = None

    def __init_subclass__(
        cls,
        width: Optional[int] = None,
        signed: Optional[bool] = None,
        **kwargs: Any,
    ):
        super().__init_subclass__(**kwargs)

        if signed is not None:
            cls.SIGNED = signed
            cls.WIDTH = None
            cls.MIN_VALUE = None if signed else 0
            cls.MAX_VALUE = None

        if width is not None:
            cls.WIDTH = width
            cls.MIN_VALUE, cls.MAX_VALUE = integer_bounds(width, cls.SIGNED)
            _INTEGER_TYPES.setdefault((width, cls.SIGNED), cls)

    def __init__(self, value: object):
        """
        Args:
            value: Текст, int, целый float или другое bounded значение

        Raises:
            NotAnInteger: Значение не целое число
            ReceivedFloat: Значение дробное
            BelowMinimum: value < MIN_VALUE
            AboveMaximum: value > MAX_VALUE
        """
        self._value = self._check_range(
            to_integer(value, self.type_name(), self.MIN_VALUE, self.MAX_VALUE)
        )

    @classmethod
    def _check_range(cls, value: int) -> int:
        if cls.MIN_VALUE is not None and value < cls.MIN_VALUE:
            raise BelowMinimum(
                f"{cls.__name__} value must be >= {cls.MIN_VALUE}, got {value}",
                value=value,
                bound=cls.MIN_VALUE,
                type_name=cls.__name__,
            )

        if cls.MAX_VALUE is not None and value > cls.MAX_VALUE:
            raise AboveMaximum(
                f"{cls.__name__} value must be <= {cls.MAX_VALUE}, got {value}",
                value=value,
                bound=cls.MAX_VALUE,
                type_name=cls.__name__,
            )

        return value

    # -------------------------------------------------------------------------
    # Классификация и диспетчеризация
    # -------------------------------------------------------------------------

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """
        Проверка без exception: примет ли конструктор значение.

        Реализована через сам конструктор, поэтому предикат
        и конструктор не могут разойтись.
        """
        try:
            cls(value)
        except InvalidNumber:
            return False
        return True

    @classmethod
    def from_value(cls, value: object, width: Union[int, str, None] = None) -> "BoundedInteger":
        """
        Диспетчер по разрядности.

        Args:
            value: Входное значение
            width: Разрядность (8/16/32/64/128 или "8", ...);
                None — разрядность класса, для Int/Uint — обобщённый тип

        Examples:
            >>> Int.from_value(5, "8")
            Int8(5)
            >>> Int.from_value(10**40)
            Int(10000000000000000000000000000000000000000)
        """
        if width is None:
            return cls(value)
        return integer_type(width, cls.SIGNED)(value)

    @classmethod
    def from_words(
        cls,
        high: object,
        low: object,
        width: Union[int, str, None] = None,
        *,
        engine: Any = None,
    ) -> BoundedValue:
        """
        Composite конструктор: (high << width) + low.

        Знаковость берётся из класса, width по умолчанию — разрядность
        класса (или default_width движка для Int/Uint). Результат может
        оказаться шире класса (promotion) или Biggest.

        Args:
            high: Старшее слово (hex-текст, int, bounded)
            low: Младшее слово
            width: Целевая разрядность (сдвиг)
            engine: CompositeEngine (default: общий движок модуля)
        """
        from src.fixwidth.domain.composite import compose

        return compose(
            high,
            low,
            width if width is not None else cls.WIDTH,
            signed=cls.SIGNED,
            engine=engine,
        )

    @property
    def exceeds_fixed_width(self) -> bool:
        """Вышло бы значение за диапазон Int128 (предикат Biggest)."""
        return self._value > MAX_INT_128 or self._value < MIN_INT_128

    # -------------------------------------------------------------------------
    # Арифметика (value semantics)
    # -------------------------------------------------------------------------

    def _operand(self, other: object) -> int:
        return to_integer(other, self.type_name())

    def _derive(self, value: int) -> "BoundedInteger":
        return type(self)(value)

    def add(self, other: object) -> "BoundedInteger":
        """Сумма, перепроверенная по диапазону типа."""
        return self._derive(self._value + self._operand(other))

    def subtract(self, other: object) -> "BoundedInteger":
        """Разность, перепроверенная по диапазону типа."""
        return self._derive(self._value - self._operand(other))

    def multiply(self, other: object) -> "BoundedInteger":
        """Произведение, перепроверенное по диапазону типа."""
        return self._derive(self._value * self._operand(other))

    def divide(self, other: object) -> "BoundedInteger":
        """
        Целочисленное деление с округлением к нулю.

        Raises:
            DivisionByZero: Если делитель равен 0
            AboveMaximum: MIN_VALUE / -1 для знаковых типов
        """
        divisor = self._operand(other)

        if divisor == 0:
            raise DivisionByZero(
                f"{self.type_name()} division by zero: {self._value} / 0",
                value=self._value,
                type_name=self.type_name(),
            )

        return self._derive(big_trunc_div(self._value, divisor))

    def power(self, exp: object) -> "BoundedInteger":
        """
        Возведение в степень с проверкой диапазона.

        Raises:
            ValueError: Если exp < 0
            AboveMaximum / BelowMinimum: Результат вне диапазона
        """
        exponent = self._operand(exp)

        # |base| >= 2, exp >= WIDTH: |результат| >= 2^WIDTH, степень не вычисляется
        if self.WIDTH is not None and abs(self._value) >= 2 and exponent >= self.WIDTH:
            name = self.type_name()
            if self._value < 0 and exponent % 2 == 1:
                raise BelowMinimum(
                    f"{name} value must be >= {self.MIN_VALUE}, got {self._value}**{exponent}",
                    value=f"{self._value}**{exponent}",
                    bound=self.MIN_VALUE,
                    type_name=name,
                )
            raise AboveMaximum(
                f"{name} value must be <= {self.MAX_VALUE}, got {self._value}**{exponent}",
                value=f"{self._value}**{exponent}",
                bound=self.MAX_VALUE,
                type_name=name,
            )

        return self._derive(big_pow(self._value, exponent))

    def absolute_value(self) -> "BoundedInteger":
        """abs(value); для MIN_VALUE знакового типа → AboveMaximum."""
        return self._derive(big_abs(self._value))

    def sign(self) -> int:
        """Знак значения: -1, 0 или 1."""
        return big_sign(self._value)

    # -------------------------------------------------------------------------
    # Протокол чисел Python
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __add__(self, other: object) -> "BoundedInteger":
        if not _is_int_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "BoundedInteger":
        if not _is_int_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "BoundedInteger":
        if not _is_int_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "BoundedInteger":
        if not _is_int_operand(other):
            return NotImplemented
        return self._derive(self._operand(other) - self._value)

    def __mul__(self, other: object) -> "BoundedInteger":
        if not _is_int_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> "BoundedInteger":
        if not _is_int_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> "BoundedInteger":
        return self._derive(-self._value)

    def __abs__(self) -> "BoundedInteger":
        return self.absolute_value()


def _is_int_operand(other: object) -> bool:
    if isinstance(other, bool):
        return False
    return isinstance(other, (int, BoundedInteger))


def integer_type(width: Union[int, str], signed: bool = True) -> Type[BoundedInteger]:
    """
    Конкретный класс по разрядности и знаковости.

    Raises:
        ValueError: Если разрядность не поддерживается

    Examples:
        >>> integer_type(16, signed=False)
        <class 'src.fixwidth.domain.integers.Uint16'>
    """
    return _INTEGER_TYPES[(normalize_width(width, INTEGER_WIDTHS), signed)]


# =============================================================================
# SIGNED
# =============================================================================


class Int(BoundedInteger, signed=True):
    """Знаковое целое без ограничения разрядности."""

    __slots__ = ()


class Int8(Int, width=8):
    __slots__ = ()


class Int16(Int, width=16):
    __slots__ = ()


class Int32(Int, width=32):
    __slots__ = ()


class Int64(Int, width=64):
    __slots__ = ()


class Int128(Int, width=128):
    __slots__ = ()


# =============================================================================
# UNSIGNED
# =============================================================================


class Uint(BoundedInteger, signed=False):
    """Беззнаковое целое без ограничения разрядности (только value >= 0)."""

    __slots__ = ()


class Uint8(Uint, width=8):
    __slots__ = ()


class Uint16(Uint, width=16):
    __slots__ = ()


class Uint32(Uint, width=32):
    __slots__ = ()


class Uint64(Uint, width=64):
    __slots__ = ()


class Uint128(Uint, width=128):
    __slots__ = ()


# =============================================================================
# LONG
# =============================================================================


class Long(abc.ABC):
    """
    Long — Int32, если значение помещается, иначе Int64.

    Long(v) возвращает экземпляр Int32 или Int64 (не Long);
    isinstance(x, Long) истинно для обоих.

    Raises:
        BelowMinimum / AboveMaximum: Значение вне Int64 (используйте Biggest)
    """

    def __new__(cls, value: object) -> BoundedInteger:  # type: ignore[misc]
        try:
            return Int32(value)
        except OutOfRange:
            return Int64(value)

    @staticmethod
    def is_long(value: object) -> bool:
        return Int32.is_valid(value) or Int64.is_valid(value)

    @staticmethod
    def from_value(value: object) -> BoundedInteger:
        return Long(value)


Long.register(Int32)
Long.register(Int64)


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_int(value: object) -> bool:
    """Целое ли значение (любой величины)."""
    return Int.is_valid(value)


def is_uint(value: object) -> bool:
    """Неотрицательное ли целое значение (любой величины)."""
    return Uint.is_valid(value)


def is_int8(value: object) -> bool:
    return Int8.is_valid(value)


def is_int16(value: object) -> bool:
    return Int16.is_valid(value)


def is_int32(value: object) -> bool:
    return Int32.is_valid(value)


def is_int64(value: object) -> bool:
    return Int64.is_valid(value)


def is_int128(value: object) -> bool:
    return Int128.is_valid(value)


def is_uint8(value: object) -> bool:
    return Uint8.is_valid(value)


def is_uint16(value: object) -> bool:
    return Uint16.is_valid(value)


def is_uint32(value: object) -> bool:
    return Uint32.is_valid(value)


def is_uint64(value: object) -> bool:
    return Uint64.is_valid(value)


def is_uint128(value: object) -> bool:
    return Uint128.is_valid(value)


def is_long(value: object) -> bool:
    """Помещается ли значение в Long (Int32 или Int64)."""
    return Long.is_long(value)


# Синонимы разрядностей
is_long_long = is_int64
is_bigger = is_int128
