"""
Biggest — контейнер без верхней границы

Единственный тип без валидации диапазона: хранит значения, которые
иерархия фиксированных разрядностей удержать не может. Вместо ошибки
сообщает о выходе за фиксированные разрядности предикатом
exceeds_fixed_width.

Вызывающий код, которому нужна фиксированная разрядность, проверяет
предикат сам или вызывает require_fixed_width() / narrow().
"""

import operator
from typing import Union

from src.fixwidth.domain.errors import (
    DivisionByZero,
    InvalidNumber,
    OutOfRange,
    Unrepresentable,
)
from src.fixwidth.domain.integers import BoundedInteger, Int128, Uint128, integer_type
from src.fixwidth.domain.sources import BoundedValue, combine_words, resolve_word, to_integer
from src.fixwidth.math.bigmath import big_pow, big_sign, big_trunc_div
from src.fixwidth.math.bounds import INTEGER_WIDTHS, MAX_INT_128, MIN_INT_128, normalize_width

# Сдвиг по умолчанию для Biggest.from_words
BIGGEST_DEFAULT_SHIFT = 128


class Biggest(BoundedValue):
    """
    Целое произвольной величины.

    Арифметика возвращает новые экземпляры Biggest и никогда
    не перепроверяет диапазон (его нет). Деление на ноль всё равно
    запрещено.
    """

    __slots__ = ()

    def __init__(self, value: object):
        """
        Raises:
            NotAnInteger / ReceivedFloat: Значение не целое
        """
        self._value = to_integer(value, self.type_name())

    @classmethod
    def from_words(
        cls,
        high: object,
        low: object,
        width: Union[int, str] = BIGGEST_DEFAULT_SHIFT,
    ) -> "Biggest":
        """
        Сборка из пары слов: (high << width) + low, всегда Biggest.

        Examples:
            >>> Biggest.from_words(1, 0).value == 1 << 128
            True
        """
        # "8.5" и 8.5 отвергаются, дробный сдвиг не округляется
        shift = int(width) if isinstance(width, str) else operator.index(width)
        return cls(
            combine_words(
                resolve_word(high, cls.type_name()),
                resolve_word(low, cls.type_name()),
                shift,
            )
        )

    @classmethod
    def from_value(cls, value: object) -> "Biggest":
        return cls(value)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    @property
    def exceeds_fixed_width(self) -> bool:
        """Значение вне диапазона Int128."""
        return Biggest.is_biggest(self._value)

    def is_really_biggest(self) -> bool:
        return self.exceeds_fixed_width

    @staticmethod
    def is_biggest(value: object) -> bool:
        """Лежит ли значение вне диапазона Int128 (False для не целых значений)."""
        try:
            number = to_integer(value, "Biggest")
        except OutOfRange:
            # текст длиннее MAX_INTEGER_TEXT_DIGITS цифр
            return True
        except InvalidNumber:
            return False
        return number > MAX_INT_128 or number < MIN_INT_128

    @staticmethod
    def is_bigger(value: object) -> bool:
        """Помещается ли значение в Int128."""
        return Int128.is_valid(value)

    # -------------------------------------------------------------------------
    # Сужение
    # -------------------------------------------------------------------------

    def narrow(self) -> BoundedInteger:
        """
        Наименьший фиксированный контейнер для значения.

        Знаковые разрядности перебираются первыми; значения выше
        MAX_INT_128 могут поместиться только в Uint128.

        Raises:
            Unrepresentable: Значение вне Int128 и Uint128
        """
        for width in INTEGER_WIDTHS:
            container = integer_type(width, signed=True)
            if container.is_valid(self._value):
                return container(self._value)

        if Uint128.is_valid(self._value):
            return Uint128(self._value)

        raise Unrepresentable(
            f"Biggest value {self._value} does not fit any fixed width "
            f"(max {INTEGER_WIDTHS[-1]} bits)",
            value=self._value,
            type_name=self.type_name(),
        )

    def require_fixed_width(self, width: Union[int, str] = 128, signed: bool = True) -> BoundedInteger:
        """
        Конвертация в заданную фиксированную разрядность.

        Raises:
            Unrepresentable: Значение не помещается в разрядность
        """
        container = integer_type(normalize_width(width), signed)

        if not container.is_valid(self._value):
            raise Unrepresentable(
                f"Biggest value {self._value} does not fit {container.__name__}",
                value=self._value,
                bound=(container.MIN_VALUE, container.MAX_VALUE),
                type_name=container.__name__,
            )

        return container(self._value)

    # -------------------------------------------------------------------------
    # Арифметика (без проверки диапазона)
    # -------------------------------------------------------------------------

    def _operand(self, other: object) -> int:
        return to_integer(other, self.type_name())

    def add(self, other: object) -> "Biggest":
        return Biggest(self._value + self._operand(other))

    def subtract(self, other: object) -> "Biggest":
        return Biggest(self._value - self._operand(other))

    def multiply(self, other: object) -> "Biggest":
        return Biggest(self._value * self._operand(other))

    def divide(self, other: object) -> "Biggest":
        """
        Целочисленное деление с округлением к нулю.

        Raises:
            DivisionByZero: Если делитель равен 0
        """
        divisor = self._operand(other)

        if divisor == 0:
            raise DivisionByZero(
                f"Biggest division by zero: {self._value} / 0",
                value=self._value,
                type_name=self.type_name(),
            )

        return Biggest(big_trunc_div(self._value, divisor))

    def power(self, exp: object) -> "Biggest":
        return Biggest(big_pow(self._value, self._operand(exp)))

    def sign(self) -> int:
        return big_sign(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value
