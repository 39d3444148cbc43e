"""
Errors — таксономия ошибок валидации bounded типов

Одна ошибка на каждый вид нарушения. Каждая несёт исходное значение
и нарушенную границу (где применимо).

Базовый класс InvalidNumber наследует ValueError:
- привычная семантика "неверное значение" для вызывающего кода
- pydantic превращает ValueError из валидатора в ValidationError

Политика распространения: ошибка поднимается в точке конструирования
или арифметики и сразу уходит к вызывающему. Никаких retry, recovery
или clamp внутри библиотеки.
"""

from typing import Optional


class InvalidNumber(ValueError):
    """
    Базовая ошибка валидации bounded значения.

    Attributes:
        code: Машинно-читаемый код ошибки
        value: Значение, не прошедшее валидацию
        bound: Нарушенная граница (для ошибок диапазона)
        type_name: Имя целевого типа (например, 'Int8')
    """

    code: str = "INVALID_NUMBER"

    def __init__(
        self,
        message: str,
        *,
        value: object = None,
        bound: object = None,
        type_name: Optional[str] = None,
    ):
        super().__init__(message)
        self.value = value
        self.bound = bound
        self.type_name = type_name


class NotANumber(InvalidNumber):
    """Значение не приводится к числовому домену вообще."""

    code = "NOT_A_NUMBER"


class NotAnInteger(NotANumber):
    """Значение не является целым числом."""

    code = "NOT_AN_INTEGER"


class ReceivedFloat(InvalidNumber):
    """
    Целочисленный тип получил дробное значение.

    Отделено от NotAnInteger, чтобы вызывающий мог отличить
    "3.5" (число, но не целое) от "abc" (не число).
    """

    code = "RECEIVED_FLOAT"


class ReceivedInteger(InvalidNumber):
    """Float тип получил целое значение (в пределах MAX_SAFE_INTEGER)."""

    code = "RECEIVED_INTEGER"


class OutOfRange(InvalidNumber):
    """Значение вне диапазона [minimum, maximum] целевого типа."""

    code = "OUT_OF_RANGE"


class BelowMinimum(OutOfRange):
    """Значение меньше минимума целевого типа."""

    code = "INVALID_MIN_VALUE"


class AboveMaximum(OutOfRange):
    """Значение больше максимума целевого типа."""

    code = "INVALID_MAX_VALUE"


class DivisionByZero(InvalidNumber, ZeroDivisionError):
    """Деление на ноль в арифметике bounded типа."""

    code = "DIVISION_BY_ZERO"


class Unrepresentable(InvalidNumber):
    """
    Значение Biggest не помещается ни в одну фиксированную разрядность.

    Biggest сам никогда не падает; эту ошибку поднимает
    Biggest.require_fixed_width() для вызывающих, которым нужна
    фиксированная разрядность.
    """

    code = "UNREPRESENTABLE"
