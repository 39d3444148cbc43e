"""
BigMath — примитивы произвольной точности над int

Аналоги math.pow / abs / sign / min / max, но без перехода во float:
- Все результаты точные (int)
- Входы приводятся через to_big (int, целый float, текст, __index__)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не возвращает float
2. Отрицательная степень запрещена (результат не целый)
3. Деление big_trunc_div округляет к нулю, как целочисленное деление
   в языках с фиксированной разрядностью
"""

import math
import operator


def to_big(x: object) -> int:
    """
    Приведение значения к int без потери точности.

    Args:
        x: int, целый float, десятичный/0x текст или объект с __index__

    Returns:
        Значение как int

    Raises:
        ValueError: Если значение не целое или не парсится
        TypeError: Если тип не поддерживается

    Examples:
        >>> to_big("42")
        42
        >>> to_big("0x1f")
        31
        >>> to_big(3.0)
        3
    """
    if isinstance(x, bool):
        raise TypeError("bool is not a valid integer source")

    if isinstance(x, float):
        if not math.isfinite(x) or not x.is_integer():
            raise ValueError(f"value must be an integral finite number, got {x}")
        return int(x)

    if isinstance(x, str):
        text = x.strip()
        try:
            return int(text)
        except ValueError:
            return int(text, 0)

    return operator.index(x)


def big_pow(base: object, exp: object) -> int:
    """
    Целочисленное возведение в степень.

    Raises:
        ValueError: Если exp < 0

    Examples:
        >>> big_pow(2, 64)
        18446744073709551616
    """
    base_int, exp_int = to_big(base), to_big(exp)

    if exp_int < 0:
        raise ValueError(f"exp must be non-negative, got {exp_int}")

    return base_int**exp_int


def big_abs(x: object) -> int:
    """Абсолютное значение."""
    value = to_big(x)
    return -value if value < 0 else value


def big_sign(x: object) -> int:
    """
    Знак значения: -1, 0 или 1.

    Examples:
        >>> big_sign(-7)
        -1
        >>> big_sign(0)
        0
    """
    value = to_big(x)
    if value == 0:
        return 0
    return -1 if value < 0 else 1


def big_min(*values: object) -> int:
    """
    Минимум из значений.

    Raises:
        ValueError: Если значения не переданы
    """
    if not values:
        raise ValueError("big_min requires at least one value")
    return min(to_big(v) for v in values)


def big_max(*values: object) -> int:
    """
    Максимум из значений.

    Raises:
        ValueError: Если значения не переданы
    """
    if not values:
        raise ValueError("big_max requires at least one value")
    return max(to_big(v) for v in values)


def big_trunc_div(numerator: object, denominator: object) -> int:
    """
    Целочисленное деление с округлением к нулю.

    В отличие от оператора // (округление к -inf), результат
    для разных знаков округляется к нулю: -7 / 2 → -3.

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> big_trunc_div(7, 2)
        3
        >>> big_trunc_div(-7, 2)
        -3
    """
    num, den = to_big(numerator), to_big(denominator)

    quotient = abs(num) // abs(den)

    if (num < 0) != (den < 0):
        return -quotient
    return quotient
