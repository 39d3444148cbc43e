"""
Width/Bounds Registry — таблица диапазонов для фиксированных разрядностей

Единственный источник истины для всех проверок диапазона:
- (width, signed) → (minimum, maximum) для целых типов
- width → (minimum, maximum) для float типов

ФОРМУЛЫ:
    signed:   [-2^(w-1), 2^(w-1) - 1]
    unsigned: [0, 2^w - 1]

Float границы не выводятся из формулы, это константы представления:
- 32-bit: ±3.4e38 (IEEE-754 single)
- 64-bit: ±sys.float_info.max (наибольший конечный double)

Все целые границы точные (int), без float-аппроксимации.
"""

import sys
from typing import Final, NamedTuple, Union

# =============================================================================
# РАЗРЯДНОСТИ
# =============================================================================

INTEGER_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64, 128)

FLOAT_WIDTHS: Final[tuple[int, ...]] = (32, 64)

# Текстовые синонимы разрядностей float
FLOAT_WIDTH_NAMES: Final[dict[str, int]] = {"double": 64}

# Порог, выше которого целое значение принимается как float
# (2^53 - 1, наибольшее целое, точно представимое в double)
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Наибольшее число цифр целого, разбираемого из текста с экспонентой
# ("1e99999"); Biggest и обобщённые Int/Uint не имеют другой границы
MAX_INTEGER_TEXT_DIGITS: Final[int] = 100_000


class Bounds(NamedTuple):
    """Точный целочисленный диапазон [minimum, maximum]."""

    minimum: int
    maximum: int


class FloatBounds(NamedTuple):
    """Диапазон float типа [minimum, maximum]."""

    minimum: float
    maximum: float


# =============================================================================
# РЕЕСТР
# =============================================================================


def normalize_width(width: Union[int, str], allowed: tuple[int, ...] = INTEGER_WIDTHS) -> int:
    """
    Нормализация разрядности к int.

    Args:
        width: Разрядность (8, "8", "double", ...)
        allowed: Допустимые разрядности

    Returns:
        Разрядность как int

    Raises:
        ValueError: Если разрядность не поддерживается

    Examples:
        >>> normalize_width("16")
        16
        >>> normalize_width("double", FLOAT_WIDTHS)
        64
    """
    if isinstance(width, bool):
        raise ValueError(f"width must be one of {allowed}, got {width!r}")

    if isinstance(width, str):
        text = width.strip().lower()
        if text in FLOAT_WIDTH_NAMES and FLOAT_WIDTH_NAMES[text] in allowed:
            return FLOAT_WIDTH_NAMES[text]
        try:
            width = int(text)
        except ValueError:
            raise ValueError(f"width must be one of {allowed}, got {width!r}") from None

    if width not in allowed:
        raise ValueError(f"width must be one of {allowed}, got {width!r}")

    return width


def integer_bounds(width: Union[int, str], signed: bool = True) -> Bounds:
    """
    Диапазон целого типа заданной разрядности и знаковости.

    Args:
        width: Разрядность (8/16/32/64/128)
        signed: Знаковый тип (default: True)

    Returns:
        Bounds(minimum, maximum), точные значения

    Examples:
        >>> integer_bounds(8)
        Bounds(minimum=-128, maximum=127)
        >>> integer_bounds(8, signed=False)
        Bounds(minimum=0, maximum=255)
    """
    bits = normalize_width(width, INTEGER_WIDTHS)

    if signed:
        return Bounds(-(1 << (bits - 1)), (1 << (bits - 1)) - 1)

    return Bounds(0, (1 << bits) - 1)


def float_bounds(width: Union[int, str]) -> FloatBounds:
    """
    Диапазон float типа заданной разрядности.

    Args:
        width: Разрядность (32/64 или "double")

    Returns:
        FloatBounds(minimum, maximum)
    """
    bits = normalize_width(width, FLOAT_WIDTHS)
    return _FLOAT_BOUNDS[bits]


_FLOAT_BOUNDS: Final[dict[int, FloatBounds]] = {
    32: FloatBounds(-3.4e38, 3.4e38),
    64: FloatBounds(-sys.float_info.max, sys.float_info.max),
}


# =============================================================================
# ИМЕНОВАННЫЕ КОНСТАНТЫ
# =============================================================================

MIN_INT_8: Final[int] = integer_bounds(8).minimum
MIN_INT_16: Final[int] = integer_bounds(16).minimum
MIN_INT_32: Final[int] = integer_bounds(32).minimum
MIN_INT_64: Final[int] = integer_bounds(64).minimum
MIN_INT_128: Final[int] = integer_bounds(128).minimum

MAX_INT_8: Final[int] = integer_bounds(8).maximum
MAX_INT_16: Final[int] = integer_bounds(16).maximum
MAX_INT_32: Final[int] = integer_bounds(32).maximum
MAX_INT_64: Final[int] = integer_bounds(64).maximum
MAX_INT_128: Final[int] = integer_bounds(128).maximum

# Минимум общий для всех беззнаковых разрядностей
MIN_UINT: Final[int] = 0

MAX_UINT_8: Final[int] = integer_bounds(8, signed=False).maximum
MAX_UINT_16: Final[int] = integer_bounds(16, signed=False).maximum
MAX_UINT_32: Final[int] = integer_bounds(32, signed=False).maximum
MAX_UINT_64: Final[int] = integer_bounds(64, signed=False).maximum
MAX_UINT_128: Final[int] = integer_bounds(128, signed=False).maximum

MIN_FLOAT_32: Final[float] = _FLOAT_BOUNDS[32].minimum
MIN_FLOAT_64: Final[float] = _FLOAT_BOUNDS[64].minimum

MAX_FLOAT_32: Final[float] = _FLOAT_BOUNDS[32].maximum
MAX_FLOAT_64: Final[float] = _FLOAT_BOUNDS[64].maximum
