"""
Тесты для Width/Bounds Registry

Проверяет:
1. Точные границы для всех разрядностей и знаковостей
2. Нормализацию разрядности ("8", "double", отказ для неизвестных)
3. Float границы
4. Именованные константы
"""

import sys

import pytest

from src.fixwidth.math.bounds import (
    FLOAT_WIDTHS,
    INTEGER_WIDTHS,
    MAX_FLOAT_32,
    MAX_FLOAT_64,
    MAX_INT_8,
    MAX_INT_16,
    MAX_INT_32,
    MAX_INT_64,
    MAX_INTEGER_TEXT_DIGITS,
    MAX_INT_128,
    MAX_SAFE_INTEGER,
    MAX_UINT_8,
    MAX_UINT_16,
    MAX_UINT_32,
    MAX_UINT_64,
    MAX_UINT_128,
    MIN_FLOAT_32,
    MIN_FLOAT_64,
    MIN_INT_8,
    MIN_INT_16,
    MIN_INT_32,
    MIN_INT_64,
    MIN_INT_128,
    MIN_UINT,
    Bounds,
    float_bounds,
    integer_bounds,
    normalize_width,
)

# =============================================================================
# ТЕСТЫ ЦЕЛЫХ ГРАНИЦ
# =============================================================================


class TestIntegerBounds:
    """Тесты integer_bounds"""

    @pytest.mark.parametrize("width", INTEGER_WIDTHS)
    def test_signed_formula(self, width: int) -> None:
        """Знаковый диапазон [-2^(w-1), 2^(w-1) - 1]"""
        bounds = integer_bounds(width)
        assert bounds.minimum == -(2 ** (width - 1))
        assert bounds.maximum == 2 ** (width - 1) - 1

    @pytest.mark.parametrize("width", INTEGER_WIDTHS)
    def test_unsigned_formula(self, width: int) -> None:
        """Беззнаковый диапазон [0, 2^w - 1]"""
        bounds = integer_bounds(width, signed=False)
        assert bounds.minimum == 0
        assert bounds.maximum == 2**width - 1

    def test_bounds_are_exact_ints(self) -> None:
        """Границы 128-bit точные, без float-аппроксимации"""
        bounds = integer_bounds(128, signed=False)
        assert isinstance(bounds.maximum, int)
        assert bounds.maximum == 340282366920938463463374607431768211455

    def test_named_tuple(self) -> None:
        """Результат — Bounds(minimum, maximum)"""
        assert integer_bounds(8) == Bounds(-128, 127)
        assert integer_bounds("16", signed=False) == Bounds(0, 65535)

    def test_unknown_width_rejected(self) -> None:
        """Неподдерживаемая разрядность — ValueError"""
        with pytest.raises(ValueError, match="width must be one of"):
            integer_bounds(12)


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ РАЗРЯДНОСТИ
# =============================================================================


class TestNormalizeWidth:
    """Тесты normalize_width"""

    def test_int_and_text(self) -> None:
        """int и текстовая разрядность"""
        assert normalize_width(8) == 8
        assert normalize_width("64") == 64
        assert normalize_width(" 128 ") == 128

    def test_double_alias_for_floats(self) -> None:
        """'double' → 64 только для float разрядностей"""
        assert normalize_width("double", FLOAT_WIDTHS) == 64
        assert normalize_width("DOUBLE", FLOAT_WIDTHS) == 64

        with pytest.raises(ValueError):
            normalize_width("double", (8, 16))

    def test_float_widths_reject_integer_only_widths(self) -> None:
        """8 не float разрядность"""
        with pytest.raises(ValueError):
            normalize_width(8, FLOAT_WIDTHS)

    def test_garbage_rejected(self) -> None:
        """Мусор и bool отвергаются"""
        with pytest.raises(ValueError):
            normalize_width("eight")
        with pytest.raises(ValueError):
            normalize_width(True)
        with pytest.raises(ValueError):
            normalize_width(0)


# =============================================================================
# ТЕСТЫ FLOAT ГРАНИЦ
# =============================================================================


class TestFloatBounds:
    """Тесты float_bounds"""

    def test_float32(self) -> None:
        assert float_bounds(32) == (-3.4e38, 3.4e38)

    def test_float64_is_largest_finite_double(self) -> None:
        """64-bit: ±sys.float_info.max"""
        bounds = float_bounds("double")
        assert bounds.maximum == sys.float_info.max
        assert bounds.minimum == -sys.float_info.max

    def test_unknown_width_rejected(self) -> None:
        with pytest.raises(ValueError):
            float_bounds(16)


# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestConstants:
    """Именованные константы совпадают с таблицей"""

    def test_signed_constants(self) -> None:
        assert (MIN_INT_8, MAX_INT_8) == (-128, 127)
        assert (MIN_INT_16, MAX_INT_16) == (-32768, 32767)
        assert (MIN_INT_32, MAX_INT_32) == (-2147483648, 2147483647)
        assert (MIN_INT_64, MAX_INT_64) == (-(2**63), 2**63 - 1)
        assert (MIN_INT_128, MAX_INT_128) == (-(2**127), 2**127 - 1)

    def test_unsigned_constants(self) -> None:
        assert MIN_UINT == 0
        assert MAX_UINT_8 == 255
        assert MAX_UINT_16 == 65535
        assert MAX_UINT_32 == 4294967295
        assert MAX_UINT_64 == 18446744073709551615
        assert MAX_UINT_128 == 2**128 - 1

    def test_float_constants(self) -> None:
        assert MIN_FLOAT_32 == -MAX_FLOAT_32
        assert MIN_FLOAT_64 == -MAX_FLOAT_64
        assert MAX_FLOAT_32 < MAX_FLOAT_64

    def test_max_safe_integer(self) -> None:
        """2^53 - 1"""
        assert MAX_SAFE_INTEGER == 9007199254740991
        assert float(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER

    def test_integer_text_digit_cap(self) -> None:
        """Потолок длины текста покрывает все фиксированные разрядности"""
        assert MAX_INTEGER_TEXT_DIGITS == 100_000
        assert len(str(MAX_UINT_128)) < MAX_INTEGER_TEXT_DIGITS
