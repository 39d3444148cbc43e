"""
Тесты для Sources — классификация и приведение входных значений

Проверяет:
1. classify → NumericSource (TEXT / INTEGER / FLOAT / BOUNDED)
2. to_integer / to_real
3. resolve_word (hex-слова composite-пары) и combine_words
"""

import math

import pytest

from src.fixwidth.domain.errors import (
    AboveMaximum,
    BelowMinimum,
    NotAnInteger,
    NotANumber,
    ReceivedFloat,
)
from src.fixwidth.domain.integers import Int8
from src.fixwidth.domain.sources import (
    NumericSource,
    SourceKind,
    classify,
    combine_words,
    resolve_word,
    to_integer,
    to_real,
)


class TestClassify:
    """classify — тип входа определяется один раз"""

    def test_kinds(self) -> None:
        assert classify("12") == NumericSource(SourceKind.TEXT, "12")
        assert classify(12) == NumericSource(SourceKind.INTEGER, 12)
        assert classify(1.5) == NumericSource(SourceKind.FLOAT, 1.5)
        assert classify(Int8(3)) == NumericSource(SourceKind.BOUNDED, 3)

    def test_bool_rejected(self) -> None:
        with pytest.raises(NotANumber, match="does not accept bool"):
            classify(True)

    def test_unsupported_type(self) -> None:
        with pytest.raises(NotANumber, match="got list"):
            classify([1])

    def test_custom_error(self) -> None:
        with pytest.raises(NotAnInteger):
            classify(None, "Int8", error=NotAnInteger)


class TestToInteger:
    """to_integer"""

    def test_text_forms(self) -> None:
        assert to_integer("42") == 42
        assert to_integer(" 1e3 ") == 1000
        assert to_integer("-0") == 0

    def test_exact_large_text(self) -> None:
        """Decimal-разбор без потерь double"""
        assert to_integer("1e30") == 10**30

    def test_fraction(self) -> None:
        with pytest.raises(ReceivedFloat):
            to_integer("0.5")
        with pytest.raises(ReceivedFloat):
            to_integer(0.5)

    def test_not_a_number(self) -> None:
        with pytest.raises(NotAnInteger):
            to_integer("")
        with pytest.raises(NotAnInteger):
            to_integer("Infinity")

    def test_range_checked_before_materializing(self) -> None:
        with pytest.raises(AboveMaximum):
            to_integer("1e999999999", "Int8", -128, 127)
        with pytest.raises(BelowMinimum):
            to_integer("-1e999999999", "Int8", -128, 127)

    def test_digit_cap_without_bounds(self) -> None:
        assert to_integer("1e5000") == 10**5000
        with pytest.raises(AboveMaximum, match="digits"):
            to_integer("1e200000")
        with pytest.raises(BelowMinimum, match="digits"):
            to_integer("-1e200000")


class TestToReal:
    """to_real"""

    def test_sources(self) -> None:
        assert to_real("2.5") == 2.5
        assert to_real(2) == 2.0
        assert to_real(Int8(3)) == 3.0

    def test_huge_int_becomes_inf(self) -> None:
        assert to_real(10**400) == math.inf
        assert to_real(-(10**400)) == -math.inf

    def test_unparseable_text(self) -> None:
        with pytest.raises(NotANumber, match="numeric string"):
            to_real("abc")


class TestWords:
    """resolve_word и combine_words"""

    def test_hex_text(self) -> None:
        assert resolve_word("#ff") == 255
        assert resolve_word("ff") == 255
        assert resolve_word("0xff") == 255
        assert resolve_word(" #10 ") == 16

    def test_non_text(self) -> None:
        assert resolve_word(16) == 16
        assert resolve_word(Int8(-1)) == -1

    def test_bad_hex(self) -> None:
        with pytest.raises(NotAnInteger, match="hexadecimal"):
            resolve_word("#xyz")

    def test_combine(self) -> None:
        assert combine_words(1, 0, 64) == 1 << 64
        assert combine_words(1, 255, 8) == 511

    def test_negative_shift(self) -> None:
        with pytest.raises(ValueError, match="shift must be non-negative"):
            combine_words(1, 0, -1)
