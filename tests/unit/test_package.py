"""
Тесты публичного интерфейса пакета src.fixwidth

Проверяет синонимы и экспорт имён.
"""

import src.fixwidth as fixwidth
from src.fixwidth import (
    Bigger,
    Double,
    Float64,
    Int64,
    Int128,
    LongLong,
    Uint8,
    compose,
    is_int,
)


class TestAliases:
    """Синонимы типов"""

    def test_aliases(self) -> None:
        assert LongLong is Int64
        assert Bigger is Int128
        assert Double is Float64

    def test_alias_constructs(self) -> None:
        assert type(LongLong(5)) is Int64
        assert Double("2.5") == 2.5


class TestExports:
    """Все имена из __all__ доступны"""

    def test_all_names_resolve(self) -> None:
        for name in fixwidth.__all__:
            assert hasattr(fixwidth, name), name

    def test_core_behaviour_through_package(self) -> None:
        assert is_int(3)
        assert Uint8(250).add(5) == 255
        assert compose(1, 0, 64) == 1 << 64
