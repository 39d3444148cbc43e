"""
Composite — сборка целого из пары слов с promotion

Сборка:
    value = (high << width) + low

Сдвиг равен ЦЕЛЕВОЙ разрядности width (а не половине): composite
(1, 0) с width=64 даёт 1 << 64.

Promotion (после вычисления value):
1. Контейнеры перебираются от разрядности width вверх по INTEGER_WIDTHS
2. Возвращается первый контейнер нужной знаковости, который держит value
3. Если не держит ни один (включая 128-bit) → Biggest,
   exceeds_fixed_width == True

Знаковость:
- signed=True/False явно
- signed=None: unsigned, только если оба слова — Uint экземпляры,
  иначе signed
- unsigned composite с отрицательным value → BelowMinimum

Кэш:
- CompositeCache — явный, инъектируемый, потокобезопасный (Lock)
- Ключ (high, low, width, signed): одинаковые слова с разной
  знаковостью или разрядностью не конфликтуют
- Опциональная ёмкость (LRU вытеснение), None — без ограничения
- При гонке двух потоков на одном ключе сохраняется первый результат
"""

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Final, NamedTuple, Optional, Union

from src.fixwidth.domain.biggest import Biggest
from src.fixwidth.domain.errors import BelowMinimum
from src.fixwidth.domain.integers import Uint, integer_type
from src.fixwidth.domain.sources import BoundedValue, combine_words, resolve_word
from src.fixwidth.math.bounds import INTEGER_WIDTHS, normalize_width

logger = logging.getLogger(__name__)

# Ёмкость кэша общего движка модуля
DEFAULT_CACHE_CAPACITY: Final[int] = 4096

# Целевая разрядность по умолчанию для compose()
DEFAULT_COMPOSITE_WIDTH: Final[int] = 64


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CompositeConfig:
    """Конфигурация CompositeEngine.

    default_width — целевая разрядность, если она не передана явно.
    cache_capacity=None — кэш без ограничения размера.
    """

    default_width: int = DEFAULT_COMPOSITE_WIDTH
    cache_enabled: bool = True
    cache_capacity: Optional[int] = DEFAULT_CACHE_CAPACITY

    def __post_init__(self):
        normalize_width(self.default_width, INTEGER_WIDTHS)

        if self.cache_capacity is not None and self.cache_capacity <= 0:
            raise ValueError(f"cache_capacity must be positive or None, got {self.cache_capacity}")


# =============================================================================
# CACHE
# =============================================================================


class CompositeKey(NamedTuple):
    """Ключ кэша composite."""

    high: int
    low: int
    width: int
    signed: bool


class CompositeCache:
    """
    Потокобезопасный кэш результатов composite.

    Все значения иммутабельны, поэтому один экземпляр можно
    отдавать нескольким вызывающим.
    """

    def __init__(self, capacity: Optional[int] = None):
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive or None, got {capacity}")

        self._capacity = capacity
        self._entries: "OrderedDict[CompositeKey, BoundedValue]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def get(self, key: CompositeKey) -> Optional[BoundedValue]:
        """Значение по ключу или None."""
        with self._lock:
            value = self._entries.get(key)

            if value is None:
                self.misses += 1
                return None

            self.hits += 1
            self._entries.move_to_end(key)
            return value

    def put(self, key: CompositeKey, value: BoundedValue) -> BoundedValue:
        """
        Сохранение значения.

        Returns:
            Значение, оказавшееся в кэше: если другой поток успел
            записать ключ раньше, возвращается его значение
        """
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing

            self._entries[key] = value

            if self._capacity is not None and len(self._entries) > self._capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Composite cache evicted %s", evicted)

            return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


# =============================================================================
# ENGINE
# =============================================================================


class CompositeEngine:
    """
    Composite/Promotion Engine.

    Вычисляет (high << width) + low и выбирает наименьший контейнер
    от разрядности width вверх, либо Biggest.
    """

    def __init__(
        self,
        config: Optional[CompositeConfig] = None,
        cache: Optional[CompositeCache] = None,
    ):
        self.config = config or CompositeConfig()

        if cache is None and self.config.cache_enabled:
            cache = CompositeCache(self.config.cache_capacity)

        self.cache = cache

    @staticmethod
    def combine(high: object, low: object, width: Union[int, str]) -> int:
        """
        Значение composite без выбора контейнера.

        Examples:
            >>> CompositeEngine.combine(1, 0, 64) == 1 << 64
            True
            >>> CompositeEngine.combine("#1", "#ff", 8)
            511
        """
        shift = normalize_width(width, INTEGER_WIDTHS)
        return combine_words(resolve_word(high), resolve_word(low), shift)

    @staticmethod
    def select_container(value: int, width: Union[int, str], signed: bool) -> type:
        """
        Класс контейнера для value: первый от width вверх, иначе Biggest.

        Raises:
            BelowMinimum: Отрицательное value для unsigned composite
        """
        nominal = normalize_width(width, INTEGER_WIDTHS)

        if not signed and value < 0:
            raise BelowMinimum(
                f"Unsigned composite must be >= 0, got {value}",
                value=value,
                bound=0,
                type_name="Uint",
            )

        for candidate in INTEGER_WIDTHS:
            if candidate < nominal:
                continue

            container = integer_type(candidate, signed)
            if container.MIN_VALUE <= value <= container.MAX_VALUE:
                return container

        return Biggest

    def compose(
        self,
        high: object,
        low: object,
        width: Union[int, str, None] = None,
        *,
        signed: Optional[bool] = None,
    ) -> BoundedValue:
        """
        Сборка composite с promotion.

        Args:
            high: Старшее слово (hex-текст с '#', int, bounded значение)
            low: Младшее слово
            width: Целевая разрядность (default: config.default_width)
            signed: Знаковость (None — вывод по словам)

        Returns:
            BoundedInteger подходящей разрядности или Biggest

        Raises:
            NotAnInteger / ReceivedFloat: Слово не целое
            BelowMinimum: Отрицательный unsigned composite
            ValueError: Неподдерживаемая разрядность
        """
        target = normalize_width(
            width if width is not None else self.config.default_width,
            INTEGER_WIDTHS,
        )

        if signed is None:
            signed = not (_is_unsigned_word(high) and _is_unsigned_word(low))

        key = CompositeKey(resolve_word(high), resolve_word(low), target, signed)

        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Composite cache hit for %s", key)
                return cached

        value = combine_words(key.high, key.low, target)
        container = self.select_container(value, target, signed)

        if container is not integer_type(target, signed):
            logger.debug(
                "Composite (%s << %d) + %s promoted to %s",
                key.high,
                target,
                key.low,
                container.__name__,
            )

        result = container(value)

        if self.cache is not None:
            result = self.cache.put(key, result)

        return result


def _is_unsigned_word(word: object) -> bool:
    return isinstance(word, Uint)


# Общий движок модуля (явная замена через параметр engine=)
_DEFAULT_ENGINE = CompositeEngine()


def default_engine() -> CompositeEngine:
    """Общий движок модуля."""
    return _DEFAULT_ENGINE


def compose(
    high: object,
    low: object,
    width: Union[int, str, None] = None,
    *,
    signed: Optional[bool] = None,
    engine: Optional[CompositeEngine] = None,
) -> BoundedValue:
    """
    Composite через переданный или общий движок.

    Examples:
        >>> compose(1, 0, 64)
        Int128(18446744073709551616)
        >>> compose(0, 5)
        Int64(5)
    """
    return (engine or _DEFAULT_ENGINE).compose(high, low, width, signed=signed)


def compose_unsigned(
    high: object,
    low: object,
    width: Union[int, str, None] = None,
    *,
    engine: Optional[CompositeEngine] = None,
) -> BoundedValue:
    """Беззнаковый composite (Uint-контейнеры)."""
    return compose(high, low, width, signed=False, engine=engine)
