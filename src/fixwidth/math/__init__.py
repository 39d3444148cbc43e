"""
Math modules для fixwidth

Точные целочисленные примитивы и таблица диапазонов разрядностей.
"""

# BigMath
from src.fixwidth.math.bigmath import (
    big_abs,
    big_max,
    big_min,
    big_pow,
    big_sign,
    big_trunc_div,
    to_big,
)

# Width/Bounds Registry
from src.fixwidth.math.bounds import (
    FLOAT_WIDTHS,
    INTEGER_WIDTHS,
    MAX_FLOAT_32,
    MAX_INTEGER_TEXT_DIGITS,
    MAX_FLOAT_64,
    MAX_INT_8,
    MAX_INT_16,
    MAX_INT_32,
    MAX_INT_64,
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
    FloatBounds,
    float_bounds,
    integer_bounds,
    normalize_width,
)

__all__ = [
    # BigMath
    "big_abs",
    "big_max",
    "big_min",
    "big_pow",
    "big_sign",
    "big_trunc_div",
    "to_big",
    # Bounds: Widths
    "FLOAT_WIDTHS",
    "INTEGER_WIDTHS",
    "MAX_SAFE_INTEGER",
    "MAX_INTEGER_TEXT_DIGITS",
    # Bounds: Integer constants
    "MIN_INT_8",
    "MIN_INT_16",
    "MIN_INT_32",
    "MIN_INT_64",
    "MIN_INT_128",
    "MAX_INT_8",
    "MAX_INT_16",
    "MAX_INT_32",
    "MAX_INT_64",
    "MAX_INT_128",
    "MIN_UINT",
    "MAX_UINT_8",
    "MAX_UINT_16",
    "MAX_UINT_32",
    "MAX_UINT_64",
    "MAX_UINT_128",
    # Bounds: Float constants
    "MIN_FLOAT_32",
    "MIN_FLOAT_64",
    "MAX_FLOAT_32",
    "MAX_FLOAT_64",
    # Bounds: Types
    "Bounds",
    "FloatBounds",
    # Bounds: Functions
    "float_bounds",
    "integer_bounds",
    "normalize_width",
]
