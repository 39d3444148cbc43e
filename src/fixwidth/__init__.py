"""
fixwidth — bounded числовые типы фиксированной разрядности.

Int8…Int128, Uint8…Uint128, Float32/Float64, Biggest и composite
(high, low) сборка с promotion. Переполнение всегда наблюдаемо:
выход за диапазон → ошибка, никогда не wraparound.
"""

# Contracts
from src.fixwidth.contracts import (
    RangeContractValidator,
    RecordContractValidator,
    validate_range,
    validate_record,
)

# Domain
from src.fixwidth.domain import (
    AboveMaximum,
    BelowMinimum,
    Biggest,
    BoundedFloat,
    BoundedInteger,
    BoundedValue,
    CompositeCache,
    CompositeConfig,
    CompositeEngine,
    DivisionByZero,
    Float,
    Float32,
    Float64,
    Int,
    Int8,
    Int16,
    Int32,
    Int64,
    Int128,
    InvalidNumber,
    Long,
    NotAnInteger,
    NotANumber,
    OutOfRange,
    ReceivedFloat,
    ReceivedInteger,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Uint128,
    Unrepresentable,
    compose,
    compose_unsigned,
    float_type,
    integer_type,
    is_bigger,
    is_double,
    is_float,
    is_float32,
    is_float64,
    is_int,
    is_int8,
    is_int16,
    is_int32,
    is_int64,
    is_int128,
    is_long,
    is_long_long,
    is_uint,
    is_uint8,
    is_uint16,
    is_uint32,
    is_uint64,
    is_uint128,
)

# Math
from src.fixwidth.math import (
    MAX_FLOAT_32,
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
    big_abs,
    big_max,
    big_min,
    big_pow,
    big_sign,
)

# Синонимы
LongLong = Int64
Bigger = Int128
Double = Float64

__all__ = [
    # Integers
    "BoundedInteger",
    "Int",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Int128",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "Uint128",
    "Long",
    "LongLong",
    "Bigger",
    "integer_type",
    # Floats
    "BoundedFloat",
    "Float",
    "Float32",
    "Float64",
    "Double",
    "float_type",
    # Overflow container
    "Biggest",
    "BoundedValue",
    # Composite
    "CompositeCache",
    "CompositeConfig",
    "CompositeEngine",
    "compose",
    "compose_unsigned",
    # Predicates
    "is_int",
    "is_int8",
    "is_int16",
    "is_int32",
    "is_int64",
    "is_int128",
    "is_uint",
    "is_uint8",
    "is_uint16",
    "is_uint32",
    "is_uint64",
    "is_uint128",
    "is_long",
    "is_long_long",
    "is_bigger",
    "is_float",
    "is_float32",
    "is_float64",
    "is_double",
    # Errors
    "InvalidNumber",
    "NotANumber",
    "NotAnInteger",
    "ReceivedFloat",
    "ReceivedInteger",
    "OutOfRange",
    "BelowMinimum",
    "AboveMaximum",
    "DivisionByZero",
    "Unrepresentable",
    # Constants
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
    "MIN_FLOAT_32",
    "MIN_FLOAT_64",
    "MAX_FLOAT_32",
    "MAX_FLOAT_64",
    "MAX_SAFE_INTEGER",
    # BigMath
    "big_abs",
    "big_max",
    "big_min",
    "big_pow",
    "big_sign",
    # Contracts
    "RangeContractValidator",
    "RecordContractValidator",
    "validate_range",
    "validate_record",
]
