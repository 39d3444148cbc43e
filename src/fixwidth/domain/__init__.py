"""
Domain models: bounded integer/float типы, Biggest и composite engine.
"""

from src.fixwidth.domain.biggest import Biggest
from src.fixwidth.domain.composite import (
    CompositeCache,
    CompositeConfig,
    CompositeEngine,
    CompositeKey,
    compose,
    compose_unsigned,
    default_engine,
)
from src.fixwidth.domain.errors import (
    AboveMaximum,
    BelowMinimum,
    DivisionByZero,
    InvalidNumber,
    NotAnInteger,
    NotANumber,
    OutOfRange,
    ReceivedFloat,
    ReceivedInteger,
    Unrepresentable,
)
from src.fixwidth.domain.floats import (
    BoundedFloat,
    Float,
    Float32,
    Float64,
    float_type,
    is_double,
    is_float,
    is_float32,
    is_float64,
)
from src.fixwidth.domain.integers import (
    BoundedInteger,
    Int,
    Int8,
    Int16,
    Int32,
    Int64,
    Int128,
    Long,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Uint128,
    integer_type,
    is_bigger,
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
from src.fixwidth.domain.sources import (
    BoundedValue,
    NumericSource,
    SourceKind,
    classify,
    resolve_word,
    to_integer,
    to_real,
)

__all__ = [
    # Base
    "BoundedValue",
    "NumericSource",
    "SourceKind",
    "classify",
    "resolve_word",
    "to_integer",
    "to_real",
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
    "integer_type",
    # Integer predicates
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
    # Floats
    "BoundedFloat",
    "Float",
    "Float32",
    "Float64",
    "float_type",
    "is_float",
    "is_float32",
    "is_float64",
    "is_double",
    # Biggest
    "Biggest",
    # Composite
    "CompositeCache",
    "CompositeConfig",
    "CompositeEngine",
    "CompositeKey",
    "compose",
    "compose_unsigned",
    "default_engine",
]
