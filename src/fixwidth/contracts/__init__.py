"""
Contract Validation Module

JSON Schema контракты диапазонов bounded типов и их валидация.
"""

from .schemas import JSON_SCHEMA_DIALECT, range_schema, record_schema
from .validators import (
    RangeContractValidator,
    RecordContractValidator,
    SchemaRegistry,
    validate_range,
    validate_record,
)

__all__ = [
    # Schemas
    "JSON_SCHEMA_DIALECT",
    "range_schema",
    "record_schema",
    # Classes
    "SchemaRegistry",
    "RangeContractValidator",
    "RecordContractValidator",
    # Functions
    "validate_range",
    "validate_record",
]
