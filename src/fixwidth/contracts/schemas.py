"""
Range Schemas — JSON Schema контракты диапазонов

Строит JSON Schema (Draft 2020-12) для bounded типов:
- целые: {"type": "integer", "minimum": ..., "maximum": ...}
- float: {"type": "number", "minimum": ..., "maximum": ...}

Используется:
- bounded классами (json_schema(), pydantic JSON schema)
- validators.py для проверки внешних payload-ов
"""

from typing import Any, Dict, Final, Optional

JSON_SCHEMA_DIALECT: Final[str] = "https://json-schema.org/draft/2020-12/schema"


def range_schema(
    minimum: Optional[float],
    maximum: Optional[float],
    integral: bool,
    title: Optional[str] = None,
) -> Dict[str, Any]:
    """
    JSON Schema контракт диапазона.

    Args:
        minimum: Нижняя граница (None — без границы)
        maximum: Верхняя граница (None — без границы)
        integral: True для целых типов ("integer"), False для "number"
        title: Имя типа (optional)

    Returns:
        Схема как dict

    Examples:
        >>> range_schema(0, 255, integral=True)
        {'type': 'integer', 'minimum': 0, 'maximum': 255}
    """
    schema: Dict[str, Any] = {"type": "integer" if integral else "number"}

    if minimum is not None:
        schema["minimum"] = minimum

    if maximum is not None:
        schema["maximum"] = maximum

    if title is not None:
        schema["title"] = title

    return schema


def record_schema(properties: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    """
    JSON Schema для объекта, все поля которого обязательны.

    Args:
        properties: Имя поля → схема поля

    Returns:
        Схема объекта с $schema, required и additionalProperties=False
    """
    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "type": "object",
        "properties": dict(properties),
        "required": sorted(properties),
        "additionalProperties": False,
    }
