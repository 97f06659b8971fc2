"""
Numeric — variant dispatch для Numeric Value

Каждая операция ядра ветвится по представлению входа:
INTEGER (int), FLOAT (float) или DECIMAL (decimal.Decimal).
"""

from decimal import Decimal
from enum import Enum

from src.core.math.numerical_safeguards import InvalidArgument, Number, is_integer_value


class NumericKind(str, Enum):
    """Представление Numeric Value."""

    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    DECIMAL = "DECIMAL"


def classify(value: Number) -> NumericKind:
    """
    Определение варианта Numeric Value.

    bool отвергается: формально это int, но не число для ядра.

    Raises:
        InvalidArgument: Для неподдерживаемых типов

    Examples:
        >>> classify(1)
        <NumericKind.INTEGER: 'INTEGER'>
        >>> classify(Decimal("1.5"))
        <NumericKind.DECIMAL: 'DECIMAL'>
    """
    if isinstance(value, Decimal):
        return NumericKind.DECIMAL
    if isinstance(value, float):
        return NumericKind.FLOAT
    if is_integer_value(value):
        return NumericKind.INTEGER

    raise InvalidArgument(f"Unsupported numeric type: {type(value).__name__}")


def one_like(value: Number) -> Number:
    """Единица в представлении value: 1, 1.0 или Decimal(1)."""
    kind = classify(value)
    if kind is NumericKind.DECIMAL:
        return Decimal(1)
    if kind is NumericKind.FLOAT:
        return 1.0
    return 1


def zero_like(value: Number) -> Number:
    kind = classify(value)
    if kind is NumericKind.DECIMAL:
        return Decimal(0)
    if kind is NumericKind.FLOAT:
        return 0.0
    return 0
