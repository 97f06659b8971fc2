"""
Digits — точная работа с десятичными цифрами

Подсчёт цифр и извлечение цифр float выполняются по строковому/целочисленному
представлению, без log10 и без двоичного округления.

Float рендерится в кратчайшую последовательность цифр, которая переживает
round trip (repr), поэтому 0.00035 даёт цифры (3, 5), а не
(3, 4, 9, 9, 9, ...).
"""

import math
from decimal import Decimal
from typing import NamedTuple

from src.core.math.numerical_safeguards import (
    InvalidArgument,
    Number,
    is_integer_value,
    validate_finite,
)


class FloatDigits(NamedTuple):
    """
    Цифры float в форме 0.d1d2...dn × 10^exponent.

    Attributes:
        digits: Значащие цифры без хвостовых нулей
        exponent: Позиция десятичной точки относительно первой цифры
        sign: +1 или -1
    """

    digits: tuple[int, ...]
    exponent: int
    sign: int


class DigitTuple(NamedTuple):
    """
    Цифры числа в форме sign × coefficient × 10^exponent (как Decimal.as_tuple).

    sign: +1 или -1 (в отличие от Decimal.as_tuple, где 0/1).
    """

    sign: int
    digits: tuple[int, ...]
    exponent: int


def number_of_integer_digits(value: int) -> int:
    """
    Количество десятичных цифр целого числа.

    Examples:
        >>> number_of_integer_digits(465)
        3
        >>> number_of_integer_digits(-10)
        2
        >>> number_of_integer_digits(0)
        1
    """
    if not is_integer_value(value):
        raise InvalidArgument(f"Expected an integer, got {value!r}")
    return len(str(abs(value)))


def digits_to_integer(digits: tuple[int, ...]) -> int:
    """(3, 5) → 35"""
    result = 0
    for digit in digits:
        result = result * 10 + digit
    return result


def float_to_digits(value: float) -> FloatDigits:
    """
    Кратчайшие round-trip цифры float.

    Args:
        value: Конечный float

    Returns:
        FloatDigits(digits, exponent, sign), value == sign × 0.digits × 10^exponent

    Raises:
        InvalidArgument: Для NaN/Inf

    Examples:
        >>> float_to_digits(0.00035)
        FloatDigits(digits=(3, 5), exponent=-3, sign=1)
        >>> float_to_digits(465.0)
        FloatDigits(digits=(4, 6, 5), exponent=3, sign=1)
    """
    validate_finite(value, "value")

    sign = -1 if math.copysign(1.0, value) < 0 else 1
    if value == 0.0:
        return FloatDigits(digits=(0,), exponent=1, sign=sign)

    _, digits, exp = Decimal(repr(abs(value))).as_tuple()

    # Хвостовые нули ("465.0") не значащие
    while len(digits) > 1 and digits[-1] == 0:
        digits = digits[:-1]
        exp += 1

    return FloatDigits(digits=tuple(digits), exponent=exp + len(digits), sign=sign)


def to_tuple(value: Number) -> DigitTuple:
    """
    Разложение числа на (sign, digits, exponent) с coefficient-экспонентой.

    Для float используется float_to_digits, поэтому 0.1 → (1, (1,), -1).

    Examples:
        >>> to_tuple(Decimal("-4.65"))
        DigitTuple(sign=-1, digits=(4, 6, 5), exponent=-2)
        >>> to_tuple(0.1)
        DigitTuple(sign=1, digits=(1,), exponent=-1)
    """
    if isinstance(value, float):
        parts = float_to_digits(value)
        return DigitTuple(
            sign=parts.sign,
            digits=parts.digits,
            exponent=parts.exponent - len(parts.digits),
        )

    if isinstance(value, Decimal):
        validate_finite(value, "value")
        decimal_value = value
    elif is_integer_value(value):
        decimal_value = Decimal(value)
    else:
        raise InvalidArgument(f"Unsupported numeric type: {type(value).__name__}")

    sign, digits, exponent = decimal_value.as_tuple()
    return DigitTuple(sign=-1 if sign else 1, digits=tuple(digits), exponent=exponent)
