"""
Normalization — Mantissa/Exponent нормализация

Представление числа в научной форме value = mantissa × 10^exponent,
1 <= |mantissa| < 10. Основа для log и round_significant.

Две ветки:
- |value| <= 1 (включая ровно ±1): экспонента считается от ведущих нулей,
  которые задаёт отрицательная экспонента coefficient
- |value| > 1: экспонента = цифры coefficient + экспонента - 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Подсчёт цифр точный (по цифрам, никогда через log10)
2. Исходное значение не изменяется, результат вычисляется заново при каждом вызове
3. Float предварительно рендерится в точную последовательность цифр
"""

from decimal import Decimal

from src.core.math.digits import digits_to_integer, number_of_integer_digits, to_tuple
from src.core.math.numeric import NumericKind, classify
from src.core.math.numerical_safeguards import (
    MINUS_ONE,
    ONE,
    Number,
    validate_finite,
)


def _between_one_and_minus_one(value: Number) -> bool:
    return MINUS_ONE <= value <= ONE


def _scientific_exponent(coef_digits: int, exponent: int, small: bool) -> int:
    """
    Экспонента научной формы по числу цифр coefficient и его экспоненте.

    Args:
        coef_digits: Количество цифр coefficient
        exponent: Экспонента coefficient (value = coefficient × 10^exponent)
        small: True если |value| <= 1
    """
    if small:
        # 0.00035 = 35 × 10^-5: 5 - 2 = 3 ведущих нуля → 10^-4
        leading_zeros = -exponent - coef_digits
        return -(leading_zeros + 1)

    return coef_digits + exponent - 1


def _decimal_mantissa_exponent(value: Decimal) -> tuple[Decimal, int]:
    sign, digits, exp = value.as_tuple()
    coef_digits = number_of_integer_digits(digits_to_integer(digits))
    small = _between_one_and_minus_one(value)

    exponent = _scientific_exponent(coef_digits, exp, small)
    if small:
        mantissa = Decimal((sign, digits, -coef_digits + 1))
    else:
        mantissa = Decimal((sign, digits, exp - exponent))

    return mantissa, exponent


def _float_mantissa_exponent(value: float) -> tuple[float, int]:
    sign, digits, exp = to_tuple(value)
    coef_digits = len(digits)
    small = _between_one_and_minus_one(value)

    exponent = _scientific_exponent(coef_digits, exp, small)
    decimal_sign = 0 if sign > 0 else 1
    mantissa = float(Decimal((decimal_sign, digits, -coef_digits + 1)))

    return mantissa, exponent


def mantissa_exponent(value: Number) -> tuple[Number, int]:
    """
    Нормализация числа в (mantissa, exponent).

    Args:
        value: Decimal, float или int (конечный)

    Returns:
        (mantissa, exponent), value == mantissa × 10^exponent:
        - Decimal → Decimal mantissa (цифры не меняются, только экспонента)
        - float → float mantissa
        - int → float mantissa
        - 0 → (0, 0) в представлении входа

    Raises:
        InvalidArgument: Для NaN/Inf и неподдерживаемых типов

    Examples:
        >>> mantissa_exponent(Decimal("465"))
        (Decimal('4.65'), 2)
        >>> mantissa_exponent(Decimal("-46.543"))
        (Decimal('-4.6543'), 1)
        >>> mantissa_exponent(Decimal("0.00035"))
        (Decimal('3.5'), -4)
        >>> mantissa_exponent(0.00035)
        (3.5, -4)
    """
    kind = classify(value)
    validate_finite(value, "value")

    if value == 0:
        return value, 0

    if kind is NumericKind.DECIMAL:
        return _decimal_mantissa_exponent(value)

    if kind is NumericKind.FLOAT:
        return _float_mantissa_exponent(value)

    exponent = number_of_integer_digits(value) - 1
    return float(Decimal(value).scaleb(-exponent)), exponent
