"""
Exponentiation — возведение в целую степень

Binary exponentiation (square-and-multiply): O(log n) умножений.
- n == 0 → 1 в представлении основания (1, 1.0, Decimal(1))
- n == 1 → основание без изменений
- n < 0 → 1 / power(base, -n)

Decimal fast path: если coefficient основания ровно 10 (чистая степень
десяти), результат строится сдвигом хранимой экспоненты за O(1), без
умножений. Слой форматирования постоянно возводит 10 в целые степени.

Только целые показатели. Дробные степени → композиция root/log снаружи.
"""

import math
from decimal import Decimal
from typing import Optional

from src.core.math.numeric import NumericKind, classify, one_like
from src.core.math.numerical_safeguards import (
    ONE,
    DivisionByZero,
    Number,
    NumericOverflow,
    validate_finite,
    validate_integer_exponent,
)
from src.core.math.precision import PrecisionConfig, resolve_config

# Coefficient Decimal(10) / Decimal("1.0") / Decimal("1.0E+5")
_TEN_DIGITS = (1, 0)


def _binary_power(base: Number, n: int) -> Number:
    """
    base^n для n >= 1 (square-and-multiply по битам n).

    Decimal-умножения выполняются в текущем контексте.
    """
    result = None
    square = base

    while n > 0:
        if n & 1:
            result = square if result is None else result * square
        n >>= 1
        if n:
            square = square * square

    return result


def _shift_power_of_ten(base: Decimal, n: int) -> Decimal:
    """
    (10 × 10^exp)^n = 10 × 10^((exp + 1) × n - 1).

    Для канонического Decimal(10) (exp == 0) это exp + n - 1.
    Знак сохраняется только для нечётного n.
    """
    sign, _, exp = base.as_tuple()
    result_sign = sign if n % 2 else 0
    return Decimal((result_sign, _TEN_DIGITS, (exp + 1) * n - 1))


def _float_power(base: float, n: int) -> float:
    """
    base^n для float с контролем переполнения.

    Умножение float молча даёт inf; для n < 0 переполнение знаменателя
    даёт 0.0 (как math.pow), а его исчезновение до 0.0 означает
    непредставимо большой результат.
    """
    if n < 0:
        denominator = _binary_power(base, -n)
        if denominator == 0:
            raise NumericOverflow(f"power({base!r}, {n}) is out of float range")
        return 1 / denominator

    result = _binary_power(base, n)
    if not math.isfinite(result):
        raise NumericOverflow(f"power({base!r}, {n}) is out of float range")
    return result


def power(
    base: Number,
    exponent: Number,
    *,
    config: Optional[PrecisionConfig] = None,
) -> Number:
    """
    Возведение числа в целую степень.

    Args:
        base: int, float или Decimal
        exponent: int или Decimal без дробной части
        config: Параметры точности (Decimal-контекст); None → default

    Returns:
        base^exponent в представлении base. Исключение: int с отрицательной
        степенью даёт float (1 / int).

    Raises:
        InvalidArgument: Нецелый показатель, NaN/Inf, неподдерживаемый тип
        DivisionByZero: Нулевое основание с отрицательным показателем
        NumericOverflow: Float-результат вне диапазона float

    Examples:
        >>> power(10, 3)
        1000
        >>> power(2, 10)
        1024
        >>> power(2.0, -2)
        0.25
        >>> power(Decimal(10), 4)
        Decimal('1.0E+4')
    """
    kind = classify(base)
    validate_finite(base, "base")
    n = validate_integer_exponent(exponent)

    if n == 0:
        return one_like(base)

    if n == 1:
        return base

    if n < 0 and base == 0:
        raise DivisionByZero(f"Zero base raised to a negative power: {base!r}^{n}")

    if kind is NumericKind.DECIMAL:
        if base.as_tuple().digits == _TEN_DIGITS:
            return _shift_power_of_ten(base, n)

        with resolve_config(config).decimal_context():
            if n < 0:
                return ONE / _binary_power(base, -n)
            return _binary_power(base, n)

    if kind is NumericKind.FLOAT:
        return _float_power(base, n)

    if n < 0:
        return 1 / _binary_power(base, -n)

    return _binary_power(base, n)
