"""
Roots — квадратный корень и корень n-й степени (Newton's method)

sqrt:
    Decimal: seed из math.sqrt(to_float(x)), затем Newton iteration
        e' = (e + x / e) / 2
    до |e' - e| <= e × precision (относительный порог). Быстрый float seed
    обычно оставляет ~2 итерации; итоговая точность определяется только
    Newton loop, не seed.
    int/float: math.sqrt.

root:
    seed x^(1/nth) во float, затем
        delta = (1/nth) × (x / r^(nth-1) - r),  r' = r + delta
    до |delta| <= precision × max(1, |r|).
    Decimal итерирует в Decimal, числа во float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательный вход sqrt → InvalidArgument (комплексных чисел нет)
2. nth валидируется (int > 0) до входа в цикл
3. Цикл ограничен max_iterations → ConvergenceError вместо зависания
"""

import logging
import math
from decimal import Decimal
from typing import Optional

from src.core.math.exponentiation import power
from src.core.math.numeric import NumericKind, classify, zero_like
from src.core.math.numerical_safeguards import (
    ONE,
    TEN,
    TWO,
    ConvergenceError,
    InvalidArgument,
    Number,
    to_decimal,
    to_float,
    validate_finite,
    validate_positive_integer,
)
from src.core.math.precision import PrecisionConfig, resolve_config

logger = logging.getLogger(__name__)


# =============================================================================
# SEED
# =============================================================================


def _decimal_seed(value: Decimal, nth: int) -> Decimal:
    """
    Начальное приближение корня nth степени для положительного Decimal.

    Float seed теряет точность (допустимо только для seed). Если значение
    вне диапазона float (seed == inf или 0.0), используется порядок величины
    10^(adjusted // nth).
    """
    approximation = to_float(value)
    seed = math.sqrt(approximation) if nth == 2 else math.pow(approximation, 1.0 / nth)
    if math.isfinite(seed) and seed > 0.0:
        return Decimal(repr(seed))

    return TEN ** (value.adjusted() // nth)


def _not_converged(name: str, value: Number, config: PrecisionConfig) -> ConvergenceError:
    logger.warning(
        "%s did not converge for %r within %d iterations",
        name,
        value,
        config.max_iterations,
    )
    return ConvergenceError(
        f"{name}({value!r}) did not converge within {config.max_iterations} iterations "
        f"(precision={config.precision})"
    )


# =============================================================================
# SQUARE ROOT
# =============================================================================


def _decimal_sqrt(value: Decimal, precision: Decimal, config: PrecisionConfig) -> Decimal:
    estimate = _decimal_seed(value, 2)

    with config.decimal_context():
        for iteration in range(1, config.max_iterations + 1):
            new_estimate = (estimate + value / estimate) / TWO
            if abs(new_estimate - estimate) <= estimate * precision:
                logger.debug("sqrt(%s) converged after %d iterations", value, iteration)
                return new_estimate
            estimate = new_estimate

    raise _not_converged("sqrt", value, config)


def sqrt(
    value: Number,
    precision: Optional[Number] = None,
    *,
    config: Optional[PrecisionConfig] = None,
) -> Number:
    """
    Квадратный корень.

    Args:
        value: Неотрицательное int, float или Decimal
        precision: Порог остановки Newton iteration (default: config.precision)
        config: Параметры точности; None → DEFAULT_PRECISION_CONFIG

    Returns:
        Decimal для Decimal входа, float для int/float

    Raises:
        InvalidArgument: Отрицательный вход, NaN/Inf, неположительный precision
        ConvergenceError: Превышен max_iterations

    Examples:
        >>> sqrt(Decimal(9))
        Decimal('3.0')
        >>> sqrt(16)
        4.0
    """
    kind = classify(value)
    validate_finite(value, "value")
    config = resolve_config(config)

    if value < 0:
        raise InvalidArgument(f"Square root of a negative number is undefined: {value!r}")

    if kind is not NumericKind.DECIMAL:
        return math.sqrt(value)

    if value == 0:
        return value

    threshold = config.precision if precision is None else to_decimal(precision)
    if threshold <= 0:
        raise InvalidArgument(f"precision must be positive, got {precision!r}")

    return _decimal_sqrt(value, threshold, config)


# =============================================================================
# N-TH ROOT
# =============================================================================


def _float_root(value: float, nth: int, config: PrecisionConfig) -> float:
    root_estimate = math.pow(value, 1.0 / nth)
    threshold = float(config.precision)

    for iteration in range(1, config.max_iterations + 1):
        delta = (value / math.pow(root_estimate, nth - 1) - root_estimate) / nth
        root_estimate = root_estimate + delta
        if abs(delta) <= threshold * max(1.0, abs(root_estimate)):
            logger.debug("root(%r, %d) converged after %d iterations", value, nth, iteration)
            return root_estimate

    raise _not_converged("root", value, config)


def _decimal_root(value: Decimal, nth: int, config: PrecisionConfig) -> Decimal:
    root_estimate = _decimal_seed(value, nth)
    decimal_nth = Decimal(nth)

    with config.decimal_context():
        for iteration in range(1, config.max_iterations + 1):
            divisor = power(root_estimate, nth - 1, config=config)
            delta = (value / divisor - root_estimate) / decimal_nth
            root_estimate = root_estimate + delta
            if abs(delta) <= config.precision * max(ONE, abs(root_estimate)):
                logger.debug("root(%s, %d) converged after %d iterations", value, nth, iteration)
                return root_estimate

    raise _not_converged("root", value, config)


def root(
    value: Number,
    nth: int,
    *,
    config: Optional[PrecisionConfig] = None,
) -> Number:
    """
    Корень nth степени (Newton's method).

    Отрицательный value допустим только для нечётного nth: root(-8, 3) == -2.

    Args:
        value: int, float или Decimal
        nth: Положительный int
        config: Параметры точности; None → DEFAULT_PRECISION_CONFIG

    Returns:
        Decimal для Decimal входа, float для int/float

    Raises:
        InvalidArgument: nth не положительный int; отрицательный value при чётном nth
        ConvergenceError: Превышен max_iterations

    Examples:
        >>> root(Decimal(8), 3)
        Decimal('2.0')
        >>> root(Decimal(16), 4)
        Decimal('2.0')
    """
    kind = classify(value)
    validate_finite(value, "value")
    nth = validate_positive_integer(nth, "nth")
    config = resolve_config(config)

    if value == 0:
        return zero_like(value) if kind is NumericKind.DECIMAL else 0.0

    if value < 0:
        if nth % 2 == 0:
            raise InvalidArgument(
                f"Even root of a negative number is undefined: root({value!r}, {nth})"
            )
        return -root(-value, nth, config=config)

    if nth == 1:
        return value if kind is NumericKind.DECIMAL else float(value)

    if kind is NumericKind.DECIMAL:
        return _decimal_root(value, nth, config)

    return _float_root(float(value), nth, config)
