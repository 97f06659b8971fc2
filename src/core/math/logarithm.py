"""
Logarithm — натуральный и десятичный логарифм

int/float: math.log / math.log10.

Decimal (вычисляется вручную):
    1. (m, e) = mantissa_exponent(x), 1 <= m < 10
    2. s = sqrt(m), y = (s - 1) / (s + 1)
    3. ln(s) = 2 × artanh(y) ≈ 2 × (y + y^3/3 + y^5/5 + y^7/7)
    4. ln(x) = e × ln(10) + 2 × ln(s)

    log10(x) = ln(x) / ln(10)

ТОЧНОСТЬ:
Ряд artanh обрезан (по умолчанию три члена после y). Это фиксированная
аппроксимация, настроенная под мантиссы в [1, 10): y < 0.52, ошибка
обрезания занижает результат не более чем на ~1e-2 для m → 10 и исчезающе
мала для m → 1. Произвольная точность НЕ гарантируется; больше членов
задаётся через PrecisionConfig.log_series_terms.
"""

import logging
import math
from decimal import Decimal
from typing import Optional

from src.core.math.exponentiation import power
from src.core.math.normalization import mantissa_exponent
from src.core.math.numeric import NumericKind, classify
from src.core.math.numerical_safeguards import (
    LN10,
    ONE,
    TWO,
    ZERO,
    InvalidArgument,
    Number,
    validate_finite,
)
from src.core.math.precision import PrecisionConfig, resolve_config
from src.core.math.roots import sqrt

logger = logging.getLogger(__name__)


def _validate_log_domain(value: Number, name: str) -> NumericKind:
    kind = classify(value)
    validate_finite(value, "value")
    if value <= 0:
        raise InvalidArgument(f"{name} is undefined for non-positive values: {value!r}")
    return kind


def log_series(y: Decimal, terms: tuple[int, ...], config: PrecisionConfig) -> Decimal:
    """
    Сумма y^k / k по нечётным k из terms (без ведущего y).

    Examples:
        >>> log_series(Decimal("0.5"), (3,), DEFAULT_PRECISION_CONFIG)
        Decimal('0.04166666666666666666666666667')
    """
    total = ZERO
    with config.decimal_context():
        for term in terms:
            k = Decimal(term)
            total = power(y, term, config=config) / k + total
    return total


def _decimal_log(value: Decimal, config: PrecisionConfig) -> Decimal:
    mantissa, exponent = mantissa_exponent(value)

    with config.decimal_context():
        ln_ten_part = Decimal(exponent) * LN10

        sqrt_mantissa = sqrt(mantissa, config=config)
        y = (sqrt_mantissa - ONE) / (sqrt_mantissa + ONE)

        ln_sqrt_mantissa = (log_series(y, config.log_series_terms, config) + y) * TWO
        result = TWO * ln_sqrt_mantissa + ln_ten_part

    logger.debug("log(%s): mantissa=%s exponent=%d y=%s", value, mantissa, exponent, y)
    return result


def log(value: Number, *, config: Optional[PrecisionConfig] = None) -> Number:
    """
    Натуральный логарифм.

    Args:
        value: Положительное int, float или Decimal
        config: Параметры точности (Decimal); None → DEFAULT_PRECISION_CONFIG

    Returns:
        float для int/float, Decimal для Decimal

    Raises:
        InvalidArgument: value <= 0, NaN/Inf

    Examples:
        >>> log(123)
        4.812184355372417
        >>> log(Decimal(9000))
        Decimal('9.103886231350952380952380952')
    """
    kind = _validate_log_domain(value, "log")

    if kind is not NumericKind.DECIMAL:
        return math.log(value)

    return _decimal_log(value, resolve_config(config))


def log10(value: Number, *, config: Optional[PrecisionConfig] = None) -> Number:
    """
    Десятичный логарифм.

    Decimal: log10(x) = ln(x) / ln(10), с тем же LN10, что и в log,
    поэтому log10(Decimal(100)) == 2 точно.

    Raises:
        InvalidArgument: value <= 0, NaN/Inf

    Examples:
        >>> log10(100)
        2.0
        >>> log10(Decimal(9000))
        Decimal('3.953767554157656512064441441')
    """
    kind = _validate_log_domain(value, "log10")

    if kind is not NumericKind.DECIMAL:
        return math.log10(value)

    config = resolve_config(config)
    with config.decimal_context():
        return log(value, config=config) / LN10
