"""
Rounding & Range — округление до значащих цифр, floored modulo, within

round_significant:
    Округление до n ЗНАЧАЩИХ цифр (не дробных):
        d = ceil(log10(|x|)), p = n - d
        x ≈ round(|x| × 10^p) / 10^p, знак восстанавливается
    Шаг округления масштабированного целого: round-half-away-from-zero
    (0.00035 → 0.0004 при n=1).

mod:
    Floored division: x - floor(x / m) × m. Знак результата совпадает со
    знаком modulus (в отличие от truncated remainder, Python math.fmod).
    Считается точно: truncated remainder (math.fmod, Decimal %) плюс
    коррекция знака, Decimal в контексте, вмещающем целую часть частного.

within:
    Проверка попадания в целый диапазон для plural rules. Float попадает в
    диапазон ТОЛЬКО без дробной части: within(2.1, range(1, 4)) is False.
"""

import math
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal
from typing import Optional, Union

from src.core.math.exponentiation import power
from src.core.math.logarithm import log10
from src.core.math.normalization import mantissa_exponent
from src.core.math.numeric import NumericKind, classify
from src.core.math.numerical_safeguards import (
    DEFAULT_ROUNDING,
    TEN,
    DivisionByZero,
    InvalidArgument,
    Number,
    is_finite_number,
    is_integer_value,
    to_decimal,
    validate_finite,
    validate_positive_integer,
)
from src.core.math.precision import PrecisionConfig, resolve_config

IntegerRange = Union[range, tuple[int, int]]


def default_rounding() -> int:
    """Количество дробных цифр по умолчанию для слоя форматирования."""
    return DEFAULT_ROUNDING


# =============================================================================
# WITHIN
# =============================================================================


def _range_bounds(value_range: IntegerRange) -> tuple[int, int]:
    if isinstance(value_range, range):
        if value_range.step != 1:
            raise InvalidArgument(f"Range step must be 1, got {value_range!r}")
        return value_range.start, value_range.stop - 1

    first, last = value_range
    if not (is_integer_value(first) and is_integer_value(last)):
        raise InvalidArgument(f"Range bounds must be integers, got {value_range!r}")
    return first, last


def within(value: Number, value_range: IntegerRange) -> bool:
    """
    Проверка, что число лежит в целом диапазоне (включительно).

    Args:
        value: int, float или Decimal
        value_range: range с шагом 1 (range(1, 4) означает 1..3) или (first, last)

    Returns:
        int: first <= value <= last
        float/Decimal: True только если нет дробной части и first <= value <= last

    Raises:
        InvalidArgument: range с шагом != 1, нецелые границы tuple

    Examples:
        >>> within(2.0, range(1, 4))
        True
        >>> within(2.1, range(1, 4))
        False
        >>> within(3, (1, 3))
        True
    """
    kind = classify(value)
    first, last = _range_bounds(value_range)

    if kind is NumericKind.INTEGER:
        return first <= value <= last

    if not is_finite_number(value):
        return False

    if kind is NumericKind.FLOAT:
        has_fraction = not value.is_integer()
    else:
        has_fraction = value != value.to_integral_value()

    return not has_fraction and first <= value <= last


# =============================================================================
# MODULO
# =============================================================================


def mod(
    number: Number,
    modulus: Number,
    *,
    config: Optional[PrecisionConfig] = None,
) -> Number:
    """
    Modulo через floored division.

    Результат имеет знак modulus: mod(-7, 3) == 2, mod(7, -3) == -2.

    Смешанные пары Decimal/число: число приводится к Decimal (float через repr,
    поэтому 3.4 → Decimal("3.4")).

    Args:
        number: Делимое (int, float или Decimal)
        modulus: Modulus (int, float или Decimal), не ноль

    Returns:
        - int для пары int/int
        - Decimal если хотя бы один операнд Decimal
        - float в остальных случаях

    Raises:
        DivisionByZero: modulus == 0
        InvalidArgument: NaN/Inf, неподдерживаемый тип

    Examples:
        >>> mod(1234.0, 5)
        4.0
        >>> mod(Decimal("1234.456"), 5)
        Decimal('4.456')
        >>> mod(Decimal("123.456"), Decimal("3.4"))
        Decimal('1.056')
        >>> mod(Decimal("123.456"), 3.4)
        Decimal('1.056')
    """
    number_kind = classify(number)
    modulus_kind = classify(modulus)
    validate_finite(number, "number")
    validate_finite(modulus, "modulus")

    if modulus == 0:
        raise DivisionByZero(f"Modulo by zero: mod({number!r}, {modulus!r})")

    if NumericKind.DECIMAL in (number_kind, modulus_kind):
        return _decimal_mod(to_decimal(number), to_decimal(modulus), resolve_config(config))

    if number_kind is NumericKind.INTEGER and modulus_kind is NumericKind.INTEGER:
        return number - (number // modulus) * modulus

    return _float_mod(number, modulus)


def _floor_remainder(remainder: Number, modulus: Number) -> Number:
    """Truncated remainder (знак делимого) → floored (знак modulus)."""
    if remainder and (remainder < 0) != (modulus < 0):
        return remainder + modulus
    return remainder


def _decimal_mod(number: Decimal, modulus: Decimal, config: PrecisionConfig) -> Decimal:
    # Целая часть частного точна: контекст вмещает её цифры и цифры операндов
    quotient_digits = max(0, number.adjusted() - modulus.adjusted()) + 1
    operand_digits = max(len(number.as_tuple().digits), len(modulus.as_tuple().digits))

    with config.decimal_context(extra_digits=quotient_digits + operand_digits):
        return _floor_remainder(number % modulus, modulus)


def _float_mod(number: Union[int, float], modulus: Union[int, float]) -> float:
    # math.fmod точен и не вычисляет x / m
    return _floor_remainder(math.fmod(number, modulus), modulus)


# =============================================================================
# ROUND SIGNIFICANT
# =============================================================================


def _round_significant_number(value: Union[int, float], n: int) -> Union[int, float]:
    sign = -1 if value < 0 else 1
    magnitude = abs(value)

    # ceil(log10(x)) по точным цифрам: 10^e → e, иначе e + 1
    mantissa, exponent = mantissa_exponent(magnitude)
    d = exponent if mantissa == 1 else exponent + 1
    p = n - d

    # Масштабирование по точным цифрам (repr), без двоичного шума 0.00035 × 10^4
    shifted = to_decimal(magnitude).scaleb(p).to_integral_value(rounding=ROUND_HALF_UP)

    rounded = shifted.scaleb(-p)

    if is_integer_value(value):
        return sign * int(rounded)

    return sign * float(rounded)


def _round_significant_decimal(value: Decimal, n: int, config: PrecisionConfig) -> Decimal:
    if value < 0:
        return -_round_significant_decimal(-value, n, config)

    with config.decimal_context():
        d = log10(value, config=config).to_integral_value(rounding=ROUND_CEILING)
        raised = Decimal(n) - d

        magnitude = power(TEN, raised, config=config)
        shifted = (value * magnitude).to_integral_value(rounding=ROUND_HALF_UP)

        return shifted / magnitude


def round_significant(
    value: Number,
    n: int,
    *,
    config: Optional[PrecisionConfig] = None,
) -> Number:
    """
    Округление до n значащих цифр.

    Это НЕ округление дробных цифр (round / Decimal.quantize):
    - 3.14159 → 3 значащие цифры → 3.14
    - 10.3554 → 1 значащая цифра → 10.0
    - 0.00035 → 1 значащая цифра → 0.0004

    Значащие цифры: 1000 имеет одну значащую цифру, 1006 имеет четыре,
    0.00035 имеет две (ведущие нули только задают порядок величины).

    Args:
        value: int, float или Decimal
        n: Количество значащих цифр (положительный int)
        config: Параметры точности (Decimal); None → DEFAULT_PRECISION_CONFIG

    Returns:
        Округлённое значение в представлении value (int → int)

    Raises:
        InvalidArgument: n не положительный int, NaN/Inf

    Examples:
        >>> round_significant(3.14159, 3)
        3.14
        >>> round_significant(10.3554, 1)
        10.0
        >>> round_significant(0.00035, 1)
        0.0004
        >>> round_significant(Decimal("0.00035"), 1)
        Decimal('0.0004')
    """
    kind = classify(value)
    validate_finite(value, "value")
    n = validate_positive_integer(n, "n")

    if value == 0:
        return value

    if kind is NumericKind.DECIMAL:
        return _round_significant_decimal(value, n, resolve_config(config))

    return _round_significant_number(value, n)
