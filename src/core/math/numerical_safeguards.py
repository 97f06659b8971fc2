"""
Numerical Safeguards — общие примитивы decimal-ядра

Модуль содержит всё, что разделяют алгоритмы ядра:
- Константы точности (Newton threshold, лимит итераций, ln(10))
- Decimal-литералы (0, 1, 2, -1, 10), создаваемые один раз при импорте
- Таксономию исключений (InvalidArgument, DivisionByZero, NumericOverflow, ConvergenceError)
- Валидацию аргументов и коэрсию в Decimal
- Lossy-конверсию Decimal → float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка поднимается в точке нарушения, частичных результатов нет
2. NaN/Inf никогда не возвращаются для отвергнутого входа
3. Float → Decimal всегда через repr (без двоичного шума)
4. Все константы неизменяемы и инициализируются один раз
"""

import math
from decimal import Decimal
from typing import Final, Union

# =============================================================================
# ТИПЫ
# =============================================================================

# Numeric Value: int | float | Decimal
Number = Union[int, float, Decimal]


# =============================================================================
# DECIMAL-ЛИТЕРАЛЫ
# =============================================================================

ZERO: Final[Decimal] = Decimal(0)
ONE: Final[Decimal] = Decimal(1)
TWO: Final[Decimal] = Decimal(2)
MINUS_ONE: Final[Decimal] = Decimal(-1)
TEN: Final[Decimal] = Decimal(10)


# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Порог остановки Newton iteration (sqrt, root)
DEFAULT_PRECISION: Final[Decimal] = Decimal("0.0001")

# Защитный лимит итераций: non-convergence → ConvergenceError
DEFAULT_MAX_ITERATIONS: Final[int] = 1000

# Нечётные степени ряда artanh после ведущего y: y + y^3/3 + y^5/5 + y^7/7
DEFAULT_LOG_SERIES_TERMS: Final[tuple[int, ...]] = (3, 5, 7)

# Рабочая точность Decimal-контекста (значащие цифры)
DEFAULT_DECIMAL_DIGITS: Final[int] = 28

# Количество дробных цифр по умолчанию для слоя форматирования
DEFAULT_ROUNDING: Final[int] = 3

# ln(10), фиксированная константа для log и log10
LN10: Final[Decimal] = Decimal("2.30258509299")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MathKernelError(Exception):
    """Базовое исключение decimal-ядра."""

    pass


class InvalidArgument(MathKernelError, ValueError):
    """
    Нарушение предусловия операции.

    Поднимается для:
    - отрицательного входа sqrt, неположительного входа log/log10
    - неположительного nth (root) или n (round_significant)
    - нецелого показателя степени (power)
    - NaN/Inf и неподдерживаемых типов

    Не является retryable: вызывающий код обязан проверять домен заранее.
    """

    pass


class DivisionByZero(MathKernelError, ZeroDivisionError):
    """Нулевой modulus (mod) или нулевое основание при отрицательной степени."""

    pass


class NumericOverflow(MathKernelError, OverflowError):
    """Результат конечного float-входа не представим во float (±inf)."""

    pass


class ConvergenceError(MathKernelError, ArithmeticError):
    """
    Итеративный алгоритм не сошёлся за max_iterations.

    Признак malformed input или нарушенного инварианта, а не нехватки точности.
    """

    pass


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_integer_value(value: object) -> bool:
    """True для int, но не для bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_finite_number(value: Number) -> bool:
    """
    Проверка, что значение конечно (не NaN, не Inf).

    Args:
        value: int, float или Decimal

    Returns:
        True для любого int и для конечных float/Decimal
    """
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: Number, name: str) -> None:
    """
    Валидация, что значение конечно.

    Raises:
        InvalidArgument: Если value NaN или Inf
    """
    if not is_finite_number(value):
        raise InvalidArgument(f"{name} must be finite (not NaN/Inf), got {value!r}")


def validate_positive_integer(value: object, name: str) -> int:
    """
    Валидация целого положительного параметра (nth, количество цифр).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidArgument: Если value не int (bool отвергается) или value <= 0

    Examples:
        >>> validate_positive_integer(3, "nth")
        3
    """
    if not is_integer_value(value) or value <= 0:
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
    return value


def validate_integer_exponent(exponent: object) -> int:
    """
    Валидация показателя степени для power.

    Принимается int или Decimal без дробной части.

    Returns:
        Показатель как int

    Raises:
        InvalidArgument: Для float, дробного Decimal, bool и прочих типов
    """
    if is_integer_value(exponent):
        return exponent

    if isinstance(exponent, Decimal):
        if exponent.is_finite() and exponent == exponent.to_integral_value():
            return int(exponent)

    raise InvalidArgument(f"exponent must be an integer, got {exponent!r}")


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def to_decimal(value: Number) -> Decimal:
    """
    Коэрсия числа в Decimal без двоичного шума.

    Float проходит через repr: 3.4 → Decimal("3.4"), а не
    Decimal("3.399999999999999911182158029987...").

    Raises:
        InvalidArgument: Для NaN/Inf и неподдерживаемых типов
    """
    if isinstance(value, Decimal):
        validate_finite(value, "value")
        return value

    if isinstance(value, float):
        validate_finite(value, "value")
        return Decimal(repr(value))

    if is_integer_value(value):
        return Decimal(value)

    raise InvalidArgument(f"Unsupported numeric type: {type(value).__name__}")


def to_float(value: Decimal) -> float:
    """
    Конверсия Decimal → float.

    ВНИМАНИЕ: конверсия с потерей точности. Многие значения не переживут
    round trip Decimal → float → Decimal; используйте только там, где
    точность не важна (например, seed для Newton iteration).

    Значения за пределами диапазона float дают ±inf или ±0.0.

    Args:
        value: Decimal (обязательно)

    Returns:
        sign × coefficient × 10^exponent как float

    Raises:
        InvalidArgument: Если value не Decimal

    Examples:
        >>> to_float(Decimal("1.5"))
        1.5
        >>> to_float(Decimal("-0.25"))
        -0.25
    """
    if not isinstance(value, Decimal):
        raise InvalidArgument(f"to_float expects a Decimal, got {type(value).__name__}")

    return float(value)
