"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Таксономию исключений (иерархия и совместимость со встроенными)
2. Валидацию целых параметров и показателей степени
3. Коэрсию в Decimal без двоичного шума
4. Lossy-конверсию to_float
5. Variant dispatch (classify)
"""

import math
from decimal import Decimal

import pytest

from src.core.math.numeric import NumericKind, classify, one_like, zero_like
from src.core.math.numerical_safeguards import (
    LN10,
    ConvergenceError,
    DivisionByZero,
    InvalidArgument,
    MathKernelError,
    NumericOverflow,
    is_finite_number,
    is_integer_value,
    to_decimal,
    to_float,
    validate_finite,
    validate_integer_exponent,
    validate_positive_integer,
)

# =============================================================================
# ТЕСТЫ ИСКЛЮЧЕНИЙ
# =============================================================================


class TestExceptionTaxonomy:
    """Тесты иерархии исключений"""

    def test_all_errors_share_base(self) -> None:
        """Все ошибки ядра наследуют MathKernelError"""
        for error in (InvalidArgument, DivisionByZero, NumericOverflow, ConvergenceError):
            assert issubclass(error, MathKernelError)

    def test_builtin_compatibility(self) -> None:
        """Ошибки ловятся стандартными except-ветками"""
        assert issubclass(InvalidArgument, ValueError)
        assert issubclass(DivisionByZero, ZeroDivisionError)
        assert issubclass(ConvergenceError, ArithmeticError)
        assert issubclass(NumericOverflow, OverflowError)


# =============================================================================
# ТЕСТЫ ПРЕДИКАТОВ И ВАЛИДАЦИИ
# =============================================================================


class TestPredicates:
    """Тесты is_integer_value и is_finite_number"""

    def test_bool_is_not_integer(self) -> None:
        assert is_integer_value(5)
        assert not is_integer_value(True)
        assert not is_integer_value(5.0)

    def test_finite_numbers(self) -> None:
        assert is_finite_number(1)
        assert is_finite_number(1.5)
        assert is_finite_number(Decimal("1.5"))

    def test_non_finite_numbers(self) -> None:
        assert not is_finite_number(float("nan"))
        assert not is_finite_number(float("inf"))
        assert not is_finite_number(Decimal("NaN"))
        assert not is_finite_number(Decimal("-Infinity"))


class TestValidation:
    """Тесты валидаторов аргументов"""

    def test_validate_finite_raises_on_nan(self) -> None:
        with pytest.raises(InvalidArgument, match="must be finite"):
            validate_finite(float("nan"), "value")

    def test_positive_integer_accepted(self) -> None:
        assert validate_positive_integer(1, "nth") == 1
        assert validate_positive_integer(42, "nth") == 42

    @pytest.mark.parametrize("bad", [0, -1, 2.0, True, "3", None])
    def test_positive_integer_rejected(self, bad) -> None:
        """Ноль, отрицательные, float, bool и строки отвергаются"""
        with pytest.raises(InvalidArgument, match="nth must be a positive integer"):
            validate_positive_integer(bad, "nth")

    def test_integer_exponent_from_decimal(self) -> None:
        """Decimal без дробной части допустим как показатель"""
        assert validate_integer_exponent(Decimal("3")) == 3
        assert validate_integer_exponent(Decimal("-2.00")) == -2
        assert validate_integer_exponent(7) == 7

    @pytest.mark.parametrize("bad", [2.0, 0.5, Decimal("1.5"), Decimal("NaN"), False])
    def test_integer_exponent_rejected(self, bad) -> None:
        with pytest.raises(InvalidArgument, match="exponent must be an integer"):
            validate_integer_exponent(bad)


# =============================================================================
# ТЕСТЫ КОНВЕРСИЙ
# =============================================================================


class TestToDecimal:
    """Тесты to_decimal"""

    def test_float_goes_through_repr(self) -> None:
        """3.4 → Decimal('3.4'), без двоичного хвоста"""
        assert to_decimal(3.4) == Decimal("3.4")
        assert to_decimal(0.1) == Decimal("0.1")

    def test_integer_and_decimal(self) -> None:
        assert to_decimal(5) == Decimal(5)
        value = Decimal("1.23")
        assert to_decimal(value) is value

    def test_rejects_non_finite_and_unsupported(self) -> None:
        with pytest.raises(InvalidArgument):
            to_decimal(float("inf"))
        with pytest.raises(InvalidArgument, match="Unsupported numeric type"):
            to_decimal("1.5")


class TestToFloat:
    """Тесты to_float (lossy)"""

    def test_exact_values(self) -> None:
        assert to_float(Decimal("1.5")) == 1.5
        assert to_float(Decimal("-0.25")) == -0.25
        assert to_float(Decimal("1E+3")) == 1000.0

    def test_lossy_conversion_is_close(self) -> None:
        """Длинный Decimal теряет цифры, но остаётся близким"""
        value = Decimal("3.141592653589793238462643383")
        assert to_float(value) == pytest.approx(math.pi)

    def test_requires_decimal(self) -> None:
        with pytest.raises(InvalidArgument, match="expects a Decimal"):
            to_float(1.5)

    def test_ln10_constant(self) -> None:
        assert to_float(LN10) == pytest.approx(math.log(10), abs=1e-11)


# =============================================================================
# ТЕСТЫ VARIANT DISPATCH
# =============================================================================


class TestClassify:
    """Тесты classify, one_like, zero_like"""

    def test_variants(self) -> None:
        assert classify(3) is NumericKind.INTEGER
        assert classify(3.0) is NumericKind.FLOAT
        assert classify(Decimal(3)) is NumericKind.DECIMAL

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidArgument, match="Unsupported numeric type: bool"):
            classify(True)

    def test_one_like_matches_representation(self) -> None:
        assert type(one_like(7)) is int
        assert type(one_like(7.5)) is float
        assert one_like(Decimal("7.5")) == Decimal(1)
        assert isinstance(one_like(Decimal("7.5")), Decimal)

    def test_zero_like(self) -> None:
        assert zero_like(3) == 0 and type(zero_like(3)) is int
        assert type(zero_like(3.0)) is float
        assert isinstance(zero_like(Decimal(3)), Decimal)
