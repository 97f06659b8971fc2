"""
Тесты для Mantissa/Exponent нормализации

Проверяемые инварианты:
1. value == mantissa × 10^exponent
2. 1 <= |mantissa| < 10 для ненулевых значений
3. Ветка |value| <= 1 (включая ровно ±1) и ветка |value| > 1
4. Float нормализуется по точным цифрам
5. Исходное значение не изменяется
"""

from decimal import Decimal

import pytest

from src.core.math.normalization import mantissa_exponent
from src.core.math.numerical_safeguards import InvalidArgument


class TestDecimalGreaterThanOne:
    """Ветка |value| > 1"""

    def test_integer_valued(self) -> None:
        mantissa, exponent = mantissa_exponent(Decimal("465"))
        assert mantissa == Decimal("4.65")
        assert exponent == 2

    def test_fractional(self) -> None:
        assert mantissa_exponent(Decimal("1.23004")) == (Decimal("1.23004"), 0)

    def test_negative(self) -> None:
        mantissa, exponent = mantissa_exponent(Decimal("-46.543"))
        assert mantissa == Decimal("-4.6543")
        assert exponent == 1

    def test_positive_stored_exponent(self) -> None:
        """4.65E+5: coefficient 465, exponent 3"""
        assert mantissa_exponent(Decimal("4.65E+5")) == (Decimal("4.65"), 5)

    def test_mantissa_keeps_digits(self) -> None:
        """Цифры coefficient не меняются, только экспонента"""
        mantissa, _ = mantissa_exponent(Decimal("9000"))
        assert mantissa.as_tuple().digits == (9, 0, 0, 0)
        assert mantissa == Decimal(9)


class TestDecimalBetweenMinusOneAndOne:
    """Ветка |value| <= 1"""

    def test_small_value(self) -> None:
        mantissa, exponent = mantissa_exponent(Decimal("0.00035"))
        assert mantissa == Decimal("3.5")
        assert exponent == -4

    def test_exactly_one(self) -> None:
        assert mantissa_exponent(Decimal("1")) == (Decimal(1), 0)
        assert mantissa_exponent(Decimal("1.00")) == (Decimal(1), 0)

    def test_exactly_minus_one(self) -> None:
        assert mantissa_exponent(Decimal("-1")) == (Decimal(-1), 0)

    def test_half(self) -> None:
        assert mantissa_exponent(Decimal("0.5")) == (Decimal(5), -1)
        assert mantissa_exponent(Decimal("-0.050")) == (Decimal(-5), -2)


class TestFloat:
    """Float: те же две ветки по точным цифрам"""

    def test_small_float(self) -> None:
        assert mantissa_exponent(0.00035) == (3.5, -4)

    def test_large_float(self) -> None:
        assert mantissa_exponent(465.0) == (4.65, 2)
        assert mantissa_exponent(-46.543) == (-4.6543, 1)

    def test_one(self) -> None:
        assert mantissa_exponent(1.0) == (1.0, 0)

    def test_mantissa_is_float(self) -> None:
        mantissa, _ = mantissa_exponent(123.25)
        assert isinstance(mantissa, float)
        assert mantissa == 1.2325


class TestIntegerAndZero:
    """int и ноль"""

    def test_integer(self) -> None:
        assert mantissa_exponent(465) == (4.65, 2)
        assert mantissa_exponent(1000) == (1.0, 3)

    @pytest.mark.parametrize("zero", [0, 0.0, Decimal(0)])
    def test_zero(self, zero) -> None:
        mantissa, exponent = mantissa_exponent(zero)
        assert mantissa == 0
        assert type(mantissa) is type(zero)
        assert exponent == 0


class TestInvariants:
    """Инварианты нормализации"""

    @pytest.mark.parametrize(
        "value",
        ["0.00035", "0.1", "0.999", "1", "1.5", "9.99", "10", "12345.678", "-0.02", "-98765"],
    )
    def test_reconstruction_and_range(self, value) -> None:
        number = Decimal(value)
        mantissa, exponent = mantissa_exponent(number)

        assert mantissa.scaleb(exponent) == number
        assert Decimal(1) <= abs(mantissa) < Decimal(10)

    def test_source_not_mutated(self) -> None:
        number = Decimal("123.45")
        before = number.as_tuple()
        mantissa_exponent(number)
        assert number.as_tuple() == before

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            mantissa_exponent(Decimal("Infinity"))
        with pytest.raises(InvalidArgument):
            mantissa_exponent(float("nan"))
