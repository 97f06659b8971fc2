"""
Тесты публичного API src.core.math

Сквозные сценарии через пакетный импорт: то, что использует слой
форматирования чисел.
"""

from decimal import Decimal

import pytest

import src.core.math as kmath


class TestExports:
    """Все операции ядра доступны из пакета"""

    @pytest.mark.parametrize("name", kmath.__all__)
    def test_export_exists(self, name) -> None:
        assert hasattr(kmath, name)


class TestLiteralScenarios:
    """Эталонные значения"""

    def test_mod(self) -> None:
        assert kmath.mod(1234.0, 5) == 4.0

    def test_power(self) -> None:
        assert kmath.power(10, 3) == 1000

    def test_sqrt(self) -> None:
        assert kmath.sqrt(Decimal(9)) == Decimal("3.0")

    def test_round_significant(self) -> None:
        assert kmath.round_significant(3.14159, 3) == 3.14
        assert kmath.round_significant(0.00035, 1) == 0.0004

    def test_within(self) -> None:
        assert kmath.within(2.0, range(1, 4)) is True
        assert kmath.within(2.1, range(1, 4)) is False

    def test_errors(self) -> None:
        with pytest.raises(kmath.InvalidArgument):
            kmath.sqrt(Decimal(-1))
        with pytest.raises(kmath.DivisionByZero):
            kmath.mod(Decimal(5), 0)


class TestComposition:
    """Композиция операций в Decimal"""

    def test_significant_digits_of_large_decimal(self) -> None:
        value = Decimal("98765.4321")
        mantissa, exponent = kmath.mantissa_exponent(value)
        assert exponent == 4
        assert kmath.round_significant(mantissa, 2) == Decimal("9.9")

    def test_power_then_root(self) -> None:
        cubed = kmath.power(Decimal("1.7"), 3)
        assert abs(kmath.root(cubed, 3) - Decimal("1.7")) < Decimal("1e-10")

    def test_shared_config(self) -> None:
        config = kmath.PrecisionConfig(precision=Decimal("1e-12"), decimal_digits=40)
        result = kmath.sqrt(Decimal(2), config=config)
        assert abs(result * result - 2) < Decimal("1e-11")

    def test_representation_preserved(self) -> None:
        assert kmath.classify(kmath.power(Decimal(3), 2)) is kmath.NumericKind.DECIMAL
        assert kmath.classify(kmath.power(3.0, 2)) is kmath.NumericKind.FLOAT
        assert kmath.classify(kmath.power(3, 2)) is kmath.NumericKind.INTEGER
