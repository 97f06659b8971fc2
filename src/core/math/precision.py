"""
PrecisionConfig — параметры точности decimal-ядра

Immutable Pydantic модель со всеми настраиваемыми параметрами итеративных
алгоритмов (sqrt, root, log). Значения по умолчанию воспроизводят
поведение слоя форматирования; DEFAULT_PRECISION_CONFIG создаётся один раз.
"""

from decimal import Decimal, localcontext
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import (
    DEFAULT_DECIMAL_DIGITS,
    DEFAULT_LOG_SERIES_TERMS,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PRECISION,
)


class PrecisionConfig(BaseModel):
    """
    Параметры точности и защитные лимиты.

    Attributes:
        precision: Относительный порог остановки Newton iteration
        max_iterations: Лимит итераций, после которого ConvergenceError
        log_series_terms: Нечётные степени ряда artanh для Decimal log
        decimal_digits: Значащие цифры рабочего Decimal-контекста
    """

    precision: Decimal = Field(
        DEFAULT_PRECISION, gt=0, description="Порог остановки Newton iteration"
    )
    max_iterations: int = Field(
        DEFAULT_MAX_ITERATIONS, gt=0, description="Защитный лимит итераций"
    )
    log_series_terms: tuple[int, ...] = Field(
        DEFAULT_LOG_SERIES_TERMS, description="Степени ряда y^k/k после ведущего y"
    )
    decimal_digits: int = Field(
        DEFAULT_DECIMAL_DIGITS, gt=0, description="Точность Decimal-контекста"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("log_series_terms")
    @classmethod
    def validate_series_terms(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Степени ряда artanh: нечётные и >= 3 (y^1 это ведущий член)"""
        for term in v:
            if term < 3 or term % 2 == 0:
                raise ValueError(f"log series terms must be odd and >= 3, got {term}")
        return v

    def decimal_context(self, extra_digits: int = 0):
        """
        Локальный Decimal-контекст с рабочей точностью (thread-local).

        extra_digits расширяет точность для операций, где целая часть
        промежуточного результата должна быть точной (floored modulo).
        """
        return localcontext(prec=self.decimal_digits + extra_digits)


DEFAULT_PRECISION_CONFIG = PrecisionConfig()


def resolve_config(config: Optional[PrecisionConfig]) -> PrecisionConfig:
    return DEFAULT_PRECISION_CONFIG if config is None else config
