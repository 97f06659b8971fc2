"""
Core math modules — decimal-ядро для форматирования чисел

Численные алгоритмы, работающие одинаково над int, float и Decimal:
modulo, power, log/log10, sqrt, root, округление до значащих цифр,
mantissa/exponent нормализация.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    DEFAULT_DECIMAL_DIGITS,
    DEFAULT_LOG_SERIES_TERMS,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    LN10,
    # Exceptions
    ConvergenceError,
    DivisionByZero,
    InvalidArgument,
    MathKernelError,
    NumericOverflow,
    # Types
    Number,
    # Conversions
    to_decimal,
    to_float,
)

# Precision config
from src.core.math.precision import (
    DEFAULT_PRECISION_CONFIG,
    PrecisionConfig,
)

# Variant dispatch
from src.core.math.numeric import NumericKind, classify

# Digits
from src.core.math.digits import (
    DigitTuple,
    FloatDigits,
    digits_to_integer,
    float_to_digits,
    number_of_integer_digits,
    to_tuple,
)

# Algorithms
from src.core.math.normalization import mantissa_exponent
from src.core.math.exponentiation import power
from src.core.math.roots import root, sqrt
from src.core.math.logarithm import log, log10
from src.core.math.rounding import default_rounding, mod, round_significant, within

__all__ = [
    # Constants
    "DEFAULT_DECIMAL_DIGITS",
    "DEFAULT_LOG_SERIES_TERMS",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "LN10",
    # Exceptions
    "MathKernelError",
    "InvalidArgument",
    "DivisionByZero",
    "ConvergenceError",
    "NumericOverflow",
    # Types
    "Number",
    "NumericKind",
    "DigitTuple",
    "FloatDigits",
    # Config
    "PrecisionConfig",
    "DEFAULT_PRECISION_CONFIG",
    # Dispatch & conversions
    "classify",
    "to_decimal",
    "to_float",
    # Digits
    "digits_to_integer",
    "float_to_digits",
    "number_of_integer_digits",
    "to_tuple",
    # Operations
    "within",
    "mod",
    "power",
    "log",
    "log10",
    "sqrt",
    "root",
    "round_significant",
    "mantissa_exponent",
    "default_rounding",
]
