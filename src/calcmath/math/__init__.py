"""
Math modules для calcmath

Скалярные и векторные функции, комбинаторика и общие численные проверки.
"""

# Numerical Safeguards
from src.calcmath.math.numerical_safeguards import (
    # Exceptions
    InvalidArgument,
    # Checks
    is_integral,
    is_valid_float,
    # Validation
    validate_finite,
    validate_non_negative,
    validate_non_negative_integral,
)

# Elementary
from src.calcmath.math.elementary import (
    E,
    PI,
    cross,
    dot,
    exp,
    length,
    rotvec,
)

# Combinatorics
from src.calcmath.math.combinatorics import (
    DEFAULT_BINOMIAL_CONFIG,
    LOG_FLOAT_MAX,
    MAX_FLOAT_FACTORIAL_ARG,
    BinomialConfig,
    factorial,
    ncr,
)

__all__ = [
    # Numerical Safeguards: Exceptions
    "InvalidArgument",
    # Numerical Safeguards: Checks
    "is_integral",
    "is_valid_float",
    # Numerical Safeguards: Validation
    "validate_finite",
    "validate_non_negative",
    "validate_non_negative_integral",
    # Elementary: Constants
    "E",
    "PI",
    # Elementary: Functions
    "cross",
    "dot",
    "exp",
    "length",
    "rotvec",
    # Combinatorics: Constants
    "LOG_FLOAT_MAX",
    "MAX_FLOAT_FACTORIAL_ARG",
    # Combinatorics: Config
    "DEFAULT_BINOMIAL_CONFIG",
    "BinomialConfig",
    # Combinatorics: Functions
    "factorial",
    "ncr",
]
