"""
Combinatorics — Факториал и биномиальный коэффициент

Модуль содержит:
- factorial(x)  — x! (целый путь или gamma-обобщение)
- ncr(n, r)     — биномиальный коэффициент n! / ((n-r)! * r!)

ПОЛИТИКА ДОМЕНА (по умолчанию):
    n, r должны быть неотрицательными целыми (int или float без дробной
    части) и r <= n. Любое нарушение → InvalidArgument.
    NaN как sentinel не возвращается.

GAMMA-ОБОБЩЕНИЕ (BinomialConfig(gamma_generalization=True)):
    x! = Γ(x + 1) для нецелых x. Для ncr допускаются вещественные n, r
    при 0 <= r <= n. Отрицательные аргументы и r > n по-прежнему
    → InvalidArgument.

Целые аргументы считаются точно в int-арифметике (math.comb); результат,
не помещающийся во float, возвращается как inf без вычисления
полного целого значения.
"""

import logging
import math
from dataclasses import dataclass
from typing import Final, Optional

from src.calcmath.math.numerical_safeguards import (
    InvalidArgument,
    is_integral,
    validate_finite,
    validate_non_negative,
    validate_non_negative_integral,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Наибольшее n, для которого n! помещается во float (171! > 1.8e308)
MAX_FLOAT_FACTORIAL_ARG: Final[int] = 170

# ln(sys.float_info.max)
LOG_FLOAT_MAX: Final[float] = math.log(1.7976931348623157e308)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BinomialConfig:
    """Политика домена для factorial / ncr.

    gamma_generalization=False: только неотрицательные целые аргументы.
    gamma_generalization=True: нецелые аргументы через Γ(x + 1).
    """
    gamma_generalization: bool = False


DEFAULT_BINOMIAL_CONFIG = BinomialConfig()


# =============================================================================
# ВНУТРЕННИЕ ПОМОЩНИКИ
# =============================================================================


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        logger.debug("integer result has %d bits, returning inf", value.bit_length())
        return math.inf


def _exact_factorial(n: int) -> float:
    """n! для неотрицательного целого n, inf если не помещается во float."""
    if n > MAX_FLOAT_FACTORIAL_ARG:
        logger.debug("factorial(%d) exceeds float range, returning inf", n)
        return math.inf
    return float(math.factorial(n))


def _exact_binomial(n: int, r: int) -> float:
    """
    Точный C(n, r) для 0 <= r <= n.

    Нижняя оценка C(n, k) >= (n / k)^k при k = min(r, n - r) отсекает
    заведомо непредставимые во float результаты до вычисления math.comb.
    """
    k = min(r, n - r)
    if k == 0:
        return 1.0

    if k * math.log(n / k) > LOG_FLOAT_MAX:
        logger.debug("ncr(%d, %d) exceeds float range, returning inf", n, r)
        return math.inf

    return _int_to_float(math.comb(n, k))


def _gamma_factorial(x: float) -> float:
    """Γ(x + 1) с переводом полюсов в InvalidArgument."""
    try:
        return math.gamma(x + 1.0)
    except OverflowError:
        return math.inf
    except ValueError:
        # Полюс: x + 1 неположительное целое
        raise InvalidArgument(f"factorial is undefined at x={x} (pole of gamma)") from None


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(x: float, config: Optional[BinomialConfig] = None) -> float:
    """
    Факториал x!.

    Args:
        x: Аргумент
        config: Политика домена (default: только неотрицательные целые)

    Returns:
        x! как float (inf при переполнении)

    Raises:
        InvalidArgument: Если x вне домена выбранной политики

    Examples:
        >>> factorial(5)
        120.0
        >>> factorial(0)
        1.0
        >>> half = factorial(0.5, BinomialConfig(gamma_generalization=True))
        >>> abs(half - math.sqrt(math.pi) / 2) < 1e-12
        True
    """
    config = config or DEFAULT_BINOMIAL_CONFIG

    try:
        if config.gamma_generalization:
            validate_finite(x, "x")
            if is_integral(x) and x >= 0:
                return _exact_factorial(int(x))
            return _gamma_factorial(x)

        n = validate_non_negative_integral(x, "x")
        return _exact_factorial(n)
    except InvalidArgument as e:
        logger.debug("factorial(%r) rejected: %s", x, e)
        raise


# =============================================================================
# NCR
# =============================================================================


def ncr(n: float, r: float, config: Optional[BinomialConfig] = None) -> float:
    """
    Биномиальный коэффициент n! / ((n-r)! * r!).

    Args:
        n: Размер множества
        r: Размер выборки
        config: Политика домена (default: только неотрицательные целые)

    Returns:
        Биномиальный коэффициент как float (inf при переполнении)

    Raises:
        InvalidArgument: Если n или r отрицательные, NaN/Inf, r > n,
            либо (в политике по умолчанию) нецелые

    Examples:
        >>> ncr(5, 2)
        10.0
        >>> ncr(7, 0)
        1.0
        >>> ncr(2, 5)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidArgument: r must not exceed n, got n=2, r=5
    """
    config = config or DEFAULT_BINOMIAL_CONFIG

    try:
        if config.gamma_generalization:
            validate_non_negative(n, "n")
            validate_non_negative(r, "r")
        else:
            validate_non_negative_integral(n, "n")
            validate_non_negative_integral(r, "r")

        if r > n:
            raise InvalidArgument(f"r must not exceed n, got n={n}, r={r}")
    except InvalidArgument as e:
        logger.debug("ncr(%r, %r) rejected: %s", n, r, e)
        raise

    if is_integral(n) and is_integral(r):
        return _exact_binomial(int(n), int(r))

    return _gamma_factorial(n) / (_gamma_factorial(n - r) * _gamma_factorial(r))
