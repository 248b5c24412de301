"""
Numerical Safeguards — общие проверки для математических функций

Модуль содержит:
- Проверки валидности float (NaN/Inf) и целочисленности
- Единый тип доменной ошибки InvalidArgument

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Доменные ошибки всегда сигнализируются через InvalidArgument
2. Python int вне диапазона float считается невалидным, а не роняет проверку
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Аргумент вне области определения функции.

    Примеры: ncr(n, r) при r > n, факториал отрицательного числа,
    NaN/Inf там, где ожидается целое число.
    """

    pass


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN, Inf или int,
        не помещающийся во float
    """
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_integral(value: float) -> bool:
    """
    Проверка, что значение конечное и не имеет дробной части.

    Examples:
        >>> is_integral(5)
        True
        >>> is_integral(5.0)
        True
        >>> is_integral(5.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    if not is_valid_float(value):
        return False
    return float(value).is_integer()


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        InvalidArgument: Если value NaN/Inf или int вне диапазона float
    """
    if is_valid_float(value):
        return

    if isinstance(value, int):
        raise InvalidArgument(
            f"{name} must be a finite number within float range, "
            f"got an integer of {value.bit_length()} bits"
        )
    raise InvalidArgument(f"{name} must be a finite number (not NaN/Inf), got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и неотрицательное.

    Raises:
        InvalidArgument: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")


def validate_non_negative_integral(value: float, name: str) -> int:
    """
    Валидация неотрицательного целого значения.

    Принимает как int, так и float без дробной части (5.0).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Значение, приведённое к int

    Raises:
        InvalidArgument: Если value отрицательное, дробное или NaN/Inf
    """
    validate_non_negative(value, name)

    if not is_integral(value):
        raise InvalidArgument(f"{name} must be an integer, got {value}")

    return int(value)
