"""
Vector2 — Модель двумерного вектора

Immutable Pydantic модель пары (x, y). Любая операция над вектором
возвращает новый экземпляр, исходные значения не изменяются.

Доступ к компонентам: поля v.x / v.y либо функции x(v) / y(v).

Компоненты принимаются только как int/float (strict): строки вроде "3"
не приводятся. inf/NaN допустимы и сериализуются в JSON как
Infinity/NaN, так что round-trip через JSON сохраняет значение.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field


# =============================================================================
# ВНУТРЕННИЕ ПОМОЩНИКИ
# =============================================================================


def _component_pow(base: float, exponent: float) -> float:
    """base ** exponent по правилам IEEE 754 (pow), без исключений math."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        odd_exponent = float(exponent).is_integer() and int(exponent) % 2 == 1
        return -math.inf if base < 0 and odd_exponent else math.inf
    except ValueError:
        # 0 в отрицательной степени либо отрицательное основание в дробной
        if base == 0:
            return math.inf
        return math.nan


# =============================================================================
# VECTOR2 MODEL
# =============================================================================


class Vector2(BaseModel):
    """
    Двумерный евклидов вектор.

    Immutable модель (frozen=True): все операции создают новый экземпляр.

    Поддерживаемые операции:
        v + w, v - w, -v  — покомпонентно
        v * s, s * v, v / s — умножение/деление на скаляр
        v ** s — возведение каждой компоненты в степень s

    Произведение вектора на вектор оператором не поддерживается,
    используйте dot() или cross().
    """

    x: float = Field(..., description="Компонента x")
    y: float = Field(..., description="Компонента y")

    model_config = {
        "frozen": True,  # Immutable
        "strict": True,  # без приведения "3" -> 3.0
        "ser_json_inf_nan": "constants",  # inf/NaN -> Infinity/NaN в JSON
    }

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, scalar: object) -> Vector2:
        if isinstance(scalar, Vector2) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(x=self.x * scalar, y=self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector2:
        if isinstance(scalar, Vector2) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(x=self.x / scalar, y=self.y / scalar)

    def __pow__(self, exponent: object) -> Vector2:
        if isinstance(exponent, Vector2) or not isinstance(exponent, (int, float)):
            return NotImplemented
        return Vector2(
            x=_component_pow(self.x, exponent),
            y=_component_pow(self.y, exponent),
        )

    def __neg__(self) -> Vector2:
        return Vector2(x=-self.x, y=-self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


# =============================================================================
# КОНСТРУКТОР И АКСЕССОРЫ
# =============================================================================


def vec(x: float, y: float) -> Vector2:
    """
    Создание вектора из двух компонент.

    Raises:
        pydantic.ValidationError: Если компонента не является числом

    Examples:
        >>> vec(3, 4)
        Vector2(x=3.0, y=4.0)
    """
    return Vector2(x=x, y=y)


def x(v: Vector2) -> float:
    """Компонента x вектора."""
    return v.x


def y(v: Vector2) -> float:
    """Компонента y вектора."""
    return v.y
