"""
Elementary — Скалярные и векторные элементарные функции

Модуль содержит:
- exp(x)          — экспонента
- length(v)       — евклидова норма вектора
- rotvec(v, r)    — поворот вектора против часовой стрелки
- dot(a, b)       — скалярное произведение
- cross(a, b)     — z-компонента векторного произведения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные векторы не изменяются, результат всегда новый Vector2
2. length(rotvec(v, r)) ≈ length(v) для любого r
3. dot(a, b) == dot(b, a), cross(a, b) == -cross(b, a)
4. Переполнение не является ошибкой: результат inf по правилам IEEE 754
"""

import logging
import math
from typing import Final

from src.calcmath.domain.vector import Vector2

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Глобальные константы калькулятора: pi и e
PI: Final[float] = math.pi
E: Final[float] = math.e


# =============================================================================
# СКАЛЯРНЫЕ ФУНКЦИИ
# =============================================================================


def exp(x: float) -> float:
    """
    e в степени x.

    math.exp бросает OverflowError для больших x; здесь переполнение
    приводится к inf, как в обычной арифметике с плавающей точкой.

    Examples:
        >>> exp(0)
        1.0
        >>> exp(1000)
        inf
        >>> exp(float('-inf'))
        0.0
    """
    try:
        return math.exp(x)
    except OverflowError:
        # Python int вне диапазона float: e^(-huge) -> 0.0
        if x < 0:
            return 0.0
        logger.debug("exp(%r) overflowed, returning inf", x)
        return math.inf


# =============================================================================
# ВЕКТОРНЫЕ ФУНКЦИИ
# =============================================================================


def length(v: Vector2) -> float:
    """
    Евклидова норма sqrt(x^2 + y^2).

    math.hypot не переполняется на промежуточном x^2 и даёт точный
    результат для целых пифагоровых троек.

    Examples:
        >>> length(Vector2(x=3, y=4))
        5.0
        >>> length(Vector2(x=0, y=0))
        0.0
    """
    return math.hypot(v.x, v.y)


def rotvec(v: Vector2, r: float) -> Vector2:
    """
    Поворот вектора на угол r (радианы) против часовой стрелки.

    Формулы:
        x' = x*cos(r) - y*sin(r)
        y' = x*sin(r) + y*cos(r)

    Args:
        v: Исходный вектор
        r: Угол поворота в радианах

    Returns:
        Новый повёрнутый вектор той же длины (с точностью до округления).
        Для r = ±inf синус и косинус не определены: компоненты NaN,
        как у sin/cos в IEEE 754.
    """
    try:
        angle = float(r)
    except OverflowError:
        angle = math.inf if r > 0 else -math.inf

    if math.isinf(angle):
        logger.debug("rotvec angle %r is infinite, returning NaN vector", r)
        cos_r = sin_r = math.nan
    else:
        cos_r = math.cos(angle)
        sin_r = math.sin(angle)
    return Vector2(
        x=v.x * cos_r - v.y * sin_r,
        y=v.x * sin_r + v.y * cos_r,
    )


def dot(a: Vector2, b: Vector2) -> float:
    """Скалярное произведение a.x*b.x + a.y*b.y."""
    return a.x * b.x + a.y * b.y


def cross(a: Vector2, b: Vector2) -> float:
    """
    z-компонента векторного произведения a.x*b.y - a.y*b.x.

    Положительна, если поворот от a к b идёт против часовой стрелки.
    """
    return a.x * b.y - a.y * b.x
