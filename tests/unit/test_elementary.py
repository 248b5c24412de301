"""
Тесты для модуля Elementary

Проверяет:
1. exp: базовые значения и переполнение в inf
2. length: евклидова норма
3. rotvec: поворот и сохранение длины
4. dot / cross: симметрия и антисимметрия
"""

import logging
import math

import pytest

from src.calcmath.domain import Vector2, vec
from src.calcmath.math.elementary import E, PI, cross, dot, exp, length, rotvec


SAMPLE_VECTORS = [
    vec(1, 0),
    vec(0, 1),
    vec(3, 4),
    vec(-2.5, 7.25),
    vec(1e-8, -1e-8),
    vec(1e6, -3e5),
]

SAMPLE_ANGLES = [0.0, math.pi / 6, math.pi / 2, math.pi, 2.5, -1.0, 10 * math.pi]


# =============================================================================
# EXP
# =============================================================================


class TestExp:
    """Тесты для exp"""

    def test_exp_zero_is_one(self) -> None:
        assert exp(0) == 1.0

    def test_exp_one_is_e(self) -> None:
        assert exp(1) == pytest.approx(math.e)

    def test_exp_negative(self) -> None:
        assert exp(-1) == pytest.approx(1 / math.e)

    def test_exp_overflow_returns_inf(self) -> None:
        """Переполнение — не ошибка, а inf"""
        assert exp(1000) == math.inf

    def test_exp_overflow_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.calcmath.math.elementary"):
            exp(1000)
        assert "overflowed" in caplog.text

    def test_exp_huge_int_argument(self) -> None:
        """int вне диапазона float: как e^(±inf)"""
        assert exp(10**400) == math.inf
        assert exp(-(10**400)) == 0.0

    def test_exp_of_constant_e(self) -> None:
        assert exp(1) == pytest.approx(E)

    def test_exp_infinities_and_nan(self) -> None:
        assert exp(math.inf) == math.inf
        assert exp(-math.inf) == 0.0
        assert math.isnan(exp(math.nan))


# =============================================================================
# LENGTH
# =============================================================================


class TestLength:
    """Тесты для length"""

    def test_pythagorean_triple_exact(self) -> None:
        assert length(vec(3, 4)) == 5.0

    def test_zero_vector(self) -> None:
        assert length(vec(0, 0)) == 0.0

    def test_non_negative(self) -> None:
        for v in SAMPLE_VECTORS:
            assert length(v) >= 0.0
            assert length(-v) == length(v)

    def test_zero_only_for_zero_vector(self) -> None:
        assert length(vec(1e-300, 0)) > 0.0
        assert length(vec(0, -1e-300)) > 0.0


# =============================================================================
# ROTVEC
# =============================================================================


class TestRotvec:
    """Тесты для rotvec"""

    def test_quarter_turn(self) -> None:
        """rotvec((1,0), pi/2) ≈ (0,1)"""
        result = rotvec(vec(1, 0), math.pi / 2)
        assert result.x == pytest.approx(0.0, abs=1e-12)
        assert result.y == pytest.approx(1.0)

    def test_half_turn(self) -> None:
        result = rotvec(vec(3, 4), math.pi)
        assert result.x == pytest.approx(-3.0)
        assert result.y == pytest.approx(-4.0)

    def test_zero_angle_identity(self) -> None:
        v = vec(-2.5, 7.25)
        assert rotvec(v, 0.0) == v

    def test_counterclockwise_direction(self) -> None:
        """Положительный угол поворачивает против часовой стрелки"""
        v = vec(1, 0)
        assert cross(v, rotvec(v, 0.3)) > 0

    @pytest.mark.parametrize("angle", SAMPLE_ANGLES)
    def test_length_preserved(self, angle: float) -> None:
        """Инвариант: |length(rotvec(v, r)) - length(v)| < eps"""
        for v in SAMPLE_VECTORS:
            assert length(rotvec(v, angle)) == pytest.approx(length(v), rel=1e-12, abs=1e-15)

    @pytest.mark.parametrize("angle", [math.inf, -math.inf, math.nan])
    def test_non_finite_angle_gives_nan_vector(self, angle: float) -> None:
        """Как sin/cos в IEEE 754: компоненты NaN, без исключения"""
        result = rotvec(vec(1, 0), angle)
        assert math.isnan(result.x)
        assert math.isnan(result.y)

    def test_huge_int_angle_gives_nan_vector(self) -> None:
        result = rotvec(vec(1, 2), 10**400)
        assert math.isnan(result.x)
        assert math.isnan(result.y)

    def test_infinite_angle_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.calcmath.math.elementary"):
            rotvec(vec(1, 0), math.inf)
        assert "is infinite" in caplog.text

    def test_full_turn_with_pi_constant(self) -> None:
        result = rotvec(vec(3, 4), 2 * PI)
        assert result.x == pytest.approx(3.0)
        assert result.y == pytest.approx(4.0)

    def test_input_not_mutated(self) -> None:
        v = vec(1, 2)
        result = rotvec(v, 1.0)
        assert isinstance(result, Vector2)
        assert result is not v
        assert v == vec(1, 2)


# =============================================================================
# DOT / CROSS
# =============================================================================


class TestDot:
    """Тесты для dot"""

    def test_orthogonal_basis(self) -> None:
        assert dot(vec(1, 0), vec(0, 1)) == 0.0

    def test_basic(self) -> None:
        assert dot(vec(1, 2), vec(3, 4)) == 11.0

    def test_symmetric(self) -> None:
        for a in SAMPLE_VECTORS:
            for b in SAMPLE_VECTORS:
                assert dot(a, b) == dot(b, a)

    def test_self_dot_is_length_squared(self) -> None:
        v = vec(3, 4)
        assert dot(v, v) == pytest.approx(length(v) ** 2)


class TestCross:
    """Тесты для cross"""

    def test_basis(self) -> None:
        assert cross(vec(1, 0), vec(0, 1)) == 1.0
        assert cross(vec(0, 1), vec(1, 0)) == -1.0

    def test_antisymmetric(self) -> None:
        for a in SAMPLE_VECTORS:
            for b in SAMPLE_VECTORS:
                assert cross(a, b) == -cross(b, a)

    def test_parallel_is_zero(self) -> None:
        assert cross(vec(2, 4), vec(1, 2)) == 0.0
