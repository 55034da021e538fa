from __future__ import annotations

import math

import pytest

from crustier.core.geometry import (
    Point,
    ShapeError,
    arc_points,
    arc_sweep,
    as_point,
    is_finite_point,
)


def test_point_is_a_tuple() -> None:
    p = Point(1.5, -2.0)
    assert p == (1.5, -2.0)
    x, y = p
    assert (x, y) == (1.5, -2.0)
    assert str(p) == "(1.5, -2.0)"


def test_as_point_coerces_ints() -> None:
    p = as_point([3, 4])
    assert isinstance(p, Point)
    assert p == (3.0, 4.0)


@pytest.mark.parametrize("bad", [(1,), (1, 2, 3), "ab", 5, (True, 1), ("a", 1)])
def test_as_point_rejects(bad: object) -> None:
    with pytest.raises(ShapeError):
        as_point(bad)  # type: ignore[arg-type]


def test_is_finite_point() -> None:
    assert is_finite_point(Point(0.0, 1.0))
    assert not is_finite_point(Point(math.nan, 1.0))
    assert not is_finite_point(Point(0.0, -math.inf))


def test_arc_sweep_full_turn_follows_direction() -> None:
    assert arc_sweep(0.0, 2 * math.pi, clockwise=True) == -2 * math.pi
    assert arc_sweep(0.0, 2 * math.pi, clockwise=False) == 2 * math.pi


def test_arc_sweep_partial() -> None:
    assert arc_sweep(0.0, math.pi / 2, clockwise=False) == pytest.approx(math.pi / 2)
    assert arc_sweep(0.0, math.pi / 2, clockwise=True) == pytest.approx(
        -3 * math.pi / 2
    )
    assert arc_sweep(math.pi / 2, 0.0, clockwise=True) == pytest.approx(-math.pi / 2)


def test_arc_points_full_circle_closes() -> None:
    pts = arc_points(Point(10.0, 20.0), 5.0, 0.0, 2 * math.pi, True, max_step_deg=10)
    assert len(pts) >= 37
    assert pts[0] == pytest.approx((15.0, 20.0))
    assert pts[-1] == pytest.approx((15.0, 20.0))
    for p in pts:
        assert math.hypot(p.x - 10.0, p.y - 20.0) == pytest.approx(5.0)
    # Clockwise (negative sweep) heads toward -y first.
    assert pts[1].y < 20.0
    for a, b in zip(pts, pts[1:]):
        chord = math.hypot(b.x - a.x, b.y - a.y)
        assert chord <= 2 * 5.0 * math.sin(math.radians(10) / 2) + 1e-9


def test_arc_points_zero_sweep_has_two_points() -> None:
    pts = arc_points(Point(0.0, 0.0), 1.0, 1.0, 1.0, False)
    assert len(pts) == 2
    assert pts[0] == pts[-1]
