import math

import pytest

from pinhole_vtk import (
    compute_window_center,
    compute_view_angle,
    compute_focal_length,
)


def test_centered_principal_point_gives_zero_window_center():
    assert compute_window_center((320.0, 240.0), 640, 480) == (0.0, 0.0)


def test_odd_image_size_center():
    assert compute_window_center((320.5, 240.5), 641, 481) == (0.0, 0.0)


def test_off_center_principal_point_is_nonzero():
    wcx, wcy = compute_window_center((321.0, 240.0), 640, 480)
    assert wcx != 0.0
    assert wcy == 0.0


def test_window_center_x_offset():
    wcx, _ = compute_window_center((300.0, 240.0), 640, 480)
    assert wcx == pytest.approx(0.0625)


def test_window_center_y_offset():
    _, wcy = compute_window_center((320.0, 200.0), 640, 480)
    assert wcy == pytest.approx(-1.0 / 6.0)


def test_view_angle_sixty_degrees(vga_intrinsics):
    angle = compute_view_angle(vga_intrinsics["focal_len"], vga_intrinsics["ny"])
    assert angle == pytest.approx(60.0)


def test_view_angle_decreases_with_focal_length():
    angles = [compute_view_angle(f, 480) for f in (100.0, 300.0, 600.0, 2000.0)]
    assert angles == sorted(angles, reverse=True)
    assert len(set(angles)) == len(angles)


def test_view_angle_increases_with_image_height():
    angles = [compute_view_angle(500.0, ny) for ny in (120, 480, 1080, 4000)]
    assert angles == sorted(angles)
    assert len(set(angles)) == len(angles)


def test_zero_focal_length_is_straight_angle():
    assert compute_view_angle(0.0, 480) == pytest.approx(180.0)


@pytest.mark.parametrize("angle", [15.0, 45.0, 60.0, 90.0, 120.0])
def test_focal_length_inverts_view_angle(angle):
    f = compute_focal_length(angle, 720)
    assert compute_view_angle(f, 720) == pytest.approx(angle)


def test_focal_length_for_ninety_degrees():
    assert compute_focal_length(90.0, 480) == pytest.approx(240.0)
    assert math.isclose(compute_view_angle(240.0, 480), 90.0)


def test_zero_width_gives_non_finite_window_center():
    wcx, wcy = compute_window_center((320.0, 240.0), 0, 480)
    assert not math.isfinite(wcx)
    assert wcy == 0.0


def test_zero_size_centered_point_is_nan():
    wcx, wcy = compute_window_center((0.0, 0.0), 0, 0)
    assert math.isnan(wcx)
    assert math.isnan(wcy)
