import math

import pytest

from solar_system.navigation import OrbitControls


def distance(a, b):
    return math.sqrt(sum((a[i] - b[i]) ** 2 for i in range(3)))


def test_starts_at_given_position():
    controls = OrbitControls((-60, 100, 180))
    assert controls.position == pytest.approx((-60, 100, 180))
    assert not controls.moving


def test_update_without_input_keeps_camera_still():
    controls = OrbitControls((-60, 100, 180))
    for _ in range(10):
        position = controls.update()
    assert position == pytest.approx((-60, 100, 180))


def test_rotation_is_damped_toward_rest():
    controls = OrbitControls((0, 0, 100), damping_factor=0.05)
    controls.rotate_left(1.0)
    controls.update()
    first_step = controls.theta
    assert first_step == pytest.approx(-0.05)
    for _ in range(500):
        controls.update()
    assert controls.theta == pytest.approx(-1.0, abs=1e-6)


def test_rotation_keeps_distance_to_target():
    controls = OrbitControls((-60, 100, 180))
    radius = controls.radius
    controls.rotate_left(0.7)
    controls.rotate_up(0.3)
    for _ in range(30):
        position = controls.update()
    assert distance(position, controls.target) == pytest.approx(radius)


def test_without_damping_input_applies_at_once():
    controls = OrbitControls((0, 0, 100), enable_damping=False)
    controls.rotate_left(0.5)
    controls.update()
    assert controls.theta == pytest.approx(-0.5)
    controls.update()
    assert controls.theta == pytest.approx(-0.5)


def test_polar_angle_is_clamped():
    controls = OrbitControls((0, 0, 100), enable_damping=False)
    controls.rotate_up(10)
    controls.update()
    assert 0 < controls.phi < math.pi


def test_zoom_respects_limits():
    controls = OrbitControls((0, 0, 100), min_distance=20, max_distance=150)
    controls.dolly_in(0.5)
    controls.update()
    assert controls.radius == pytest.approx(50)
    for _ in range(10):
        controls.dolly_in(0.5)
        controls.update()
    assert controls.radius == pytest.approx(20)
    for _ in range(10):
        controls.dolly_out(0.5)
        controls.update()
    assert controls.radius == pytest.approx(150)


def test_pan_moves_target_and_camera_together():
    controls = OrbitControls((0, 0, 100), enable_damping=False)
    controls.pan(0.1, 0.0)
    position = controls.update()
    assert controls.target[0] != 0
    assert distance(position, controls.target) == pytest.approx(100)
