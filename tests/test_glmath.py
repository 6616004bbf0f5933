import math

import numpy as np
import pytest

from sceneforge.glmath import (
    look_at,
    ortho,
    perspective,
    scale,
    transform_direction,
    transform_point,
    translate,
    yaw_pitch_roll,
)


def _project(matrix, point):
    clip = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def test_translate_moves_points_but_not_directions():
    m = translate((1.0, -2.0, 3.5))
    assert np.allclose(transform_point(m, (4.0, 5.0, 6.0)), (5.0, 3.0, 9.5))
    assert np.allclose(transform_direction(m, (4.0, 5.0, 6.0)), (4.0, 5.0, 6.0))


def test_scale_multiplies_each_axis():
    m = scale((2.0, 3.0, 4.0))
    assert np.allclose(transform_point(m, (1.0, 1.0, 1.0)), (2.0, 3.0, 4.0))


def test_translate_rejects_wrong_size():
    with pytest.raises(ValueError):
        translate((1.0, 2.0))


def test_yaw_pitch_roll_zero_is_identity():
    assert np.allclose(yaw_pitch_roll(0.0, 0.0, 0.0), np.eye(4))


@pytest.mark.parametrize("angles", [(0.3, -1.1, 2.0), (1.0, 0.5, -0.7), (-2.5, 0.1, 0.9)])
def test_yaw_pitch_roll_is_a_proper_rotation(angles):
    rot = yaw_pitch_roll(*angles)[:3, :3]
    assert np.allclose(rot @ rot.T, np.eye(3))
    assert math.isclose(np.linalg.det(rot), 1.0, rel_tol=1e-9)


def test_yaw_turns_forward_axis_towards_x():
    rot = yaw_pitch_roll(math.pi / 2, 0.0, 0.0)
    assert np.allclose(transform_direction(rot, (0.0, 0.0, 1.0)), (1.0, 0.0, 0.0))


def test_yaw_pitch_roll_order_is_yaw_then_pitch_then_roll():
    yaw, pitch, roll = 0.4, -0.8, 1.3
    combined = (
        yaw_pitch_roll(yaw, 0.0, 0.0)
        @ yaw_pitch_roll(0.0, pitch, 0.0)
        @ yaw_pitch_roll(0.0, 0.0, roll)
    )
    assert np.allclose(yaw_pitch_roll(yaw, pitch, roll), combined)


def test_look_at_places_eye_at_origin_and_center_on_negative_z():
    eye = (1.0, 2.0, 3.0)
    center = (4.0, 6.0, 3.0)
    view = look_at(eye, center, (0.0, 0.0, 1.0))
    assert np.allclose(transform_point(view, eye), (0.0, 0.0, 0.0))
    distance = np.linalg.norm(np.subtract(center, eye))
    assert np.allclose(transform_point(view, center), (0.0, 0.0, -distance))
    up_in_view = transform_direction(view, (0.0, 0.0, 1.0))
    assert up_in_view[1] > 0.0
    assert math.isclose(up_in_view[0], 0.0, abs_tol=1e-12)


def test_look_at_rejects_degenerate_direction():
    with pytest.raises(ValueError):
        look_at((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))


def test_perspective_maps_near_and_far_planes_to_ndc_limits():
    near, far = 0.5, 50.0
    proj = perspective(math.radians(60.0), 1.5, near, far)
    assert math.isclose(_project(proj, (0.0, 0.0, -near))[2], -1.0, rel_tol=1e-9)
    assert math.isclose(_project(proj, (0.0, 0.0, -far))[2], 1.0, rel_tol=1e-9)


def test_perspective_edge_of_view_maps_to_unit_y():
    fovy, near = math.radians(90.0), 1.0
    proj = perspective(fovy, 2.0, near, 10.0)
    top = near * math.tan(fovy / 2)
    assert math.isclose(_project(proj, (0.0, top, -near))[1], 1.0, rel_tol=1e-9)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_ortho_maps_box_corners_to_unit_cube():
    left, right, bottom, top, near, far = -2.0, 4.0, -1.0, 3.0, 0.5, 20.0
    proj = ortho(left, right, bottom, top, near, far)
    assert np.allclose(transform_point(proj, (left, bottom, -near)), (-1.0, -1.0, -1.0))
    assert np.allclose(transform_point(proj, (right, top, -far)), (1.0, 1.0, 1.0))


def test_ortho_rejects_empty_volume():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, -1.0, 1.0, 0.1, 10.0)