import math

import numpy as np
import pytest

from astrosky.core import CartesianPosition, DegenerateInputError
from astrosky.core.vectors import (
    quat_conj,
    quat_from_axis_180,
    quat_from_axis_angle,
    quat_length,
    quat_mult,
    move_from_to,
    rotate_vector,
    rotate_vector_180,
    vadd,
    vcross,
    vdot,
    vlength,
    vmidpoint,
    vneg,
    vnormalize,
    vsub,
)


def test_basic_vector_ops():
    assert vlength((3.0, 4.0, 0.0)) == 5.0
    assert vadd((1, 2, 3), (1, 1, 1)) == pytest.approx([2, 3, 4])
    assert vsub((1, 2, 3), (1, 1, 1)) == pytest.approx([0, 1, 2])
    assert vneg((1, -2, 3)) == pytest.approx([-1, 2, -3])
    assert vdot((1, 0, 0), (0, 1, 0)) == 0.0
    assert vcross((1, 0, 0), (0, 1, 0)) == pytest.approx([0, 0, 1])


def test_accepts_records():
    p = CartesianPosition(3.0, 0.0, 4.0)
    assert vlength(p) == 5.0
    assert vnormalize(p) == pytest.approx([0.6, 0.0, 0.8])


def test_normalize_zero_raises():
    with pytest.raises(DegenerateInputError):
        vnormalize((0.0, 0.0, 0.0))


def test_midpoint_is_unit():
    m = vmidpoint((1, 0, 0), (0, 1, 0))
    assert m == pytest.approx([math.sqrt(0.5), math.sqrt(0.5), 0.0])


def test_quaternion_rotation_about_z():
    v = rotate_vector((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), 90.0)
    assert v == pytest.approx([0.0, 1.0, 0.0], abs=1e-12)


def test_quaternion_length_and_conjugate():
    q = quat_from_axis_angle((0.0, 1.0, 0.0), 73.0)
    assert quat_length(q) == pytest.approx(1.0)
    identity = quat_mult(q, quat_conj(q))
    assert identity == pytest.approx([0.0, 0.0, 0.0, 1.0], abs=1e-12)


def test_half_turn_matches_general_rotation():
    axis = vnormalize((1.0, 2.0, -0.5))
    v = (0.3, -1.0, 2.0)
    assert rotate_vector_180(v, axis) == pytest.approx(rotate_vector(v, axis, 180.0), abs=1e-12)
    assert quat_from_axis_180(axis) == pytest.approx(quat_from_axis_angle(axis, 180.0), abs=1e-12)


def test_rotation_composition():
    z = (0.0, 0.0, 1.0)
    q = quat_mult(quat_from_axis_angle(z, 30.0), quat_from_axis_angle(z, 60.0))
    assert q == pytest.approx(quat_from_axis_angle(z, 90.0), abs=1e-12)


@pytest.mark.parametrize("v1,v2", [
    ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    ((1.0, 2.0, 3.0), (-1.0, 0.5, 0.2)),
    ((0.0, 0.0, 1.0), (0.05, 0.0, -1.0)),   # nearly opposite: reflected path
])
def test_move_from_to_carries_v1_onto_v2(v1, v2):
    moved = move_from_to(v1, v2, v1)
    assert vnormalize(moved) == pytest.approx(vnormalize(v2), abs=1e-9)
    assert vlength(moved) == pytest.approx(vlength(v1))


def test_move_from_to_preserves_angles():
    v1, v2 = (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)
    a, b = np.array([0.2, 0.9, 0.1]), np.array([-0.5, 0.3, 0.7])
    before = vdot(a, b)
    after = vdot(move_from_to(v1, v2, a), move_from_to(v1, v2, b))
    assert after == pytest.approx(before)
