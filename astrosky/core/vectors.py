"""
Vector and quaternion primitives.

Vectors are numpy arrays of shape (3,). Anything with x/y/z attributes
(CartesianPosition, HorizontalPosition) is accepted wherever a vector is
expected.

Quaternion convention: q = [x, y, z, w] with w the scalar component.
Rotating a vector v by q is q * v * q_conj.
"""

from __future__ import annotations

import numpy as np

from .types import DegenerateInputError


def as_vec(v) -> np.ndarray:
    """Coerce a sequence or an x/y/z record to a float array of shape (3,)."""
    if hasattr(v, "x") and hasattr(v, "y") and hasattr(v, "z"):
        return np.array([v.x, v.y, v.z], dtype=float)
    return np.asarray(v, dtype=float).reshape(3)


def vlensq(v) -> float:
    v = as_vec(v)
    return float(np.dot(v, v))


def vlength(v) -> float:
    return float(np.sqrt(vlensq(v)))


def vnormalize(v) -> np.ndarray:
    """Unit vector along v.

    Raises:
        DegenerateInputError: if v has zero length or is not finite.
    """
    v = as_vec(v)
    n = np.linalg.norm(v)
    if not np.isfinite(n) or n < 1e-300:
        raise DegenerateInputError(f"cannot normalize vector {v.tolist()}")
    return v / n


def vneg(v) -> np.ndarray:
    return -as_vec(v)


def vadd(v, w) -> np.ndarray:
    return as_vec(v) + as_vec(w)


def vsub(v1, v2) -> np.ndarray:
    """v1 - v2"""
    return as_vec(v1) - as_vec(v2)


def vdot(v, w) -> float:
    return float(np.dot(as_vec(v), as_vec(w)))


def vcross(v, w) -> np.ndarray:
    return np.cross(as_vec(v), as_vec(w))


def vmidpoint(v1, v2) -> np.ndarray:
    """Unit vector halfway between v1 and v2."""
    return vnormalize((as_vec(v1) + as_vec(v2)) / 2.0)


# ---------------------------------------------------------------------------
# Quaternions
# ---------------------------------------------------------------------------

def quat_length(q: np.ndarray) -> float:
    return float(np.linalg.norm(q))


def quat_from_axis_angle(axis, angle_deg: float) -> np.ndarray:
    """Rotation of angle_deg degrees about a unit axis."""
    axis = as_vec(axis)
    half = np.radians(angle_deg) * 0.5
    s = np.sin(half)
    return np.array([axis[0] * s, axis[1] * s, axis[2] * s, np.cos(half)])


def quat_from_axis_180(axis) -> np.ndarray:
    """Half-turn about a unit axis (cheaper than quat_from_axis_angle(axis, 180))."""
    axis = as_vec(axis)
    return np.array([axis[0], axis[1], axis[2], 0.0])


def quat_conj(q: np.ndarray) -> np.ndarray:
    return np.array([-q[0], -q[1], -q[2], q[3]])


def quat_mult(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """Hamilton product q1 * q2."""
    x1, y1, z1, w1 = q1
    x2, y2, z2, w2 = q2
    return np.array([
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 - x1*z2 + y1*w2 + z1*x2,
        w1*z2 + x1*y2 - y1*x2 + z1*w2,
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
    ])


def _rotate_by(q: np.ndarray, v) -> np.ndarray:
    v = as_vec(v)
    p = np.array([v[0], v[1], v[2], 0.0])
    r = quat_mult(quat_mult(q, p), quat_conj(q))
    return r[:3]


def rotate_vector(v, axis, angle_deg: float) -> np.ndarray:
    """Rotate v by angle_deg about a unit axis."""
    return _rotate_by(quat_from_axis_angle(axis, angle_deg), v)


def rotate_vector_180(v, axis) -> np.ndarray:
    return _rotate_by(quat_from_axis_180(axis), v)


def move_from_to(v1, v2, v3) -> np.ndarray:
    """
    Apply to v3 the rotation that carries direction v1 onto direction v2.

    Two half-turns compose the rotation: one about the bisector of v1 and v2,
    then one about v2. Nearly opposite v1/v2 make the bisector unstable, so
    both v1 and v3 are reflected through the origin first.
    """
    if vdot(vnormalize(v1), vnormalize(v2)) < -0.1:
        return move_from_to(vneg(v1), v2, vneg(v3))
    mp = vmidpoint(vnormalize(v1), vnormalize(v2))
    i1 = rotate_vector_180(v3, mp)
    return rotate_vector_180(i1, vnormalize(v2))
