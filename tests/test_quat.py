from __future__ import annotations

import numpy as np

from rigid_inertia.core.math.quat import (
    quat_from_axis_angle,
    quat_from_rpy,
    quat_identity,
    quat_inverse,
    quat_mul,
    quat_rotate,
    quat_to_rotmat,
    quat_to_rpy,
)


def test_quat_rotate_preserves_norm() -> None:
    rng = np.random.default_rng(123)
    v = rng.normal(size=(100, 3))
    axis = rng.normal(size=(100, 3))
    angle = rng.uniform(low=-np.pi, high=np.pi, size=(100,))
    q = quat_from_axis_angle(axis, angle)

    v_rot = quat_rotate(q, v)
    n0 = np.linalg.norm(v, axis=-1)
    n1 = np.linalg.norm(v_rot, axis=-1)
    assert np.allclose(n0, n1, rtol=1e-12, atol=1e-12)


def test_quat_composition() -> None:
    rng = np.random.default_rng(456)
    v = rng.normal(size=(10, 3))
    q1 = quat_from_axis_angle(rng.normal(size=(10, 3)), rng.normal(size=(10,)))
    q2 = quat_from_axis_angle(rng.normal(size=(10, 3)), rng.normal(size=(10,)))

    v_seq = quat_rotate(q2, quat_rotate(q1, v))
    q_comp = quat_mul(q2, q1)
    v_comp = quat_rotate(q_comp, v)

    assert np.allclose(v_seq, v_comp, rtol=1e-12, atol=1e-12)


def test_rotmat_matches_rotate() -> None:
    rng = np.random.default_rng(7)
    q = quat_from_axis_angle(rng.normal(size=(20, 3)), rng.uniform(-np.pi, np.pi, size=(20,)))
    v = rng.normal(size=(20, 3))
    rot = quat_to_rotmat(q)
    assert np.allclose(np.einsum("bij,bj->bi", rot, v), quat_rotate(q, v))
    eye = np.broadcast_to(np.eye(3), rot.shape)
    assert np.allclose(rot @ np.swapaxes(rot, -1, -2), eye)


def test_quat_inverse() -> None:
    q = quat_from_axis_angle(np.array([1.0, 2.0, -0.5]), 0.8)
    assert np.allclose(quat_mul(q, quat_inverse(q)), quat_identity())


def test_rpy_yaw_matches_axis_angle() -> None:
    q = quat_from_rpy(np.array([0.0, 0.0, 0.7]))
    expected = quat_from_axis_angle(np.array([0.0, 0.0, 1.0]), 0.7)
    assert np.allclose(q, expected)


def test_rpy_is_fixed_axis_xyz() -> None:
    roll, pitch, yaw = 0.3, -0.4, 1.1
    q = quat_from_rpy(np.array([roll, pitch, yaw]))
    qx = quat_from_axis_angle(np.array([1.0, 0.0, 0.0]), roll)
    qy = quat_from_axis_angle(np.array([0.0, 1.0, 0.0]), pitch)
    qz = quat_from_axis_angle(np.array([0.0, 0.0, 1.0]), yaw)
    expected = quat_mul(qz, quat_mul(qy, qx))
    assert np.allclose(quat_to_rotmat(q), quat_to_rotmat(expected))


def test_rpy_round_trip() -> None:
    rng = np.random.default_rng(99)
    rpy = np.stack(
        [
            rng.uniform(-3.0, 3.0, size=50),
            rng.uniform(-1.5, 1.5, size=50),
            rng.uniform(-3.0, 3.0, size=50),
        ],
        axis=-1,
    )
    assert np.allclose(quat_to_rpy(quat_from_rpy(rpy)), rpy, atol=1e-9)
