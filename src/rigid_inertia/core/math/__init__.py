"""Math utilities namespace."""

from .pose import Pose  # noqa: F401
from .quat import (  # noqa: F401
    quat_conj,
    quat_from_axis_angle,
    quat_from_rpy,
    quat_identity,
    quat_inverse,
    quat_mul,
    quat_normalize,
    quat_rotate,
    quat_to_rotmat,
    quat_to_rpy,
)
from .vector import norm, unit, vec3  # noqa: F401
