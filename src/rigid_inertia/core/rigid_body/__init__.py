"""Rigid body mass properties namespace."""

from .mass_properties import MassProperties, compose  # noqa: F401
from .shapes import box, from_point_masses, sphere  # noqa: F401
from .tensor import entries_from_tensor, moi_at, parallel_axis, tensor_from_entries  # noqa: F401
