"""Rigid body mass properties: tensor reframing, composition and live binding."""

from .core.math.pose import Pose  # noqa: F401
from .core.rigid_body.mass_properties import MassProperties, compose  # noqa: F401
from .errors import (  # noqa: F401
    InertialError,
    InvalidInertiaError,
    InvalidMassError,
    MalformedUpdateError,
    MissingConfigElementError,
)

__version__ = "0.1.0"
