"""I/O namespace."""

from .messages import InertialUpdate, apply_update, update_from_mass_properties  # noqa: F401
from .param_sync import InertialBinding, element_from_mass_properties  # noqa: F401
from .param_tree import (  # noqa: F401
    INERTIAL_TEMPLATE,
    LiveValueProvider,
    ParamElement,
    inertial_element,
    load_inertial,
    save_inertial,
)
