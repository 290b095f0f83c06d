"""Exception types for mass-property handling.

All of them derive from ``ValueError`` so callers that already guard input
validation with ``except ValueError`` keep working.
"""


class InertialError(ValueError):
    """Base exception for mass-property errors."""


class MissingConfigElementError(InertialError):
    """A required parameter-tree element is missing at load time."""

    def __init__(self, path: str) -> None:
        super().__init__(f"missing required element: {path}")
        self.path = path


class InvalidMassError(InertialError):
    """A mass is negative, or a total mass is not positive."""


class InvalidInertiaError(InertialError):
    """An inertia tensor is not symmetric positive semi-definite."""


class MalformedUpdateError(InertialError):
    """An update message could not be decoded."""


__all__ = [
    "InertialError",
    "MissingConfigElementError",
    "InvalidMassError",
    "InvalidInertiaError",
    "MalformedUpdateError",
]
