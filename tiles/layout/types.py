"""Shared layout types."""

from enum import Enum


class Axis(Enum):
    """Direction along which a split divides its region.

    HORIZONTAL places the two children side by side, VERTICAL stacks them.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def from_string(cls, value: str) -> "Axis":
        """Parse an axis from its name or first letter ("h", "vertical", ...)."""
        value = value.strip().lower()
        for axis in cls:
            if value in (axis.value, axis.value[0]):
                return axis
        raise ValueError(f"Invalid axis: {value!r}")

    @property
    def short(self) -> str:
        return self.value[0].upper()
