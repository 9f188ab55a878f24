"""Configuration utilities for the joystick panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


MIN_GUIDE_ANGLES = 2


class ConfigurationError(ValueError):
    """Raised when a scale, guide angle set or panel geometry is unusable."""


def check_scale(value: float, name: str) -> float:
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be between 0.0 and 1.0, got {value}")
    return value


def check_angles(angles: Iterable[int]) -> Tuple[int, ...]:
    """Return the angles as a tuple of ints, rejecting sets with fewer than two entries."""
    if angles is None:
        raise ConfigurationError("Guide angles cannot be None")
    result = tuple(int(a) for a in angles)
    if len(result) < MIN_GUIDE_ANGLES:
        raise ConfigurationError(
            f"At least {MIN_GUIDE_ANGLES} guide angles are required, got {len(result)}"
        )
    return result


@dataclass
class JoystickConfig:
    """Container for the user editable joystick configuration."""

    panel_scale: float = 0.9  # panel radius relative to half the short side
    inner_area_scale: float = 0.4  # dead zone radius relative to the panel radius
    joystick_scale: float = 0.2  # stick radius relative to the panel radius
    guide_angles: Tuple[int, ...] = ()

    def __post_init__(self):
        self.validate()

    def validate(self):
        check_scale(self.panel_scale, "panel_scale")
        check_scale(self.inner_area_scale, "inner_area_scale")
        check_scale(self.joystick_scale, "joystick_scale")

        # Either of these leaves no travel between the dead zone and the rim.
        if self.panel_scale == 0.0:
            raise ConfigurationError("panel_scale must be greater than 0.0")
        if self.inner_area_scale == 1.0:
            raise ConfigurationError("inner_area_scale must be less than 1.0")

        # An empty set means "no guide lines"; anything else needs two entries.
        if self.guide_angles:
            self.guide_angles = check_angles(self.guide_angles)
        else:
            self.guide_angles = ()
