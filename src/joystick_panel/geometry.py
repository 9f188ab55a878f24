from __future__ import annotations
import math
from dataclasses import dataclass

from .config import ConfigurationError, check_scale


@dataclass(frozen=True)
class Point:
    """2D coordinate in widget space (y grows downward)."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class PanelGeometry:
    """Panel center plus the radii that bound the stick and the dead zone."""
    center: Point
    panel_radius: float
    dead_zone_radius: float

    def __post_init__(self) -> None:
        if not self.panel_radius > 0.0:
            raise ConfigurationError(f"Panel radius must be positive, got {self.panel_radius}")
        if not 0.0 <= self.dead_zone_radius < self.panel_radius:
            raise ConfigurationError(
                f"Dead zone radius must be in [0, {self.panel_radius}), got {self.dead_zone_radius}"
            )


@dataclass(frozen=True)
class Signal:
    """Direction in whole degrees counter-clockwise from east, power in [0, 1]."""
    angle: int
    power: float


@dataclass(frozen=True)
class GuideSegment:
    start: Point
    end: Point


def panel_geometry_for_size(
    width: float,
    height: float,
    panel_scale: float,
    inner_area_scale: float,
) -> PanelGeometry:
    """Derive the panel geometry for a widget of the given size."""
    check_scale(panel_scale, "panel_scale")
    check_scale(inner_area_scale, "inner_area_scale")

    panel_radius = min(width, height) / 2.0 * panel_scale
    return PanelGeometry(
        center=Point(width / 2.0, height / 2.0),
        panel_radius=panel_radius,
        dead_zone_radius=panel_radius * inner_area_scale,
    )
