from __future__ import annotations
import logging
import math
from enum import Enum, auto
from typing import Optional

from .config import ConfigurationError
from .geometry import PanelGeometry, Point, Signal


logger = logging.getLogger(__name__)


class PointerPhase(Enum):
    """Phase of a pointer event delivered by the host."""
    PRESS = auto()
    MOVE = auto()
    RELEASE = auto()


class StickMapper:
    """
    Maps pointer coordinates to a stick position and an (angle, power) signal.
    Responsibilities:
      - Own the panel geometry and the current stick position
      - Clamp the stick onto the panel
      - Derive angle/power, applying the dead zone
    """

    def __init__(self, geometry: Optional[PanelGeometry] = None) -> None:
        self._geometry: Optional[PanelGeometry] = None
        self._position = Point(0.0, 0.0)
        if geometry is not None:
            self.set_geometry(geometry)

    # ---- geometry ----
    @property
    def geometry(self) -> Optional[PanelGeometry]:
        return self._geometry

    def set_panel_geometry(self, center: Point, panel_radius: float, dead_zone_radius: float) -> None:
        self.set_geometry(PanelGeometry(center, float(panel_radius), float(dead_zone_radius)))

    def set_geometry(self, geometry: PanelGeometry) -> None:
        logger.debug(
            "Panel geometry: center=(%.1f, %.1f) radius=%.1f dead_zone=%.1f",
            geometry.center.x, geometry.center.y,
            geometry.panel_radius, geometry.dead_zone_radius,
        )
        self._geometry = geometry

    # ---- stick position ----
    @property
    def position(self) -> Point:
        return self._position

    @property
    def distance(self) -> float:
        """Distance from the stick to the panel center."""
        return self._position.distance_to(self._require_geometry().center)

    def reset_stick(self) -> None:
        self._position = self._require_geometry().center

    def update_from_pointer(self, x: float, y: float) -> float:
        """Move the stick to the pointer, clamped to the panel. Returns the clamped distance."""
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Pointer coordinates must be finite, got ({x}, {y})")

        geometry = self._require_geometry()
        center = geometry.center
        dx = x - center.x
        dy = y - center.y
        dist = math.hypot(dx, dy)

        if dist > geometry.panel_radius:
            scale = geometry.panel_radius / dist
            self._position = Point(center.x + dx * scale, center.y + dy * scale)
            return geometry.panel_radius

        self._position = Point(float(x), float(y))
        return dist

    # ---- signal ----
    def compute_signal(self, dist: float, is_released: bool) -> Signal:
        """Derive (angle, power) from the stored stick position and its distance to center."""
        if dist == 0:
            return Signal(0, 0.0)

        geometry = self._require_geometry()
        center = geometry.center
        stick = self._position

        # asin only resolves [0, 90]; the quadrant picks the real angle.
        ratio = min(1.0, abs(center.y - stick.y) / dist)
        base = math.degrees(math.asin(ratio))
        if stick.x >= center.x:
            angle = base if stick.y < center.y else 360.0 - base
        else:
            angle = 180.0 - base if stick.y < center.y else 180.0 + base

        if is_released or dist <= geometry.dead_zone_radius:
            power = 0.0
        else:
            power = (dist - geometry.dead_zone_radius) / (geometry.panel_radius - geometry.dead_zone_radius)
            power = min(1.0, power)

        return Signal(int(round(angle)) % 360, power)

    def handle_pointer(self, phase: PointerPhase, x: float, y: float) -> Signal:
        """Process one pointer event and return the signal to report for it."""
        if phase == PointerPhase.RELEASE:
            self.reset_stick()
            return self.compute_signal(0.0, True)

        dist = self.update_from_pointer(x, y)
        return self.compute_signal(dist, False)

    # ---- internal helpers ----
    def _require_geometry(self) -> PanelGeometry:
        if self._geometry is None:
            raise ConfigurationError("Panel geometry has not been set")
        return self._geometry
