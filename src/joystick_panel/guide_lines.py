"""Guide lines drawn from the panel center out to its rim."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Tuple

from .config import ConfigurationError, check_angles
from .geometry import GuideSegment, Point


logger = logging.getLogger(__name__)


class GuideLineGeometry:
    """Holds the configured guide angles and turns them into line segments."""

    def __init__(self, angles: Iterable[int] = ()) -> None:
        self._angles: Tuple[int, ...] = ()
        angles = tuple(angles)
        if angles:
            self.set_angles(angles)

    @property
    def angles(self) -> Tuple[int, ...]:
        return self._angles

    def set_angles(self, angles: Iterable[int]) -> None:
        try:
            self._angles = check_angles(angles)
        except ConfigurationError as exc:
            logger.error("Rejected guide angles: %s", exc)
            raise

    def clear(self) -> None:
        self._angles = ()

    def compute_segments(self, center: Point, panel_radius: float) -> Tuple[GuideSegment, ...]:
        """Segments from center to the rim, one per angle, in configured order."""
        segments = []
        for angle in self._angles:
            radian = math.radians(angle)
            end = Point(
                center.x + math.cos(radian) * panel_radius,
                center.y - math.sin(radian) * panel_radius,  # screen y grows downward
            )
            segments.append(GuideSegment(center, end))
        return tuple(segments)
