"""Geometry and input mapping for an on-screen circular joystick."""

from .config import ConfigurationError, JoystickConfig
from .geometry import GuideSegment, PanelGeometry, Point, Signal, panel_geometry_for_size
from .guide_lines import GuideLineGeometry
from .stick_mapper import PointerPhase, StickMapper

__all__ = [
    'ConfigurationError',
    'GuideLineGeometry',
    'GuideSegment',
    'JoystickConfig',
    'PanelGeometry',
    'Point',
    'PointerPhase',
    'Signal',
    'StickMapper',
    'panel_geometry_for_size',
]
