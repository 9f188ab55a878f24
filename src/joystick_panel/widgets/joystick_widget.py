from __future__ import annotations
import logging
from dataclasses import replace
from typing import Callable, Optional, Tuple

# Qt
from PyQt5.QtCore import Qt, QPointF, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QPainter, QPen, QRadialGradient
from PyQt5.QtWidgets import QWidget

from ..config import ConfigurationError, JoystickConfig, check_scale
from ..geometry import GuideSegment, PanelGeometry, Point, Signal, panel_geometry_for_size
from ..guide_lines import GuideLineGeometry
from ..stick_mapper import PointerPhase, StickMapper


logger = logging.getLogger(__name__)

MoveListener = Callable[[int, float], None]


class JoystickWidget(QWidget):
    """
    Circular joystick panel built around a StickMapper and a GuideLineGeometry.
    - Emits (angle, power) once per processed press/move/release.
    - Re-derives the panel geometry whenever the widget is resized.
    """

    # Signals
    moved = pyqtSignal(int, float)  # angle in degrees, power [0..1]

    def __init__(self, config: Optional[JoystickConfig] = None, parent=None) -> None:
        super().__init__(parent)

        self._config = replace(config) if config is not None else JoystickConfig()
        self._mapper = StickMapper()
        self._guides = GuideLineGeometry(self._config.guide_angles)
        self._listener: Optional[MoveListener] = None
        self._pressed = False

        self.setMinimumSize(100, 100)
        self.resize(200, 200)
        self._refresh_geometry()

    # ---- public config api ----
    def get_config(self) -> JoystickConfig:
        return self._config

    def set_panel_scale(self, scale: float) -> None:
        scale = check_scale(scale, "panel_scale")
        panel_geometry_for_size(self.width(), self.height(), scale, self._config.inner_area_scale)
        self._config.panel_scale = scale
        self._refresh_geometry()

    def get_panel_scale(self) -> float:
        return self._config.panel_scale

    def set_inner_area_scale(self, scale: float) -> None:
        scale = check_scale(scale, "inner_area_scale")
        panel_geometry_for_size(self.width(), self.height(), self._config.panel_scale, scale)
        self._config.inner_area_scale = scale
        self._refresh_geometry()

    def get_inner_area_scale(self) -> float:
        return self._config.inner_area_scale

    def set_joystick_scale(self, scale: float) -> None:
        self._config.joystick_scale = check_scale(scale, "joystick_scale")
        self.update()

    def get_joystick_scale(self) -> float:
        return self._config.joystick_scale

    def set_angles(self, *angles: int) -> None:
        self._guides.set_angles(angles)
        self._config.guide_angles = self._guides.angles
        self.update()

    def get_angles(self) -> Tuple[int, ...]:
        return self._guides.angles

    def set_listener(self, listener: Optional[MoveListener]) -> None:
        """Install a single observer for (angle, power); None removes it."""
        self._listener = listener

    # ---- public state api ----
    def panel_geometry(self) -> Optional[PanelGeometry]:
        return self._mapper.geometry

    def stick_position(self) -> Point:
        return self._mapper.position

    def stick_radius(self) -> float:
        geometry = self._mapper.geometry
        if geometry is None:
            return 0.0
        return geometry.panel_radius * self._config.joystick_scale

    def guide_segments(self) -> Tuple[GuideSegment, ...]:
        geometry = self._mapper.geometry
        if geometry is None:
            return ()
        return self._guides.compute_segments(geometry.center, geometry.panel_radius)

    def process_pointer(self, phase: PointerPhase, x: float, y: float) -> Optional[Signal]:
        """Feed one pointer event through the mapper and notify observers."""
        if self._mapper.geometry is None:
            return None

        signal = self._mapper.handle_pointer(phase, x, y)
        logger.debug("%s -> angle=%d power=%.3f", phase.name, signal.angle, signal.power)
        self.moved.emit(signal.angle, signal.power)
        if self._listener is not None:
            self._listener(signal.angle, signal.power)
        self.update()
        return signal

    # ---- Qt events ----
    def resizeEvent(self, event) -> None:
        self._refresh_geometry()
        super().resizeEvent(event)

    def mousePressEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._pressed = True
            self.process_pointer(PointerPhase.PRESS, e.x(), e.y())

    def mouseMoveEvent(self, e) -> None:
        if self._pressed:
            self.process_pointer(PointerPhase.MOVE, e.x(), e.y())

    def mouseReleaseEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._pressed = False
            self.process_pointer(PointerPhase.RELEASE, e.x(), e.y())

    def paintEvent(self, event) -> None:
        geometry = self._mapper.geometry
        if geometry is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        center = QPointF(geometry.center.x, geometry.center.y)
        self._draw_panel(painter, center, geometry.panel_radius)
        if self._config.inner_area_scale > 0:
            self._draw_dead_zone(painter, center, geometry.dead_zone_radius)
        self._draw_guide_lines(painter)
        self._draw_stick(painter)

    def _draw_panel(self, painter: QPainter, center: QPointF, radius: float) -> None:
        painter.save()

        gradient = QRadialGradient(center, radius)
        gradient.setColorAt(0.0, QColor(60, 60, 60))
        gradient.setColorAt(0.7, QColor(45, 45, 45))
        gradient.setColorAt(1.0, QColor(30, 30, 30))

        painter.setBrush(QBrush(gradient))
        painter.setPen(QPen(QColor(80, 80, 80), 2))
        painter.drawEllipse(center, radius, radius)

        painter.restore()

    def _draw_dead_zone(self, painter: QPainter, center: QPointF, radius: float) -> None:
        painter.save()
        painter.setPen(QPen(QColor(255, 100, 100, 120), 2))
        painter.setBrush(Qt.NoBrush)
        painter.drawEllipse(center, radius, radius)
        painter.restore()

    def _draw_guide_lines(self, painter: QPainter) -> None:
        segments = self.guide_segments()
        if not segments:
            return

        painter.save()
        painter.setPen(QPen(QColor(140, 140, 140, 180), 2, Qt.DotLine))
        for segment in segments:
            painter.drawLine(
                QPointF(segment.start.x, segment.start.y),
                QPointF(segment.end.x, segment.end.y),
            )
        painter.restore()

    def _draw_stick(self, painter: QPainter) -> None:
        painter.save()

        position = self._mapper.position
        stick = QPointF(position.x, position.y)
        radius = self.stick_radius()

        base_color = QColor(80, 160, 255)
        gradient = QRadialGradient(stick, max(1.0, radius))
        gradient.setColorAt(0.0, base_color.lighter(150))
        gradient.setColorAt(0.5, base_color)
        gradient.setColorAt(1.0, base_color.darker(120))
        painter.setBrush(QBrush(gradient))
        painter.setPen(QPen(base_color.darker(150), 1))
        painter.drawEllipse(stick, radius, radius)

        painter.restore()

    # ---- internal helpers ----
    def _refresh_geometry(self) -> None:
        """Re-derive the panel from the current size and put the stick back at center."""
        try:
            geometry = panel_geometry_for_size(
                self.width(), self.height(),
                self._config.panel_scale, self._config.inner_area_scale,
            )
        except ConfigurationError as exc:
            logger.debug("No usable panel for %dx%d: %s", self.width(), self.height(), exc)
            self._mapper = StickMapper()
        else:
            self._mapper.set_geometry(geometry)
            self._mapper.reset_stick()
        self.update()
