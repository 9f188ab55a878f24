"""Qt widgets for the joystick panel."""

from .joystick_widget import JoystickWidget

__all__ = ['JoystickWidget']
