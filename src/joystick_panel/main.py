#!/usr/bin/env python3

import logging
import sys

from PyQt5.QtWidgets import QApplication

from .widgets import JoystickWidget


logger = logging.getLogger(__name__)


def log_signal(angle: int, power: float) -> None:
    logger.debug("angle = %d, power = %.3f", angle, power)


def main():
    """Launch the joystick panel as a standalone window and log its output."""
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    app = QApplication(sys.argv)
    widget = JoystickWidget()
    widget.set_angles(0, 60, 120, 180, 240, 300)
    widget.set_listener(log_signal)
    widget.setWindowTitle("Joystick Panel")
    widget.resize(400, 400)
    widget.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
