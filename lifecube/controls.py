"""Keyboard and mouse handling that steers a camera."""

from __future__ import annotations

import enum
from collections.abc import Container
from dataclasses import dataclass

from lifecube.camera import Camera

MIN_ZOOM = 1.0
MAX_ZOOM = 45.0


class Key(enum.Enum):
    ESCAPE = "escape"
    A = "a"
    D = "d"
    W = "w"
    S = "s"


def process_input(camera: Camera, pressed: Container[Key], delta_time: float) -> bool:
    """Move the camera for the pressed keys; return True if the window should close."""
    should_close = Key.ESCAPE in pressed
    if Key.A in pressed:
        camera.move_left(delta_time)
    if Key.D in pressed:
        camera.move_right(delta_time)
    if Key.W in pressed:
        camera.move_forward(delta_time)
    if Key.S in pressed:
        camera.move_backward(delta_time)
    return should_close


@dataclass
class Cursor:
    """Turns cursor movement and scrolling into camera turns and zoom."""

    camera: Camera
    last_x: float = 400.0
    last_y: float = 300.0
    xoffset: float = 0.0
    yoffset: float = 0.0
    sensitivity: float = 0.1
    first_mouse: bool = True
    zoom: float = 45.0

    def mouse_callback(self, xpos: float, ypos: float) -> None:
        if self.first_mouse:
            self.last_x = xpos
            self.last_y = ypos
            self.first_mouse = False
        self.xoffset = (xpos - self.last_x) * self.sensitivity
        self.yoffset = (self.last_y - ypos) * self.sensitivity
        self.last_x = xpos
        self.last_y = ypos
        self.camera.look_around(self.yoffset, self.xoffset)

    def scroll_callback(self, xoffset: float, yoffset: float) -> None:
        self.zoom = max(MIN_ZOOM, min(MAX_ZOOM, self.zoom - yoffset))
        self.camera.set_fov(self.zoom)