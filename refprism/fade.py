"""Full-screen fade used to enter and leave scenes."""

from __future__ import annotations

from dataclasses import replace
from enum import IntEnum

from .gameobject import GameObject, make_quad
from .vector import Color, Vector2, Vector3

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720


class FadeState(IntEnum):
    """What the fade is doing."""

    NONE = 0
    IN = 1
    OUT = 2


class Fade(GameObject):
    """A white-textured quad whose alpha ramps up (fade out) or down (fade in)."""

    FADE_RATE = 0.05
    TEXTURE_PATH = "asset/texture/white.png"

    def __init__(self) -> None:
        super().__init__()
        self.color = Color(1.0, 1.0, 1.0, 0.0)
        self.fade_state = FadeState.NONE
        self.fade_end = False
        self.texture = self.TEXTURE_PATH
        self.quad = make_quad(Vector2(), Vector2(1.0, 1.0))

    def init(self) -> None:
        self.size = Vector3(float(SCREEN_WIDTH), float(SCREEN_HEIGHT), 0.0)
        self.pos = Vector3(0.0, 0.0, 0.0)
        self._rebuild_quad()

    def update(self) -> None:
        if self.fade_state == FadeState.OUT:
            self.color = replace(self.color, a=self.color.a + self.FADE_RATE)
            if self.color.a >= 1.0:
                self.fade_end = True
        elif self.fade_state == FadeState.IN:
            self.color = replace(self.color, a=self.color.a - self.FADE_RATE)
            if self.color.a <= 0.0:
                self.destroy()

    def set_fade_state(self, state: FadeState) -> None:
        """Start a fade; fading out starts transparent, anything else opaque."""
        state = FadeState(state)
        alpha = 0.0 if state == FadeState.OUT else 1.0
        self.color = replace(self.color, a=alpha)
        self.fade_state = state

    def _rebuild_quad(self) -> None:
        self.quad = make_quad(
            Vector2(self.pos.x, self.pos.y), Vector2(self.size.x, self.size.y)
        )

    def set_tex_pos(self, pos: Vector2) -> None:
        self.pos = Vector3(pos.x, pos.y, self.pos.z)
        self._rebuild_quad()

    def set_tex_size(self, size: Vector2) -> None:
        self.size = Vector3(size.x, size.y, self.size.z)
        self._rebuild_quad()