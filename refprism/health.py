"""Health bar: a red background bar with a green bar for what is left."""

from __future__ import annotations

from typing import List, Tuple

from .gameobject import GameObject, Quad, make_quad
from .vector import Color, Vector2, Vector3

RED = Color(1.0, 0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)


class Health(GameObject):
    """Remaining hits of the laser cannon, drawn as a two-layer bar."""

    DIV_NUM_X = 5
    DIV_NUM_Y = 5
    MAX_COUNT = DIV_NUM_X * DIV_NUM_Y
    DIGIT_MAX = 2
    HEALTH_MAX = 10
    DEF_SIZE_X = 300.0
    TEXTURE_PATH = "asset/texture/white.png"

    def __init__(self) -> None:
        super().__init__()
        self.color = Color(1.0, 1.0, 1.0, 1.0)
        self.left_top_pos = Vector3()
        self.div_value = Vector2()
        self.count = 0
        self.quad = make_quad(Vector2(), Vector2(1.0, 1.0))
        self.drawn: List[Tuple[Color, Quad]] = []

    def init(self) -> None:
        self.div_value = Vector2(1.0 / self.DIV_NUM_X, 1.0 / self.DIV_NUM_Y)
        self.count = self.HEALTH_MAX
        self.size = Vector3(100.0, 50.0, 0.0)
        self.pos = Vector3(0.0, 0.0, 0.0)
        self.left_top_pos = self.pos
        self._rebuild_quad()
        self.init_components()

    def update(self) -> None:
        if self.count < 0:
            self.count = 0
        self.update_components()

    def draw(self) -> None:
        self.drawn = self.bars()
        color, quad = self.drawn[-1]
        self.color = color
        # The last bar drawn leaves its size behind.
        self.set_tex_size(
            Vector2(quad.positions[1].x - quad.positions[0].x, self.size.y)
        )
        self.draw_components()

    def add(self, value: int) -> None:
        self.count += value

    def sub(self, value: int) -> None:
        self.count -= value

    def reset(self) -> None:
        self.count = 0

    def _rebuild_quad(self) -> None:
        self.quad = make_quad(
            Vector2(self.pos.x, self.pos.y), Vector2(self.size.x, self.size.y)
        )

    def set_tex_pos(self, pos: Vector2) -> None:
        self.pos = Vector3(pos.x, pos.y, self.pos.z)
        self.left_top_pos = self.pos
        self._rebuild_quad()

    def set_tex_size(self, size: Vector2) -> None:
        self.size = Vector3(size.x, size.y, self.size.z)
        self._rebuild_quad()

    def bars(self) -> List[Tuple[Color, Quad]]:
        """The red full-length bar, then the green bar scaled by health."""
        origin = Vector2(self.pos.x, self.pos.y)
        full = make_quad(origin, Vector2(self.DEF_SIZE_X, self.size.y))
        remaining_width = self.DEF_SIZE_X / self.HEALTH_MAX * self.count
        remaining = make_quad(origin, Vector2(remaining_width, self.size.y))
        return [(RED, full), (GREEN, remaining)]