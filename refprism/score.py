"""Four-digit score display drawn from a 5x5 sheet of digit sprites."""

from __future__ import annotations

from typing import List

from .gameobject import GameObject, Quad, make_quad
from .vector import Color, Vector2, Vector3


def _c_mod(value: int, divisor: int) -> int:
    """Remainder with the sign of ``value``, as integer division truncates."""
    return value - int(value / divisor) * divisor


class Score(GameObject):
    """Running score shown as a fixed number of digits."""

    DIV_NUM_X = 5
    DIV_NUM_Y = 5
    MAX_COUNT = DIV_NUM_X * DIV_NUM_Y
    DIGIT_MAX = 4
    SCORE_MAX = 9999
    TEXTURE_PATH = "asset/texture/number.png"

    def __init__(self) -> None:
        super().__init__()
        self.color = Color(1.0, 1.0, 1.0, 1.0)
        self.left_top_pos = Vector3()
        self.div_value = Vector2()
        self.count = 0
        self.quad = make_quad(Vector2(), Vector2(1.0, 1.0))
        self.quads: List[Quad] = []

    def init(self) -> None:
        self.div_value = Vector2(1.0 / self.DIV_NUM_X, 1.0 / self.DIV_NUM_Y)
        self.count = 0
        self.size = Vector3(100.0, 100.0, 0.0)
        self.pos = Vector3(0.0, 0.0, 0.0)
        self.left_top_pos = self.pos
        self._rebuild_quad()
        self.init_components()

    def update(self) -> None:
        if self.count > self.SCORE_MAX:
            self.count = self.SCORE_MAX
        self.update_components()

    def draw(self) -> None:
        self.quads = self.digit_quads()
        if self.quads:
            self.quad = self.quads[-1]
        self.draw_components()

    def add(self, value: int) -> None:
        self.count += value

    def reset(self) -> None:
        self.count = 0

    def _rebuild_quad(self) -> None:
        self.quad = make_quad(
            Vector2(self.pos.x, self.pos.y), Vector2(self.size.x, self.size.y)
        )

    def set_tex_pos(self, pos: Vector2) -> None:
        """Move the display so its top-left corner is at ``pos``."""
        self.pos = Vector3(pos.x, pos.y, self.pos.z)
        self.left_top_pos = self.pos
        self._rebuild_quad()

    def set_tex_size(self, size: Vector2) -> None:
        """Set the size of one digit sprite."""
        self.size = Vector3(size.x, size.y, self.size.z)
        self._rebuild_quad()

    def digit_quads(self) -> List[Quad]:
        """One quad per digit, least significant (rightmost) first."""
        quads: List[Quad] = []
        remaining = self.count
        step = self.size.x * 0.5
        for i in range(1, self.DIGIT_MAX + 1):
            num = _c_mod(remaining, 10)
            tex = Vector2(
                _c_mod(num, self.DIV_NUM_X) * (1.0 / self.DIV_NUM_X),
                int(num / self.DIV_NUM_X) * (1.0 / self.DIV_NUM_Y),
            )
            pos = Vector2(self.left_top_pos.x + step * (self.DIGIT_MAX - i), self.left_top_pos.y)
            quads.append(make_quad(pos, Vector2(self.size.x, self.size.y), tex, self.div_value))
            remaining = int(remaining / 10)
        return quads