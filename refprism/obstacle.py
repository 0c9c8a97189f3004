"""Pillars that block the player and stop laser beams."""

from __future__ import annotations

from .gameobject import GameObject


class Obstacle(GameObject):
    """A static cylinder whose collision radius is half its X scale."""

    MODEL_PATH = "asset/model/cylinder.obj"

    def init(self) -> None:
        self.radius = self.scl.x * 0.5
        self.init_components()

    def update(self) -> None:
        """Obstacles do not move."""