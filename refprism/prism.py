"""The spinning prism shown on the title and result screens."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional

from .gameobject import GameObject
from .vector import Vector3


class Prism(GameObject):
    """A large prism that turns slowly and may carry looping background music."""

    MODEL_PATH = "asset/model/Prism.obj"
    ENV_TEXTURE_PATH = "asset/texture/water-bg-pattern-04.jpg"
    SPIN_SPEED = 0.01

    def __init__(self) -> None:
        super().__init__()
        self.bgm: Optional[str] = None
        self.bgm_loop = False

    def init(self) -> None:
        self.pos = Vector3(0.0, 0.0, 0.0)
        self.scl = Vector3(5.0, 5.0, 5.0)
        self.init_components()

    def uninit(self) -> None:
        self.bgm = None
        self.bgm_loop = False
        self.uninit_components()

    def update(self) -> None:
        yaw = self.rot.y + self.SPIN_SPEED
        if yaw >= math.pi * 2:
            yaw = 0.0
        self.rot = replace(self.rot, y=yaw)
        self.update_components()

    def set_bgm(self, path: str) -> None:
        """Play the music at ``path`` on a loop."""
        self.bgm = str(path)
        self.bgm_loop = True