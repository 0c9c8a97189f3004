"""The crystal the player steers to bend the laser beam."""

from __future__ import annotations

import math
from dataclasses import replace

from .gameobject import GameObject
from .input import Key, Keyboard
from .laser import LaserBeam, LaserState
from .obstacle import Obstacle
from .vector import Vector3


class Player(GameObject):
    """Moves with WASD, turns with the arrow keys, and swaps beam mode with space."""

    DEF_SPEED = 10.0
    PLAY_FIELD_SIZE = 50.0
    ROT_SPEED = 0.02
    ROT_SPEED_REFRACT = 0.05
    MODEL_PATH = "asset/model/Emerald_2.obj"
    SE_PATH = "asset/audio/wan.wav"

    def __init__(self) -> None:
        super().__init__()
        self.vel = Vector3()
        self.old_pos = Vector3()

    def init(self) -> None:
        self.pos = Vector3(1.0, 0.0, -4.0)
        self.scl = Vector3(2.0, 1.0, 1.5)
        self.init_components()

    def _keyboard(self) -> Keyboard:
        scene = self.scene
        if scene is None or scene.manager is None:
            raise RuntimeError("player is not in a managed scene")
        return scene.manager.keyboard

    def update(self) -> None:
        scene = self.scene
        keys = self._keyboard()
        lasers = scene.get_game_objects(LaserBeam)

        self.old_pos = self.pos
        vx = vz = 0.0
        if keys.is_pressed(Key.W):
            vz = self.DEF_SPEED
        if keys.is_pressed(Key.S):
            vz = -self.DEF_SPEED
        if keys.is_pressed(Key.A):
            vx = -self.DEF_SPEED
        if keys.is_pressed(Key.D):
            vx = self.DEF_SPEED
        self.vel = Vector3(vx, self.vel.y, vz)

        rot_speed = self.ROT_SPEED
        if any(laser.state == LaserState.REFRACT for laser in lasers):
            rot_speed = self.ROT_SPEED_REFRACT
        if keys.is_pressed(Key.LEFT):
            self.rot = replace(self.rot, y=self.rot.y - rot_speed)
        if keys.is_pressed(Key.RIGHT):
            self.rot = replace(self.rot, y=self.rot.y + rot_speed)

        if keys.is_triggered(Key.SPACE):
            for laser in lasers:
                if laser.target_obj is self:
                    laser.swap_state()

        moved = self.pos + self.vel * self.DT
        limit = self.PLAY_FIELD_SIZE
        self.pos = Vector3(
            min(max(moved.x, -limit), limit),
            moved.y,
            min(max(moved.z, -limit), limit),
        )

        for obstacle in scene.get_game_objects(Obstacle):
            dx = obstacle.pos.x - self.pos.x
            dz = obstacle.pos.z - self.pos.z
            if math.sqrt(dx * dx + dz * dz) < obstacle.scl.x:
                self.pos = Vector3(self.old_pos.x, self.pos.y, self.old_pos.z)
                self.vel = Vector3(0.0, self.vel.y, 0.0)

        self.update_components()