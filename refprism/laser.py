"""The laser beam, the cannon that fires it, and the enemies that walk into it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import List, Optional

from .gameobject import GameObject
from .health import Health
from .obstacle import Obstacle
from .scene import Layer, Manager
from .score import Score
from .vector import Color, Vector3


def _manager(obj: GameObject) -> Manager:
    scene = obj.scene
    if scene is None or scene.manager is None:
        raise RuntimeError(f"{type(obj).__name__} is not in a managed scene")
    return scene.manager


def _scene(obj: GameObject):
    if obj.scene is None:
        raise RuntimeError(f"{type(obj).__name__} is not in a scene")
    return obj.scene


class LaserState(IntEnum):
    """How a beam is produced from the one before it."""

    NONE = 0
    REFLECT = 1
    REFRACT = 2


@dataclass
class BeamParticle:
    """One glowing sprite placed along a beam."""

    pos: Vector3 = field(default_factory=Vector3)
    vel: Vector3 = field(default_factory=Vector3)
    target_pos: Vector3 = field(default_factory=Vector3)
    status: int = 0
    life: int = 0
    enable: bool = False


class LaserBeam(GameObject):
    """A beam from a start point; a reflected or refracted beam leaves the crystal."""

    REFLASER_LENGTH = 15.0
    PARTICLE_MIN_SIZE = 0.3
    PARTICLE_MAX_SIZE = 1.5
    PARTICLE_SPACE = 0.05
    PARTICLE_MAX = 1500
    TEXTURE_PATH = "asset/texture/particleOrigin.png"
    SE_PATH = "asset/audio/laserHit.wav"

    def __init__(self) -> None:
        super().__init__()
        self.start_pos = Vector3()
        self.end_pos = Vector3()
        self.direction = Vector3()
        self.color = Color(0.5, 0.5, 1.0, 1.0)
        self.length = 0.0
        self.state = LaserState.NONE
        self.target_obj: Optional[GameObject] = None
        self.prev_laser: Optional[LaserBeam] = None
        self.particle_amount = self.PARTICLE_MAX
        self.particles: List[BeamParticle] = [
            BeamParticle() for _ in range(self.PARTICLE_MAX)
        ]

    def init(self) -> None:
        self.pos = replace(self.pos, y=0.5)
        self.start_pos = Vector3(0.0, 0.5, 0.0)
        self.end_pos = Vector3(5.0, 0.5, 0.0)
        self.scl = Vector3(self.PARTICLE_MIN_SIZE, self.PARTICLE_MIN_SIZE, 1.0)
        self.size = Vector3(self.PARTICLE_MAX_SIZE, 1.0, 1.0)

    def front_vec(self) -> Vector3:
        return self.end_pos - self.start_pos

    def swap_state(self) -> None:
        """Toggle between reflection and refraction; a primary beam stays as it is."""
        if self.state == LaserState.NONE:
            return
        if self.state == LaserState.REFLECT:
            self.state = LaserState.REFRACT
        else:
            self.state = LaserState.REFLECT

    def _center_along(self, normal: Vector3) -> None:
        half = self.length * 0.5
        self.pos = Vector3(
            self.start_pos.x + normal.x * half,
            self.pos.y,
            self.start_pos.z + normal.z * half,
        )

    def _aim(self) -> None:
        target = self.target_obj
        if target is None:
            raise RuntimeError("laser beam has no target object")
        if self.state == LaserState.NONE:
            self.end_pos = replace(target.pos, y=self.start_pos.y)
            self.direction = self.end_pos - self.start_pos
            self.length = self.direction.length()
            self.pos = Vector3(
                self.start_pos.x + self.end_pos.x * 0.5,
                self.pos.y,
                self.start_pos.z + self.end_pos.z * 0.5,
            )
            return
        if self.prev_laser is None:
            raise RuntimeError("secondary laser beam has no previous beam")
        self.start_pos = replace(target.pos, y=0.5)
        self.length = self.REFLASER_LENGTH
        front = self.prev_laser.front_vec()
        normal = target.forward()
        if self.state == LaserState.REFLECT:
            ref = front.reflect(normal)
        else:
            ref = front.refract(normal)
        self.end_pos = replace(target.pos + ref * self.length, y=self.start_pos.y)
        self.direction = self.front_vec()
        self._center_along(self.direction.normalize())

    def update(self) -> None:
        scene = _scene(self)
        self._aim()

        self.size = replace(self.size, z=self.length)
        self.rot = replace(
            self.rot, y=math.atan2(self.direction.x, self.direction.z) + math.pi
        )

        for obstacle in scene.get_game_objects(Obstacle):
            if self.state != LaserState.NONE and self.prev_laser is not None:
                if self.prev_laser.on_collision(obstacle):
                    self.length = 0.0
                    self.size = replace(self.size, z=0.0)
                    break
            self.on_collision(obstacle)

        cannon = scene.get_game_object(LaserCannon)
        if cannon is not None and self.state != LaserState.NONE:
            self.on_collision(cannon)

        for enemy in scene.get_game_objects(Enemy):
            if self.on_collision(enemy):
                score = scene.get_game_object(Score)
                if score is None:
                    raise RuntimeError("scene has no score display")
                score.add(_manager(self).rand(10, 50))
                enemy.destroy()

        self._update_particles()
        self.update_components()

    def _update_particles(self) -> None:
        self.particle_amount = min(
            int(self.length / self.PARTICLE_SPACE), self.PARTICLE_MAX
        )
        unit = self.direction.normalize()
        for i, particle in enumerate(self.particles):
            if particle.status == 2:
                if particle.enable:
                    particle.enable = False
                    particle.status = 0
                continue
            if particle.status == 0 and not particle.enable and i < self.particle_amount:
                particle.enable = True
                particle.status = 1
            if particle.status in (0, 1) and particle.enable:
                if i >= self.particle_amount:
                    particle.enable = False
                    particle.status = 0
                particle.pos = self.start_pos + unit * (self.PARTICLE_SPACE * i)

    def on_collision(self, obj: GameObject) -> bool:
        """Oriented-box versus circle test; on a hit the beam is cut at ``obj``."""
        half = self.size * 0.5
        if half.z == 0.0:
            return False
        obj_radius = obj.radius
        obj_pos = replace(obj.pos, y=self.start_pos.y)
        offset = self.pos - obj_pos
        dot_x = offset.dot(self.right())
        dot_z = offset.dot(self.forward())
        if (
            -half.x - obj_radius < dot_x < half.x + obj_radius
            and -half.z - obj_radius < dot_z < half.z + obj_radius
        ):
            self.length = (self.start_pos - obj_pos).length()
            self.size = replace(self.size, z=self.length)
            normal = self.direction.normalize()
            self.end_pos = self.start_pos + normal * self.length
            self._center_along(normal)
            return True
        return False


class LaserCannon(GameObject):
    """The sphere at the centre that fires the primary beam and takes damage."""

    MODEL_PATH = "asset/model/sphere_smooth.obj"
    BGM_PATH = "asset/audio/MusMus_BGM_cool02.wav"

    def __init__(self) -> None:
        super().__init__()
        self.front = Vector3()
        self.laser: Optional[LaserBeam] = None

    def init(self) -> None:
        self.pos = Vector3(0.0, 0.0, 0.0)
        self.scl = Vector3(2.0, 2.0, 2.0)
        self.radius = self.scl.x
        self.init_components()

    def update(self) -> None:
        if self.laser is None:
            raise RuntimeError("laser cannon has no laser")
        self.front = -self.laser.front_vec()
        self.rot = replace(self.rot, y=math.atan2(self.front.x, self.front.z))

        scene = _scene(self)
        for enemy in scene.get_game_objects(Enemy):
            if (enemy.pos - self.pos).length() < self.radius + enemy.radius:
                health = scene.get_game_object(Health)
                if health is None:
                    raise RuntimeError("scene has no health display")
                health.sub(1)
                enemy.destroy()
        self.update_components()


class Enemy(GameObject):
    """Walks straight towards the start of the first laser beam."""

    DEF_SPEED = 2.0
    MODEL_PATH = "asset/model/enemyModel.obj"

    def __init__(self) -> None:
        super().__init__()
        self.speed = 0.0

    def init(self) -> None:
        self.radius = self.scl.x * 0.5
        self.speed = self.DEF_SPEED
        self.init_components()

    def update(self) -> None:
        lasers = _scene(self).get_game_objects(LaserBeam)
        if not lasers:
            raise RuntimeError("no laser beam in the scene")
        base = lasers[0].start_pos
        normal = (base - self.pos).normalize()
        self.pos = self.pos + normal * (self.speed * self.DT)
        self.rot = replace(self.rot, y=math.atan2(normal.x, normal.z))
        self.update_components()


class EnemySpawner(GameObject):
    """Adds an enemy on a ring around the centre every few frames."""

    SPAWN_RADIUS = 50.0
    NOT_SPAWN_RADIUS = 15.0
    SPAWN_LATE = 90

    def __init__(self) -> None:
        super().__init__()
        self.time = 0

    def init(self) -> None:
        self.pos = Vector3(0.0, 0.0, 0.0)
        self.init_components()

    def update(self) -> None:
        self.time += 1
        if self.time < self.SPAWN_LATE:
            return
        self.time = 0
        manager = _manager(self)
        distance = manager.randf(self.NOT_SPAWN_RADIUS, self.SPAWN_RADIUS)
        angle = manager.randf(0.0, 2.0 * math.pi)
        spawn_pos = Vector3(math.cos(angle) * distance, 0.0, math.sin(angle) * distance)
        enemy = _scene(self).add_game_object(Enemy, Layer.OBJECT_3D)
        enemy.speed = manager.randf(1.5, 4.0)
        enemy.pos = spawn_pos