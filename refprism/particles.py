"""Sprite particles that trace the laser beams and spray from the cannon's muzzle."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from .gameobject import GameObject
from .laser import LaserBeam, LaserCannon
from .scene import Manager
from .vector import Color, Vector3


def _manager(obj: GameObject) -> Manager:
    scene = obj.scene
    if scene is None or scene.manager is None:
        raise RuntimeError(f"{type(obj).__name__} is not in a managed scene")
    return scene.manager


@dataclass
class Particle:
    """One sprite; status 0 waits, 1 is being set up, 2 is moving."""

    pos: Vector3 = field(default_factory=Vector3)
    vel: Vector3 = field(default_factory=Vector3)
    acce: Vector3 = field(default_factory=Vector3)
    status: int = 0
    life: int = 0
    enable: bool = False


def _advance(particle: Particle, dt: float) -> None:
    particle.vel = particle.vel + particle.acce
    particle.pos = particle.pos + particle.vel * dt
    particle.life -= 1
    if particle.life <= 0:
        particle.status = 0
        particle.enable = False


class ParticleEmitter(GameObject):
    """Spreads its particles evenly along the line between two points."""

    PARTICLE_MAX = 100
    TEXTURE_PATH = "asset/texture/particleOrigin.png"

    def __init__(self) -> None:
        super().__init__()
        self.start_pos = Vector3()
        self.end_pos = Vector3()
        self.length = 0.0
        self.start_pos_obj: Optional[GameObject] = None
        self.end_pos_obj: Optional[GameObject] = None
        self.particles: List[Particle] = [Particle() for _ in range(self.PARTICLE_MAX)]

    def init(self) -> None:
        self.start_pos = Vector3(0.0, 0.5, 0.0)
        self.end_pos = Vector3(5.0, 0.5, 0.0)
        self.scl = Vector3(1.0, 1.0, 1.0)

    def update(self) -> None:
        if self.start_pos_obj is not None:
            p = self.start_pos_obj.pos
            self.start_pos = Vector3(p.x, 0.5, p.z)
        if self.end_pos_obj is not None:
            p = self.end_pos_obj.pos
            self.end_pos = Vector3(p.x, 0.5, p.z)

        front = self.end_pos - self.start_pos
        unit = front.normalize()
        self.length = front.length()
        step = self.length / self.PARTICLE_MAX

        for i, particle in enumerate(self.particles):
            if particle.status == 0:
                if not particle.enable:
                    particle.enable = True
                    particle.status = 1
            elif particle.status == 1 and particle.enable:
                particle.pos = self.start_pos + unit * (step * i)


class ParticleLaserBeam(GameObject):
    """Sparks that drift sideways off a laser beam."""

    PARTICLE_MAX = 50
    PARTICLE_INIT_VEL = 1.0
    TEXTURE_PATH = "asset/texture/particleOrigin.png"

    def __init__(self) -> None:
        super().__init__()
        self.laser_obj: Optional[LaserBeam] = None
        self.color = Color()
        self.particles: List[Particle] = [Particle() for _ in range(self.PARTICLE_MAX)]

    def init(self) -> None:
        self.scl = Vector3(0.3, 0.3, 1.0)
        self.color = Color(1.0, 1.0, 1.0, 0.5)

    def _laser(self) -> LaserBeam:
        if self.laser_obj is None:
            raise RuntimeError("beam particles have no laser")
        return self.laser_obj

    def visible(self) -> bool:
        """Whether the sparks are drawn: not while the beam is cut to nothing."""
        return self._laser().length != 0.0

    def _spawn(self, particle: Particle, manager: Manager, start: Vector3, end: Vector3) -> None:
        t = manager.randf()
        rand_pos = t * start + (1 - t) * end
        angle = manager.randf(0.0, math.pi * 2.0)
        c, s = math.cos(angle), math.sin(angle)
        offset = Vector3(c + s, 0.0, c - s) * 0.3
        particle.pos = rand_pos + offset
        speed = manager.randf(0.0, 2.0)
        direction = offset.normalize()
        particle.vel = direction * speed
        particle.acce = direction * -0.01
        particle.life = manager.rand(30, 50)

    def update(self) -> None:
        laser = self._laser()
        manager = _manager(self)
        start = laser.start_pos
        end = laser.end_pos

        for particle in self.particles:
            if particle.status == 0:
                if not particle.enable:
                    particle.enable = True
                    particle.status = 1
                continue
            if particle.status == 1 and particle.enable:
                particle.status = 2
                self._spawn(particle, manager, start, end)
            if particle.enable:
                _advance(particle, self.DT)


class ParticleLaserPort(GameObject):
    """Sparks sprayed in a cone from where the primary beam leaves the cannon."""

    PARTICLE_MAX = 100
    PARTICLE_INIT_VEL = 1.0
    MAX_ANGLE = math.pi / 180.0 * 60.0
    TEXTURE_PATH = "asset/texture/particleOrigin.png"

    def __init__(self) -> None:
        super().__init__()
        self.laser_obj: Optional[LaserBeam] = None
        self.color = Color()
        self.particles: List[Particle] = [Particle() for _ in range(self.PARTICLE_MAX)]

    def init(self) -> None:
        self.scl = Vector3(0.5, 0.5, 1.0)
        self.color = Color(1.0, 1.0, 1.0, 0.5)

    def update(self) -> None:
        laser = self.laser_obj
        if laser is None:
            raise RuntimeError("port particles have no laser")
        scene = self.scene
        if scene is None:
            raise RuntimeError("port particles are not in a scene")
        cannon = scene.get_game_object(LaserCannon)
        if cannon is None:
            raise RuntimeError("scene has no laser cannon")
        manager = _manager(self)

        origin = laser.start_pos
        front = laser.front_vec().normalize()
        base_scl = cannon.scl.x

        for particle in self.particles:
            if particle.status == 0:
                if not particle.enable:
                    particle.enable = True
                    particle.status = 1
                continue
            if particle.status == 1 and particle.enable:
                particle.status = 2
                particle.pos = origin + front * base_scl
                angle = manager.randf(-self.MAX_ANGLE, self.MAX_ANGLE)
                speed = manager.randf(3.0, 6.0)
                c, s = math.cos(angle), math.sin(angle)
                particle.vel = Vector3(
                    c * front.x + s * front.z,
                    front.y,
                    c * front.z - s * front.x,
                ) * speed
                a = particle.acce
                particle.acce = Vector3(a.x, -0.2, a.z)
                particle.life = manager.rand(30, 50)
            if particle.enable:
                _advance(particle, self.DT)