"""The title, game and result scenes and how the game moves between them."""

from __future__ import annotations

import math
from typing import Optional

from .camera import Camera
from .fade import SCREEN_WIDTH, Fade, FadeState
from .gameobject import GameObject, make_quad
from .health import Health
from .input import Key
from .laser import Enemy, EnemySpawner, LaserBeam, LaserCannon, LaserState
from .obstacle import Obstacle
from .particles import ParticleLaserBeam, ParticleLaserPort
from .player import Player
from .prism import Prism
from .scene import Layer, Manager, Scene, SceneName
from .score import Score
from .vector import Color, Vector2, Vector3

OBSTACLE_COUNT = 20

# Crystals and beams decorating the title and result screens:
# (position, yaw, beam colour, state of the beam leaving the crystal).
_SHOWCASE = (
    (Vector3(12.0, 0.0, -3.0), math.pi / 2, Color(0.5, 0.0, 0.0, 1.0), LaserState.REFRACT),
    (Vector3(15.0, 0.0, 10.0), math.pi / 9, Color(0.0, 0.5, 0.0, 1.0), LaserState.REFLECT),
    (Vector3(-13.0, 0.0, -10.0), math.pi / 6, Color(0.0, 0.0, 0.5, 1.0), LaserState.REFLECT),
    (Vector3(-17.0, 0.0, 2.0), math.pi / 3, Color(0.5, 0.5, 0.5, 1.0), LaserState.REFRACT),
)


class _Sprite(GameObject):
    """A textured screen-space rectangle."""

    DEFAULT_TEXTURE = "asset/texture/white.png"

    def __init__(self) -> None:
        super().__init__()
        self.color = Color(1.0, 1.0, 1.0, 1.0)
        self.texture = self.DEFAULT_TEXTURE
        self.quad = make_quad(Vector2(), Vector2(1.0, 1.0))

    def init(self) -> None:
        self.size = Vector3(100.0, 100.0, 0.0)
        self.pos = Vector3(0.0, 0.0, 0.0)
        self._rebuild()
        self.init_components()

    def _rebuild(self) -> None:
        self.quad = make_quad(
            Vector2(self.pos.x, self.pos.y), Vector2(self.size.x, self.size.y)
        )

    def place(self, texture: str, pos: Vector2, size: Vector2) -> None:
        self.texture = texture
        self.pos = Vector3(pos.x, pos.y, self.pos.z)
        self.size = Vector3(size.x, size.y, self.size.z)
        self._rebuild()


def _manager(scene: Scene) -> Manager:
    if scene.manager is None:
        raise RuntimeError(f"{type(scene).__name__} is not run by a manager")
    return scene.manager


def _add_sprite(scene: Scene, texture: str, pos: Vector2, size: Vector2) -> _Sprite:
    sprite = scene.add_game_object(_Sprite, Layer.OBJECT_2D)
    sprite.place(texture, pos, size)
    return sprite


def _add_showcase(scene: Scene, bgm: str) -> None:
    scene.add_game_object(Camera, Layer.SYSTEM)
    prism = scene.add_game_object(Prism, Layer.OBJECT_3D)
    prism.set_bgm(bgm)
    for pos, yaw, color, state in _SHOWCASE:
        player = scene.add_game_object(Player, Layer.OBJECT_3D)
        player.pos = pos
        player.rot = Vector3(0.0, yaw, 0.0)

        laser = scene.add_game_object(LaserBeam, Layer.OBJECT_3D)
        laser.target_obj = player
        laser.color = color

        laser_ref = scene.add_game_object(LaserBeam, Layer.OBJECT_3D)
        laser_ref.target_obj = player
        laser_ref.prev_laser = laser
        laser_ref.color = color
        laser_ref.state = state


def _start_fade(scene: Scene, state: FadeState) -> Fade:
    fade = scene.add_game_object(Fade, Layer.OBJECT_2D)
    fade.set_fade_state(state)
    return fade


def _fade_finished(scene: Scene) -> bool:
    fade = scene.get_game_object(Fade)
    return fade is not None and fade.fade_end


class TitleScene(Scene):
    """Logo and demo crystals; Enter starts the game."""

    BGM_PATH = "asset/audio/MusMus_BGM_cool01.wav"

    def init(self) -> None:
        _manager(self).current_scene = SceneName.TITLE
        _start_fade(self, FadeState.IN)
        _add_showcase(self, self.BGM_PATH)
        _add_sprite(
            self, "asset/texture/Title_RefPrism.png", Vector2(50.0, 50.0), Vector2(700.0, 200.0)
        )
        _add_sprite(
            self, "asset/texture/PressEnter.png", Vector2(500.0, 550.0), Vector2(700.0, 100.0)
        )

    def update(self) -> None:
        super().update()
        manager = _manager(self)
        if manager.keyboard.is_triggered(Key.RETURN):
            _start_fade(self, FadeState.OUT)
        if _fade_finished(self):
            manager.set_scene(GameScene)


class GameScene(Scene):
    """The play field: defend the cannon by steering the beam into enemies."""

    def init(self) -> None:
        manager = _manager(self)
        manager.current_scene = SceneName.GAME
        _start_fade(self, FadeState.IN)

        self.add_game_object(Camera, Layer.SYSTEM)
        self.add_game_object(EnemySpawner, Layer.SYSTEM)

        player = self.add_game_object(Player, Layer.OBJECT_3D)

        laser = self.add_game_object(LaserBeam, Layer.OBJECT_3D)
        laser.target_obj = player

        laser_ref = self.add_game_object(LaserBeam, Layer.OBJECT_3D)
        laser_ref.target_obj = player
        laser_ref.prev_laser = laser
        laser_ref.state = LaserState.REFLECT

        particle_color = laser.color + Color(0.2, 0.2, 0.2, 0.0)
        for beam in (laser, laser_ref):
            sparks = self.add_game_object(ParticleLaserBeam, Layer.OBJECT_3D)
            sparks.laser_obj = beam
            sparks.color = particle_color
        port = self.add_game_object(ParticleLaserPort, Layer.OBJECT_3D)
        port.laser_obj = laser
        port.color = particle_color

        cannon = self.add_game_object(LaserCannon, Layer.OBJECT_3D)
        cannon.laser = laser

        for _ in range(OBSTACLE_COUNT):
            distance = manager.randf(5.0, 25.0)
            angle = manager.randf(0.0, 2.0 * math.pi)
            obstacle = self.add_game_object(Obstacle, Layer.OBJECT_3D)
            obstacle.pos = Vector3(math.cos(angle) * distance, 0.0, math.sin(angle) * distance)

        self.add_game_object(EnemySpawner, Layer.SYSTEM)
        for x, z in ((10.0, 10.0), (10.0, -10.0), (-10.0, 10.0), (-10.0, -10.0)):
            self.add_game_object(Enemy, Layer.OBJECT_3D).pos = Vector3(x, 0.0, z)

        self.add_game_object(Score, Layer.OBJECT_2D).set_tex_pos(Vector2(1000.0, 0.0))
        self.add_game_object(Health, Layer.OBJECT_2D).set_tex_pos(Vector2(0.0, 0.0))
        _add_sprite(
            self, "asset/texture/guide.png", Vector2(0.0, 650.0), Vector2(SCREEN_WIDTH, 80.0)
        )

    def update(self) -> None:
        super().update()
        manager = _manager(self)
        health = self.get_game_object(Health)
        if health is None:
            raise RuntimeError("game scene has no health display")
        if health.count <= 0 or manager.keyboard.is_triggered(Key.RETURN):
            _start_fade(self, FadeState.OUT)
        if _fade_finished(self):
            score = self.get_game_object(Score)
            if score is None:
                raise RuntimeError("game scene has no score display")
            result = manager.set_scene(ResultScene)
            result.score = score.count


class ResultScene(Scene):
    """Shows the final score; Enter returns to the title."""

    BGM_PATH = "asset/audio/MusMus_BGM_cool03.wav"

    def __init__(self, manager: Optional[Manager] = None) -> None:
        super().__init__(manager)
        self.score = 0

    def init(self) -> None:
        _manager(self).current_scene = SceneName.RESULT
        _start_fade(self, FadeState.IN)
        _add_showcase(self, self.BGM_PATH)
        _add_sprite(
            self, "asset/texture/scoreText.png", Vector2(330.0, 100.0), Vector2(300.0, 140.0)
        )
        score = self.add_game_object(Score, Layer.OBJECT_2D)
        score.set_tex_pos(Vector2(400.0, 200.0))
        score.set_tex_size(Vector2(200.0, 200.0))
        score.count = self.score
        _add_sprite(
            self, "asset/texture/toTitle.png", Vector2(500.0, 550.0), Vector2(700.0, 100.0)
        )

    def update(self) -> None:
        super().update()
        manager = _manager(self)
        if manager.keyboard.is_triggered(Key.RETURN):
            _start_fade(self, FadeState.OUT)
        if _fade_finished(self):
            manager.set_scene(TitleScene)


def new_game(seed: Optional[int] = None) -> Manager:
    """A manager running the title scene."""
    manager = Manager(seed)
    manager.start(TitleScene)
    return manager