"""The camera that looks down on the play field."""

from __future__ import annotations

from .gameobject import GameObject
from .player import Player
from .scene import SceneName
from .vector import Matrix4, Vector3, look_at_lh

_IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class Camera(GameObject):
    """Top-down camera; in the game scene it hovers over the player."""

    HEIGHT = 5.0
    DISTANCE = 30.0
    FOV_Y = 1.0
    NEAR_Z = 1.0
    FAR_Z = 1000.0

    def __init__(self) -> None:
        super().__init__()
        self.target = Vector3()
        self.view_matrix: Matrix4 = _IDENTITY
        self.current_scene = SceneName.TITLE

    def init(self) -> None:
        scene = self.scene
        if scene is None or scene.manager is None:
            raise RuntimeError("camera is not in a managed scene")
        self.current_scene = scene.manager.current_scene
        self.set_scene_position(self.current_scene)

    def update(self) -> None:
        if self.current_scene != SceneName.GAME:
            return
        scene = self.scene
        if scene is None:
            raise RuntimeError("camera is not in a scene")
        player = scene.get_game_object(Player)
        if player is None:
            raise RuntimeError("scene has no player")
        self.target = player.pos
        self.pos = Vector3(player.pos.x, self.pos.y, player.pos.z - 1.0)

    def draw(self) -> None:
        """Compute and keep the view matrix for this frame."""
        self.view_matrix = look_at_lh(self.pos, self.target, Vector3(0.0, 1.0, 0.0))

    def set_scene_position(self, scene_name: SceneName) -> None:
        """Place the camera where the given scene starts it."""
        if scene_name == SceneName.TITLE or scene_name == SceneName.RESULT:
            self.pos = Vector3(0.0, 25.0, -1.0)
            self.target = Vector3(0.0, 0.0, 0.0)
        elif scene_name == SceneName.GAME:
            self.pos = Vector3(0.0, self.DISTANCE, -1.0)
            self.target = Vector3(0.0, 0.0, 0.0)