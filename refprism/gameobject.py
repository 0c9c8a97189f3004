"""Base classes for everything that lives in a scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Type, TypeVar

from .vector import Matrix4, Vector2, Vector3, rotation_rows

C = TypeVar("C", bound="Component")


class Component:
    """A piece of behaviour attached to a game object."""

    def __init__(self, game_object: GameObject) -> None:
        self.game_object = game_object

    def init(self) -> None:
        """Called once when the component is attached."""

    def uninit(self) -> None:
        """Called when the component is released."""

    def update(self) -> None:
        """Called once per frame."""

    def draw(self) -> None:
        """Called once per rendered frame."""


@dataclass(frozen=True)
class Quad:
    """Four corners of a screen-space sprite in triangle-strip order."""

    positions: Tuple[Vector2, Vector2, Vector2, Vector2]
    tex_coords: Tuple[Vector2, Vector2, Vector2, Vector2]


def make_quad(
    pos: Vector2,
    size: Vector2,
    tex_coord: Vector2 = Vector2(0.0, 0.0),
    tex_size: Vector2 = Vector2(1.0, 1.0),
) -> Quad:
    """Build a quad with top-left corner ``pos`` and the given texture window."""
    return Quad(
        positions=(
            Vector2(pos.x, pos.y),
            Vector2(pos.x + size.x, pos.y),
            Vector2(pos.x, pos.y + size.y),
            Vector2(pos.x + size.x, pos.y + size.y),
        ),
        tex_coords=(
            Vector2(tex_coord.x, tex_coord.y),
            Vector2(tex_coord.x + tex_size.x, tex_coord.y),
            Vector2(tex_coord.x, tex_coord.y + tex_size.y),
            Vector2(tex_coord.x + tex_size.x, tex_coord.y + tex_size.y),
        ),
    )


class GameObject:
    """An object with a transform, a list of components and a destroy flag."""

    DT = 1.0 / 60.0

    def __init__(self) -> None:
        self.pos = Vector3(0.0, 0.0, 0.0)
        self.rot = Vector3(0.0, 0.0, 0.0)
        self.scl = Vector3(1.0, 1.0, 1.0)
        self.size = Vector3(1.0, 1.0, 1.0)
        self.radius = 0.0
        self.destroyed = False
        self.components: List[Component] = []
        self.scene: Optional[Any] = None

    def init(self) -> None:
        self.init_components()

    def uninit(self) -> None:
        self.uninit_components()

    def update(self) -> None:
        self.update_components()

    def draw(self) -> None:
        self.draw_components()

    def init_components(self) -> None:
        for component in self.components:
            component.init()

    def uninit_components(self) -> None:
        for component in self.components:
            component.uninit()
        self.components.clear()

    def update_components(self) -> None:
        for component in self.components:
            component.update()

    def draw_components(self) -> None:
        for component in self.components:
            component.draw()

    def add_component(self, component: C) -> C:
        component.init()
        self.components.append(component)
        return component

    def remove_component(self, component: Component) -> None:
        self.components = [c for c in self.components if c is not component]

    def get_component(self, kind: Type[C]) -> Optional[C]:
        return next((c for c in self.components if isinstance(c, kind)), None)

    def destroy(self) -> None:
        """Mark the object for removal at the end of the scene update."""
        self.destroyed = True

    def up(self) -> Vector3:
        return rotation_rows(self.rot.x, self.rot.y, self.rot.z)[1]

    def forward(self) -> Vector3:
        return rotation_rows(self.rot.x, self.rot.y, self.rot.z)[2]

    def right(self) -> Vector3:
        return rotation_rows(self.rot.x, self.rot.y, self.rot.z)[0]

    def distance_xz(self, pos: Vector3) -> float:
        return Vector2(self.pos.x - pos.x, self.pos.z - pos.z).length()

    def distance(self, pos: Vector3) -> float:
        return (self.pos - pos).length()

    def view_distance(self, view: Matrix4) -> float:
        """Depth of this object along the view direction of ``view``."""
        direction = Vector3(view[0][2], view[1][2], view[2][2])
        origin = Vector3(view[3][0], view[3][1], view[3][2])
        return direction.dot(self.pos - origin)