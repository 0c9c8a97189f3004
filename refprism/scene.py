"""Scenes holding layered game objects, and the manager that runs them."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Type, TypeVar, Union

from .gameobject import GameObject
from .input import Keyboard, KeyLike

T = TypeVar("T", bound=GameObject)
S = TypeVar("S", bound="Scene")


class Layer(IntEnum):
    """Update and draw order of the objects in a scene."""

    SYSTEM = 0
    OBJECT_3D = 1
    EFFECT = 2
    OBJECT_2D = 3


class SceneName(IntEnum):
    """The scenes the game moves between."""

    TITLE = 0
    GAME = 1
    RESULT = 2


class Scene:
    """A set of game objects kept in layers and updated and drawn in layer order."""

    def __init__(self, manager: Optional[Manager] = None) -> None:
        self.manager = manager
        self._layers: Dict[Layer, List[GameObject]] = {layer: [] for layer in Layer}

    def __iter__(self) -> Iterator[GameObject]:
        for objects in self._layers.values():
            yield from objects

    def objects_in(self, layer: Union[Layer, int]) -> List[GameObject]:
        """A copy of the objects in one layer, in the order they were added."""
        return list(self._layers[Layer(layer)])

    def init(self) -> None:
        """Populate the scene; the base scene starts empty."""

    def uninit(self) -> None:
        for objects in self._layers.values():
            for obj in objects:
                obj.uninit()
            objects.clear()

    def update(self) -> None:
        for objects in self._layers.values():
            # Objects appended to this layer during the pass are updated too.
            for obj in objects:
                obj.update()
            survivors = []
            for obj in objects:
                if obj.destroyed:
                    obj.uninit()
                else:
                    survivors.append(obj)
            objects[:] = survivors

    def draw(self) -> None:
        for objects in self._layers.values():
            for obj in objects:
                obj.draw()

    def add_game_object(self, kind: Union[Type[T], T], layer: Union[Layer, int]) -> T:
        """Create (or take) an object, initialise it and put it in ``layer``."""
        objects = self._layers[Layer(layer)]
        obj = kind if isinstance(kind, GameObject) else kind()
        obj.scene = self
        obj.init()
        objects.append(obj)
        return obj

    def get_game_object(self, kind: Type[T]) -> Optional[T]:
        """The first object of type ``kind`` in layer order, or None."""
        return next((obj for obj in self if isinstance(obj, kind)), None)

    def get_game_objects(self, kind: Type[T]) -> List[T]:
        """Every object of type ``kind``, in layer order."""
        return [obj for obj in self if isinstance(obj, kind)]


class Manager:
    """Owns the running scene, the keyboard and the random number source."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)
        self.keyboard = Keyboard()
        self.scene: Optional[Scene] = None
        self.next_scene: Optional[Scene] = None
        self.current_scene = SceneName.TITLE

    def _require_scene(self) -> Scene:
        if self.scene is None:
            raise RuntimeError("no scene is running")
        return self.scene

    def start(self, scene_cls: Callable[[Manager], S]) -> S:
        """Reset input and run ``scene_cls`` as the first scene."""
        self.keyboard.reset()
        scene = scene_cls(self)
        self.scene = scene
        scene.init()
        return scene

    def shutdown(self) -> None:
        if self.scene is not None:
            self.scene.uninit()
            self.scene = None
        self.next_scene = None
        self.keyboard.reset()

    def update(self, pressed: Iterable[KeyLike] = ()) -> None:
        """Advance input one frame with ``pressed`` held, then update the scene."""
        self.keyboard.update(pressed)
        self._require_scene().update()

    def draw(self) -> None:
        """Draw the scene, then switch to a requested scene if there is one."""
        scene = self._require_scene()
        scene.draw()
        if self.next_scene is not None:
            scene.uninit()
            self.scene = self.next_scene
            self.next_scene = None
            self.scene.init()

    def rand(self, low: int = 0, high: int = 1) -> int:
        """Uniform integer in ``[low, high]``."""
        return self.rng.randint(low, high)

    def randf(self, low: float = 0.0, high: float = 1.0) -> float:
        """Uniform float between ``low`` and ``high``."""
        return self.rng.uniform(low, high)

    def set_scene(self, scene_cls: Callable[[Manager], S]) -> S:
        """Request a scene change; it happens at the end of the next draw."""
        scene = scene_cls(self)
        self.next_scene = scene
        return scene