"""Keyboard state with press and trigger (newly pressed) queries."""

from __future__ import annotations

from enum import IntEnum
from typing import FrozenSet, Iterable, Union

KEY_COUNT = 256


class Key(IntEnum):
    """Virtual key codes used by the game."""

    RETURN = 0x0D
    ESCAPE = 0x1B
    SPACE = 0x20
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28

    NUM_0 = 0x30
    NUM_1 = 0x31
    NUM_2 = 0x32
    NUM_3 = 0x33
    NUM_4 = 0x34
    NUM_5 = 0x35
    NUM_6 = 0x36
    NUM_7 = 0x37
    NUM_8 = 0x38
    NUM_9 = 0x39

    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A


KeyLike = Union[Key, int]


def _code(key: KeyLike) -> int:
    code = int(key)
    if not 0 <= code < KEY_COUNT:
        raise ValueError(f"key code out of range: {code}")
    return code


class Keyboard:
    """Holds this frame's and last frame's set of pressed keys."""

    def __init__(self) -> None:
        self._current: FrozenSet[int] = frozenset()
        self._previous: FrozenSet[int] = frozenset()

    def reset(self) -> None:
        self._current = frozenset()
        self._previous = frozenset()

    def update(self, pressed: Iterable[KeyLike] = ()) -> None:
        """Advance one frame; ``pressed`` are the keys held down now."""
        codes = frozenset(_code(key) for key in pressed)
        self._previous, self._current = self._current, codes

    def is_pressed(self, key: KeyLike) -> bool:
        return _code(key) in self._current

    def is_triggered(self, key: KeyLike) -> bool:
        code = _code(key)
        return code in self._current and code not in self._previous