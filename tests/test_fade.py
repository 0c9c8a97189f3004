import pytest

from refprism.fade import SCREEN_HEIGHT, SCREEN_WIDTH, Fade, FadeState
from refprism.scene import Layer, Scene
from refprism.vector import Vector2


def make_fade(state):
    fade = Fade()
    fade.init()
    fade.set_fade_state(state)
    return fade


def test_set_fade_state_alpha():
    assert make_fade(FadeState.OUT).color.a == 0.0
    assert make_fade(FadeState.IN).color.a == 1.0
    assert make_fade(FadeState.NONE).color.a == 1.0


def test_init_covers_screen():
    fade = Fade()
    fade.init()
    assert fade.quad.positions[0] == Vector2(0.0, 0.0)
    assert fade.quad.positions[3] == Vector2(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert (SCREEN_WIDTH, SCREEN_HEIGHT) == (1280, 720)


def test_fade_out_ends_after_about_twenty_frames():
    fade = make_fade(FadeState.OUT)
    for _ in range(19):
        fade.update()
    assert not fade.fade_end
    fade.update()
    fade.update()
    assert fade.fade_end
    assert not fade.destroyed


def test_fade_out_step_size():
    fade = make_fade(FadeState.OUT)
    fade.update()
    assert fade.color.a == pytest.approx(Fade.FADE_RATE)


def test_fade_in_destroys_itself():
    fade = make_fade(FadeState.IN)
    fade.update()
    assert not fade.destroyed
    assert fade.color.a == pytest.approx(1.0 - Fade.FADE_RATE)
    for _ in range(25):
        fade.update()
    assert fade.destroyed
    assert not fade.fade_end


def test_none_state_does_not_change():
    fade = make_fade(FadeState.NONE)
    for _ in range(5):
        fade.update()
    assert fade.color.a == 1.0
    assert not fade.destroyed
    assert not fade.fade_end


def test_fade_in_removed_from_scene():
    scene = Scene()
    fade = scene.add_game_object(Fade, Layer.OBJECT_2D)
    fade.set_fade_state(FadeState.IN)
    for _ in range(25):
        scene.update()
    assert scene.get_game_object(Fade) is None


def test_set_tex_pos_and_size():
    fade = Fade()
    fade.init()
    fade.set_tex_pos(Vector2(10.0, 20.0))
    fade.set_tex_size(Vector2(30.0, 40.0))
    assert fade.quad.positions[0] == Vector2(10.0, 20.0)
    assert fade.quad.positions[3] == Vector2(40.0, 60.0)


def test_invalid_state_rejected():
    fade = Fade()
    with pytest.raises(ValueError):
        fade.set_fade_state(7)