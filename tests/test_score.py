import pytest

from refprism.score import Score
from refprism.vector import Vector2


@pytest.fixture
def score():
    s = Score()
    s.init()
    return s


def test_init_starts_at_zero(score):
    assert score.count == 0
    assert score.div_value.x == pytest.approx(1.0 / Score.DIV_NUM_X)
    assert score.div_value.y == pytest.approx(1.0 / Score.DIV_NUM_Y)


def test_add_and_reset(score):
    score.add(30)
    score.add(12)
    assert score.count == 42
    score.reset()
    assert score.count == 0


def test_update_clamps_to_maximum(score):
    score.add(12345)
    score.update()
    assert score.count == Score.SCORE_MAX


def test_update_keeps_value_within_range(score):
    score.add(500)
    score.update()
    assert score.count == 500


def test_set_tex_pos_moves_quad(score):
    score.set_tex_pos(Vector2(1000.0, 0.0))
    assert score.quad.positions[0] == Vector2(1000.0, 0.0)
    assert score.left_top_pos.x == 1000.0


def test_set_tex_size_resizes_quad(score):
    score.set_tex_pos(Vector2(400.0, 200.0))
    score.set_tex_size(Vector2(200.0, 200.0))
    assert score.quad.positions[3] == Vector2(600.0, 400.0)


def test_digit_quads_count_and_layout(score):
    score.set_tex_pos(Vector2(400.0, 200.0))
    score.set_tex_size(Vector2(200.0, 200.0))
    quads = score.digit_quads()
    assert len(quads) == Score.DIGIT_MAX
    # Rightmost digit first, each one half a sprite to the left of the previous.
    xs = [q.positions[0].x for q in quads]
    assert xs[-1] == 400.0
    for a, b in zip(xs, xs[1:]):
        assert a - b == pytest.approx(100.0)
    assert all(q.positions[0].y == 200.0 for q in quads)


def test_zero_uses_first_cell(score):
    for quad in score.digit_quads():
        assert quad.tex_coords[0] == Vector2(0.0, 0.0)


def test_digit_five_uses_second_row(score):
    score.add(5)
    units = score.digit_quads()[0]
    assert units.tex_coords[0].x == pytest.approx(0.0)
    assert units.tex_coords[0].y == pytest.approx(1.0 / Score.DIV_NUM_Y)


def test_texture_window_matches_cell_size(score):
    score.add(9876)
    for quad in score.digit_quads():
        width = quad.tex_coords[1].x - quad.tex_coords[0].x
        height = quad.tex_coords[2].y - quad.tex_coords[0].y
        assert width == pytest.approx(score.div_value.x)
        assert height == pytest.approx(score.div_value.y)


def test_equal_digits_share_texture(score):
    score.add(7777)
    coords = {q.tex_coords[0] for q in score.digit_quads()}
    assert len(coords) == 1


def test_draw_records_quads(score):
    score.add(12)
    score.draw()
    assert score.quads == score.digit_quads()
    assert score.quad == score.quads[-1]