import pytest

from tictactoe.game_logic import DRAW, LINES, Player, Turn, Won
from tictactoe.presentation import header_text, stroke_endpoints


@pytest.mark.parametrize("state,text", [
    (Turn(Player.X), "Player X turn"),
    (Turn(Player.O), "Player O turn"),
    (Won(Player.X), "Won by X"),
    (Won(Player.O), "Won by O"),
    (DRAW, "Draw"),
])
def test_header_text(state, text):
    assert header_text(state) == text


def test_header_text_rejects_unknown_state():
    with pytest.raises(TypeError):
        header_text("finished")


def test_no_line_no_stroke():
    assert stroke_endpoints(None, 300) is None


def test_left_column_stroke_is_vertical():
    (x0, y0), (x1, y1) = stroke_endpoints(LINES[3], 300, cell_margin=10)
    lo = (300 - 310 / 3 * 2) / 2
    assert x0 == pytest.approx(lo)
    assert x1 == pytest.approx(lo)
    assert y0 == pytest.approx(lo)
    assert y1 == pytest.approx(300 - lo)


def test_middle_row_stroke_is_horizontal_through_centre():
    (x0, y0), (x1, y1) = stroke_endpoints(LINES[1], 300, cell_margin=0)
    assert (y0, y1) == (150, 150)
    assert x0 == pytest.approx(50)
    assert x1 == pytest.approx(250)


def test_anti_diagonal_runs_top_right_to_bottom_left():
    (x0, y0), (x1, y1) = stroke_endpoints(LINES[7], 300, cell_margin=0)
    assert (x0, y0) == (pytest.approx(250), pytest.approx(50))
    assert (x1, y1) == (pytest.approx(50), pytest.approx(250))
