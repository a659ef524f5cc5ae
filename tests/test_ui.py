import pytest

from tictactoe.game_logic import GameEngine, Player, Turn, Won

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QPoint, Qt  # noqa: E402
from PySide6.QtTest import QTest  # noqa: E402

from tictactoe.ui.main_window import TicTacToeWindow  # noqa: E402


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow(GameEngine())
    win.resize(300, 400)
    yield win
    win.close()


def click(window, row, col):
    window.board_widget.cell_clicked.emit(row, col)


def test_header_starts_on_x_turn(window):
    assert window.header_label.text() == "Player X turn"


def test_clicks_play_and_refresh_header(window):
    click(window, 0, 0)
    assert window.engine.cell_at(0, 0).player is Player.X
    assert window.header_label.text() == "Player O turn"
    click(window, 0, 0)
    assert window.engine.current_state() == Turn(Player.O)


def test_win_then_replay_button(window):
    for row, col in [(0, 0), (1, 1), (1, 0), (1, 2), (2, 0)]:
        click(window, row, col)
    assert window.engine.current_state() == Won(Player.X)
    assert window.header_label.text() == "Won by X"
    window.replay_button.click()
    assert window.engine.move_count == 0
    assert window.header_label.text() == "Player X turn"


def test_board_maps_positions_to_cells(window):
    board = window.board_widget
    board.resize(300, 300)
    assert board.cell_at_position(10, 10) == (0, 0)
    assert board.cell_at_position(150, 290) == (2, 1)
    assert board.cell_at_position(299, 0) == (0, 2)
    assert board.cell_at_position(300, 10) is None


def test_board_centres_square_in_wide_widget(window):
    board = window.board_widget
    board.resize(500, 300)
    # square spans x 100..400
    assert board.cell_at_position(50, 50) is None
    assert board.cell_at_position(110, 50) == (0, 0)
    assert board.cell_at_position(390, 250) == (2, 2)


def test_board_paints_won_position(window):
    for row, col in [(0, 0), (1, 1), (1, 0), (1, 2), (2, 0)]:
        click(window, row, col)
    board = window.board_widget
    board.resize(300, 300)
    image = board.grab()
    assert not image.isNull()


def test_mouse_click_on_board_plays_that_cell(window):
    window.show()
    board = window.board_widget
    side = min(board.width(), board.height())
    ox, oy = (board.width() - side) // 2, (board.height() - side) // 2
    # centre of the bottom-right cell
    QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier,
                     QPoint(ox + side * 5 // 6, oy + side * 5 // 6))
    assert window.engine.cell_at(2, 2).player is Player.X
    assert window.header_label.text() == "Player O turn"


def test_mouse_click_outside_square_is_ignored(window):
    board = window.board_widget
    board.resize(500, 300)
    QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(20, 150))
    assert window.engine.move_count == 0


def test_new_game_menu_action_resets(window):
    click(window, 1, 1)
    click(window, 0, 0)
    window.new_action.trigger()
    assert window.engine.move_count == 0
    assert window.header_label.text() == "Player X turn"
