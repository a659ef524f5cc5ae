from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from loguru import logger

BOARD_SIZE = 3  # fixed 3x3 grid


class Player(Enum):
    """
    the two marks, X always opens
    """
    X = "X"
    O = "O"

    @property
    def label(self):
        return self.value

    def other(self):
        return Player.O if self is Player.X else Player.X


@dataclass(frozen=True)
class Cell:
    """
    content of one board position, empty when player is None
    """
    player: Optional[Player] = None

    @classmethod
    def played_by(cls, player):
        return cls(player)

    @property
    def is_empty(self):
        return self.player is None


EMPTY = Cell()


class BoardIndex(NamedTuple):
    row: int
    column: int


@dataclass(frozen=True)
class Turn:
    of: Player


@dataclass(frozen=True)
class Won:
    by: Player


@dataclass(frozen=True)
class Draw:
    pass


DRAW = Draw()


def _line(*coords):
    return tuple(BoardIndex(r, c) for r, c in coords)


# scan order: rows, columns, main diagonal, anti-diagonal
# each line runs from its start corner/edge to its end corner/edge
LINES = (
    tuple(_line(*((r, c) for c in range(BOARD_SIZE))) for r in range(BOARD_SIZE))
    + tuple(_line(*((r, c) for r in range(BOARD_SIZE))) for c in range(BOARD_SIZE))
    + (_line(*((i, i) for i in range(BOARD_SIZE))),
       _line(*((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))))
)


class GameEngine:
    """
    tic-tac-toe rules and state

    The engine is a passive model: shells call play()/replay() and then
    re-read current_state(), cell_at() and winning_line(). State is derived
    from the board on every query so it can never drift from it.
    """
    def __init__(self):
        """
        init empty board, X to move
        """
        self._cells = [[EMPTY for _ in range(BOARD_SIZE)]
                       for _ in range(BOARD_SIZE)]

    def _check_index(self, row, column):
        if not (0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE):
            raise IndexError(f"board index ({row}, {column}) out of range")

    def cell_at(self, row, column) -> Cell:
        self._check_index(row, column)
        return self._cells[row][column]

    def empty_cells(self):
        """
        free positions in row-major order
        """
        return [BoardIndex(r, c)
                for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
                if self._cells[r][c].is_empty]

    @property
    def move_count(self):
        """
        marks on the board, read-only
        """
        return BOARD_SIZE * BOARD_SIZE - len(self.empty_cells())

    def winning_line(self):
        """
        first completed line in scan order, or None
        """
        for line in LINES:
            first = self._cells[line[0].row][line[0].column]
            if first.is_empty:
                continue
            if all(self._cells[r][c] == first for r, c in line[1:]):
                return line
        return None

    def current_state(self):
        """
        Turn(of), Won(by) or DRAW, recomputed from the board
        """
        line = self.winning_line()
        if line is not None:
            r, c = line[0]
            return Won(self._cells[r][c].player)
        if self.move_count == BOARD_SIZE * BOARD_SIZE:
            return DRAW
        # X opens, so an even count means X to move
        return Turn(Player.X if self.move_count % 2 == 0 else Player.O)

    def is_over(self) -> bool:
        return not isinstance(self.current_state(), Turn)

    def play(self, row, column) -> None:
        """
        place the current player's mark; illegal moves are ignored
        """
        self._check_index(row, column)
        state = self.current_state()
        if not isinstance(state, Turn):
            logger.debug("ignoring move ({}, {}): game is over ({})", row, column, state)
            return
        if not self._cells[row][column].is_empty:
            logger.debug("ignoring move ({}, {}): cell taken", row, column)
            return
        self._cells[row][column] = Cell.played_by(state.of)
        logger.debug("{} played ({}, {})", state.of.label, row, column)

        result = self.current_state()
        if isinstance(result, Won):
            logger.debug("{} wins along {}", result.by.label, self.winning_line())
        elif isinstance(result, Draw):
            logger.debug("board full, draw")

    def replay(self) -> None:
        """
        clear board back to a fresh game
        """
        self._cells = [[EMPTY for _ in range(BOARD_SIZE)]
                       for _ in range(BOARD_SIZE)]
        logger.debug("board reset, X to move")
