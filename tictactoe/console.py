from loguru import logger

from .game_logic import BOARD_SIZE, BoardIndex, GameEngine
from .presentation import header_text

REPLAY_WORDS = ("r", "replay")
QUIT_WORDS = ("q", "quit")


def parse_move(text):
    """
    'r,c' or 'r c' with both in 0-2, else None
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, column = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE):
        return None
    return BoardIndex(row, column)


class ConsoleGame:
    """
    terminal front-end: prints the board, reads moves
    """
    def __init__(self, engine=None, input_fn=input, output_fn=print):
        self.engine = engine if engine is not None else GameEngine()
        self._input = input_fn
        self._output = output_fn

    def render(self):
        """
        board with row/col indices, empty cells show their column number
        """
        self._output("\n-------------")
        for r in range(BOARD_SIZE):
            marks = []
            for c in range(BOARD_SIZE):
                cell = self.engine.cell_at(r, c)
                marks.append(str(c) if cell.is_empty else cell.player.label)
            self._output(f"{r}  {' | '.join(marks)}")
            if r < BOARD_SIZE - 1: self._output("  -----------")
        self._output("   0   1   2")  # column indices
        self._output("-------------")
        self._output(header_text(self.engine.current_state()))

    def run(self):
        """
        loop until quit or end of input
        """
        self.render()
        while True:
            if self.engine.is_over():
                prompt = "(r)eplay or (q)uit: "
            else:
                prompt = "Enter move (row,col) from 0-2, (r)eplay or (q)uit: "
            try:
                text = self._input(prompt).strip().lower()
            except EOFError:
                logger.debug("console input closed")
                return
            if text in QUIT_WORDS:
                return
            if text in REPLAY_WORDS:
                self.engine.replay()
            else:
                move = parse_move(text)
                if move is None:
                    self._output("!! Invalid input. Use row,col (e.g. 0,0 or 1,2).")
                    continue
                if not self.engine.is_over() and move not in self.engine.empty_cells():
                    self._output("!! Cell already taken. Try again.")
                self.engine.play(*move)
            self.render()
