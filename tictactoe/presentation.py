"""
Qt-free helpers shared by the board widget and the console shell.
"""
from .game_logic import Draw, Turn, Won


def header_text(state):
    """
    one-line status for the header label
    """
    if isinstance(state, Turn):
        return f"Player {state.of.label} turn"
    if isinstance(state, Won):
        return f"Won by {state.by.label}"
    if isinstance(state, Draw):
        return "Draw"
    raise TypeError(f"unknown game state {state!r}")


def stroke_endpoints(line, side, cell_margin=10.0):
    """
    Map a winning line to stroke endpoints inside a square board.

    The stroke covers two thirds of the board (plus the cell margin) and is
    centred, so indices 0/1/2 land on min/centre/max. Column is x, row is y.
    Returns ((x0, y0), (x1, y1)) from line[0] to line[2], or None.
    """
    if line is None:
        return None
    stroke = (side + cell_margin) / 3 * 2
    lo = (side - stroke) / 2
    positions = (lo, side / 2, lo + stroke)
    start, end = line[0], line[2]
    return ((positions[start.column], positions[start.row]),
            (positions[end.column], positions[end.row]))
