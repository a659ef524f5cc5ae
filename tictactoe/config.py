import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WINNING_LINE_COLOR = "orange"
MARK_WIDTH = 5
GRID_WIDTH = 2
WINNING_LINE_WIDTH = 6
MARK_INSET = 10      # px between a mark and its cell edge
MIN_BOARD_SIDE = 150

# -----------------------------------------------------------------------------
# ENVIRONMENT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    cell_margin: float = 10.0   # gap between cells used by the win stroke


def load_settings():
    """
    read TICTACTOE_* overrides, .env included
    """
    load_dotenv(find_dotenv(usecwd=True))
    log_level = os.getenv("TICTACTOE_LOG_LEVEL", Settings.log_level).upper()
    raw_margin = os.getenv("TICTACTOE_CELL_MARGIN")
    if raw_margin is None:
        return Settings(log_level=log_level)
    try:
        cell_margin = float(raw_margin)
    except ValueError:
        raise ValueError(f"TICTACTOE_CELL_MARGIN must be a number, got {raw_margin!r}") from None
    if cell_margin < 0:
        raise ValueError(f"TICTACTOE_CELL_MARGIN must be >= 0, got {cell_margin}")
    return Settings(log_level=log_level, cell_margin=cell_margin)
