import sys
import argparse

from loguru import logger
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from tictactoe.config import load_settings
from tictactoe.console import ConsoleGame
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
BUTTON_COLOR = QColor(66, 66, 66)
HIGHLIGHT_COLOR = QColor(42, 130, 218)
PLACEHOLDER_TEXT_COLOR = QColor(160, 160, 160)
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app):
    """
    Apply the default dark theme palette using predefined constants.
    """
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, Qt.white)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, Qt.white)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, Qt.white)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, Qt.white)
    palette.setColor(QPalette.PlaceholderText, PLACEHOLDER_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def setup_logging(level):
    # single stderr sink at the configured level
    logger.remove()
    logger.add(sys.stderr, level=level)


def run_gui(settings):
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow(cell_margin=settings.cell_margin)
    window.show()
    return app.exec()


def run_console():
    try:
        ConsoleGame().run()
    except KeyboardInterrupt:
        print("\nGame interrupted by user (Ctrl+C).")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Two-player Tic-Tac-Toe")
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play in the terminal instead of opening a window"
    )
    parser.add_argument(
        "--log-level",
        help="loguru level, e.g. DEBUG (default: TICTACTOE_LOG_LEVEL or WARNING)"
    )
    args = parser.parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))
    level = (args.log_level or settings.log_level).upper()
    try:
        logger.level(level)
    except ValueError:
        parser.error(f"unknown log level {level!r}")
    setup_logging(level)
    logger.debug("starting in {} mode", "console" if args.console else "gui")

    if args.console:
        return run_console()
    return run_gui(settings)


if __name__ == '__main__':
    sys.exit(main())
