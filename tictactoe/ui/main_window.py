from loguru import logger

from ..game_logic import GameEngine, Turn, Won
from ..presentation import header_text
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QLabel, QMenuBar, QMenu
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: header, board, replay button
    """
    def __init__(self, engine=None, cell_margin=10.0):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, cell_margin=cell_margin, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setSpacing(30)

        self._create_menu_bar()
        self.header_label = QLabel("")
        f = QFont(); f.setPointSize(16); self.header_label.setFont(f)
        self.header_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.header_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self.replay_button = QPushButton("Replay")
        self.replay_button.clicked.connect(self.replay)
        self.main_layout.addWidget(self.replay_button, alignment=Qt.AlignCenter)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_action = QAction("New Game", self)
        self.new_action.triggered.connect(self.replay)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def refresh(self):
        # re-read everything from the engine
        state = self.engine.current_state()
        style = "color: #eee;"
        if isinstance(state, Won): style = "color: lime; font-weight: bold;"
        elif isinstance(state, Turn): style = "color: #8acaff; font-weight: bold;"
        self.header_label.setStyleSheet(style)
        self.header_label.setText(header_text(state))
        self.board_widget.update()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # engine ignores taken cells and finished games
        self.engine.play(r, c)
        self.refresh()

    @Slot()
    def replay(self):
        logger.debug("replay requested from ui")
        self.engine.replay()
        self.refresh()
