from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from .. import config
from ..game_logic import BOARD_SIZE, Player
from ..presentation import stroke_endpoints


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, engine, cell_margin=10.0, parent=None):
        super().__init__(parent)
        self.engine = engine  # read-only here, the window issues commands
        self.cell_margin = cell_margin
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(config.MIN_BOARD_SIDE, config.MIN_BOARD_SIDE))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _board_geometry(self):
        # side and top-left corner of the centred square
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w - side) / 2, (h - side) / 2

    def cell_at_position(self, x, y):
        """
        map widget coords to (row, col), None outside the grid
        """
        side, ox, oy = self._board_geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and the winning stroke
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, offset_x, offset_y = self._board_geometry()
            painter.fillRect(self.rect(), QColor(config.BOARD_BACKGROUND))
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(QColor(config.GRID_COLOR), config.GRID_WIDTH))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # marks
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    cell = self.engine.cell_at(r, c)
                    if cell.is_empty: continue
                    cx = offset_x + c*cell_size + cell_size/2
                    cy = offset_y + r*cell_size + cell_size/2
                    rad = max(cell_size/2 - config.MARK_INSET, 1)
                    if cell.player is Player.X:
                        painter.setPen(QPen(QColor(config.X_COLOR), config.MARK_WIDTH))
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.setPen(QPen(QColor(config.O_COLOR), config.MARK_WIDTH))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # stroke through the winning line
            ends = stroke_endpoints(self.engine.winning_line(), side, self.cell_margin)
            if ends is not None:
                (x0, y0), (x1, y1) = ends
                painter.setPen(QPen(QColor(config.WINNING_LINE_COLOR), config.WINNING_LINE_WIDTH,
                                    Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawLine(QPointF(offset_x+x0, offset_y+y0),
                                 QPointF(offset_x+x1, offset_y+y1))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        hit = self.cell_at_position(pos.x(), pos.y())
        if hit is not None:
            self.cell_clicked.emit(*hit)  # notify main window
