"""BoardScene — QGraphicsScene that draws the 5x5 board, towers and workers."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from santorini.core.board import Board, Cell
from santorini.core.enums import Phase
from santorini.core.types import BOARD_SIZE, Coordinate, is_owned_by
from santorini.game.state import TurnState
from santorini.ui.styles.theme import BoardTheme


def cell_label(cell: Cell | None) -> str:
    """Text shown on a square: one bracket pair per tower level."""
    if cell is None:
        return ""
    if cell.dome:
        return "[ [ [ o ] ] ]"
    middle = [cell.worker_id] if cell.occupied and cell.worker_id else []
    return " ".join(["["] * cell.level + middle + ["]"] * cell.level)


def highlight_for(coord: Coordinate, cell: Cell | None, turn: TurnState) -> str | None:
    """Name of the :class:`BoardTheme` colour overlaying *coord*, if any."""
    phase = turn.phase
    if (
        cell is not None
        and cell.occupied
        and turn.current_worker is None
        and phase == Phase.MOVE
        and is_owned_by(cell.worker_id, turn.current_player)
    ):
        return "available_worker"
    if cell is not None and cell.occupied and cell.worker_id == turn.current_worker:
        return "selected_worker"
    if turn.current_worker is None:
        return None
    if phase == Phase.MOVE and coord in turn.possible_moves:
        return "possible_move"
    if phase in (Phase.BUILD, Phase.SECOND_BUILD) and coord in turn.possible_builds:
        return "possible_build"
    return None


class BoardScene(QGraphicsScene):
    """Renders the board and turns mouse presses into cell coordinates.

    Signals:
        cell_clicked(int, int): Emitted with ``(x, y)`` of the pressed square.
    """

    cell_clicked = pyqtSignal(int, int)

    TILE = 100  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board = Board.empty()
        self._turn = TurnState()
        self._interactive = True

        self._tile_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._highlight_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._label_items: dict[Coordinate, QGraphicsSimpleTextItem] = {}

        self.setSceneRect(0, 0, BOARD_SIZE * self.TILE, BOARD_SIZE * self.TILE)
        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, turn: TurnState, board: Board) -> None:
        """Redraw from a new TurnState / Board pair."""
        self._turn = turn
        self._board = board
        self._draw_board()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive

    def is_interactive(self) -> bool:
        return self._interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        for items in (self._tile_items, self._highlight_items, self._label_items):
            for item in items.values():
                self.removeItem(item)
            items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))
        for coord, cell in self._board.cells():
            rect = QGraphicsRectItem(coord.x * t, coord.y * t, t, t)
            rect.setBrush(QBrush(self._tile_color(cell)))
            rect.setPen(QPen(self._theme.grid))
            rect.setZValue(0)
            self.addItem(rect)
            self._tile_items[coord] = rect

            overlay = highlight_for(coord, cell, self._turn)
            if overlay is not None:
                self._highlight_items[coord] = self._make_highlight(
                    coord, getattr(self._theme, overlay)
                )

            label = cell_label(cell)
            if label:
                txt = QGraphicsSimpleTextItem(label)
                txt.setFont(font)
                txt.setBrush(QBrush(self._theme.text))
                bounds = txt.boundingRect()
                txt.setPos(
                    coord.x * t + (t - bounds.width()) / 2,
                    coord.y * t + (t - bounds.height()) / 2,
                )
                txt.setZValue(1)
                self.addItem(txt)
                self._label_items[coord] = txt

    def _tile_color(self, cell: Cell | None) -> QColor:
        if cell is None or cell.level == 0 and not cell.dome:
            return self._theme.ground
        if cell.dome:
            return self._theme.dome
        return self._theme.tower.darker(100 + 10 * cell.level)

    def _make_highlight(self, coord: Coordinate, color: QColor) -> QGraphicsRectItem:
        t = self.TILE
        rect = QGraphicsRectItem(coord.x * t, coord.y * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        return rect

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        coord = self._pos_to_cell(event.scenePos())
        if coord is not None:
            self.cell_clicked.emit(coord.x, coord.y)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_cell(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board coordinate."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Coordinate(col, row)
