"""Visual theme constants and QSS styles for the Santorini client."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the 5x5 board."""

    ground: QColor  # level 0
    tower: QColor  # levels 1-3
    dome: QColor
    grid: QColor
    text: QColor
    available_worker: QColor  # own workers selectable in MOVE
    selected_worker: QColor
    possible_move: QColor
    possible_build: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            ground=QColor(146, 187, 112),  # grass
            tower=QColor(236, 234, 226),  # whitewash
            dome=QColor(38, 86, 160),  # aegean blue
            grid=QColor(60, 60, 60),
            text=QColor(30, 30, 30),
            available_worker=QColor(255, 215, 0, 90),
            selected_worker=QColor(255, 140, 0, 140),
            possible_move=QColor(0, 160, 255, 90),
            possible_build=QColor(170, 90, 200, 90),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

# Whitewashed walls and Aegean blue accents.
APP_STYLE = """
QMainWindow, QWidget {
    background: #f4f1ea;
    color: #1f2d3d;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLabel#statusLabel {
    font-size: 14px;
    padding: 6px;
    border-bottom: 2px solid #2656a0;
}

QGraphicsView {
    border: 1px solid #9aa7b5;
}

QComboBox {
    background: #ffffff;
    border: 1px solid #9aa7b5;
    border-radius: 3px;
    padding: 3px 6px;
}
QComboBox:disabled {
    color: #7b8794;
    background: #ebe7dd;
}

QPushButton {
    background: #2656a0;
    color: #ffffff;
    border: none;
    border-radius: 3px;
    padding: 6px 12px;
}
QPushButton:hover {
    background: #3169bf;
}
QPushButton:disabled {
    background: #b8c3d1;
    color: #eef1f5;
}

QMenuBar::item:selected, QMenu::item:selected {
    background: #2656a0;
    color: #ffffff;
}
"""
