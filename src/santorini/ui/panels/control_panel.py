"""ControlPanel — session action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from santorini.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for session actions: new game and undo selection."""

    new_game_clicked = pyqtSignal()
    undo_selection_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()
        self.set_undo_enabled(False)
        self.set_skip_hint_visible(False)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        self._btn_new = QPushButton()
        self._btn_new.setFont(btn_font)
        self._btn_new.setMinimumHeight(36)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

        self._btn_undo = QPushButton()
        self._btn_undo.setFont(btn_font)
        self._btn_undo.setMinimumHeight(36)
        self._btn_undo.clicked.connect(self.undo_selection_clicked)
        layout.addWidget(self._btn_undo)

        self._skip_hint = QLabel()
        self._skip_hint.setWordWrap(True)
        layout.addWidget(self._skip_hint)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_new.setText(s.btn_new_game)
        self._btn_undo.setText(s.btn_undo_selection)
        self._skip_hint.setText(s.hint_skip_second_build)

    def set_undo_enabled(self, enabled: bool) -> None:
        """Undo is only meaningful while a worker is selected in MOVE."""
        self._btn_undo.setEnabled(enabled)

    def set_skip_hint_visible(self, visible: bool) -> None:
        self._skip_hint.setVisible(visible)

    def is_undo_enabled(self) -> bool:
        return self._btn_undo.isEnabled()

    def is_skip_hint_visible(self) -> bool:
        return not self._skip_hint.isHidden()
