"""GodCardPanel — per-player god card choice and confirmation."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from santorini.core.enums import PLAYER_IDS, GodCard
from santorini.game.state import GodCardSelection
from santorini.ui.i18n import t


class GodCardPanel(QWidget):
    """Combo boxes while INITIALIZE is active, read-only labels afterwards.

    Signals:
        card_changed(str, str): ``(player_id, god card name)``.
        confirm_clicked(): The user confirmed both choices.
    """

    card_changed = pyqtSignal(str, str)
    confirm_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._combos: dict[str, QComboBox] = {}
        self._row_labels: dict[str, QLabel] = {}
        self._editable = False
        self._setup_ui()
        self.retranslate_ui()
        self.set_editable(False)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        layout.addWidget(self._header)

        form = QFormLayout()
        for player in PLAYER_IDS:
            combo = QComboBox()
            for card in GodCard:
                combo.addItem(card.value, card.value)
            combo.currentTextChanged.connect(
                lambda text, player=player: self._on_combo_changed(player, text)
            )
            label = QLabel()
            form.addRow(label, combo)
            self._combos[player] = combo
            self._row_labels[player] = label
        layout.addLayout(form)

        self._btn_confirm = QPushButton()
        self._btn_confirm.setMinimumHeight(32)
        self._btn_confirm.clicked.connect(self.confirm_clicked)
        layout.addWidget(self._btn_confirm)

    def retranslate_ui(self) -> None:
        s = t()
        self._header.setText(s.god_cards_header)
        for player, label in self._row_labels.items():
            label.setText(s.god_card_label.format(player=player))
        self._btn_confirm.setText(s.btn_confirm_god_cards)

    def set_editable(self, editable: bool) -> None:
        """Editable during INITIALIZE; display-only for the rest of the game."""
        self._editable = editable
        self._header.setVisible(editable)
        for combo in self._combos.values():
            combo.setEnabled(editable)
        self._btn_confirm.setVisible(editable)

    def is_editable(self) -> bool:
        return self._editable

    def set_selection(self, selection: GodCardSelection) -> None:
        for player, combo in self._combos.items():
            card = selection.for_player(player)
            if combo.currentText() != card.value:
                combo.blockSignals(True)
                combo.setCurrentText(card.value)
                combo.blockSignals(False)

    def _on_combo_changed(self, player: str, text: str) -> None:
        if self._editable:
            self.card_changed.emit(player, text)
