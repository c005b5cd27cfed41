"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from santorini.config import ClientSettings
from santorini.core.enums import GodCard
from santorini.game.controller import TurnController
from santorini.net.sync import EngineSync
from santorini.net.transport import ITransport, QtHttpTransport
from santorini.ui.board.board_view import BoardView
from santorini.ui.game_sync import GameSync
from santorini.ui.i18n import t
from santorini.ui.panels.control_panel import ControlPanel
from santorini.ui.panels.god_card_panel import GodCardPanel


class MainWindow(QMainWindow):
    """Main application window for the Santorini client."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        transport: ITransport | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or ClientSettings()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(760, 560)

        self._controller = TurnController()
        self._transport = transport or QtHttpTransport(self._settings.server_url, self)
        self._engine_sync = EngineSync(
            controller=self._controller, transport=self._transport
        )

        self._setup_ui()
        self._setup_menu()
        self._game_sync = GameSync(
            controller=self._controller,
            board_scene=self._board_view.board_scene,
            control_panel=self._control_panel,
            god_card_panel=self._god_card_panel,
            set_status=self._status_label.setText,
        )
        self._game_sync.connect()
        self._connect_signals()
        self._game_sync.refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        outer = QVBoxLayout(central)
        outer.setContentsMargins(6, 6, 6, 6)
        outer.setSpacing(6)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        self._status_label.setWordWrap(True)
        outer.addWidget(self._status_label)

        row = QHBoxLayout()
        row.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        row.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)
        self._god_card_panel = GodCardPanel()
        right.addWidget(self._god_card_panel)
        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)
        right.addStretch(1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        row.addWidget(right_widget)

        outer.addLayout(row, stretch=1)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        act_quit = QAction(s.menu_quit, self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        self._menu_game.addAction(act_quit)

    def _connect_signals(self) -> None:
        self._board_view.cell_clicked.connect(self._on_cell_clicked)
        self._control_panel.new_game_clicked.connect(self._on_new_game)
        self._control_panel.undo_selection_clicked.connect(self._on_undo_selection)
        self._god_card_panel.card_changed.connect(self._on_god_card_changed)
        self._god_card_panel.confirm_clicked.connect(self._on_confirm_god_cards)

    # ── Handlers ─────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._engine_sync.new_game()

    def _on_cell_clicked(self, x: int, y: int) -> None:
        self._engine_sync.handle_click(x, y)

    def _on_undo_selection(self) -> None:
        self._engine_sync.deselect_worker()

    def _on_god_card_changed(self, player: str, card: str) -> None:
        self._engine_sync.set_god_card(player, GodCard(card))

    def _on_confirm_god_cards(self) -> None:
        self._engine_sync.confirm_god_cards()

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> TurnController:
        return self._controller

    @property
    def engine_sync(self) -> EngineSync:
        return self._engine_sync

    @property
    def status_text(self) -> str:
        return self._status_label.text()
