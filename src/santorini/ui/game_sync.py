"""UI/game state synchronisation helpers for MainWindow."""

from __future__ import annotations

from collections.abc import Callable

from santorini.core.board import Board
from santorini.core.enums import Phase
from santorini.game.controller import TurnController
from santorini.game.interfaces import Notice
from santorini.game.state import TurnState
from santorini.ui.board.board_scene import BoardScene
from santorini.ui.i18n import format_notice
from santorini.ui.panels.control_panel import ControlPanel
from santorini.ui.panels.god_card_panel import GodCardPanel


class GameSync:
    """Applies turn-controller changes to UI widgets."""

    __slots__ = (
        "_controller",
        "_board_scene",
        "_control_panel",
        "_god_card_panel",
        "_set_status",
    )

    def __init__(
        self,
        *,
        controller: TurnController,
        board_scene: BoardScene,
        control_panel: ControlPanel,
        god_card_panel: GodCardPanel,
        set_status: Callable[[str], None],
    ) -> None:
        self._controller = controller
        self._board_scene = board_scene
        self._control_panel = control_panel
        self._god_card_panel = god_card_panel
        self._set_status = set_status

    def connect(self) -> None:
        """Subscribe to controller events."""
        events = self._controller.events
        events.on_state_changed.append(self.on_state_changed)
        events.on_notice.append(self.on_notice)
        events.on_phase_changed.append(self.on_phase_changed)
        events.on_game_over.append(self.on_game_over)

    def refresh(self) -> None:
        """Full sync from the controller's current state."""
        self.on_phase_changed(self._controller.turn.phase)
        self.on_state_changed(self._controller.turn, self._controller.board)
        self.on_notice(self._controller.notice)

    def on_state_changed(self, turn: TurnState, board: Board) -> None:
        self._board_scene.set_state(turn, board)
        self._control_panel.set_undo_enabled(turn.has_selection)
        self._god_card_panel.set_selection(self._controller.god_cards)

    def on_phase_changed(self, phase: Phase | None) -> None:
        self._board_scene.set_interactive(phase not in (None, Phase.END))
        self._control_panel.set_skip_hint_visible(phase == Phase.SECOND_BUILD)
        self._god_card_panel.set_editable(phase == Phase.INITIALIZE)

    def on_game_over(self, _winner: str) -> None:
        self._board_scene.set_interactive(False)
        self._control_panel.set_undo_enabled(False)

    def on_notice(self, notice: Notice) -> None:
        self._set_status(format_notice(notice))
