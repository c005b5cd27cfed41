"""TurnController — the client-side mirror of the engine's turn phases.

Owns the Board and TurnState pair.  Every transition is driven by an engine
snapshot or an explicit user action; nothing here invents a phase locally
except the two session boundaries (new game → INITIALIZE, god cards →
PLACE_WORKER when the engine is silent about it).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from santorini.core.board import Board, parse_board
from santorini.core.enums import GodCard, Phase
from santorini.core.types import PlayerId, WorkerId, is_owned_by
from santorini.game.interfaces import ITurnController, Notice, NoticeKind
from santorini.game.state import GodCardSelection, Snapshot, TurnState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[TurnState, Board], None]
NoticeCallback = Callable[[Notice], None]
PhaseCallback = Callable[[Phase | None], None]
GameOverCallback = Callable[[PlayerId], None]  # winner


@dataclass
class TurnEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_notice: list[NoticeCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController(ITurnController):
    """Phase state machine for one client session.

    Thread-safety: all methods are called from the Qt main thread; engine
    replies are delivered there by the transport.
    """

    __slots__ = (
        "_board",
        "_turn",
        "_god_cards",
        "_notice",
        "events",
    )

    def __init__(self) -> None:
        self._board = Board.empty()
        self._turn = TurnState()
        self._god_cards = GodCardSelection()
        self._notice = Notice(NoticeKind.WELCOME)
        self.events = TurnEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> TurnState:
        return self._turn

    @property
    def god_cards(self) -> GodCardSelection:
        return self._god_cards

    @property
    def notice(self) -> Notice:
        return self._notice

    # ── Session boundaries ───────────────────────────────────────────────

    def reset(self) -> None:
        old_phase = self._turn.phase
        self._board = Board.empty()
        self._turn = TurnState()
        self._god_cards = GodCardSelection()
        if old_phase is not None:
            self._emit_phase(None)
        self._emit_state()
        self._set_notice(Notice(NoticeKind.WELCOME))

    def start_session(self, snapshot: Snapshot) -> bool:
        return self._adopt(
            snapshot,
            forced_phase=Phase.INITIALIZE,
            notice=Notice(NoticeKind.SELECT_GOD_CARDS),
        )

    def set_god_card(self, player: PlayerId, card: GodCard) -> bool:
        if self._turn.phase != Phase.INITIALIZE:
            self._set_notice(Notice(NoticeKind.GOD_CARDS_LOCKED))
            return False
        self._god_cards = self._god_cards.with_card(player, card)
        return True

    def confirm_god_cards(self, snapshot: Snapshot) -> bool:
        if self._turn.phase != Phase.INITIALIZE:
            self._set_notice(Notice(NoticeKind.GOD_CARDS_LOCKED))
            return False
        return self._adopt(
            snapshot,
            default_phase=Phase.PLACE_WORKER,
            notice=Notice(NoticeKind.GOD_CARDS_CONFIRMED),
        )

    # ── Snapshot application ─────────────────────────────────────────────

    def apply_engine_snapshot(self, snapshot: Snapshot) -> bool:
        return self._adopt(snapshot)

    def _adopt(
        self,
        snapshot: Snapshot,
        *,
        forced_phase: Phase | None = None,
        default_phase: Phase | None = None,
        notice: Notice | None = None,
    ) -> bool:
        if forced_phase is not None:
            phase = forced_phase
        elif snapshot.phase is not None:
            phase = snapshot.phase
        else:
            phase = default_phase

        parsed = parse_board(snapshot.board)
        if parsed.missing:
            self._board = parsed.board
            if forced_phase is not None or default_phase is not None:
                # Session boundaries advance even without a board.
                self._set_boundary_phase(phase)
            self._emit_state()
            self._set_notice(Notice(NoticeKind.MISSING_BOARD))
            return False

        if snapshot.winner is not None:
            phase = Phase.END

        moves = snapshot.possible_moves
        if phase is not None and phase.has_targets:
            available = not (moves is not None and not moves)
            turn = TurnState(
                current_player=snapshot.current_player,
                current_worker=snapshot.current_worker,
                phase=phase,
                possible_moves=moves or frozenset(),
                possible_builds=snapshot.possible_builds or frozenset(),
                worker_available=available,
            )
        else:
            turn = TurnState(
                current_player=snapshot.current_player,
                current_worker=snapshot.current_worker,
                phase=phase,
            )

        old_phase = self._turn.phase
        self._board = parsed.board
        self._turn = turn

        if phase != old_phase:
            self._emit_phase(phase)
        self._emit_state()

        if snapshot.winner is not None:
            self._set_notice(Notice(NoticeKind.GAME_OVER, player=snapshot.winner))
            if old_phase != Phase.END:
                self._emit_game_over(snapshot.winner)
        elif not turn.worker_available:
            self._set_notice(
                Notice(NoticeKind.WORKER_UNAVAILABLE, worker=turn.current_worker)
            )
        elif notice is not None:
            self._set_notice(notice)
        else:
            self._set_notice(
                Notice(
                    NoticeKind.PHASE_STATUS,
                    player=turn.current_player,
                    detail=str(phase) if phase is not None else "",
                )
            )
        return True

    def _set_boundary_phase(self, phase: Phase | None) -> None:
        old_phase = self._turn.phase
        self._turn = replace(
            self._turn,
            phase=phase,
            possible_moves=frozenset(),
            possible_builds=frozenset(),
            worker_available=True,
        )
        if phase != old_phase:
            self._emit_phase(phase)

    # ── Worker selection ─────────────────────────────────────────────────

    def validate_worker_selection(self, worker_id: WorkerId) -> bool:
        turn = self._turn
        if (
            turn.phase != Phase.MOVE
            or turn.current_worker is not None
            or not is_owned_by(worker_id, turn.current_player)
        ):
            _LOGGER.debug(
                "Rejected selection of %s (phase=%s, player=%s, selected=%s)",
                worker_id,
                turn.phase,
                turn.current_player,
                turn.current_worker,
            )
            self._set_notice(
                Notice(NoticeKind.INVALID_SELECTION, player=turn.current_player)
            )
            return False
        return True

    def select_worker(self, worker_id: WorkerId, snapshot: Snapshot) -> bool:
        if not self.validate_worker_selection(worker_id):
            return False

        parsed = parse_board(snapshot.board)
        if parsed.missing:
            self._board = parsed.board
            self._emit_state()
            self._set_notice(Notice(NoticeKind.MISSING_BOARD))
            return False

        moves = snapshot.possible_moves
        available = moves is None or bool(moves)
        self._board = parsed.board
        self._turn = replace(
            self._turn,
            current_worker=worker_id,
            possible_moves=moves or frozenset(),
            possible_builds=frozenset(),
            worker_available=available,
        )
        self._emit_state()
        kind = NoticeKind.WORKER_SELECTED if available else NoticeKind.WORKER_CANNOT_MOVE
        self._set_notice(Notice(kind, worker=worker_id))
        return True

    def deselect_worker(self) -> bool:
        if not self._turn.has_selection:
            return False
        self._turn = replace(
            self._turn,
            current_worker=None,
            possible_moves=frozenset(),
            possible_builds=frozenset(),
            worker_available=True,
        )
        self._emit_state()
        self._set_notice(
            Notice(NoticeKind.WORKER_DESELECTED, player=self._turn.current_player)
        )
        return True

    # ── Notices ──────────────────────────────────────────────────────────

    def notify(self, notice: Notice) -> None:
        self._set_notice(notice)

    def _set_notice(self, notice: Notice) -> None:
        self._notice = notice
        for cb in self.events.on_notice:
            cb(notice)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_state(self) -> None:
        for cb in self.events.on_state_changed:
            cb(self._turn, self._board)

    def _emit_phase(self, phase: Phase | None) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_game_over(self, winner: PlayerId) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
