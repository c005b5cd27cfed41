"""Abstract interfaces and notice types for the game layer.

The UI and the sync adapter depend on :class:`ITurnController`, not on the
concrete controller, so tests can drive either side in isolation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from santorini.core.board import Board
    from santorini.core.enums import GodCard
    from santorini.core.types import PlayerId, WorkerId
    from santorini.game.state import GodCardSelection, Snapshot, TurnState


# ── Notices ──────────────────────────────────────────────────────────────────


class NoticeKind(IntEnum):
    """User-facing advisories raised by the state machine."""

    WELCOME = auto()
    NEW_GAME_FAILED = auto()
    SELECT_GOD_CARDS = auto()
    GOD_CARDS_LOCKED = auto()  # selection attempted outside INITIALIZE
    GOD_CARDS_CONFIRMED = auto()
    GOD_CARDS_FAILED = auto()
    PHASE_STATUS = auto()
    WORKER_UNAVAILABLE = auto()
    WORKER_SELECTED = auto()
    WORKER_CANNOT_MOVE = auto()
    WORKER_DESELECTED = auto()
    INVALID_SELECTION = auto()
    SECOND_BUILD_SKIPPED = auto()
    GAME_OVER = auto()
    MISSING_BOARD = auto()
    REQUEST_FAILED = auto()


@dataclass(frozen=True, slots=True)
class Notice:
    """A typed message; the UI turns it into localised text."""

    kind: NoticeKind
    player: str | None = None
    worker: str | None = None
    detail: str = ""


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnController(ABC):
    """Interface for the client-side phase state machine."""

    @property
    @abstractmethod
    def board(self) -> Board: ...

    @property
    @abstractmethod
    def turn(self) -> TurnState: ...

    @property
    @abstractmethod
    def god_cards(self) -> GodCardSelection: ...

    @abstractmethod
    def reset(self) -> None:
        """Return to the pre-game state, discarding all selections."""

    @abstractmethod
    def start_session(self, snapshot: Snapshot) -> bool:
        """Adopt a new-game response; the phase becomes INITIALIZE."""

    @abstractmethod
    def set_god_card(self, player: PlayerId, card: GodCard) -> bool:
        """Change a pending god-card choice. Returns True if allowed."""

    @abstractmethod
    def confirm_god_cards(self, snapshot: Snapshot) -> bool:
        """Adopt the post-selection snapshot once both cards are accepted."""

    @abstractmethod
    def apply_engine_snapshot(self, snapshot: Snapshot) -> bool:
        """Replace Board and TurnState from *snapshot*. Returns True if applied."""

    @abstractmethod
    def validate_worker_selection(self, worker_id: WorkerId) -> bool:
        """Local pre-filter run before asking the engine to select a worker."""

    @abstractmethod
    def select_worker(self, worker_id: WorkerId, snapshot: Snapshot) -> bool:
        """Fold a select-worker response into the state."""

    @abstractmethod
    def deselect_worker(self) -> bool:
        """Drop the current selection during MOVE. Returns True on success."""

    @abstractmethod
    def notify(self, notice: Notice) -> None:
        """Surface an advisory without touching Board or TurnState."""
