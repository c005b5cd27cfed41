"""Game management layer — turn state machine and click dispatch.

Quick start::

    from santorini.game import TurnController, Snapshot, dispatch_click

    ctrl = TurnController()
    ctrl.apply_engine_snapshot(Snapshot.from_payload(payload))
    intent = dispatch_click(ctrl.turn, ctrl.board, 2, 3)
"""

from santorini.game.controller import TurnController, TurnEvents
from santorini.game.dispatcher import dispatch_click
from santorini.game.intents import (
    Build,
    Intent,
    MoveWorker,
    NoOp,
    PlaceWorker,
    SelectWorker,
    SkipSecondBuild,
)
from santorini.game.interfaces import ITurnController, Notice, NoticeKind
from santorini.game.state import (
    NO_WINNER,
    GodCardSelection,
    Snapshot,
    SnapshotError,
    TurnState,
)

__all__ = [
    # Interfaces
    "ITurnController",
    "Notice",
    "NoticeKind",
    # State
    "NO_WINNER",
    "GodCardSelection",
    "Snapshot",
    "SnapshotError",
    "TurnState",
    # Concrete
    "TurnController",
    "TurnEvents",
    "dispatch_click",
    # Intents
    "Build",
    "Intent",
    "MoveWorker",
    "NoOp",
    "PlaceWorker",
    "SelectWorker",
    "SkipSecondBuild",
]
