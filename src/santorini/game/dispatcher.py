"""Click interpretation: (phase, selection, targets, board) → Intent.

Pure and synchronous.  The dispatcher never talks to the engine; it only
decides which request a click maps to, if any.
"""

from __future__ import annotations

from santorini.core.board import Board
from santorini.core.enums import Phase
from santorini.core.types import Coordinate, in_bounds, is_owned_by
from santorini.game.intents import (
    Build,
    Intent,
    MoveWorker,
    NoOp,
    PlaceWorker,
    SelectWorker,
    SkipSecondBuild,
)
from santorini.game.interfaces import Notice, NoticeKind
from santorini.game.state import TurnState


def dispatch_click(turn: TurnState, board: Board, x: int, y: int) -> Intent:
    """Map a click on ``(x, y)`` to an intent for the current phase."""
    if not in_bounds(x, y):
        return NoOp()

    phase = turn.phase
    if phase == Phase.PLACE_WORKER:
        return _on_place(turn, x, y)
    if phase == Phase.MOVE:
        return _on_move(turn, board, x, y)
    if phase in (Phase.SECOND_MOVE, Phase.BUILD):
        return _on_build(turn, x, y)
    if phase == Phase.SECOND_BUILD:
        return _on_second_build(turn, board, x, y)
    # INITIALIZE, END, or no game yet.
    return NoOp()


def _on_place(turn: TurnState, x: int, y: int) -> Intent:
    if turn.current_worker is None:
        return NoOp()
    return PlaceWorker(turn.current_worker, x, y)


def _on_move(turn: TurnState, board: Board, x: int, y: int) -> Intent:
    if turn.current_worker is not None:
        # Legality of the destination is left to the engine.
        return MoveWorker(turn.current_worker, x, y)

    worker_id = board.worker_at(x, y)
    if worker_id is None or not is_owned_by(worker_id, turn.current_player):
        return NoOp(Notice(NoticeKind.INVALID_SELECTION, player=turn.current_player))
    return SelectWorker(worker_id)


def _on_build(turn: TurnState, x: int, y: int) -> Intent:
    if turn.current_worker is None or Coordinate(x, y) not in turn.possible_builds:
        return NoOp()
    return Build(turn.current_worker, x, y)


def _on_second_build(turn: TurnState, board: Board, x: int, y: int) -> Intent:
    if turn.current_worker is None:
        return NoOp()

    # A worker's own square is never a build target, so it doubles as "skip".
    if board.find_worker(turn.current_worker) == Coordinate(x, y):
        return SkipSecondBuild(turn.current_worker)
    if Coordinate(x, y) in turn.possible_builds:
        return Build(turn.current_worker, x, y)
    return NoOp()
