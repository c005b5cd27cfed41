"""Intents — what a board click asks the engine to do."""

from __future__ import annotations

from dataclasses import dataclass

from santorini.core.types import WorkerId
from santorini.game.interfaces import Notice


@dataclass(frozen=True, slots=True)
class PlaceWorker:
    worker_id: WorkerId
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class SelectWorker:
    worker_id: WorkerId


@dataclass(frozen=True, slots=True)
class MoveWorker:
    worker_id: WorkerId
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Build:
    worker_id: WorkerId
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class SkipSecondBuild:
    worker_id: WorkerId


@dataclass(frozen=True, slots=True)
class NoOp:
    """Nothing to send; *notice* is an optional local advisory."""

    notice: Notice | None = None


Intent = PlaceWorker | SelectWorker | MoveWorker | Build | SkipSecondBuild | NoOp
