"""Board - immutable 5x5 grid of cell states mirrored from the engine."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

from santorini.core.types import (
    BOARD_SIZE,
    MAX_LEVEL,
    Coordinate,
    PlayerId,
    WorkerId,
    in_bounds,
)

_LOGGER = logging.getLogger(__name__)


class BoardFormatError(ValueError):
    """Raised internally when a wire board cannot be decoded."""


@dataclass(frozen=True, slots=True)
class Cell:
    """State of a single board square."""

    occupied: bool = False
    owner_id: PlayerId | None = None
    worker_id: WorkerId | None = None
    level: int = 0
    dome: bool = False

    @property
    def is_capped(self) -> bool:
        """A domed tower accepts no further building."""
        return self.dome

    @classmethod
    def from_wire(cls, raw: dict) -> Cell:
        """Decode one engine cell object.

        The engine spells the id ``workerID``; ``workerId`` is accepted too.
        The worker id is only kept for occupied cells.
        """
        level = raw.get("level", 0)
        if not isinstance(level, int) or isinstance(level, bool):
            raise BoardFormatError(f"Invalid level: {level!r}")
        if not 0 <= level <= MAX_LEVEL:
            raise BoardFormatError(f"Level out of range: {level}")

        occupied = bool(raw.get("occupied", False))
        worker_id = raw.get("workerID", raw.get("workerId")) if occupied else None
        owner_id = raw.get("ownerID", raw.get("ownerId")) if occupied else None
        return cls(
            occupied=occupied and worker_id is not None,
            owner_id=str(owner_id) if owner_id is not None else None,
            worker_id=str(worker_id) if worker_id is not None else None,
            level=level,
            dome=bool(raw.get("dome", False)),
        )


class Board:
    """Immutable row-major (y, then x) grid of :class:`Cell`.

    A ``None`` entry means the engine sent no data for that square.
    Instances are never mutated; every engine response produces a new one.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[tuple[Cell | None, ...], ...]) -> None:
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise BoardFormatError("Board must be 5x5")
        self._rows = rows

    @classmethod
    def empty(cls) -> Board:
        """Return a fresh board with no cell data."""
        return cls(tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    # ── Element access ───────────────────────────────────────────────────

    @property
    def rows(self) -> tuple[tuple[Cell | None, ...], ...]:
        return self._rows

    def cell(self, x: int, y: int) -> Cell | None:
        if not in_bounds(x, y):
            return None
        return self._rows[y][x]

    def worker_at(self, x: int, y: int) -> WorkerId | None:
        """Id of the worker standing on ``(x, y)``, if any."""
        cell = self.cell(x, y)
        if cell is None or not cell.occupied:
            return None
        return cell.worker_id

    def find_worker(self, worker_id: WorkerId | None) -> Coordinate | None:
        """Locate *worker_id* by scanning every cell."""
        if worker_id is None:
            return None
        for coord, cell in self.cells():
            if cell is not None and cell.worker_id == worker_id:
                return coord
        return None

    def cells(self) -> Iterator[tuple[Coordinate, Cell | None]]:
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                yield Coordinate(x, y), cell

    @property
    def is_blank(self) -> bool:
        """True when no cell carries data (placeholder board)."""
        return all(cell is None for _, cell in self.cells())

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        workers = {
            cell.worker_id: (coord.x, coord.y)
            for coord, cell in self.cells()
            if cell is not None and cell.occupied
        }
        return f"Board(workers={workers})"


class ParsedBoard(NamedTuple):
    board: Board
    missing: bool


def parse_board(raw: object) -> ParsedBoard:
    """Decode the engine's ``board`` field.

    Never raises: absent or malformed data yields an empty board with
    ``missing=True`` so the caller can surface the problem.
    """
    if raw is None:
        _LOGGER.warning("Board data is missing from the engine response")
        return ParsedBoard(Board.empty(), True)

    try:
        if not isinstance(raw, list | tuple) or len(raw) != BOARD_SIZE:
            raise BoardFormatError("Board must have 5 rows")
        rows: list[tuple[Cell | None, ...]] = []
        for raw_row in raw:
            if not isinstance(raw_row, list | tuple) or len(raw_row) != BOARD_SIZE:
                raise BoardFormatError("Board row must have 5 cells")
            row: list[Cell | None] = []
            for raw_cell in raw_row:
                if raw_cell is None:
                    row.append(None)
                elif isinstance(raw_cell, dict):
                    row.append(Cell.from_wire(raw_cell))
                else:
                    raise BoardFormatError(f"Invalid cell: {raw_cell!r}")
            rows.append(tuple(row))
        return ParsedBoard(Board(tuple(rows)), False)
    except BoardFormatError as exc:
        _LOGGER.warning("Malformed board in engine response: %s", exc)
        return ParsedBoard(Board.empty(), True)
