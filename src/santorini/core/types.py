"""Coordinate helpers and small value types."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NamedTuple

_LOGGER = logging.getLogger(__name__)

BOARD_SIZE = 5
MAX_LEVEL = 3

PlayerId = str
WorkerId = str


class Coordinate(NamedTuple):
    """Board coordinate; ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def in_bounds(x: int, y: int) -> bool:
    """Return whether ``(x, y)`` lies on the 5x5 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def is_owned_by(worker_id: WorkerId | None, player_id: PlayerId | None) -> bool:
    """Worker ids encode their owner as a prefix, e.g. ``"A1"`` → ``"A"``."""
    if not worker_id or not player_id:
        return False
    return worker_id.startswith(player_id)


def parse_coordinates(raw: Iterable[object] | None) -> frozenset[Coordinate]:
    """Decode a wire sequence of ``{"x": .., "y": ..}`` objects.

    Malformed or out-of-range entries are skipped.
    """
    if raw is None:
        return frozenset()

    coords: set[Coordinate] = set()
    for entry in raw:
        if not isinstance(entry, dict):
            _LOGGER.warning("Skipping malformed coordinate entry: %r", entry)
            continue
        x, y = entry.get("x"), entry.get("y")
        if (
            not isinstance(x, int)
            or not isinstance(y, int)
            or isinstance(x, bool)
            or isinstance(y, bool)
            or not in_bounds(x, y)
        ):
            _LOGGER.warning("Skipping malformed coordinate entry: %r", entry)
            continue
        coords.add(Coordinate(x, y))
    return frozenset(coords)
