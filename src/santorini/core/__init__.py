"""Core domain layer — board and phase value types, no Qt dependencies.

Quick start::

    from santorini.core import parse_board

    board, missing = parse_board(payload.get("board"))
    print(board.find_worker("A1"))
"""

from santorini.core.board import Board, BoardFormatError, Cell, ParsedBoard, parse_board
from santorini.core.enums import PLAYER_IDS, GodCard, Phase
from santorini.core.types import (
    BOARD_SIZE,
    MAX_LEVEL,
    Coordinate,
    PlayerId,
    WorkerId,
    in_bounds,
    is_owned_by,
    parse_coordinates,
)

__all__ = [
    # Enums
    "GodCard",
    "Phase",
    "PLAYER_IDS",
    # Types / helpers
    "BOARD_SIZE",
    "MAX_LEVEL",
    "Coordinate",
    "PlayerId",
    "WorkerId",
    "in_bounds",
    "is_owned_by",
    "parse_coordinates",
    # Board
    "Board",
    "BoardFormatError",
    "Cell",
    "ParsedBoard",
    "parse_board",
]
