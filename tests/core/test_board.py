"""Tests for Board, Cell and wire-board parsing."""

import pytest

from santorini.core.board import Board, BoardFormatError, Cell, parse_board
from santorini.core.types import Coordinate


def _wire_board(**cells: dict) -> list[list[dict]]:
    """5x5 wire board of empty level-0 cells; ``cells`` keyed ``c<x><y>``."""
    rows = []
    for y in range(5):
        row = []
        for x in range(5):
            raw = {"x": x, "y": y, "level": 0, "dome": False, "occupied": False}
            raw.update(cells.get(f"c{x}{y}", {}))
            row.append(raw)
        rows.append(row)
    return rows


class TestCellFromWire:
    def test_occupied_cell(self) -> None:
        cell = Cell.from_wire(
            {"level": 2, "dome": False, "occupied": True, "workerID": "A1", "ownerID": "A"}
        )
        assert cell.occupied
        assert cell.worker_id == "A1"
        assert cell.owner_id == "A"
        assert cell.level == 2

    def test_camel_case_ids_accepted(self) -> None:
        cell = Cell.from_wire({"occupied": True, "workerId": "B2", "ownerId": "B"})
        assert cell.worker_id == "B2"
        assert cell.owner_id == "B"

    def test_ids_ignored_when_unoccupied(self) -> None:
        cell = Cell.from_wire({"occupied": False, "workerID": "A1"})
        assert not cell.occupied
        assert cell.worker_id is None

    def test_occupied_without_worker_is_unoccupied(self) -> None:
        cell = Cell.from_wire({"occupied": True})
        assert not cell.occupied

    def test_dome(self) -> None:
        cell = Cell.from_wire({"level": 3, "dome": True})
        assert cell.is_capped

    @pytest.mark.parametrize("level", [-1, 4, "2", True, 1.5])
    def test_invalid_level(self, level: object) -> None:
        with pytest.raises(BoardFormatError):
            Cell.from_wire({"level": level})


class TestBoard:
    def test_empty_board_is_blank(self) -> None:
        board = Board.empty()
        assert board.is_blank
        assert board.cell(0, 0) is None

    def test_wrong_shape_rejected(self) -> None:
        with pytest.raises(BoardFormatError):
            Board(((None,) * 5,) * 4)

    def test_cell_out_of_bounds(self) -> None:
        assert Board.empty().cell(5, 0) is None
        assert Board.empty().cell(0, -1) is None

    def test_indexing_is_row_major(self) -> None:
        board, _ = parse_board(
            _wire_board(c31={"occupied": True, "workerID": "A1", "ownerID": "A"})
        )
        assert board.worker_at(3, 1) == "A1"
        assert board.worker_at(1, 3) is None
        assert board.rows[1][3] is not None and board.rows[1][3].worker_id == "A1"

    def test_find_worker(self) -> None:
        board, _ = parse_board(
            _wire_board(c24={"occupied": True, "workerID": "B2", "ownerID": "B"})
        )
        assert board.find_worker("B2") == Coordinate(2, 4)
        assert board.find_worker("A1") is None
        assert board.find_worker(None) is None

    def test_equality(self) -> None:
        a, _ = parse_board(_wire_board())
        b, _ = parse_board(_wire_board())
        assert a == b
        assert hash(a) == hash(b)
        assert a != Board.empty()


class TestParseBoard:
    def test_valid_board(self) -> None:
        parsed = parse_board(_wire_board(c00={"level": 1}))
        assert not parsed.missing
        cell = parsed.board.cell(0, 0)
        assert cell is not None and cell.level == 1

    def test_none_is_missing(self) -> None:
        parsed = parse_board(None)
        assert parsed.missing
        assert parsed.board.is_blank

    def test_null_cells_allowed(self) -> None:
        raw: list = _wire_board()
        raw[2][2] = None
        parsed = parse_board(raw)
        assert not parsed.missing
        assert parsed.board.cell(2, 2) is None

    @pytest.mark.parametrize(
        "raw",
        [
            "board",
            [],
            [[{}] * 5] * 4,
            [[{}] * 4] * 5,
            [[{}] * 5] * 4 + [[1, 2, 3, 4, 5]],
            [[{"level": 9}] * 5] * 5,
        ],
    )
    def test_malformed_is_missing(self, raw: object) -> None:
        parsed = parse_board(raw)
        assert parsed.missing
        assert parsed.board == Board.empty()
