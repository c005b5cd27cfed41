"""Turn state and engine snapshot value objects."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from santorini.core.enums import PLAYER_IDS, GodCard, Phase
from santorini.core.types import Coordinate, PlayerId, WorkerId, parse_coordinates

# The engine serialises "no winner yet" as the string "null".
NO_WINNER = "null"


class SnapshotError(ValueError):
    """Engine payload cannot be interpreted as a snapshot."""


@dataclass(frozen=True, slots=True)
class TurnState:
    """Whose turn it is, which phase is active, and the legal targets.

    ``possible_moves`` / ``possible_builds`` are only populated while
    ``phase`` is MOVE, BUILD or SECOND_BUILD.
    """

    current_player: PlayerId | None = None
    current_worker: WorkerId | None = None
    phase: Phase | None = None
    possible_moves: frozenset[Coordinate] = frozenset()
    possible_builds: frozenset[Coordinate] = frozenset()
    worker_available: bool = True

    @property
    def has_selection(self) -> bool:
        """A worker is chosen in the MOVE phase."""
        return self.phase == Phase.MOVE and self.current_worker is not None

    @property
    def is_over(self) -> bool:
        return self.phase == Phase.END


@dataclass(frozen=True, slots=True)
class GodCardSelection:
    """Pending god-card choice per player; frozen after INITIALIZE."""

    cards: dict[PlayerId, GodCard] = field(
        default_factory=lambda: {player: GodCard.NONE for player in PLAYER_IDS}
    )

    def for_player(self, player: PlayerId) -> GodCard:
        return self.cards.get(player, GodCard.NONE)

    def with_card(self, player: PlayerId, card: GodCard) -> GodCardSelection:
        if player not in PLAYER_IDS:
            raise ValueError(f"Unknown player: {player!r}")
        return replace(self, cards={**self.cards, player: card})


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Decoded engine response.

    ``board`` stays raw: :func:`santorini.core.board.parse_board` decides
    whether it is usable.  Absent target lists decode to ``None`` so that
    "absent" and "present but empty" remain distinguishable.
    """

    board: Any = None
    current_player: PlayerId | None = None
    current_worker: WorkerId | None = None
    phase: Phase | None = None
    possible_moves: frozenset[Coordinate] | None = None
    possible_builds: frozenset[Coordinate] | None = None
    winner: PlayerId | None = None

    @classmethod
    def from_payload(cls, payload: object) -> Snapshot:
        """Decode a JSON response body.

        Raises:
            SnapshotError: *payload* is not an object, or carries an unknown
                ``gamePhase`` or a non-list target field.
        """
        if not isinstance(payload, dict):
            raise SnapshotError("Engine response is not a JSON object")

        try:
            phase = Phase.from_wire(payload.get("gamePhase"))
        except ValueError as exc:
            raise SnapshotError(str(exc)) from None

        return cls(
            board=payload.get("board"),
            current_player=_optional_str(payload.get("currentPlayer")),
            current_worker=_optional_str(payload.get("currentWorker")),
            phase=phase,
            possible_moves=_optional_coords(payload, "possibleMoves"),
            possible_builds=_optional_coords(payload, "possibleBuilds"),
            winner=_decode_winner(payload.get("winner")),
        )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_coords(payload: dict, key: str) -> frozenset[Coordinate] | None:
    raw = payload.get(key)
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise SnapshotError(f"{key} must be a list, got {type(raw).__name__}")
    return parse_coordinates(raw)


def _decode_winner(value: object) -> PlayerId | None:
    if value is None or value == NO_WINNER or value == "":
        return None
    return str(value)
