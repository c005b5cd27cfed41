"""Core enumerations for the Santorini domain."""

from __future__ import annotations

from enum import StrEnum


class Phase(StrEnum):
    """Turn phases as reported by the engine.

    Values are the wire strings of the ``gamePhase`` field.  The
    uninitialised state (before a game exists) is represented by ``None``
    rather than a member.
    """

    INITIALIZE = "INITIALIZE"
    PLACE_WORKER = "PLACE_WORKER"
    MOVE = "MOVE"
    SECOND_MOVE = "SECOND_MOVE"
    BUILD = "BUILD"
    SECOND_BUILD = "SECOND_BUILD"
    END = "END"

    @property
    def has_targets(self) -> bool:
        """Whether move/build target sets are meaningful in this phase."""
        return self in _TARGET_PHASES

    @classmethod
    def from_wire(cls, value: object) -> Phase | None:
        """Decode a ``gamePhase`` value; ``None`` when absent.

        Raises:
            ValueError: *value* is present but not a known phase.
        """
        if value is None:
            return None
        try:
            return cls(str(value))
        except ValueError:
            raise ValueError(f"Unknown game phase: {value!r}") from None


_TARGET_PHASES = frozenset({Phase.MOVE, Phase.BUILD, Phase.SECOND_BUILD})


class GodCard(StrEnum):
    """God cards offered at the start of a game."""

    NONE = "None"
    DEMETER = "Demeter"
    HEPHAESTUS = "Hephaestus"
    MINOTAUR = "Minotaur"
    PAN = "Pan"
    APOLLO = "Apollo"


PLAYER_IDS: tuple[str, str] = ("A", "B")
