"""Typed outcomes of engine requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from santorini.game.state import Snapshot, SnapshotError
from santorini.net.transport import TransportReply


class FailureKind(IntEnum):
    """Failure taxonomy for engine requests."""

    TRANSPORT = auto()  # request did not complete or non-success status
    PROTOCOL = auto()  # success status, unusable body
    REJECTED = auto()  # engine answered with an ``error`` field
    GOD_CARDS = auto()  # one or both god-card submissions failed


@dataclass(frozen=True, slots=True)
class EngineFailure:
    kind: FailureKind
    message: str


EngineResult = Snapshot | EngineFailure


def decode_reply(reply: TransportReply) -> EngineResult:
    """Turn a raw transport reply into a snapshot or a typed failure.

    A body without ``board`` is still a snapshot: the controller degrades it
    to an empty board and reports the problem.
    """
    payload = reply.payload
    if not reply.ok:
        message = _error_text(payload) or reply.error or f"HTTP {reply.status}"
        return EngineFailure(FailureKind.TRANSPORT, message)

    if not isinstance(payload, dict):
        return EngineFailure(FailureKind.PROTOCOL, "Malformed engine response")

    error = _error_text(payload)
    if error:
        return EngineFailure(FailureKind.REJECTED, error)

    try:
        return Snapshot.from_payload(payload)
    except SnapshotError as exc:
        return EngineFailure(FailureKind.PROTOCOL, str(exc))


def _error_text(payload: object) -> str | None:
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return None
