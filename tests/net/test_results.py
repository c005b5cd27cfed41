"""Tests for decoding transport replies into results."""

from santorini.core.enums import Phase
from santorini.game.state import Snapshot
from santorini.net.results import EngineFailure, FailureKind, decode_reply
from santorini.net.transport import TransportReply


class TestDecodeReply:
    def test_snapshot(self) -> None:
        result = decode_reply(
            TransportReply(200, {"gamePhase": "MOVE", "currentPlayer": "B", "board": None})
        )
        assert isinstance(result, Snapshot)
        assert result.phase is Phase.MOVE
        assert result.current_player == "B"

    def test_body_without_board_is_still_a_snapshot(self) -> None:
        assert isinstance(decode_reply(TransportReply(200, {})), Snapshot)

    def test_engine_error_field(self) -> None:
        result = decode_reply(TransportReply(200, {"error": "Not your turn"}))
        assert result == EngineFailure(FailureKind.REJECTED, "Not your turn")

    def test_network_error(self) -> None:
        result = decode_reply(TransportReply(0, error="Host not found"))
        assert result == EngineFailure(FailureKind.TRANSPORT, "Host not found")

    def test_http_status_with_error_body(self) -> None:
        result = decode_reply(TransportReply(400, {"error": "Bad worker"}))
        assert result == EngineFailure(FailureKind.TRANSPORT, "Bad worker")

    def test_http_status_without_body(self) -> None:
        result = decode_reply(TransportReply(503))
        assert result == EngineFailure(FailureKind.TRANSPORT, "HTTP 503")

    def test_non_object_body(self) -> None:
        result = decode_reply(TransportReply(200, [1, 2, 3]))
        assert result == EngineFailure(FailureKind.PROTOCOL, "Malformed engine response")

    def test_empty_body(self) -> None:
        result = decode_reply(TransportReply(200, None))
        assert isinstance(result, EngineFailure)
        assert result.kind == FailureKind.PROTOCOL

    def test_unknown_phase(self) -> None:
        result = decode_reply(TransportReply(200, {"gamePhase": "NAP"}))
        assert isinstance(result, EngineFailure)
        assert result.kind == FailureKind.PROTOCOL
        assert "NAP" in result.message

    def test_ok_flag(self) -> None:
        assert TransportReply(204).ok
        assert not TransportReply(200, error="aborted").ok
        assert not TransportReply(302).ok
