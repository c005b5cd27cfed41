"""Tests for URL building, body decoding and the Qt transport front end."""

from __future__ import annotations

import pytest

from santorini.net.transport import (
    EngineRequest,
    QtHttpTransport,
    build_url,
    decode_payload,
)


class TestBuildUrl:
    def test_path_and_query(self) -> None:
        url = build_url(
            "http://localhost:8080",
            EngineRequest("GET", "/placeworker", query=(("workerId", "A1"), ("x", "0"))),
        )
        assert url.toString() == "http://localhost:8080/placeworker?workerId=A1&x=0"

    def test_base_with_prefix_and_trailing_slash(self) -> None:
        url = build_url("http://engine:9000/api/", EngineRequest("POST", "/build"))
        assert url.toString() == "http://engine:9000/api/build"

    def test_no_query(self) -> None:
        url = build_url("http://localhost:8080", EngineRequest("GET", "/newgame"))
        assert not url.hasQuery()


class TestDecodePayload:
    def test_json_object(self) -> None:
        assert decode_payload(b'{"winner": "null"}') == {"winner": "null"}

    def test_empty(self) -> None:
        assert decode_payload(b"") is None

    @pytest.mark.parametrize("raw", [b"<html>", b"\xff\xfe", b"{"])
    def test_undecodable(self, raw: bytes) -> None:
        assert decode_payload(raw) is None


class TestQtHttpTransport:
    def test_unsupported_method(self, qapp: object) -> None:
        transport = QtHttpTransport("http://localhost:8080")
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            transport.send(EngineRequest("DELETE", "/newgame"), lambda _reply: None)
        assert transport.pending_count == 0

    def test_base_url(self, qapp: object) -> None:
        assert QtHttpTransport("http://h:1").base_url == "http://h:1"
