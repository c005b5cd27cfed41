"""Shared pytest fixtures: headless Qt, locale reset and a scripted engine."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

# Headless Linux runners have no display server.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class ScriptedTransport:
    """Transport double: records requests, replies only when told to."""

    def __init__(self) -> None:
        self.sent: list[tuple[Any, Callable[[Any], None]]] = []

    def send(self, request: Any, on_done: Callable[[Any], None]) -> None:
        self.sent.append((request, on_done))

    @property
    def requests(self) -> list[Any]:
        return [request for request, _ in self.sent]

    def reply(self, index: int, payload: Any, status: int = 200) -> None:
        from santorini.net.transport import TransportReply

        self.sent[index][1](TransportReply(status=status, payload=payload))

    def fail(self, index: int, error: str = "Connection refused") -> None:
        from santorini.net.transport import TransportReply

        self.sent[index][1](TransportReply(status=0, error=error))


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for Qt-backed tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def scripted_transport() -> ScriptedTransport:
    return ScriptedTransport()


@pytest.fixture
def engine_payload() -> Callable[..., dict[str, Any]]:
    """Factory for engine response bodies on an empty level-0 board.

    ``workers`` maps ``(x, y)`` to a worker id; other keyword arguments are
    copied into the body verbatim.
    """

    def make(
        workers: dict[tuple[int, int], str] | None = None, **fields: Any
    ) -> dict[str, Any]:
        workers = workers or {}
        board = [
            [
                {
                    "x": x,
                    "y": y,
                    "level": 0,
                    "dome": False,
                    "occupied": (x, y) in workers,
                    "workerID": workers.get((x, y)),
                }
                for x in range(5)
            ]
            for y in range(5)
        ]
        payload: dict[str, Any] = {"board": board, "winner": "null"}
        payload.update(fields)
        return payload

    return make


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Every test starts and ends in English."""
    from santorini.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Close top-level windows left behind by UI tests."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
