"""HTTP transport to the Santorini engine.

:class:`QtHttpTransport` runs on the Qt event loop: requests are issued
without blocking and replies are delivered on the main thread, so the
turn controller never sees concurrent mutation.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from PyQt6.QtCore import QObject, QUrl, QUrlQuery
from PyQt6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EngineRequest:
    """One request against the engine's HTTP API."""

    method: str
    path: str
    query: tuple[tuple[str, str], ...] = ()
    body: dict[str, Any] | None = field(default=None, hash=False)


@dataclass(frozen=True, slots=True)
class TransportReply:
    """Raw outcome of a request.

    ``status`` is 0 when no HTTP status was received; ``error`` carries the
    network-level error text, if any.  ``payload`` is the decoded JSON body
    or ``None`` when the body was empty or not JSON.
    """

    status: int
    payload: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and 200 <= self.status < 300


ReplyCallback = Callable[[TransportReply], None]


class ITransport(Protocol):
    """Minimal transport interface used by :class:`EngineSync`."""

    def send(self, request: EngineRequest, on_done: ReplyCallback) -> None: ...


def decode_payload(raw: bytes) -> Any:
    """Decode a JSON body; ``None`` for empty or undecodable data."""
    if not raw:
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        _LOGGER.warning("Engine returned a non-JSON body (%d bytes)", len(raw))
        return None


def build_url(base_url: str, request: EngineRequest) -> QUrl:
    """Join *base_url* with the request path and query parameters."""
    url = QUrl(base_url)
    url.setPath(url.path().rstrip("/") + request.path)
    if request.query:
        query = QUrlQuery()
        for key, value in request.query:
            query.addQueryItem(key, value)
        url.setQuery(query)
    return url


class QtHttpTransport(QObject):
    """:class:`ITransport` backed by ``QNetworkAccessManager``."""

    def __init__(self, base_url: str, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._base_url = base_url
        self._manager = QNetworkAccessManager(self)
        # Replies are kept alive until their finished signal fires.
        self._pending: set[QNetworkReply] = set()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def send(self, request: EngineRequest, on_done: ReplyCallback) -> None:
        qrequest = QNetworkRequest(build_url(self._base_url, request))
        data = b""
        if request.body is not None:
            data = json.dumps(request.body).encode("utf-8")
            qrequest.setHeader(
                QNetworkRequest.KnownHeaders.ContentTypeHeader, "application/json"
            )

        method = request.method.upper()
        if method == "GET":
            reply = self._manager.get(qrequest)
        elif method == "POST":
            reply = self._manager.post(qrequest, data)
        else:
            raise ValueError(f"Unsupported HTTP method: {request.method}")

        assert reply is not None
        self._pending.add(reply)
        reply.finished.connect(lambda: self._on_finished(reply, on_done))

    def _on_finished(self, reply: QNetworkReply, on_done: ReplyCallback) -> None:
        self._pending.discard(reply)
        status_attr = reply.attribute(QNetworkRequest.Attribute.HttpStatusCodeAttribute)
        status = int(status_attr) if status_attr is not None else 0
        payload = decode_payload(bytes(reply.readAll().data()))

        error: str | None = None
        if reply.error() != QNetworkReply.NetworkError.NoError:
            error = reply.errorString()
        reply.deleteLater()

        on_done(TransportReply(status=status, payload=payload, error=error))
