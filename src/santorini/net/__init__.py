"""Engine connectivity: HTTP transport, reply decoding and the sync adapter."""

from santorini.net.results import EngineFailure, EngineResult, FailureKind, decode_reply
from santorini.net.sync import EngineSync, ReplyJoin
from santorini.net.transport import (
    EngineRequest,
    ITransport,
    QtHttpTransport,
    TransportReply,
    build_url,
    decode_payload,
)

__all__ = [
    "EngineFailure",
    "EngineRequest",
    "EngineResult",
    "EngineSync",
    "FailureKind",
    "ITransport",
    "QtHttpTransport",
    "ReplyJoin",
    "TransportReply",
    "build_url",
    "decode_payload",
    "decode_reply",
]
