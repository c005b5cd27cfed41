"""EngineSync — turns intents into engine requests and folds replies back.

The adapter only reads controller state and asks the controller to change
it; Board and TurnState are never touched directly.  A failed request
leaves the state exactly where it was, since nothing advanced before the
engine answered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import partial

from santorini.core.enums import PLAYER_IDS, GodCard, Phase
from santorini.core.types import PlayerId, WorkerId
from santorini.game.dispatcher import dispatch_click
from santorini.game.intents import (
    Build,
    Intent,
    MoveWorker,
    NoOp,
    PlaceWorker,
    SelectWorker,
    SkipSecondBuild,
)
from santorini.game.interfaces import ITurnController, Notice, NoticeKind
from santorini.net.results import EngineFailure, EngineResult, FailureKind, decode_reply
from santorini.net.transport import EngineRequest, ITransport, TransportReply

_LOGGER = logging.getLogger(__name__)

ResultHandler = Callable[[EngineResult], None]


class ReplyJoin:
    """Fan-in over a fixed set of keyed requests.

    *on_complete* fires exactly once, after every key has resolved,
    with the results in key order.
    """

    __slots__ = ("_keys", "_results", "_on_complete")

    def __init__(
        self,
        keys: Iterable[str],
        on_complete: Callable[[dict[str, EngineResult]], None],
    ) -> None:
        self._keys = tuple(keys)
        self._results: dict[str, EngineResult] = {}
        self._on_complete = on_complete

    @property
    def is_complete(self) -> bool:
        return len(self._results) == len(self._keys)

    def resolve(self, key: str, result: EngineResult) -> None:
        if key not in self._keys or key in self._results:
            return
        self._results[key] = result
        if self.is_complete:
            self._on_complete({k: self._results[k] for k in self._keys})


def _query(**params: object) -> tuple[tuple[str, str], ...]:
    return tuple((key, str(value)) for key, value in params.items())


class EngineSync:
    """Remote sync adapter between the turn controller and the engine.

    While a request is outstanding further clicks are dropped; starting a
    new game is always allowed and orphans every earlier reply.
    """

    __slots__ = (
        "__weakref__",
        "_controller",
        "_transport",
        "_in_flight",
        "_generation",
    )

    def __init__(self, *, controller: ITurnController, transport: ITransport) -> None:
        self._controller = controller
        self._transport = transport
        self._in_flight = 0
        self._generation = 0

    @property
    def busy(self) -> bool:
        """True while at least one request awaits its reply."""
        return self._in_flight > 0

    # ── Session ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset local state and ask the engine for a fresh game."""
        self._generation += 1
        self._in_flight = 0
        self._controller.reset()
        self._send(EngineRequest("GET", "/newgame"), self._on_new_game)

    def set_god_card(self, player: PlayerId, card: GodCard) -> bool:
        return self._controller.set_god_card(player, card)

    def confirm_god_cards(self) -> bool:
        """Submit both god cards concurrently; advance only if both succeed."""
        if self._drop_if_busy("god card confirmation"):
            return False
        if self._controller.turn.phase != Phase.INITIALIZE:
            self._controller.notify(Notice(NoticeKind.GOD_CARDS_LOCKED))
            return False

        cards = self._controller.god_cards
        join = ReplyJoin(PLAYER_IDS, self._on_god_cards)
        for player in PLAYER_IDS:
            request = EngineRequest(
                "POST",
                "/selectgodcard",
                body={"playerId": player, "godCard": str(cards.for_player(player))},
            )
            self._send(request, partial(join.resolve, player))
        return True

    # ── Board input ──────────────────────────────────────────────────────

    def handle_click(self, x: int, y: int) -> Intent | None:
        """Dispatch a board click; ``None`` when dropped as busy."""
        if self._drop_if_busy(f"click at ({x}, {y})"):
            return None
        intent = dispatch_click(self._controller.turn, self._controller.board, x, y)
        self.execute(intent)
        return intent

    def deselect_worker(self) -> bool:
        return self._controller.deselect_worker()

    def execute(self, intent: Intent) -> bool:
        """Issue the request for *intent*. Returns True if one was sent."""
        request: EngineRequest
        handler: ResultHandler

        if isinstance(intent, NoOp):
            if intent.notice is not None:
                self._controller.notify(intent.notice)
            return False

        if isinstance(intent, PlaceWorker):
            request = EngineRequest(
                "GET",
                "/placeworker",
                query=_query(workerId=intent.worker_id, x=intent.x, y=intent.y),
            )
            handler = self._apply_snapshot
        elif isinstance(intent, SelectWorker):
            if not self._controller.validate_worker_selection(intent.worker_id):
                return False
            player = self._controller.turn.current_player or ""
            request = EngineRequest(
                "POST",
                "/selectworker",
                query=_query(workerId=intent.worker_id, playerId=player),
            )
            handler = partial(self._on_worker_selected, intent.worker_id)
        elif isinstance(intent, MoveWorker):
            request = EngineRequest(
                "POST",
                "/move",
                query=_query(workerId=intent.worker_id, x=intent.x, y=intent.y),
            )
            handler = self._apply_snapshot
        elif isinstance(intent, Build):
            request = EngineRequest(
                "POST",
                "/build",
                query=_query(workerId=intent.worker_id, x=intent.x, y=intent.y),
            )
            handler = self._apply_snapshot
        elif isinstance(intent, SkipSecondBuild):
            request = EngineRequest(
                "POST",
                "/skipSecondBuild",
                body={"workerId": intent.worker_id},
            )
            handler = self._on_second_build_skipped
        else:
            raise TypeError(f"Unknown intent: {intent!r}")

        self._send(request, handler)
        return True

    # ── Reply handlers ───────────────────────────────────────────────────

    def _on_new_game(self, result: EngineResult) -> None:
        if isinstance(result, EngineFailure):
            self._controller.notify(
                Notice(NoticeKind.NEW_GAME_FAILED, detail=result.message)
            )
            return
        self._controller.start_session(result)

    def _on_god_cards(self, results: dict[str, EngineResult]) -> None:
        failures = [
            f"{player}: {result.message}"
            for player, result in results.items()
            if isinstance(result, EngineFailure)
        ]
        if failures:
            combined = EngineFailure(FailureKind.GOD_CARDS, "; ".join(failures))
            _LOGGER.warning("God card selection failed: %s", combined.message)
            self._controller.notify(
                Notice(NoticeKind.GOD_CARDS_FAILED, detail=combined.message)
            )
            return
        # The last player's acknowledgement carries the post-selection state.
        self._controller.confirm_god_cards(results[PLAYER_IDS[-1]])  # type: ignore[arg-type]

    def _apply_snapshot(self, result: EngineResult) -> None:
        if isinstance(result, EngineFailure):
            self._report(result)
            return
        self._controller.apply_engine_snapshot(result)

    def _on_worker_selected(self, worker_id: WorkerId, result: EngineResult) -> None:
        if isinstance(result, EngineFailure):
            self._report(result)
            return
        self._controller.select_worker(worker_id, result)

    def _on_second_build_skipped(self, result: EngineResult) -> None:
        if isinstance(result, EngineFailure):
            self._report(result)
            return
        applied = self._controller.apply_engine_snapshot(result)
        turn = self._controller.turn
        if applied and not turn.is_over:
            self._controller.notify(
                Notice(NoticeKind.SECOND_BUILD_SKIPPED, player=turn.current_player)
            )

    def _report(self, failure: EngineFailure) -> None:
        self._controller.notify(Notice(NoticeKind.REQUEST_FAILED, detail=failure.message))

    # ── Plumbing ─────────────────────────────────────────────────────────

    def _drop_if_busy(self, what: str) -> bool:
        if not self.busy:
            return False
        _LOGGER.debug("Dropping %s: %d request(s) in flight", what, self._in_flight)
        return True

    def _send(self, request: EngineRequest, handler: ResultHandler) -> None:
        generation = self._generation
        self._in_flight += 1
        _LOGGER.debug("-> %s %s %s", request.method, request.path, request.query)
        self._transport.send(
            request,
            lambda reply: self._on_reply(generation, reply, handler),
        )

    def _on_reply(
        self,
        generation: int,
        reply: TransportReply,
        handler: ResultHandler,
    ) -> None:
        if generation != self._generation:
            _LOGGER.debug("Discarding reply from an earlier game (status=%s)", reply.status)
            return
        self._in_flight = max(0, self._in_flight - 1)

        result = decode_reply(reply)
        if isinstance(result, EngineFailure):
            _LOGGER.warning(
                "Engine request failed (%s): %s", result.kind.name, result.message
            )
        handler(result)
