"""Internationalisation strings for the Santorini UI.

Usage::

    from santorini.ui.i18n import format_notice, set_language, t

    set_language("Russian")
    print(t().btn_new_game)        # "Новая игра"
    print(format_notice(controller.notice))
"""

from __future__ import annotations

from dataclasses import dataclass

from santorini.game.interfaces import Notice, NoticeKind


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str

    # ── Notices ──────────────────────────────────────────────────────────
    notice_welcome: str
    notice_new_game_failed: str  # "{detail}"
    notice_select_god_cards: str
    notice_god_cards_locked: str
    notice_god_cards_confirmed: str
    notice_god_cards_failed: str  # "{detail}"
    notice_phase_status: str  # "{phase}", "{player}"
    notice_worker_unavailable: str
    notice_worker_selected: str  # "{worker}"
    notice_worker_cannot_move: str  # "{worker}"
    notice_worker_deselected: str  # "{player}"
    notice_invalid_selection: str  # "{player}"
    notice_second_build_skipped: str
    notice_game_over: str  # "{player}"
    notice_missing_board: str
    notice_request_failed: str  # "{detail}"

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_new_game: str
    btn_undo_selection: str
    hint_skip_second_build: str

    # ── GodCardPanel ─────────────────────────────────────────────────────
    god_cards_header: str
    god_card_label: str  # "Player {player}'s God Card:"
    btn_confirm_god_cards: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Santorini",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    notice_welcome="Welcome to Santorini! Click 'Start New Game' to begin.",
    notice_new_game_failed="Failed to start a new game. Please try again. {detail}",
    notice_select_god_cards="Please select god cards for both players.",
    notice_god_cards_locked="God card selection is not allowed right now.",
    notice_god_cards_confirmed="God cards selected. Please place your workers.",
    notice_god_cards_failed="Error during god card selection: {detail}",
    notice_phase_status="Current Phase: {phase}. Player {player}'s turn.",
    notice_worker_unavailable=(
        "This worker is not available, click undo and select another one."
    ),
    notice_worker_selected="Worker {worker} selected. Now move.",
    notice_worker_cannot_move=(
        "Worker {worker} cannot move. Click undo and select another worker."
    ),
    notice_worker_deselected="Worker deselected. Player {player}, please select a worker.",
    notice_invalid_selection=(
        "Invalid selection. Please select one of your workers. "
        "Current Player: {player}."
    ),
    notice_second_build_skipped="Second build skipped. It is now the next player's turn.",
    notice_game_over=(
        "Game over. Winner is Player {player}. Click 'Start New Game' to play again."
    ),
    notice_missing_board=(
        "There was an error loading the board. Please restart the game."
    ),
    notice_request_failed="Request failed: {detail}",
    btn_new_game="Start New Game",
    btn_undo_selection="Undo Selection",
    hint_skip_second_build="* You can click selected worker's cell to skip the second build *",
    god_cards_header="Select God Cards:",
    god_card_label="Player {player}'s God Card:",
    btn_confirm_god_cards="Confirm God Cards",
)

_RU = Strings(
    window_title="Санторини",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_quit="&Выход",
    notice_welcome="Добро пожаловать в Санторини! Нажмите «Новая игра», чтобы начать.",
    notice_new_game_failed="Не удалось начать новую игру. Попробуйте ещё раз. {detail}",
    notice_select_god_cards="Выберите карты богов для обоих игроков.",
    notice_god_cards_locked="Сейчас нельзя выбирать карты богов.",
    notice_god_cards_confirmed="Карты богов выбраны. Расставьте рабочих.",
    notice_god_cards_failed="Ошибка при выборе карт богов: {detail}",
    notice_phase_status="Фаза: {phase}. Ход игрока {player}.",
    notice_worker_unavailable="Этот рабочий недоступен, нажмите «Отменить» и выберите другого.",
    notice_worker_selected="Рабочий {worker} выбран. Теперь сделайте ход.",
    notice_worker_cannot_move=(
        "Рабочий {worker} не может ходить. Нажмите «Отменить» и выберите другого."
    ),
    notice_worker_deselected="Выбор отменён. Игрок {player}, выберите рабочего.",
    notice_invalid_selection=(
        "Неверный выбор. Выберите одного из своих рабочих. Текущий игрок: {player}."
    ),
    notice_second_build_skipped="Вторая постройка пропущена. Ход следующего игрока.",
    notice_game_over=(
        "Игра окончена. Победил игрок {player}. Нажмите «Новая игра», чтобы сыграть снова."
    ),
    notice_missing_board="Ошибка загрузки доски. Перезапустите игру.",
    notice_request_failed="Ошибка запроса: {detail}",
    btn_new_game="Новая игра",
    btn_undo_selection="Отменить выбор",
    hint_skip_second_build="* Нажмите на клетку выбранного рабочего, чтобы пропустить вторую постройку *",
    god_cards_header="Выберите карты богов:",
    god_card_label="Карта бога игрока {player}:",
    btn_confirm_god_cards="Подтвердить карты",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


_NOTICE_FIELDS: dict[NoticeKind, str] = {
    NoticeKind.WELCOME: "notice_welcome",
    NoticeKind.NEW_GAME_FAILED: "notice_new_game_failed",
    NoticeKind.SELECT_GOD_CARDS: "notice_select_god_cards",
    NoticeKind.GOD_CARDS_LOCKED: "notice_god_cards_locked",
    NoticeKind.GOD_CARDS_CONFIRMED: "notice_god_cards_confirmed",
    NoticeKind.GOD_CARDS_FAILED: "notice_god_cards_failed",
    NoticeKind.PHASE_STATUS: "notice_phase_status",
    NoticeKind.WORKER_UNAVAILABLE: "notice_worker_unavailable",
    NoticeKind.WORKER_SELECTED: "notice_worker_selected",
    NoticeKind.WORKER_CANNOT_MOVE: "notice_worker_cannot_move",
    NoticeKind.WORKER_DESELECTED: "notice_worker_deselected",
    NoticeKind.INVALID_SELECTION: "notice_invalid_selection",
    NoticeKind.SECOND_BUILD_SKIPPED: "notice_second_build_skipped",
    NoticeKind.GAME_OVER: "notice_game_over",
    NoticeKind.MISSING_BOARD: "notice_missing_board",
    NoticeKind.REQUEST_FAILED: "notice_request_failed",
}


def format_notice(notice: Notice) -> str:
    """Render *notice* in the active locale."""
    template: str = getattr(t(), _NOTICE_FIELDS[notice.kind])
    return template.format(
        player=notice.player or "-",
        worker=notice.worker or "-",
        phase=notice.detail,
        detail=notice.detail,
    ).strip()
