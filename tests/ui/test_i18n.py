"""Tests for locale switching and notice formatting."""

from __future__ import annotations

from dataclasses import fields

from santorini.game.interfaces import Notice, NoticeKind
from santorini.ui.i18n import LANGUAGES, Strings, format_notice, set_language, t


def test_languages() -> None:
    assert LANGUAGES == ["English", "Russian"]


def test_unknown_language_falls_back_to_english() -> None:
    set_language("Klingon")
    assert t().btn_new_game == "Start New Game"


def test_every_notice_kind_formats_in_every_language() -> None:
    for language in LANGUAGES:
        set_language(language)
        for kind in NoticeKind:
            text = format_notice(Notice(kind, player="A", worker="A1", detail="x"))
            assert text


def test_locales_fill_every_field() -> None:
    for language in LANGUAGES:
        set_language(language)
        strings = t()
        assert all(getattr(strings, f.name) for f in fields(Strings))


def test_format_phase_status() -> None:
    notice = Notice(NoticeKind.PHASE_STATUS, player="B", detail="BUILD")
    assert format_notice(notice) == "Current Phase: BUILD. Player B's turn."


def test_format_invalid_selection() -> None:
    notice = Notice(NoticeKind.INVALID_SELECTION, player="A")
    assert format_notice(notice) == (
        "Invalid selection. Please select one of your workers. Current Player: A."
    )


def test_format_without_detail_is_stripped() -> None:
    notice = Notice(NoticeKind.NEW_GAME_FAILED)
    assert format_notice(notice) == "Failed to start a new game. Please try again."


def test_russian_game_over() -> None:
    set_language("Russian")
    text = format_notice(Notice(NoticeKind.GAME_OVER, player="A"))
    assert "A" in text
    assert text.startswith("Игра окончена")
