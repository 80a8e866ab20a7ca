"""Tests for the in-memory visit record."""

from __future__ import annotations

import logging

import pytest

from kiosk_app.core.models import EMPTY_SESSION
from kiosk_app.core.services.session_store import SessionMisuseError, SessionStore


def test_new_store_is_empty(store):
    assert store.current() == EMPTY_SESSION
    assert store.current().is_empty
    assert not store.has_active_session()


def test_begin_installs_token_only(store):
    token = store.begin()

    session = store.current()
    assert session.token == token
    assert token.startswith("sess_")
    assert session.school is None
    assert session.quiz_answer is None
    assert session.is_correct is None


def test_begin_discards_previous_session(store):
    first = store.begin()
    store.set_school("School of ICT")
    store.record_answer("1963")

    second = store.begin()

    assert second != first
    assert store.current().token == second
    assert store.current().school is None
    assert store.current().is_correct is None


def test_tokens_do_not_collide_across_visits(store):
    tokens = {store.begin() for _ in range(500)}
    assert len(tokens) == 500


def test_set_school_keeps_token(store):
    token = store.begin()
    store.set_school("School of Engineering")
    assert store.current().token == token
    assert store.current().school == "School of Engineering"


@pytest.mark.parametrize(
    "answer, expected",
    [("1963", True), ("1968", False), ("1982", False), (" 1963", False)],
)
def test_record_answer_sets_answer_and_correctness_together(store, answer, expected):
    store.begin()
    assert store.record_answer(answer) is expected
    assert store.current().quiz_answer == answer
    assert store.current().is_correct is expected


def test_clear_resets_every_field(store):
    store.begin()
    store.set_school("School of ICT")
    store.record_answer("1968")

    store.clear()

    assert store.current() == EMPTY_SESSION


def test_clear_is_idempotent(store):
    store.clear()
    store.clear()
    assert store.current().is_empty


def test_snapshot_is_read_only(store):
    store.begin()
    snapshot = store.current()
    with pytest.raises(AttributeError):
        snapshot.school = "School of ICT"


def test_strict_store_raises_on_mutation_without_session(store):
    with pytest.raises(SessionMisuseError):
        store.set_school("School of ICT")
    with pytest.raises(SessionMisuseError):
        store.record_answer("1963")


def test_lenient_store_degrades_to_noop(content, caplog):
    lenient = SessionStore(content.quiz, strict=False)

    with caplog.at_level(logging.WARNING):
        lenient.set_school("School of ICT")
        assert lenient.record_answer("1963") is None

    assert lenient.current().is_empty
    assert "no active session" in caplog.text
