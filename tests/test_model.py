"""Tests for the Note value and title helpers."""

import dataclasses

import pytest
from totepad.model import Note, sanitize_filename, title_taken


def test_with_content_returns_new_note():
    note = Note("plan", "old")
    updated = note.with_content("new")
    assert updated == Note("plan", "new")
    assert note.content == "old"


def test_note_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Note("t", "c").title = "other"


@pytest.mark.parametrize("title,expected", [
    ("plain", "plain"),
    ("a/b", "a_b"),
    ('what? "now" <x>|y*', 'what_ _now_ _x__y_'),
    ("back\\slash:colon", "back_slash_colon"),
    ("tab\there", "tab_here"),
    ("ünïcødé", "ünïcødé"),
])
def test_sanitize_filename(title, expected):
    assert sanitize_filename(title) == expected


def test_title_taken_ignores_case():
    notes = [Note("Shopping"), Note("Work")]
    assert title_taken(notes, "shopping")
    assert title_taken(notes, "WORK")
    assert not title_taken(notes, "home")
    assert not title_taken([], "anything")


def test_title_taken_compares_file_names():
    notes = [Note("a_b"), Note("what?")]
    assert title_taken(notes, "a/b")
    assert title_taken(notes, "A:B")
    assert title_taken(notes, "WHAT*")
    assert not title_taken(notes, "a-b")
