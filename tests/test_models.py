"""Tests for core data models."""

from chartedit.models import AddNoteResult, Note, NoteInsert


def test_note_key_and_hold():
    tap = Note(beat=1.5, lane=3)
    hold = Note(beat=2.0, lane=0, hold_length=1.0)
    assert tap.key == (1.5, 3)
    assert not tap.is_hold
    assert hold.is_hold


def test_add_note_result_added_flag():
    note = Note(beat=0.0, lane=0)
    assert AddNoteResult(status=NoteInsert.ADDED, note=note).added
    assert not AddNoteResult(status=NoteInsert.ALREADY_EXISTS, note=note).added
