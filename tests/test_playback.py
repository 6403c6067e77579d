"""Tests for the playback cursor."""

import pytest

from chartedit.difficulty import Difficulty
from chartedit.playback import PlaybackCursor
from chartedit.timing import TimingMap


def _difficulty() -> Difficulty:
    timing = TimingMap(offset=0.0, tempo=60.0)
    timing.set_tempo(4.0, 120.0)
    diff = Difficulty("Hard", timing)
    for beat in (0.0, 2.0, 4.0, 5.0, 6.0):
        diff.add_note(beat, 0)
    return diff


def test_update_reports_reached_notes():
    cursor = PlaybackCursor(_difficulty())
    assert [n.beat for n in cursor.update(0.0)] == [0.0]
    assert [n.beat for n in cursor.update(2.5)] == [2.0]
    # Beat 4 at 4 s, beat 5 at 4.5 s, beat 6 at 5 s
    assert [n.beat for n in cursor.update(2.1)] == [4.0, 5.0]
    assert not cursor.finished
    assert [n.beat for n in cursor.update(1.0)] == [6.0]
    assert cursor.finished


def test_beat_and_tempo_follow_position():
    cursor = PlaybackCursor(_difficulty())
    cursor.update(3.0)
    assert cursor.beat == pytest.approx(3.0)
    assert cursor.tempo == 60.0
    cursor.update(1.5)
    assert cursor.beat == pytest.approx(5.0)
    assert cursor.tempo == 120.0


def test_tempo_scale_is_clamped_and_applied():
    cursor = PlaybackCursor(_difficulty())
    cursor.set_tempo_scale(10.0)
    assert cursor.tempo_scale == 2.0
    cursor.set_tempo_scale(0.0)
    assert cursor.tempo_scale == 0.25
    cursor.set_tempo_scale(2.0)
    cursor.update(1.0)
    assert cursor.position == pytest.approx(2.0)
    assert cursor.tempo == 120.0


def test_paused_cursor_does_not_advance():
    cursor = PlaybackCursor(_difficulty())
    cursor.paused = True
    assert cursor.update(10.0) == []
    assert cursor.position == 0.0


def test_seek_skips_earlier_notes():
    cursor = PlaybackCursor(_difficulty())
    cursor.seek(4.0)
    assert [n.beat for n in cursor.update(0.0)] == [4.0]
    cursor.seek(0.5)
    assert [n.beat for n in cursor.update(1.5)] == [2.0]


def test_cursor_starts_at_offset():
    timing = TimingMap(offset=1.0, tempo=60.0)
    diff = Difficulty("Hard", timing)
    diff.add_note(0.0, 0)
    cursor = PlaybackCursor(diff)
    assert cursor.position == 1.0
    assert cursor.beat == 0.0
    assert [n.beat for n in cursor.update(0.0)] == [0.0]


def test_notes_edited_after_creation_are_picked_up():
    diff = Difficulty("Hard", TimingMap(offset=0.0, tempo=60.0))
    diff.add_note(1.0, 0)
    cursor = PlaybackCursor(diff)
    diff.remove_note(1.0, 0)
    diff.add_note(2.0, 0)
    assert [n.beat for n in cursor.update(5.0)] == [2.0]
    assert cursor.finished


def test_note_added_behind_cursor_is_not_reported():
    diff = Difficulty("Hard", TimingMap(offset=0.0, tempo=60.0))
    diff.add_note(4.0, 0)
    cursor = PlaybackCursor(diff)
    cursor.update(2.0)
    diff.add_note(1.0, 0)
    assert [n.beat for n in cursor.update(3.0)] == [4.0]


def test_tempo_change_during_playback_moves_notes():
    diff = Difficulty("Hard", TimingMap(offset=0.0, tempo=60.0))
    diff.add_note(8.0, 0)
    cursor = PlaybackCursor(diff)
    assert cursor.update(1.0) == []
    diff.timing.set_tempo(2.0, 240.0)
    # Beat 8 now sits at 2 s + 6 beats at 240 BPM = 3.5 s
    assert cursor.update(2.0) == []
    assert [n.beat for n in cursor.update(0.6)] == [8.0]
