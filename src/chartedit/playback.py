"""Playback cursor: walks a difficulty's notes in wall-clock time."""

from __future__ import annotations

from chartedit.config import MAX_TEMPO_SCALE, MIN_TEMPO_SCALE
from chartedit.difficulty import Difficulty
from chartedit.models import Note


class PlaybackCursor:
    """Advances a song position each frame and reports notes as they are reached.

    The difficulty is polled on every update, so note and tempo edits made
    while playing are picked up. Progress is tracked by time, not by index:
    a note is reported once the position passes its start time, and notes
    moved behind the cursor are never reported.
    """

    def __init__(self, difficulty: Difficulty) -> None:
        self.difficulty = difficulty
        self.position: float = difficulty.timing.offset  # seconds
        self.tempo_scale: float = 1.0
        self.paused: bool = False
        self._reached_until: float = self.position
        self._include_start = True  # notes exactly at the start count once

    def set_tempo_scale(self, scale: float) -> None:
        """Set tempo scale, clamped to [0.25, 2.0]."""
        self.tempo_scale = max(MIN_TEMPO_SCALE, min(MAX_TEMPO_SCALE, scale))

    def seek(self, time: float) -> None:
        """Jump to ``time`` seconds. Notes before that point are not reported."""
        self.position = time
        self._reached_until = time
        self._include_start = True

    def update(self, dt: float) -> list[Note]:
        """Advance playback by dt seconds. Returns notes reached this frame."""
        if self.paused:
            return []
        self.position += dt * self.tempo_scale
        reached: list[Note] = []
        for note in self.difficulty.notes:
            time = self.difficulty.note_time(note)
            if self._is_ahead(time) and time <= self.position:
                reached.append(note)
        self._reached_until = self.position
        self._include_start = False
        return reached

    def _is_ahead(self, time: float) -> bool:
        if self._include_start:
            return time >= self._reached_until
        return time > self._reached_until

    @property
    def beat(self) -> float:
        return self.difficulty.timing.beat_at(self.position)

    @property
    def tempo(self) -> float:
        """Effective tempo at the cursor, including the playback scale."""
        return self.difficulty.timing.tempo_at(self.beat) * self.tempo_scale

    @property
    def finished(self) -> bool:
        return not any(
            self._is_ahead(self.difficulty.note_time(note)) for note in self.difficulty.notes
        )
