"""A chart difficulty: notes keyed by (beat, lane), note types, and its timing map."""

from __future__ import annotations

import logging

from chartedit.config import MAX_LANE, MIN_LANE
from chartedit.models import AddNoteResult, EditNoteParams, Note, NoteInsert, NoteType
from chartedit.timing import TimingMap

logger = logging.getLogger(__name__)


class Difficulty:
    """Owns the notes and note types of one difficulty."""

    def __init__(self, name: str, timing: TimingMap | None = None) -> None:
        self.name = name
        self.timing = timing if timing is not None else TimingMap()
        self._notes: dict[tuple[float, int], Note] = {}
        self._note_types: dict[str, NoteType] = {}

    # --- notes ---

    @property
    def notes(self) -> list[Note]:
        """All notes ordered by beat, then lane."""
        return sorted(self._notes.values(), key=lambda n: n.key)

    def __len__(self) -> int:
        return len(self._notes)

    def add_note(
        self,
        beat: float,
        lane: int,
        hold_length: float = 0.0,
        note_type: str | None = None,
    ) -> AddNoteResult:
        """Insert a note. An occupied (beat, lane) slot is reported, not replaced.

        Raises:
            ValueError: If the lane is out of range or the hold length is negative.
        """
        if not MIN_LANE <= lane <= MAX_LANE:
            raise ValueError(f"Lane must be in {MIN_LANE}-{MAX_LANE}, got {lane}")
        if hold_length < 0:
            raise ValueError(f"Hold length must not be negative, got {hold_length}")

        key = (beat, lane)
        existing = self._notes.get(key)
        if existing is not None:
            logger.debug("Note already exists at beat %r lane %d", beat, lane)
            return AddNoteResult(status=NoteInsert.ALREADY_EXISTS, note=existing)

        note = Note(beat=beat, lane=lane, hold_length=hold_length, note_type=note_type)
        self._notes[key] = note
        return AddNoteResult(status=NoteInsert.ADDED, note=note)

    def add_note_at_time(
        self,
        time: float,
        lane: int,
        hold_length: float = 0.0,
        note_type: str | None = None,
    ) -> AddNoteResult:
        """Insert a note at the beat playing at ``time`` seconds."""
        return self.add_note(self.timing.beat_at(time), lane, hold_length, note_type)

    def get_note(self, beat: float, lane: int) -> Note | None:
        return self._notes.get((beat, lane))

    def edit_note(self, beat: float, lane: int, params: EditNoteParams) -> None:
        """Apply ``params`` to the note at (beat, lane). A missing note is ignored.

        Raises:
            ValueError: If the new hold length is negative.
        """
        if params.hold_length is not None and params.hold_length < 0:
            raise ValueError(f"Hold length must not be negative, got {params.hold_length}")
        note = self._notes.get((beat, lane))
        if note is None:
            return
        if params.note_type is not None:
            note.note_type = params.note_type
        if params.hold_length is not None:
            note.hold_length = params.hold_length

    def remove_note(self, beat: float, lane: int) -> None:
        self._notes.pop((beat, lane), None)

    def notes_between(self, start_beat: float, end_beat: float) -> list[Note]:
        """Notes with ``start_beat <= beat < end_beat``."""
        return [n for n in self.notes if start_beat <= n.beat < end_beat]

    def note_time(self, note: Note) -> float:
        """Wall-clock start time of a note in seconds."""
        return self.timing.time_at(note.beat)

    def note_end_time(self, note: Note) -> float:
        return self.timing.time_at(note.beat + note.hold_length)

    # --- note types ---

    @property
    def note_types(self) -> list[NoteType]:
        return list(self._note_types.values())

    def add_note_type(self, name: str, is_mine: bool = False, is_roll: bool = False) -> NoteType:
        """Register a note type. A known name returns the existing entry unchanged."""
        existing = self._note_types.get(name)
        if existing is not None:
            return existing
        note_type = NoteType(name=name, is_mine=is_mine, is_roll=is_roll)
        self._note_types[name] = note_type
        return note_type

    def get_note_type(self, name: str) -> NoteType | None:
        return self._note_types.get(name)

    def remove_note_type(self, name: str) -> None:
        """Forget a note type. Notes referring to it keep the name but resolve to None."""
        self._note_types.pop(name, None)

    def note_type_of(self, note: Note) -> NoteType | None:
        if note.note_type is None:
            return None
        return self._note_types.get(note.note_type)
