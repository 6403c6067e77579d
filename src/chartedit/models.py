"""Core data models shared across the editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class NoteInsert(Enum):
    ADDED = auto()
    ALREADY_EXISTS = auto()


@dataclass
class TempoPoint:
    """Start of a constant-tempo segment."""

    beat: float  # >= 0
    tempo: float  # beats per minute


@dataclass
class NoteType:
    name: str
    is_mine: bool = False
    is_roll: bool = False


@dataclass
class Note:
    """A single chart note, identified by its (beat, lane) pair."""

    beat: float
    lane: int  # 0-255
    hold_length: float = 0.0  # beats, 0 = tap note
    note_type: str | None = None  # NoteType name in the owning difficulty

    @property
    def key(self) -> tuple[float, int]:
        return (self.beat, self.lane)

    @property
    def is_hold(self) -> bool:
        return self.hold_length > 0.0


@dataclass
class EditNoteParams:
    """Fields to change on an existing note. None leaves a field untouched."""

    note_type: str | None = None
    hold_length: float | None = None


@dataclass
class AddNoteResult:
    status: NoteInsert
    note: Note  # the inserted note, or the one already occupying the slot

    @property
    def added(self) -> bool:
        return self.status == NoteInsert.ADDED
