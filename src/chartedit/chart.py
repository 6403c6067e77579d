"""Chart: a song's collection of named difficulties."""

from __future__ import annotations

from chartedit.config import DEFAULT_OFFSET, DEFAULT_TEMPO
from chartedit.difficulty import Difficulty
from chartedit.timing import TimingMap


class Chart:
    def __init__(self, title: str = "Untitled") -> None:
        self.title = title
        self._difficulties: dict[str, Difficulty] = {}

    @property
    def difficulties(self) -> list[Difficulty]:
        """Difficulties in creation order."""
        return list(self._difficulties.values())

    def create_difficulty(
        self,
        name: str,
        offset: float = DEFAULT_OFFSET,
        tempo: float = DEFAULT_TEMPO,
    ) -> Difficulty:
        """Create a difficulty with its own timing map.

        A name that already exists returns that difficulty; offset and tempo are
        then ignored.
        """
        existing = self._difficulties.get(name)
        if existing is not None:
            return existing
        difficulty = Difficulty(name, TimingMap(offset=offset, tempo=tempo))
        self._difficulties[name] = difficulty
        return difficulty

    def get_difficulty(self, name: str) -> Difficulty | None:
        return self._difficulties.get(name)

    def delete_difficulty(self, name: str) -> None:
        self._difficulties.pop(name, None)
