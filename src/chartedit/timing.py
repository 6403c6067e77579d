"""Timing map: conversion between beats and wall-clock seconds under tempo changes.

The tempo points split the beat axis into half-open segments
``[points[i].beat, points[i + 1].beat)``, the last one unbounded. Inside a
segment time advances linearly: ``seconds = beats / tempo * 60``.
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_right
from dataclasses import replace
from operator import attrgetter

from chartedit.config import DEFAULT_OFFSET, DEFAULT_TEMPO, LEGACY_TIME_SEED
from chartedit.models import TempoPoint

logger = logging.getLogger(__name__)

_BEAT_KEY = attrgetter("beat")


def _beats_to_seconds(beats: float, tempo: float) -> float:
    try:
        return beats / tempo * 60.0
    except ZeroDivisionError:
        # IEEE result; only the legacy seed divides by a zero tempo
        return math.nan if beats == 0 else math.copysign(math.inf, beats)


class TimingMap:
    """Ordered tempo points anchored to wall-clock time by an offset.

    Invariants: ``points[0].beat == 0``, beats strictly increasing, and no two
    adjacent points share a tempo.
    """

    def __init__(
        self,
        offset: float = DEFAULT_OFFSET,
        tempo: float = DEFAULT_TEMPO,
        legacy_time_seed: bool = LEGACY_TIME_SEED,
    ) -> None:
        if tempo <= 0:
            raise ValueError(f"Base tempo must be positive, got {tempo}")
        self.offset = float(offset)
        self.legacy_time_seed = legacy_time_seed
        self._points: list[TempoPoint] = [TempoPoint(beat=0.0, tempo=float(tempo))]

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> list[TempoPoint]:
        """Copies of the tempo points, ascending by beat."""
        return [replace(p) for p in self._points]

    @property
    def base_tempo(self) -> float:
        return self._first().tempo

    def _first(self) -> TempoPoint:
        assert self._points and self._points[0].beat == 0.0, "timing map lost its base point"
        return self._points[0]

    def beat_at(self, time: float) -> float:
        """Convert wall-clock seconds to a beat.

        Times at or before the offset extrapolate with the base tempo. A time
        landing exactly on a segment boundary maps to the boundary beat.
        """
        first = self._first()
        if time <= self.offset:
            return (time - self.offset) / (first.tempo / 60.0)

        previous_time = self.offset
        current_time = self.offset
        previous_beat = first.beat
        previous_tempo = first.tempo

        for point in self._points:
            current_time += _beats_to_seconds(point.beat - previous_beat, previous_tempo)
            if current_time > time:
                break
            previous_beat = point.beat
            previous_tempo = point.tempo
            previous_time = current_time

        return previous_beat + (time - previous_time) / 60.0 * previous_tempo

    def time_at(self, beat: float) -> float:
        """Convert a beat to wall-clock seconds.

        Beats at or before 0 extrapolate with the base tempo. With
        ``legacy_time_seed`` the walk starts from the base point's beat instead
        of its tempo, which turns every positive beat into NaN.
        """
        first = self._first()
        if beat <= 0.0:
            return beat / first.tempo * 60.0 + self.offset

        current_time = self.offset
        previous_beat = first.beat
        previous_tempo = first.beat if self.legacy_time_seed else first.tempo

        for point in self._points:
            if point.beat > beat:
                break
            current_time += _beats_to_seconds(point.beat - previous_beat, previous_tempo)
            previous_beat = point.beat
            previous_tempo = point.tempo

        return current_time + _beats_to_seconds(beat - previous_beat, previous_tempo)

    def tempo_at(self, beat: float) -> float:
        """Tempo of the segment containing ``beat``; 0.0 before the first point."""
        idx = bisect_right(self._points, beat, key=_BEAT_KEY)
        if idx == 0:
            return 0.0
        return self._points[idx - 1].tempo

    def set_tempo(self, beat: float, tempo: float) -> None:
        """Start a segment of ``tempo`` BPM at ``beat``.

        Negative or non-finite beats and non-positive or non-finite tempos are
        ignored. Setting a point to the tempo of the segment before it removes
        the point.
        """
        if not (math.isfinite(beat) and math.isfinite(tempo)) or tempo <= 0 or beat < 0:
            logger.debug("Ignoring tempo change %r BPM at beat %r", tempo, beat)
            return

        first = self._first()
        if beat == 0:
            first.tempo = float(tempo)
            self._merge_redundant()
            return

        idx = bisect_right(self._points, beat, key=_BEAT_KEY)
        assert idx > 0
        point = self._points[idx - 1]

        if point.beat == beat:
            if self._points[idx - 2].tempo == tempo:
                logger.debug("Merging tempo point at beat %r into previous segment", beat)
                del self._points[idx - 1]
            else:
                point.tempo = float(tempo)
        else:
            self._points.insert(idx, TempoPoint(beat=float(beat), tempo=float(tempo)))

        self._merge_redundant()

    def remove_tempo(self, beat: float) -> None:
        """Delete the tempo point at ``beat``. The base point is never removed."""
        if beat <= 0:
            return
        idx = bisect_right(self._points, beat, key=_BEAT_KEY)
        if idx > 1 and self._points[idx - 1].beat == beat:
            del self._points[idx - 1]
            self._merge_redundant()

    def _merge_redundant(self) -> None:
        merged = [self._first()]
        for point in self._points[1:]:
            if point.tempo == merged[-1].tempo:
                logger.debug("Dropping redundant tempo point at beat %r", point.beat)
                continue
            merged.append(point)
        self._points = merged
