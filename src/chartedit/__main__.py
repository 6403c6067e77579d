"""Entry point for `python -m chartedit` or the `chartedit` console script."""

import argparse
import logging

from chartedit.config import DEFAULT_OFFSET, DEFAULT_TEMPO
from chartedit.timing import TimingMap


def _tempo_change(value: str) -> tuple[float, float]:
    beat, _, tempo = value.partition(":")
    try:
        return float(beat), float(tempo)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected BEAT:BPM, got {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="chartedit - inspect a chart timing map")
    parser.add_argument("--offset", type=float, default=DEFAULT_OFFSET, help="Seconds at beat 0")
    parser.add_argument("--tempo", type=float, default=DEFAULT_TEMPO, help="Base tempo in BPM")
    parser.add_argument("--change", type=_tempo_change, action="append", default=[],
                        metavar="BEAT:BPM", help="Tempo change, applied in order")
    parser.add_argument("--beat", type=float, action="append", default=[],
                        help="Beat to convert to seconds")
    parser.add_argument("--time", type=float, action="append", default=[],
                        help="Time in seconds to convert to a beat")
    parser.add_argument("--legacy-time-seed", action="store_true",
                        help="Reproduce the old beat-to-time seeding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        timing = TimingMap(offset=args.offset, tempo=args.tempo,
                           legacy_time_seed=args.legacy_time_seed)
    except ValueError as exc:
        parser.error(str(exc))

    for beat, tempo in args.change:
        timing.set_tempo(beat, tempo)

    for point in timing.points:
        print(f"point  beat={point.beat:g}  tempo={point.tempo:g}")
    for beat in args.beat:
        print(f"beat {beat:g} -> {timing.time_at(beat):.6f}s  ({timing.tempo_at(beat):g} BPM)")
    for time in args.time:
        print(f"time {time:g}s -> beat {timing.beat_at(time):.6f}")


if __name__ == "__main__":
    main()
