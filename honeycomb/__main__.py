"""Command line entry point: open the simulator window or record a GIF."""

import argparse
import sys

from honeycomb.record import record_gif
from honeycomb.run import run
from honeycomb.settings import load_settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="honeycomb", description="Animated honeycomb background")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--fps", type=int, default=None, help="target frame rate (default from settings)")
    parser.add_argument("--settings", default=None, help="JSON settings file (or set $HONEYCOMB_SETTINGS)")
    parser.add_argument("--record", metavar="PATH", default=None, help="render headlessly to an animated GIF")
    parser.add_argument("--seconds", type=float, default=6.0, help="GIF length when recording")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.settings)
    except (RuntimeError, ValueError, TypeError) as e:
        print(f"[config] {e}")
        return 1

    if args.record:
        record_gif(args.record, seconds=args.seconds, fps=args.fps or 20,
                   width=args.width, height=args.height, settings=settings)
        return 0

    run(args.width, args.height, fps=args.fps, settings=settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
