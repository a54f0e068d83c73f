import argparse
import logging
import sys

from raycaster.app import App
from raycaster.config import SCREEN_WIDTH, SCREEN_HEIGHT, TICK_INTERVAL_MS, LOG_FORMAT


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Draw the wall layout and track the mouse pointer."
    )
    parser.add_argument(
        "--tick-interval",
        type=int,
        default=TICK_INTERVAL_MS,
        help="redraw interval in milliseconds (default: %(default)s)",
    )
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    if args.tick_interval <= 0:
        parser.error("--tick-interval must be positive")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    app = App(
        tick_interval_ms=args.tick_interval,
        width=args.width,
        height=args.height,
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
