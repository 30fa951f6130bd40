import argparse
import logging

from house_scene.animation import HouseAnimation
from house_scene.constants import FRAME_DELAY


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Animated house with chimney smoke and a day/night cycle")
    p.add_argument("--period", type=int, default=FRAME_DELAY,
                   help=f"Milliseconds between ticks (default: {FRAME_DELAY})")
    p.add_argument("--seed", type=int, default=None, help="Random seed for the smoke (default: random)")
    p.add_argument("--gif", type=str, default=None, metavar="FILE",
                   help="Write an animated GIF to FILE instead of opening a window")
    p.add_argument("--frames", type=int, default=200, help="Frames written with --gif (default: 200)")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    args = p.parse_args(argv)
    if args.period <= 0:
        p.error("--period must be positive")
    if args.frames <= 0:
        p.error("--frames must be positive")
    return args


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    animation = HouseAnimation(period_ms=args.period, seed=args.seed)

    if args.gif:
        from house_scene.export import export_gif
        export_gif(animation, args.gif, args.frames)
    else:
        from house_scene.app import run_window
        run_window(animation)


if __name__ == "__main__":
    main()
