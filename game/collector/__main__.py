"""
Play the star collector.

Usage:
    python -m game.collector [--width 800] [--height 600] [--seed 42]

Controls:
    Arrow keys / WASD: move
    Click or R: start / restart
"""

import argparse

from .config import DEFAULT_CONFIG


def main():
    parser = argparse.ArgumentParser(description="Star Collector")
    parser.add_argument("--width", type=int, default=DEFAULT_CONFIG.width,
                        help="Field width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_CONFIG.height,
                        help="Field height in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for star placement")
    args = parser.parse_args()

    # imported late so --help works without a display
    from .window import run_game

    print("Star Collector - Starting...")
    print(__doc__)
    game = run_game(DEFAULT_CONFIG, width=args.width, height=args.height, seed=args.seed)
    print(f"High score this session: {game.high_score}")


if __name__ == "__main__":
    main()
