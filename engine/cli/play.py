#!/usr/bin/env python3
"""
Play a game of Snake in a pygame window.

Usage:
    python play.py
    python play.py --width 640 --height 480 --fps 15

Controls:
    W/A/S/D   turn
    Space     pause / unpause (the game starts paused)

Settings can also come from SNAKE_* variables in the environment or a .env
file; command line flags win.

Exit codes:
    0  window closed, or game over
    1  font (or another resource) not found
    2  any other startup failure, e.g. invalid settings
"""

import os
import sys
import argparse
import logging
from typing import List, Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from config import GameConfig
from domain.errors import ResourceNotFoundError, StartupError
from main import run_game

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RESOURCE_NOT_FOUND = 1
EXIT_STARTUP_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Play Snake: eat food, grow, avoid the walls and yourself',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--width', type=int, help='Window width in pixels')
    parser.add_argument('--height', type=int, help='Window height in pixels')
    parser.add_argument('--length', type=int, dest='initial_length',
                        help='Initial number of body segments')
    parser.add_argument('--food', type=int, dest='food_count',
                        help='Number of food items on the board')
    parser.add_argument('--size', type=float, dest='segment_size',
                        help='Segment size in pixels')
    parser.add_argument('--fps', type=int, help='Frame-rate cap (steps per second)')
    parser.add_argument('--font', type=str, dest='font_path', help='Path to a TTF font')
    parser.add_argument('--seed', type=int, help='Seed for food placement')
    parser.add_argument(
        '--log-level',
        default=os.getenv('SNAKE_LOG_LEVEL', 'INFO'),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: INFO)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = GameConfig.from_env().override(
            width=args.width,
            height=args.height,
            initial_length=args.initial_length,
            food_count=args.food_count,
            segment_size=args.segment_size,
            fps=args.fps,
            font_path=args.font_path,
            seed=args.seed,
        ).validate()
        return run_game(config)
    except ResourceNotFoundError as e:
        logger.error(f"Could not load resource {e.path}: {e.reason}")
        print(f"An error has occurred: {e}", file=sys.stderr)
        return EXIT_RESOURCE_NOT_FOUND
    except StartupError as e:
        logger.error(f"Startup failed: {e}")
        print(f"An error has occurred: {e}", file=sys.stderr)
        return EXIT_STARTUP_FAILED


if __name__ == "__main__":
    sys.exit(main())
