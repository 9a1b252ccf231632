"""
Play the arena, or run headless random-policy episodes
"""

import argparse
import random

from .arena_env import run_random_episode
from .config import DEFAULT_CONFIG


def main(argv=None):
    parser = argparse.ArgumentParser(description="Top-down arena shooter")
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_CONFIG.screen_width,
        help=f"Window width (default: {DEFAULT_CONFIG.screen_width})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_CONFIG.screen_height,
        help=f"Window height (default: {DEFAULT_CONFIG.screen_height})",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=DEFAULT_CONFIG.fps,
        help=f"Target frame rate (default: {DEFAULT_CONFIG.fps})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for enemy placement",
    )
    parser.add_argument(
        "--random-episodes",
        type=int,
        default=0,
        help="Run N headless random-policy episodes instead of playing",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Render the random-policy episodes",
    )

    args = parser.parse_args(argv)

    try:
        config = DEFAULT_CONFIG.replace(
            screen_width=args.width,
            screen_height=args.height,
            fps=args.fps,
        )
    except ValueError as e:
        parser.error(str(e))

    if args.random_episodes > 0:
        print(f"\n{'='*60}")
        print(f"Running {args.random_episodes} random episode(s)...")
        print(f"{'='*60}\n")
        for i in range(args.random_episodes):
            seed = None if args.seed is None else args.seed + i
            result = run_random_episode(render=args.render, seed=seed, config=config)
            print(f"Episode {i + 1}: return={result['return']:.2f} "
                  f"steps={result['steps']} kills={result['kills']} "
                  f"high_score={result['high_score']} died={result['died']}")
        return

    from .game import Arena
    from .window import play

    arena = Arena(config, random.Random(args.seed))
    arena = play(config, arena)
    print(f"High score: {arena.state.high_score}")


if __name__ == "__main__":
    main()
