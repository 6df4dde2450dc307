"""
Command-line entry point: play in a window or run headless random episodes
"""

import argparse
import logging
from typing import Optional

import numpy as np

from invaders.configs.game_config import HIGHSCORE_CONFIG
from invaders.highscores import HighScoreTable
from invaders.shooter_env import run_random_episode
from invaders.state_machine import Game


def run_headless(n_episodes: int = 5, seed: Optional[int] = 42, difficulty: str = "medium"):
    """Random-policy episodes without a window"""
    scores, levels, returns = [], [], []

    print(f"\n{'='*60}")
    print(f"Running {n_episodes} headless episodes on {difficulty}...")
    print(f"{'='*60}\n")

    for episode in range(n_episodes):
        episode_seed = None if seed is None else seed + episode
        info = run_random_episode(render=False, seed=episode_seed, difficulty=difficulty)
        scores.append(info["score"])
        levels.append(info["level"])
        returns.append(info["return"])
        print(f"Episode {episode + 1}: score={info['score']} level={info['level']} lives={info['lives']}")

    print(f"\nRandom Policy Results ({n_episodes} episodes):")
    print(f"Mean Score: {np.mean(scores):.1f} ± {np.std(scores):.1f}")
    print(f"Mean Level Reached: {np.mean(levels):.1f}")

    return {
        "mean_score": float(np.mean(scores)),
        "mean_level": float(np.mean(levels)),
        "mean_return": float(np.mean(returns)),
    }


def run_window(highscore_path: str, player_name: str, seed: Optional[int] = None):
    # arcade is only needed when a window is actually opened
    import arcade
    from invaders.window import PlayWindow

    table = HighScoreTable(highscore_path).load()
    game = Game(high_scores=table, player_name=player_name, seed=seed)
    PlayWindow(game)
    arcade.run()


def main():
    parser = argparse.ArgumentParser(description="Play the invaders arcade shooter")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run random-policy episodes without opening a window",
    )
    parser.add_argument(
        "--episodes",
        type=int,
        default=5,
        help="Number of headless episodes (default: 5)",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        default="medium",
        choices=["easy", "medium", "hard"],
        help="Difficulty for headless episodes (default: medium)",
    )
    parser.add_argument(
        "--highscores",
        type=str,
        default=HIGHSCORE_CONFIG["path"],
        help=f"High score file (default: {HIGHSCORE_CONFIG['path']})",
    )
    parser.add_argument(
        "--name",
        type=str,
        default=HIGHSCORE_CONFIG["default_name"],
        help="Name recorded with high scores",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log simulation events",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.headless:
        run_headless(n_episodes=args.episodes, seed=args.seed, difficulty=args.difficulty)
    else:
        run_window(args.highscores, args.name, seed=args.seed)


if __name__ == "__main__":
    main()
