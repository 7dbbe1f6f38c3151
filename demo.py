#!/usr/bin/env python3
"""Watch a random player uncover cells."""
import time
import os

import numpy as np

from src.sweeper import BoardConfig, SweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 9, hazards: int = 10,
         seed: int = None):
    """Run demo games with text rendering."""
    config = BoardConfig(columns=size, rows=size, hazard_count=hazards)
    env = SweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)
    cells = size * size

    print(f"Board: {size}x{size} with {hazards} hazards ({100*hazards/cells:.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            # Primary actions only
            mask = env.get_action_mask()[:cells]
            action = int(rng.choice(np.flatnonzero(mask)))
            x, y = action % size, action // size

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (uncovered a hazard) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--hazards", type=int, default=None, help="Number of hazards (default: ~12%% of cells)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for boards and moves")
    args = parser.parse_args()

    hazards = args.hazards if args.hazards else int(args.size * args.size * 0.12)

    demo(delay=args.delay, games=args.games, size=args.size, hazards=hazards,
         seed=args.seed)
