#!/usr/bin/env python3
"""Watch a random agent play Minesweeper."""
import argparse
import logging
import os
import time

from agents import RandomAgent
from mineboard import BoardConfig, MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.3,
    games: int = 5,
    width: int = 9,
    height: int = 9,
    mines: int = 10,
    seed=None,
) -> int:
    """Run demo games with visualization. Returns the number of wins."""
    config = BoardConfig(width=width, height=height, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(width, height, seed=seed)

    print(f"Board: {width}x{height} with {mines} mines ({100*mines/(width*height):.1f}% density)")

    wins = 0

    for game in range(games):
        obs, _ = env.reset(seed=None if seed is None else seed + game)
        agent.reset()
        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            x, y = agent.action_to_position(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            if delay:
                clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last click: ({x}, {y})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WIN":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(delay)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")
    return wins


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--width", type=int, default=9, help="Board width")
    parser.add_argument("--height", type=int, default=9, help="Board height")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~12%% of cells)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for layouts and clicks")
    parser.add_argument("--verbose", action="store_true", help="Log engine events")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    mines = args.mines if args.mines is not None else int(args.width * args.height * 0.12)

    demo(
        delay=args.delay,
        games=args.games,
        width=args.width,
        height=args.height,
        mines=mines,
        seed=args.seed,
    )
