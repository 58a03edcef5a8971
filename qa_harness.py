"""Headless soak harness: plays simulated seconds with random input."""
from __future__ import annotations

import argparse
import random
import sys
from typing import Optional

from config import FPS
from game import Game
from round_state import GameStatus
from scheduler import FrameScheduler


class SimulatedClock:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless gameplay soak run")
    parser.add_argument("--seconds", type=float, default=60.0, help="Simulated play time")
    parser.add_argument("--seed", type=int, default=0, help="Seed for spawns and input")
    parser.add_argument("--fps", type=int, default=FPS, help="Simulated frame rate")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> Game:
    clock = SimulatedClock()
    rng = random.Random(args.seed)
    game = Game(clock=clock, scheduler=FrameScheduler(clock), rng=rng, music_enabled=False)
    game.start()

    frame = 1.0 / args.fps
    frames = int(args.seconds * args.fps)
    for _ in range(frames):
        if game.status not in (GameStatus.RUNNING, GameStatus.GAME_OVER_ANIMATING):
            break
        # change held keys every few frames, like a restless player
        if rng.random() < 0.1:
            game.inputs.key_left = rng.random() < 0.4
            game.inputs.key_right = not game.inputs.key_left and rng.random() < 0.6
            game.inputs.shoot = rng.random() < 0.5
        game.step(clock.advance(frame))
    return game


def main(argv: Optional[list[str]] = None) -> None:
    game = run(parse_args(argv))
    snap = game.snapshot
    print(f"status={snap.status.value} score={snap.score} lives={snap.lives} "
          f"level={snap.level} best_streak={snap.best_streak}")


if __name__ == "__main__":
    main(sys.argv[1:])
