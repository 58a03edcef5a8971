import os

# pygame runs headless in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FakeClock:
    """Manually advanced stand-in for time.time."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now


def make_game(clock=None, seed=1, **kwargs):
    """A Game wired to a fake clock, its own scheduler and a seeded rng."""
    import random

    from game import Game
    from scheduler import FrameScheduler

    clock = clock or FakeClock()
    kwargs.setdefault("music_enabled", False)
    game = Game(clock=clock, scheduler=FrameScheduler(clock),
                rng=random.Random(seed), **kwargs)
    return game, clock
