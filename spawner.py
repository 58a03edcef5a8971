# spawner.py

import random

from config import (
    WIDTH,
    OBSTACLE_WIDTH, OBSTACLE_SPAWN_INTERVAL,
    POWERUP_SIZE, POWERUP_SPAWN_INTERVAL, POWERUP_SPAWN_CHANCE,
    COIN_SIZE, COIN_SPAWN_INTERVAL, COIN_SPAWN_CHANCE,
)
from entities_obstacles import Obstacle, ObstacleKind
from entities_pickups import Powerup, PowerupKind, POWERUP_SIZES, Coin, CoinKind
from logging_utils import log_debug


class Spawner:
    """Time-gated creation of obstacles, powerups and coins.

    The three gates are independent; a gate that is not ready (or loses its
    coin flip) simply returns nothing for this tick.
    """

    def __init__(self, rng=None, field_width=WIDTH):
        self.rng = rng or random.Random()
        self.field_width = field_width
        self.last_obstacle = 0.0
        self.last_powerup = 0.0
        self.last_coin = 0.0

    def reset(self, now):
        self.last_obstacle = now
        self.last_powerup = now
        self.last_coin = now

    def _x_for(self, width):
        return self.rng.uniform(0, self.field_width - width)

    def spawn_obstacle(self, now, speed):
        if now - self.last_obstacle <= OBSTACLE_SPAWN_INTERVAL:
            return None
        self.last_obstacle = now
        kind = self.rng.choice(list(ObstacleKind))
        return Obstacle(kind, self._x_for(OBSTACLE_WIDTH), speed)

    def spawn_powerup(self, now):
        if now - self.last_powerup <= POWERUP_SPAWN_INTERVAL:
            return None
        if self.rng.random() >= POWERUP_SPAWN_CHANCE:
            return None
        self.last_powerup = now
        kind = self.rng.choice(list(PowerupKind))
        width = POWERUP_SIZES.get(kind, POWERUP_SIZE)[0]
        log_debug(f"Spawner.spawn_powerup kind={kind.value}")
        return Powerup(kind, self._x_for(width))

    def spawn_coin(self, now):
        if now - self.last_coin <= COIN_SPAWN_INTERVAL:
            return None
        if self.rng.random() >= COIN_SPAWN_CHANCE:
            return None
        self.last_coin = now
        kind = self.rng.choice(list(CoinKind))
        return Coin(kind, self._x_for(COIN_SIZE))
