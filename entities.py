# entities.py

# re‑export every gameplay and effect entity

from entities_utils import (
    Entity,
    intersects,
    center_of
)

from entities_player import Player, Bullet

from entities_obstacles import Obstacle, ObstacleKind

from entities_pickups import (
    Powerup,
    PowerupKind,
    EFFECT_DURATIONS,
    Coin,
    CoinKind,
    COIN_VALUES
)

from entities_particle import Particle

from entities_effects import Explosion, ScorePopup
