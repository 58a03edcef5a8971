"""Per-round aggregate state and the snapshot published after every tick."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from config import MAX_LIVES
from entities_player import Player
from managers import EffectTimers
from scoring import ScoreKeeper


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER_ANIMATING = "game_over_animating"
    GAME_OVER = "game_over"


@dataclass
class RoundState:
    """Everything a round owns; rebuilt from scratch by :func:`new_round`."""

    started_at: float
    player: Player = field(default_factory=Player)
    obstacles: List = field(default_factory=list)
    powerups: List = field(default_factory=list)
    bullets: List = field(default_factory=list)
    coins: List = field(default_factory=list)
    lives: int = MAX_LIVES
    scores: ScoreKeeper = field(default_factory=ScoreKeeper)
    timers: EffectTimers = field(default_factory=EffectTimers)
    paused_total: float = 0.0
    pause_started_at: Optional[float] = None
    last_tick_at: float = 0.0
    last_shot_at: Optional[float] = None
    game_over_at: Optional[float] = None
    obstacle_speed: float = 0.0

    def active_elapsed(self, now):
        """Wall-clock time since the round started, minus time spent paused."""
        paused = self.paused_total
        if self.pause_started_at is not None:
            paused += now - self.pause_started_at
        return max(0.0, now - self.started_at - paused)


def new_round(now, base_speed):
    return RoundState(started_at=now, last_tick_at=now, obstacle_speed=base_speed)


@dataclass(frozen=True)
class GameSnapshot:
    status: GameStatus
    score: int = 0
    lives: int = MAX_LIVES
    best_score: int = 0
    combo: int = 0
    streak: int = 0
    best_streak: int = 0
    level: int = 0
    obstacle_speed: float = 0.0
    countdown: int = 0
    active_effects: Dict[str, float] = field(default_factory=dict)
