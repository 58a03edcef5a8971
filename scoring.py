"""Score accounting for one round: survival, pickups and bullet-kill combos."""

from config import (
    SURVIVAL_POINTS, KILL_POINTS, COMBO_BONUS_PER_HIT, COMBO_WINDOW,
)


class ScoreKeeper:
    """Owns the score and the combo/streak counters of a single round.

    Every award goes through :meth:`award`, which applies the current
    multiplier, so doubling is uniform across sources. Scores only ever grow.
    """

    def __init__(self):
        self.score = 0
        self.combo = 0
        self.streak = 0
        self.best_streak = 0
        self.last_kill_at = None
        self.survival_seconds = 0

    def award(self, points, multiplier=1):
        gained = int(points) * multiplier
        if gained < 0:
            raise ValueError("score awards must be non-negative")
        self.score += gained
        return gained

    def award_survival(self, active_elapsed, multiplier=1):
        """Award SURVIVAL_POINTS for each whole active second not yet paid."""
        gained = 0
        whole_seconds = int(active_elapsed)
        while self.survival_seconds < whole_seconds:
            self.survival_seconds += 1
            gained += self.award(SURVIVAL_POINTS, multiplier)
        return gained

    def kill_points(self):
        bonus = self.combo * COMBO_BONUS_PER_HIT if self.combo > 1 else 0
        return KILL_POINTS + bonus

    def register_kill(self, now, multiplier=1):
        if self.last_kill_at is not None and now - self.last_kill_at > COMBO_WINDOW:
            self.combo = 0
        self.combo += 1
        self.streak += 1
        self.best_streak = max(self.best_streak, self.streak)
        self.last_kill_at = now
        return self.award(self.kill_points(), multiplier)

    def decay_combo(self, now):
        if self.combo and self.last_kill_at is not None and now - self.last_kill_at > COMBO_WINDOW:
            self.combo = 0

    def register_damage(self):
        self.combo = 0
        self.streak = 0
