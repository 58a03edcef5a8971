# managers.py

import random

import pygame

from config import (
    BASE_OBSTACLE_SPEED, SPEED_STEP_INTERVAL, SPEED_TRANSITION,
    EXPLOSION_DURATION,
)
from entities_effects import Explosion, ScorePopup
from entities_particle import Particle
from entities_pickups import EFFECT_DURATIONS
from entities_utils import ease_out_cubic
from logging_utils import log_debug


class DifficultyManager:
    """Obstacle speed as a function of active (pause-excluded) play time."""

    def __init__(self, base_speed=BASE_OBSTACLE_SPEED,
                 step_interval=SPEED_STEP_INTERVAL, transition=SPEED_TRANSITION):
        self.base_speed = base_speed
        self.step_interval = step_interval
        self.transition = transition

    def level_at(self, elapsed):
        return int(max(0.0, elapsed) // self.step_interval)

    def speed_at(self, elapsed):
        elapsed = max(0.0, elapsed)
        level = self.level_at(elapsed)
        since_step = elapsed - level * self.step_interval
        if level > 0 and since_step < self.transition:
            # ease from the previous level into the new one
            return self.base_speed + level - 1 + ease_out_cubic(since_step / self.transition)
        return self.base_speed + level


class EffectTimers:
    """One authoritative expiry timestamp per timed powerup kind."""

    def __init__(self):
        self.expiry = {kind: 0.0 for kind in EFFECT_DURATIONS}

    def activate(self, kind, now):
        # overwrite, never stack
        self.expiry[kind] = now + EFFECT_DURATIONS[kind]
        return self.expiry[kind]

    def is_active(self, kind, now):
        return now < self.expiry[kind]

    def remaining(self, kind, now):
        return max(0.0, self.expiry[kind] - now)

    def active(self, now):
        return {kind: self.remaining(kind, now)
                for kind in self.expiry if self.is_active(kind, now)}

    def sweep(self, now):
        """Return the kinds whose timer ran out since the last sweep."""
        expired = []
        for kind, expiry in self.expiry.items():
            if expiry and now > expiry:
                self.expiry[kind] = 0.0
                expired.append(kind)
        return expired


class EffectsManager:
    """Explosions, particles and score popups.

    All entity creation happens through add_explosion/burst/popup from the
    tick; delayed bursts are queued and materialised by update().
    """

    def __init__(self, rng=random):
        self.rng = rng
        self.explosions = []
        self.particles = []
        self.popups = []
        self._pending_bursts = []

    def add_explosion(self, pos, now, delay=0.0, max_radius=60):
        log_debug(f"EffectsManager.add_explosion pos={pos} delay={delay}")
        self.explosions.append(Explosion(pos, now + delay, max_radius, EXPLOSION_DURATION))

    def burst(self, pos, now, count=15, color=None, delay=0.0):
        if delay > 0:
            self._pending_bursts.append((now + delay, pos, count, color))
            return
        for _ in range(count):
            self.particles.append(Particle(pos, now, color=color, rng=self.rng))

    def popup(self, text, pos, now, color=(255, 255, 0)):
        self.popups.append(ScorePopup(text, pos, now, color))

    def update(self, now, dt):
        due = [b for b in self._pending_bursts if b[0] <= now]
        self._pending_bursts = [b for b in self._pending_bursts if b[0] > now]
        for at, pos, count, color in due:
            for _ in range(count):
                self.particles.append(Particle(pos, at, color=color, rng=self.rng))
        for p in self.particles:
            p.update(dt)
        self.particles = [p for p in self.particles if not p.expired(now)]
        self.explosions = [e for e in self.explosions if not e.expired(now)]
        self.popups = [p for p in self.popups if not p.expired(now)]

    @property
    def pending(self):
        return len(self._pending_bursts)

    def clear(self):
        self.explosions = []
        self.particles = []
        self.popups = []
        self._pending_bursts = []

    def draw(self, surf, now, font, offset=(0, 0)):
        for exp in self.explosions:
            exp.draw(surf, now, offset)
        for p in self.particles:
            p.draw(surf, now, offset)
        for popup in self.popups:
            popup.draw(surf, now, font, offset)


class Camera:
    def __init__(self, rng=random):
        self.rng = rng
        self.offset = pygame.math.Vector2(0, 0)
        self.shake_until = 0.0
        self.shake_intensity = 0

    def update(self, now):
        if now < self.shake_until:
            self.offset.x = self.rng.uniform(-self.shake_intensity, self.shake_intensity)
            self.offset.y = self.rng.uniform(-self.shake_intensity, self.shake_intensity)
        else:
            self.offset.x = 0
            self.offset.y = 0

    def shake(self, now, duration, intensity):
        if now >= self.shake_until:
            self.shake_intensity = 0
        self.shake_until = max(self.shake_until, now + duration)
        self.shake_intensity = max(self.shake_intensity, intensity)

    def reset(self):
        self.offset.x = 0
        self.offset.y = 0
        self.shake_until = 0.0
        self.shake_intensity = 0
