# entities_particle.py

import random
import math
import numpy as np
import pygame

from config import PARTICLE_LIFETIME

GRAVITY = 300.0


class Particle:
    def __init__(self, pos, now, color=None, speed_range=(80, 260), rng=random):
        self.pos = np.array(pos, dtype=float)
        angle = rng.uniform(0, 2 * math.pi)
        speed = rng.uniform(*speed_range)
        self.vel = np.array([math.cos(angle) * speed,
                             math.sin(angle) * speed], dtype=float)
        self.radius = rng.randint(2, 5)
        self.born = now
        self.lifetime = rng.uniform(*PARTICLE_LIFETIME)
        self.color = color or (
            rng.randint(200, 255),
            rng.randint(100, 200),
            rng.randint(0, 80)
        )

    def update(self, dt):
        self.pos += self.vel * dt
        self.vel[1] += GRAVITY * dt

    def expired(self, now):
        return now - self.born >= self.lifetime

    def draw(self, surf, now, offset=(0, 0)):
        remaining = 1 - (now - self.born) / self.lifetime
        if remaining <= 0:
            return
        radius = max(1, int(self.radius * remaining))
        pygame.draw.circle(
            surf,
            self.color,
            (int(self.pos[0] + offset[0]), int(self.pos[1] + offset[1])),
            radius
        )
