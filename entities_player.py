# entities_player.py
#
# The player's car and the bullets it fires.
# ------------------------------------------------------

import pygame

from config import (
    WIDTH, HEIGHT,
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_BASE_SPEED,
    PLAYER_START_X, PLAYER_START_Y,
    BULLET_WIDTH, BULLET_HEIGHT, BULLET_SPEED,
)
from entities_utils import Entity, clamp

INVULNERABLE_RIM = (255, 215, 0)


class Player(Entity):
    color = (0, 255, 0)

    def __init__(self):
        super().__init__(PLAYER_START_X, PLAYER_START_Y,
                         PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_BASE_SPEED)
        self.base_speed = PLAYER_BASE_SPEED

    @property
    def sprite_key(self):
        return "mycar"

    @property
    def boosted(self):
        return self.speed > self.base_speed

    def move(self, dx, dy, frames, field=(WIDTH, HEIGHT)):
        """Move along the unit axes dx/dy (-1, 0, 1), clamped to the field."""
        step = self.speed * frames
        self.x = clamp(self.x + dx * step, 0, field[0] - self.width)
        self.y = clamp(self.y + dy * step, 0, field[1] - self.height)

    def reset_speed(self):
        self.speed = self.base_speed

    def draw(self, surf, sprites, offset=(0, 0), invulnerable=False):
        super().draw(surf, sprites, offset)
        if invulnerable:
            x, y, w, h = self.rect(offset)
            pygame.draw.rect(surf, INVULNERABLE_RIM, (x - 2, y - 2, w + 4, h + 4), 3)


class Bullet(Entity):
    color = (255, 255, 255)

    def __init__(self, player):
        super().__init__(player.x + player.width / 2 - BULLET_WIDTH / 2, player.y,
                         BULLET_WIDTH, BULLET_HEIGHT, BULLET_SPEED)

    def update(self, frames):
        self.y -= self.speed * frames

    def is_off_field(self, field_height):
        return self.y + self.height <= 0
