# entities_utils.py

import pygame


def clamp(v, lo, hi):
    return max(lo, min(v, hi))


def ease_out_cubic(t):
    """1 - (1 - t)^3, with t clamped to [0, 1]."""
    t = clamp(t, 0.0, 1.0)
    return 1 - (1 - t) ** 3


def intersects(a, b):
    """Return True if the axis-aligned rectangles a and b overlap.

    Both objects expose x, y (top-left), width and height. Touching edges do
    not count as a collision.
    """
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


def center_of(entity):
    return (entity.x + entity.width / 2, entity.y + entity.height / 2)


class Entity:
    """Axis-aligned rectangle falling down the play-field at `speed` px/frame."""

    color = (255, 255, 255)

    def __init__(self, x, y, width, height, speed):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.speed = speed

    @property
    def sprite_key(self):
        return None

    def update(self, frames):
        self.y += self.speed * frames

    def is_off_field(self, field_height):
        return self.y >= field_height

    def rect(self, offset=(0, 0)):
        return (int(self.x + offset[0]), int(self.y + offset[1]),
                int(self.width), int(self.height))

    def draw(self, surf, sprites, offset=(0, 0)):
        """Blit the kind's sprite, or a solid placeholder while it is missing."""
        image = sprites.get(self.sprite_key) if sprites else None
        rect = self.rect(offset)
        if image is not None:
            surf.blit(pygame.transform.scale(image, rect[2:]), rect[:2])
        else:
            pygame.draw.rect(surf, self.color, rect)
