# entities_effects.py
#
# Cosmetic, time-limited entities. Nothing here is ever read by collision or
# scoring code; drawing is a pure function of (entity, now).

import pygame

from config import EXPLOSION_DURATION, POPUP_DURATION

EXPLOSION_RINGS = ((255, 255, 200), (255, 170, 0), (220, 40, 0))


def _alpha_circle(surface, centre, radius, color, alpha):
    """Draw a translucent filled circle using an SRCALPHA temp surface."""
    if radius <= 0 or alpha <= 0:
        return
    temp = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    pygame.draw.circle(temp, (*color, alpha), (radius, radius), radius)
    surface.blit(temp, (centre[0] - radius, centre[1] - radius))


class Explosion:
    def __init__(self, pos, start, max_radius=60, duration=EXPLOSION_DURATION):
        self.pos = pos
        self.start = start
        self.max_radius = max_radius
        self.duration = duration

    def expired(self, now):
        return now - self.start >= self.duration

    def draw(self, surf, now, offset=(0, 0)):
        t = (now - self.start) / self.duration
        if t < 0 or t >= 1:
            return
        alpha = int(255 * (1 - t))
        cx, cy = int(self.pos[0] + offset[0]), int(self.pos[1] + offset[1])
        for i, color in enumerate(EXPLOSION_RINGS):
            radius = int(self.max_radius * t * (1 - i * 0.25)) + 4
            _alpha_circle(surf, (cx, cy), radius, color, alpha)


class ScorePopup:
    """Floating '+N' label that rises and fades."""

    RISE = 40

    def __init__(self, text, pos, born, color=(255, 255, 0), duration=POPUP_DURATION):
        self.text = text
        self.pos = pos
        self.born = born
        self.color = color
        self.duration = duration

    def expired(self, now):
        return now - self.born >= self.duration

    def draw(self, surf, now, font, offset=(0, 0)):
        t = (now - self.born) / self.duration
        if t < 0 or t >= 1:
            return
        label = font.render(self.text, True, self.color)
        label.set_alpha(int(255 * (1 - t)))
        x = self.pos[0] + offset[0] - label.get_width() / 2
        y = self.pos[1] + offset[1] - self.RISE * t
        surf.blit(label, (int(x), int(y)))
