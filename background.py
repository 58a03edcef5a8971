# background.py

import pygame
from config import WIDTH, HEIGHT

ROAD_COLOR = (0, 0, 0)
LANE_COLOR = (51, 51, 51)
LANE_SPACING = 60
LANE_DASH = 30
SCROLL_SPEED = 100  # px per second


class Background:
    """Scrolling lane markings; drawing depends only on `now`."""

    def __init__(self, lanes=3):
        self.lane_xs = [WIDTH * i // lanes for i in range(1, lanes)]

    def draw(self, surf, now, offset=(0, 0)):
        surf.fill(ROAD_COLOR)
        shift = (now * SCROLL_SPEED) % LANE_SPACING
        for x in self.lane_xs:
            for y in range(-LANE_SPACING, HEIGHT, LANE_SPACING):
                pygame.draw.rect(surf, LANE_COLOR,
                                 (x + offset[0], y + shift + offset[1], 4, LANE_DASH))
