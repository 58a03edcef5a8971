# controls.py
#
# Coalesces asynchronous keyboard/touch events into "currently held" flags
# that the tick samples once per frame.

import pygame

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
SHOOT_KEYS = (pygame.K_SPACE,)

# finger travel (normalised 0..1 coordinates) before a swipe counts
SWIPE_THRESHOLD = 0.03


class InputState:
    def __init__(self):
        self.key_left = False
        self.key_right = False
        self.key_up = False
        self.key_down = False
        self.touch_left = False
        self.touch_right = False
        self.touch_up = False
        self.touch_down = False
        self.shoot = False
        self._touch_origin = None

    # keyboard and touch are independent axes; either one moves the player
    @property
    def left(self):
        return self.key_left or self.touch_left

    @property
    def right(self):
        return self.key_right or self.touch_right

    @property
    def up(self):
        return self.key_up or self.touch_up

    @property
    def down(self):
        return self.key_down or self.touch_down

    def axes(self):
        """(dx, dy) in {-1, 0, 1}; opposite directions cancel."""
        return int(self.right) - int(self.left), int(self.down) - int(self.up)

    def set_key(self, key, held):
        if key in LEFT_KEYS:
            self.key_left = held
        elif key in RIGHT_KEYS:
            self.key_right = held
        elif key in UP_KEYS:
            self.key_up = held
        elif key in DOWN_KEYS:
            self.key_down = held
        elif key in SHOOT_KEYS:
            self.shoot = held

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            self.set_key(event.key, True)
        elif event.type == pygame.KEYUP:
            self.set_key(event.key, False)
        elif event.type == pygame.FINGERDOWN:
            self._touch_origin = (event.x, event.y)
        elif event.type == pygame.FINGERMOTION:
            self.swipe_to(event.x, event.y)
        elif event.type == pygame.FINGERUP:
            self.release_touch()

    def swipe_to(self, x, y):
        if self._touch_origin is None:
            self._touch_origin = (x, y)
            return
        dx = x - self._touch_origin[0]
        dy = y - self._touch_origin[1]
        self.touch_left = dx < -SWIPE_THRESHOLD
        self.touch_right = dx > SWIPE_THRESHOLD
        self.touch_up = dy < -SWIPE_THRESHOLD
        self.touch_down = dy > SWIPE_THRESHOLD

    def release_touch(self):
        self._touch_origin = None
        self.touch_left = self.touch_right = False
        self.touch_up = self.touch_down = False

    def clear(self):
        self.__init__()
