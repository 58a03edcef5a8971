# entities_obstacles.py

from enum import Enum

from config import OBSTACLE_WIDTH, OBSTACLE_HEIGHT
from entities_utils import Entity


class ObstacleKind(Enum):
    RED = "red"
    BLUE = "blue"


OBSTACLE_COLORS = {
    ObstacleKind.RED: (255, 0, 0),
    ObstacleKind.BLUE: (30, 90, 255),
}


class Obstacle(Entity):
    """A falling car. Its speed is re-stamped every tick by the difficulty model."""

    def __init__(self, kind, x, speed):
        super().__init__(x, -OBSTACLE_HEIGHT, OBSTACLE_WIDTH, OBSTACLE_HEIGHT, speed)
        self.kind = kind
        self.color = OBSTACLE_COLORS[kind]

    @property
    def sprite_key(self):
        return self.kind.value
