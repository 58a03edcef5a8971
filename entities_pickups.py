# entities_pickups.py
import pygame
from enum import Enum

from config import (
    POWERUP_SIZE, DOUBLE_SCORE_SIZE, POWERUP_FALL_SPEED,
    COIN_SIZE, COIN_FALL_SPEED,
    SPEED_BOOST_DURATION, INVULNERABILITY_DURATION,
    WEAPON_DURATION, DOUBLE_SCORE_DURATION,
)
from entities_utils import Entity


# ------------------------------------------------------------
# Powerups
# ------------------------------------------------------------
class PowerupKind(Enum):
    LIFE = "life"
    SPEED_BOOST = "speed"
    INVULNERABILITY = "invulnerability"
    WEAPON = "gun"
    DOUBLE_SCORE = "double"


# LIFE is instantaneous and has no entry here
EFFECT_DURATIONS = {
    PowerupKind.SPEED_BOOST: SPEED_BOOST_DURATION,
    PowerupKind.INVULNERABILITY: INVULNERABILITY_DURATION,
    PowerupKind.WEAPON: WEAPON_DURATION,
    PowerupKind.DOUBLE_SCORE: DOUBLE_SCORE_DURATION,
}

POWERUP_COLORS = {
    PowerupKind.LIFE: (255, 20, 147),
    PowerupKind.SPEED_BOOST: (0, 255, 255),
    PowerupKind.INVULNERABILITY: (255, 215, 0),
    PowerupKind.WEAPON: (139, 69, 19),
    PowerupKind.DOUBLE_SCORE: (255, 165, 0),
}

POWERUP_SIZES = {
    PowerupKind.DOUBLE_SCORE: DOUBLE_SCORE_SIZE,
}


class Powerup(Entity):
    def __init__(self, kind, x):
        width, height = POWERUP_SIZES.get(kind, POWERUP_SIZE)
        super().__init__(x, -height, width, height, POWERUP_FALL_SPEED)
        self.kind = kind
        self.color = POWERUP_COLORS[kind]

    @property
    def sprite_key(self):
        return f"powerup_{self.kind.value}"

    def draw(self, surf, sprites, offset=(0, 0)):
        if sprites and sprites.get(self.sprite_key) is not None:
            super().draw(surf, sprites, offset)
            return
        # pixel-art icon built from rectangles, one per kind
        x, y, w, h = self.rect(offset)
        c = self.color
        if self.kind is PowerupKind.LIFE:
            for rect in ((x + 8, y + 5, 6, 4), (x + 16, y + 5, 6, 4), (x + 6, y + 7, 18, 8),
                         (x + 8, y + 15, 14, 6), (x + 10, y + 21, 10, 4), (x + 12, y + 25, 6, 2)):
                pygame.draw.rect(surf, c, rect)
        elif self.kind is PowerupKind.SPEED_BOOST:
            for rect in ((x + 10, y + 3, 8, 24), (x + 6, y + 8, 12, 4), (x + 12, y + 18, 12, 4)):
                pygame.draw.rect(surf, c, rect)
        elif self.kind is PowerupKind.INVULNERABILITY:
            pygame.draw.rect(surf, c, (x + 5, y + 5, 20, 20))
            pygame.draw.rect(surf, (255, 165, 0), (x + 8, y + 8, 14, 14))
        elif self.kind is PowerupKind.WEAPON:
            for rect in ((x + 8, y + 10, 14, 6), (x + 20, y + 12, 6, 2), (x + 6, y + 14, 4, 8)):
                pygame.draw.rect(surf, c, rect)
        else:
            pygame.draw.rect(surf, c, (x, y, w, h), 3)
            pygame.draw.rect(surf, c, (x + 8, y + 8, 8, h - 16))
            pygame.draw.rect(surf, c, (x + 20, y + 8, 8, h - 16))


# ------------------------------------------------------------
# Coins
# ------------------------------------------------------------
class CoinKind(Enum):
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    SOLANA = "solana"
    DOGECOIN = "dogecoin"


COIN_VALUES = {
    CoinKind.BITCOIN: 100,
    CoinKind.ETHEREUM: 50,
    CoinKind.SOLANA: 30,
    CoinKind.DOGECOIN: 10,
}

COIN_COLORS = {
    CoinKind.BITCOIN: (247, 147, 26),
    CoinKind.ETHEREUM: (98, 126, 234),
    CoinKind.SOLANA: (153, 69, 255),
    CoinKind.DOGECOIN: (194, 166, 51),
}


class Coin(Entity):
    def __init__(self, kind, x):
        super().__init__(x, -COIN_SIZE, COIN_SIZE, COIN_SIZE, COIN_FALL_SPEED)
        self.kind = kind
        self.value = COIN_VALUES[kind]
        self.color = COIN_COLORS[kind]

    @property
    def sprite_key(self):
        return f"coin_{self.kind.value}"

    def draw(self, surf, sprites, offset=(0, 0)):
        if sprites and sprites.get(self.sprite_key) is not None:
            super().draw(surf, sprites, offset)
            return
        x, y, w, h = self.rect(offset)
        pygame.draw.ellipse(surf, self.color, (x, y, w, h))
        pygame.draw.ellipse(surf, (255, 255, 255), (x, y, w, h), 2)
