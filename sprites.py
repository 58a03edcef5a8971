"""Optional sprite images; anything missing is drawn as a placeholder."""

from pathlib import Path

import pygame

from entities_obstacles import ObstacleKind
from entities_pickups import PowerupKind, CoinKind
from logging_utils import log_debug


def sprite_files():
    files = {"mycar": "mycar.png"}
    files.update({kind.value: f"{kind.value}.png" for kind in ObstacleKind})
    files.update({f"powerup_{kind.value}": f"powerup_{kind.value}.png" for kind in PowerupKind})
    files.update({f"coin_{kind.value}": f"coin_{kind.value}.png" for kind in CoinKind})
    return files


def load_sprites(directory):
    sprites = {}
    root = Path(directory)
    for key, name in sprite_files().items():
        path = root / name
        if not path.exists():
            continue
        try:
            sprites[key] = pygame.image.load(str(path))
        except pygame.error as exc:
            log_debug(f"Sprite '{key}' failed to load from {path}: {exc}")
    log_debug(f"Loaded {len(sprites)} sprites from {root}")
    return sprites
