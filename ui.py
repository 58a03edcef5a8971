# ui.py
import functools
import os

import pygame

from config import WIDTH, HEIGHT
from logging_utils import log_debug
from round_state import GameStatus

HUD_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 170)

EFFECT_LABELS = {
    "speed": "SPEED",
    "invulnerability": "SHIELD",
    "gun": "GUN",
    "double": "2X",
}


@functools.lru_cache(maxsize=None)
def get_font(size):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.SysFont("Arial", size)


class BestScoreStore:
    """Best score kept in a one-line text file."""

    def __init__(self, filename="best_score.txt"):
        self.filename = filename

    def load(self):
        if not os.path.exists(self.filename):
            return 0
        try:
            with open(self.filename, "r", encoding="utf-8") as f:
                return max(0, int(f.read().strip() or 0))
        except (OSError, ValueError) as exc:
            log_debug(f"BestScoreStore.load failed: {exc}")
            return 0

    def save(self, score):
        try:
            with open(self.filename, "w", encoding="utf-8") as f:
                f.write(f"{int(score)}\n")
        except OSError as exc:
            log_debug(f"BestScoreStore.save failed: {exc}")


def draw_hud(surf, snapshot):
    font20 = get_font(20)
    line = (f"Score: {snapshot.score}    Lives: {snapshot.lives}    "
            f"Best: {snapshot.best_score}    Level: {snapshot.level}")
    surf.blit(font20.render(line, True, HUD_COLOR), (10, 8))
    if snapshot.combo > 1:
        combo = font20.render(f"COMBO x{snapshot.combo}  STREAK {snapshot.streak}", True, (255, 215, 0))
        surf.blit(combo, (WIDTH - combo.get_width() - 10, 8))
    y = 36
    for name, remaining in snapshot.active_effects.items():
        label = font20.render(f"{EFFECT_LABELS.get(name, name)} {remaining:.1f}s", True, (0, 255, 255))
        surf.blit(label, (10, y))
        y += 24


def _centered(surf, text, size, y, color=HUD_COLOR):
    label = get_font(size).render(text, True, color)
    surf.blit(label, (WIDTH // 2 - label.get_width() // 2, y))


def draw_overlay(surf, snapshot):
    """Menu / pause / countdown / game-over panels drawn over the play surface."""
    status = snapshot.status
    if status in (GameStatus.RUNNING, GameStatus.GAME_OVER_ANIMATING):
        return
    shade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    shade.fill(OVERLAY_COLOR)
    surf.blit(shade, (0, 0))

    if status is GameStatus.NOT_STARTED:
        _centered(surf, "HODL THE WHEEL", 60, HEIGHT // 2 - 140)
        _centered(surf, "Arrows / WASD to steer, SPACE to shoot", 24, HEIGHT // 2 - 20)
        _centered(surf, "Press ENTER to start", 30, HEIGHT // 2 + 30)
        _centered(surf, f"Best: {snapshot.best_score}", 24, HEIGHT // 2 + 90)
    elif status is GameStatus.PAUSED:
        if snapshot.countdown:
            _centered(surf, str(snapshot.countdown), 120, HEIGHT // 2 - 70)
        else:
            _centered(surf, "PAUSED", 60, HEIGHT // 2 - 60)
            _centered(surf, "ESC to resume, Q to quit", 24, HEIGHT // 2 + 20)
    elif status is GameStatus.GAME_OVER:
        _centered(surf, "GAME OVER", 60, HEIGHT // 2 - 120)
        _centered(surf, f"Score: {snapshot.score}", 36, HEIGHT // 2 - 30)
        _centered(surf, f"Best: {snapshot.best_score}   Best streak: {snapshot.best_streak}", 24, HEIGHT // 2 + 20)
        _centered(surf, "R to restart, Q for menu", 24, HEIGHT // 2 + 70)
