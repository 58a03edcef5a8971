# game_loop.py

import time

import pygame

from config import (
    WIDTH, HEIGHT, settings_data,
    AUDIO_ENABLED, BEST_SCORE_PATH, SCORE_SERVER_URL, ASSET_DIR,
)
from game import Game
from score_client import RemoteScoreClient
from scheduler import FrameScheduler
from sound_manager import SoundManager
from sprites import load_sprites
from ui import BestScoreStore, draw_overlay


def letterbox_offset(window_size):
    w, h = window_size
    return (w - WIDTH) // 2, (h - HEIGHT) // 2


def process_events(game):
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        game.handle_event(event)
    return True


def present(window, game_surface, game):
    """Blit the last rendered frame plus the state overlay, letterboxed."""
    x_off, y_off = letterbox_offset(window.get_size())
    frame = game_surface.copy()
    draw_overlay(frame, game.snapshot)
    window.fill((255, 255, 255))
    window.blit(frame, (x_off, y_off))
    pygame.display.flip()


def run_game():
    pygame.init()
    pygame.display.set_caption("HODL THE WHEEL")
    clock = pygame.time.Clock()
    info = pygame.display.Info()
    window = pygame.display.set_mode((max(WIDTH, info.current_w), max(HEIGHT, info.current_h)))
    game_surface = pygame.Surface((WIDTH, HEIGHT))

    scheduler = FrameScheduler(time.time)
    game = Game(
        sfx=SoundManager(enable_audio=AUDIO_ENABLED),
        best_scores=BestScoreStore(BEST_SCORE_PATH),
        score_client=RemoteScoreClient(SCORE_SERVER_URL) if SCORE_SERVER_URL else None,
        scheduler=scheduler,
        surface=game_surface,
        sprites=load_sprites(ASSET_DIR),
    )
    running = True

    while running:
        # Re-read FPS each frame
        clock.tick(settings_data["FPS"])
        running = process_events(game)
        scheduler.run_frame()
        present(window, game_surface, game)

    game.quit_to_menu()
    pygame.quit()


if __name__ == "__main__":
    run_game()
