import pygame

import config
import logging_utils
from sprites import load_sprites, sprite_files
from ui import BestScoreStore


def test_best_score_missing_file(tmp_path):
    store = BestScoreStore(str(tmp_path / "best.txt"))
    assert store.load() == 0


def test_best_score_round_trip(tmp_path):
    path = tmp_path / "best.txt"
    store = BestScoreStore(str(path))
    store.save(4200)
    assert path.read_text(encoding="utf-8").strip() == "4200"
    assert store.load() == 4200


def test_best_score_corrupt_file(tmp_path):
    path = tmp_path / "best.txt"
    path.write_text("not a number", encoding="utf-8")
    assert BestScoreStore(str(path)).load() == 0


def test_best_score_unwritable_location(tmp_path):
    store = BestScoreStore(str(tmp_path / "missing" / "best.txt"))
    store.save(10)
    assert store.load() == 0


def test_sprite_keys_cover_every_kind():
    keys = set(sprite_files())
    assert {"mycar", "red", "blue", "powerup_double", "coin_bitcoin"} <= keys


def test_load_sprites_skips_missing_and_broken(tmp_path):
    pygame.init()
    image = pygame.Surface((10, 10))
    pygame.image.save(image, str(tmp_path / "mycar.png"))
    (tmp_path / "red.png").write_bytes(b"not an image")
    sprites = load_sprites(tmp_path)
    assert set(sprites) == {"mycar"}


def test_log_debug_disabled_writes_nothing(tmp_path, monkeypatch):
    log_file = tmp_path / "debug.txt"
    monkeypatch.setattr(config, "LOG_ENABLED", False)
    monkeypatch.setattr(logging_utils, "LOG_FILE_PATH", log_file)
    logging_utils.log_debug("hidden")
    assert not log_file.exists()


def test_log_debug_enabled_appends(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "debug.txt"
    monkeypatch.setattr(config, "LOG_ENABLED", True)
    monkeypatch.setattr(logging_utils, "LOG_FILE_PATH", log_file)
    logging_utils.log_debug("first")
    logging_utils.log_debug("second")
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert [line.split(" ", 1)[1] for line in lines] == ["first", "second"]
