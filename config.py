# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle – when enabled, every log_debug call appends a
# timestamped trace to logs/debug.txt. Disabled by default for normal play.
LOG_ENABLED = bool(int(os.getenv("HODL_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Central audio toggle so the procedural sound bank can be disabled without
# removing integration code.
AUDIO_ENABLED = bool(int(os.getenv("HODL_AUDIO_ENABLED", "1")))
MUSIC_ENABLED = bool(int(os.getenv("HODL_MUSIC_ENABLED", "1")))

# Persistence / remote scoreboard
BEST_SCORE_PATH = os.getenv("HODL_BEST_SCORE_PATH", "best_score.txt")
SCORE_SERVER_URL = os.getenv("HODL_SCORE_SERVER_URL", "")
PLAYER_NAME = os.getenv("HODL_PLAYER_NAME", "PLAYER")
ASSET_DIR = os.getenv("HODL_ASSET_DIR", "assets")

# Play-field (logical resolution, no camera scaling)
WIDTH = 1200
HEIGHT = 800

# Frames per second; entity speeds are pixels per frame at this rate
FPS = 60
MAX_FRAME_DT = 0.1

# Player
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 80
PLAYER_BASE_SPEED = 5
PLAYER_START_X = (WIDTH - PLAYER_WIDTH) / 2
PLAYER_START_Y = HEIGHT - PLAYER_HEIGHT - 120
MAX_LIVES = 3

# Obstacles & difficulty
OBSTACLE_WIDTH = 60
OBSTACLE_HEIGHT = 80
BASE_OBSTACLE_SPEED = 3
OBSTACLE_SPAWN_INTERVAL = 0.8
SPEED_STEP_INTERVAL = 5.0     # +1 obstacle speed every 5 s of active play
SPEED_TRANSITION = 1.0        # ease-out window after each step

# Powerups
POWERUP_SIZE = (30, 30)
DOUBLE_SCORE_SIZE = (36, 30)
POWERUP_FALL_SPEED = 2
POWERUP_SPAWN_INTERVAL = 8.0
POWERUP_SPAWN_CHANCE = 0.3
SPEED_BOOST_MULTIPLIER = 1.5
SPEED_BOOST_DURATION = 5.0
INVULNERABILITY_DURATION = 3.0
WEAPON_DURATION = 5.0
DOUBLE_SCORE_DURATION = 8.0

# Coins
COIN_SIZE = 32
COIN_FALL_SPEED = 2.5
COIN_SPAWN_INTERVAL = 3.0
COIN_SPAWN_CHANCE = 0.5

# Bullets
BULLET_WIDTH = 4
BULLET_HEIGHT = 10
BULLET_SPEED = 8
SHOT_COOLDOWN = 0.2

# Scoring
SURVIVAL_POINTS = 10
POWERUP_BONUS = 50
LIFE_BONUS = 500
KILL_POINTS = 100
COMBO_BONUS_PER_HIT = 50
COMBO_WINDOW = 2.0
SCORE_MULTIPLIER = 2

# State machine timings
RESUME_COUNTDOWN = 3
GAME_OVER_DELAY = 1.5

# Visual effects
EXPLOSION_DURATION = 0.5
PARTICLE_LIFETIME = (0.4, 0.9)
POPUP_DURATION = 1.0
SHAKE_DURATION = 0.4
SHAKE_INTENSITY = 12

# Audio mix
SOUND_MUSIC_VOLUME = 0.5
SOUND_SFX_VOLUME = 0.7

# Settings dictionary for runtime tuning
settings_data = {
    "FPS": FPS,
    "SOUND_MUSIC_VOLUME": SOUND_MUSIC_VOLUME,
    "SOUND_SFX_VOLUME": SOUND_SFX_VOLUME,
    "MUSIC_ENABLED": MUSIC_ENABLED,
}
