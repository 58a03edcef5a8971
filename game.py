# game.py
# ──────────────────────────────────────────────────────────────
# Round state machine and the per-frame tick
# • one `now` is read per tick and threaded through every sub-step
# • render only reads state; effects are created during the tick
# ──────────────────────────────────────────────────────────────

import random
import time

import pygame

from config import (
    HEIGHT, FPS, MAX_FRAME_DT, MAX_LIVES, PLAYER_NAME,
    SHOT_COOLDOWN, SPEED_BOOST_MULTIPLIER, SCORE_MULTIPLIER,
    POWERUP_BONUS, LIFE_BONUS,
    RESUME_COUNTDOWN, GAME_OVER_DELAY,
    SHAKE_DURATION, SHAKE_INTENSITY,
    settings_data,
)
from background import Background
from collisions import hits, match_bullets
from controls import InputState
from entities import Bullet, PowerupKind
from entities_utils import center_of
from logging_utils import log_debug
from managers import DifficultyManager, EffectsManager, Camera
from round_state import GameStatus, GameSnapshot, new_round
from scheduler import FrameScheduler
from spawner import Spawner
from ui import get_font, draw_hud

RUNNING = GameStatus.RUNNING
ANIMATING = GameStatus.GAME_OVER_ANIMATING

# explosion offsets (from the player's centre) and delays for the final sequence
GAME_OVER_SEQUENCE = (
    ((0, 0), 0.0),
    ((-22, -18), 0.3),
    ((24, 12), 0.6),
    ((0, 26), 0.9),
)


# ──────────────────────────────────────────────────────────────
# Main Game class
# ──────────────────────────────────────────────────────────────
class Game:
    def __init__(self, sfx=None, best_scores=None, score_client=None,
                 scheduler=None, clock=time.time, rng=None, surface=None,
                 sprites=None, music_enabled=None, player_name=PLAYER_NAME):
        log_debug("Game.__init__ start")
        self.clock = clock
        self.rng = rng or random.Random()
        self.scheduler = scheduler or FrameScheduler(clock)
        self.sfx = sfx
        self.best_scores = best_scores
        self.score_client = score_client
        self.surface = surface
        self.sprites = sprites or {}
        self.music_enabled = settings_data["MUSIC_ENABLED"] if music_enabled is None else music_enabled
        self.player_name = player_name

        # core state
        self.status = GameStatus.NOT_STARTED
        self.started = False
        self.countdown = 0
        self.inputs = InputState()
        self.difficulty = DifficultyManager()

        # world objects / managers
        self.spawner = Spawner(self.rng)
        self.effects = EffectsManager(self.rng)
        self.camera = Camera(self.rng)
        self.background = Background()

        now = clock()
        self.round = new_round(now, self.difficulty.base_speed)
        self.best_score = self._load_best_score()
        self._frame_handle = None
        self._countdown_handle = None
        self.snapshot = self._publish(now)

    # ──────────────────────────────────────────────────────
    # Collaborator helpers – failures are logged, never raised
    def _guard(self, label, fn, *args):
        try:
            return fn(*args)
        except Exception as exc:
            log_debug(f"Game step '{label}' failed: {exc!r}")
            return None

    def _audio(self, method, *args):
        if self.sfx is None:
            return
        self._guard(f"audio.{method}", getattr(self.sfx, method), *args)

    def _play_sfx(self, key):
        self._audio("play", key)

    def _load_best_score(self):
        if self.best_scores is None:
            return 0
        return self._guard("best_score.load", self.best_scores.load) or 0

    # ──────────────────────────────────────────────────────
    # Frame scheduling – at most one pending frame at any time
    def _schedule_frame(self):
        if self._frame_handle is None:
            self._frame_handle = self.scheduler.request_frame(self._frame)

    def _cancel_frame(self):
        self.scheduler.cancel_frame(self._frame_handle)
        self._frame_handle = None

    def _cancel_countdown(self):
        self.scheduler.cancel_timer(self._countdown_handle)
        self._countdown_handle = None

    def _frame(self, now):
        self._frame_handle = None
        if self.status not in (RUNNING, ANIMATING):
            return
        if self.surface is None:
            log_debug("Game._frame no display surface, skipping frame")
            self._schedule_frame()
            return
        self.step(now)
        self._guard("render", self.draw, self.surface, now)
        if self.status in (RUNNING, ANIMATING):
            self._schedule_frame()

    # ──────────────────────────────────────────────────────
    # Commands
    def start(self):
        if self.status not in (GameStatus.NOT_STARTED, GameStatus.GAME_OVER):
            log_debug(f"Game.start ignored in state {self.status.value}")
            return
        now = self.clock()
        log_debug("Game.start")
        self._cancel_frame()
        self._cancel_countdown()
        self.round = new_round(now, self.difficulty.base_speed)
        self.spawner.reset(now)
        self.effects.clear()
        self.camera.reset()
        self.inputs.clear()
        self.countdown = 0
        self.best_score = max(self.best_score, self._load_best_score())
        self.status = RUNNING
        self.started = True
        if self.music_enabled:
            self._audio("play_music")
        self._schedule_frame()
        self.snapshot = self._publish(now)

    def restart(self):
        if self.status is GameStatus.GAME_OVER:
            self.start()

    def pause(self):
        if self.status is not RUNNING:
            return
        now = self.clock()
        log_debug("Game.pause")
        self.status = GameStatus.PAUSED
        self.round.pause_started_at = now
        self._cancel_frame()
        self._audio("pause_music")
        self.snapshot = self._publish(now)

    def resume(self):
        if self.status is not GameStatus.PAUSED or self.countdown:
            return
        log_debug("Game.resume countdown")
        self.countdown = RESUME_COUNTDOWN
        self._countdown_handle = self.scheduler.call_later(1.0, self._countdown_tick)
        self.snapshot = self._publish(self.clock())

    def toggle_pause(self):
        if self.status is RUNNING:
            self.pause()
        elif self.status is GameStatus.PAUSED:
            self.resume()

    def _countdown_tick(self, now):
        self._countdown_handle = None
        if self.status is not GameStatus.PAUSED:
            return
        self.countdown -= 1
        if self.countdown > 0:
            self._countdown_handle = self.scheduler.call_later(1.0, self._countdown_tick)
        else:
            r = self.round
            r.paused_total += now - r.pause_started_at
            r.pause_started_at = None
            r.last_tick_at = now
            self.status = RUNNING
            log_debug(f"Game resumed, paused_total={r.paused_total:.3f}")
            self._audio("resume_music")
            self._schedule_frame()
        self.snapshot = self._publish(now)

    def quit_to_menu(self):
        if self.status is GameStatus.NOT_STARTED:
            return
        log_debug("Game.quit_to_menu")
        self._cancel_frame()
        self._cancel_countdown()
        self._audio("stop_music")
        self.countdown = 0
        self.inputs.clear()
        self.status = GameStatus.NOT_STARTED
        self.started = False
        self.snapshot = self._publish(self.clock())

    # ──────────────────────────────────────────────────────
    # Event handling
    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_p):
                self.toggle_pause()
            elif self.status is GameStatus.NOT_STARTED and event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.start()
            elif self.status is GameStatus.GAME_OVER and event.key == pygame.K_r:
                self.restart()
            elif event.key == pygame.K_q:
                self.quit_to_menu()
        self.inputs.handle_event(event)

    # ──────────────────────────────────────────────────────
    # Tick
    def step(self, now):
        """Advance the simulation to `now` and publish a snapshot."""
        r = self.round
        dt = min(max(0.0, now - r.last_tick_at), MAX_FRAME_DT)
        r.last_tick_at = now

        if self.status is RUNNING:
            frames = dt * FPS
            elapsed = r.active_elapsed(now)
            self._guard("expire_effects", self._expire_effects, now)
            self._guard("input", self._apply_input, now, frames)
            self._guard("spawn", self._spawn, now, elapsed)
            self._guard("advance", self._advance, frames, elapsed)
            self._guard("collisions", self._resolve_collisions, now)
            self._guard("prune", self._prune)
            if self.status is RUNNING:
                self._guard("survival_score", self._award_survival, now, elapsed)
        elif self.status is ANIMATING and now - r.game_over_at >= GAME_OVER_DELAY:
            self._guard("finalize", self._finalize, now)

        self._guard("effects", self._update_effects, now, dt)
        self.snapshot = self._publish(now)
        return self.snapshot

    def _multiplier(self, now):
        return SCORE_MULTIPLIER if self.round.timers.is_active(PowerupKind.DOUBLE_SCORE, now) else 1

    def _expire_effects(self, now):
        player = self.round.player
        for kind in self.round.timers.sweep(now):
            log_debug(f"Game effect expired: {kind.value}")
            if kind is PowerupKind.SPEED_BOOST and player.boosted:
                player.reset_speed()

    def _apply_input(self, now, frames):
        dx, dy = self.inputs.axes()
        self.round.player.move(dx, dy, frames)
        if self.inputs.shoot:
            self.shoot(now)

    def shoot(self, now):
        r = self.round
        if not r.timers.is_active(PowerupKind.WEAPON, now):
            return False
        if r.last_shot_at is not None and now - r.last_shot_at < SHOT_COOLDOWN:
            return False
        r.bullets.append(Bullet(r.player))
        r.last_shot_at = now
        self._play_sfx("shoot")
        return True

    def _spawn(self, now, elapsed):
        r = self.round
        obstacle = self.spawner.spawn_obstacle(now, self.difficulty.speed_at(elapsed))
        if obstacle is not None:
            r.obstacles.append(obstacle)
        powerup = self.spawner.spawn_powerup(now)
        if powerup is not None:
            r.powerups.append(powerup)
        coin = self.spawner.spawn_coin(now)
        if coin is not None:
            r.coins.append(coin)

    def _advance(self, frames, elapsed):
        r = self.round
        # every obstacle on screen shares the current speed
        r.obstacle_speed = self.difficulty.speed_at(elapsed)
        for o in r.obstacles:
            o.speed = r.obstacle_speed
            o.update(frames)
        for pool in (r.powerups, r.coins, r.bullets):
            for entity in pool:
                entity.update(frames)

    def _prune(self):
        r = self.round
        r.obstacles = [o for o in r.obstacles if not o.is_off_field(HEIGHT)]
        r.powerups = [p for p in r.powerups if not p.is_off_field(HEIGHT)]
        r.coins = [c for c in r.coins if not c.is_off_field(HEIGHT)]
        r.bullets = [b for b in r.bullets if not b.is_off_field(HEIGHT)]

    def _award_survival(self, now, elapsed):
        scores = self.round.scores
        scores.award_survival(elapsed, self._multiplier(now))
        scores.decay_combo(now)

    def _update_effects(self, now, dt):
        self.effects.update(now, dt)
        self.camera.update(now)

    # ──────────────────────────────────────────────────────
    # Collision resolution
    def _resolve_collisions(self, now):
        self._guard("collide_obstacles", self._collide_obstacles, now)
        if self.status is not RUNNING:
            return
        self._guard("collide_powerups", self._collide_powerups, now)
        self._guard("collide_coins", self._collide_coins, now)
        self._guard("collide_bullets", self._collide_bullets, now)

    def _collide_obstacles(self, now):
        r = self.round
        if r.timers.is_active(PowerupKind.INVULNERABILITY, now):
            return
        for o in hits(r.player, r.obstacles):
            r.obstacles.remove(o)
            r.lives = max(0, r.lives - 1)
            r.scores.register_damage()
            pos = center_of(o)
            self.effects.add_explosion(pos, now)
            self.effects.burst(pos, now, count=20)
            self.camera.shake(now, SHAKE_DURATION, SHAKE_INTENSITY)
            self._play_sfx("explosion")
            log_debug(f"Game player hit, lives={r.lives}")
            if r.lives == 0:
                self._begin_game_over(now)
                return

    def _collide_powerups(self, now):
        r = self.round
        for pu in hits(r.player, r.powerups):
            r.powerups.remove(pu)
            gained = self._activate_powerup(pu.kind, now)
            pos = center_of(pu)
            self.effects.burst(pos, now, count=12, color=pu.color)
            self.effects.popup(f"+{gained}", pos, now)
            self._play_sfx("pickup")

    def _activate_powerup(self, kind, now):
        r = self.round
        multiplier = self._multiplier(now)
        log_debug(f"Game powerup collected: {kind.value}")
        if kind is PowerupKind.LIFE:
            r.lives = min(MAX_LIVES, r.lives + 1)
            return r.scores.award(LIFE_BONUS, multiplier)
        r.timers.activate(kind, now)
        if kind is PowerupKind.SPEED_BOOST:
            r.player.speed = r.player.base_speed * SPEED_BOOST_MULTIPLIER
        return r.scores.award(POWERUP_BONUS, multiplier)

    def _collide_coins(self, now):
        r = self.round
        for coin in hits(r.player, r.coins):
            r.coins.remove(coin)
            gained = r.scores.award(coin.value, self._multiplier(now))
            pos = center_of(coin)
            self.effects.burst(pos, now, count=10, color=coin.color)
            self.effects.popup(f"+{gained}", pos, now, color=coin.color)
            self._play_sfx("coin")

    def _collide_bullets(self, now):
        r = self.round
        for bullet, o in match_bullets(r.bullets, r.obstacles):
            r.bullets.remove(bullet)
            r.obstacles.remove(o)
            gained = r.scores.register_kill(now, self._multiplier(now))
            pos = center_of(o)
            self.effects.add_explosion(pos, now)
            self.effects.burst(pos, now, count=15, color=(255, 140, 0))
            self.effects.burst(pos, now, count=10, color=(255, 230, 80))
            self.effects.add_explosion(pos, now, delay=0.15, max_radius=40)
            combo = r.scores.combo
            text = f"+{gained} COMBO x{combo}" if combo > 1 else f"+{gained}"
            self.effects.popup(text, pos, now)
            self._play_sfx("explosion")

    # ──────────────────────────────────────────────────────
    # Game over
    def _begin_game_over(self, now):
        r = self.round
        log_debug(f"Game over, score={r.scores.score}")
        self.status = ANIMATING
        r.game_over_at = now
        px, py = center_of(r.player)
        for i, ((dx, dy), delay) in enumerate(GAME_OVER_SEQUENCE):
            pos = (px + dx, py + dy)
            self.effects.add_explosion(pos, now, delay=delay, max_radius=80 + 20 * i)
            self.effects.burst(pos, now, count=25, delay=delay)
        self.camera.shake(now, GAME_OVER_DELAY / 2, SHAKE_INTENSITY * 1.5)
        self._play_sfx("game_over")

    def _finalize(self, now):
        self.status = GameStatus.GAME_OVER
        self._cancel_frame()
        final = self.round.scores.score
        if final > self.best_score:
            self.best_score = final
            if self.best_scores is not None:
                self._guard("best_score.save", self.best_scores.save, final)
        if self.score_client is not None:
            # fire-and-forget; runs on its own thread
            self._guard("score_client.submit", self.score_client.submit_score_async,
                        self.player_name, final)
        self._audio("stop_music")
        log_debug(f"Game finalized, score={final} best={self.best_score}")

    # ──────────────────────────────────────────────────────
    # Snapshot & draw
    def _publish(self, now):
        r = self.round
        level = self.difficulty.level_at(r.active_elapsed(now)) if self.started else 0
        return GameSnapshot(
            status=self.status,
            score=r.scores.score,
            lives=r.lives,
            best_score=self.best_score,
            combo=r.scores.combo,
            streak=r.scores.streak,
            best_streak=r.scores.best_streak,
            level=level,
            obstacle_speed=r.obstacle_speed,
            countdown=self.countdown,
            active_effects={kind.value: left for kind, left in r.timers.active(now).items()},
        )

    def draw(self, surf, now):
        """Project the current state to pixels. Never mutates game state."""
        r = self.round
        offset = (self.camera.offset.x, self.camera.offset.y)
        self.background.draw(surf, now, offset)
        for pool in (r.coins, r.powerups, r.obstacles, r.bullets):
            for entity in pool:
                entity.draw(surf, self.sprites, offset)
        if self.status is not ANIMATING:
            r.player.draw(surf, self.sprites, offset,
                          invulnerable=r.timers.is_active(PowerupKind.INVULNERABILITY, now))
        self.effects.draw(surf, now, get_font(22), offset)
        draw_hud(surf, self.snapshot)
