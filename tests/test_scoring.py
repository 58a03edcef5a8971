import unittest

from config import (
    KILL_POINTS, COMBO_BONUS_PER_HIT, COMBO_WINDOW, SURVIVAL_POINTS,
    POWERUP_BONUS, LIFE_BONUS, MAX_LIVES,
)
from entities import Bullet, Coin, CoinKind, Obstacle, ObstacleKind, Powerup, PowerupKind
from scoring import ScoreKeeper
from tests import make_game


class ScoreKeeperTests(unittest.TestCase):
    def setUp(self):
        self.scores = ScoreKeeper()

    def test_award_applies_multiplier(self):
        self.assertEqual(self.scores.award(30, 2), 60)
        self.assertEqual(self.scores.score, 60)

    def test_negative_award_rejected(self):
        with self.assertRaises(ValueError):
            self.scores.award(-5)
        self.assertEqual(self.scores.score, 0)

    def test_first_kill_has_no_combo_bonus(self):
        self.assertEqual(self.scores.register_kill(10.0), KILL_POINTS)
        self.assertEqual(self.scores.combo, 1)

    def test_kills_inside_window_build_combo(self):
        self.scores.register_kill(10.0)
        second = self.scores.register_kill(10.0 + COMBO_WINDOW - 0.1)
        self.assertEqual(second, KILL_POINTS + 2 * COMBO_BONUS_PER_HIT)
        self.assertEqual(self.scores.combo, 2)
        self.assertEqual(self.scores.best_streak, 2)

    def test_kill_after_window_restarts_combo(self):
        self.scores.register_kill(10.0)
        self.scores.register_kill(11.0)
        gained = self.scores.register_kill(11.0 + COMBO_WINDOW + 0.5)
        self.assertEqual(gained, KILL_POINTS)
        self.assertEqual(self.scores.combo, 1)
        self.assertEqual(self.scores.streak, 3)

    def test_decay_combo(self):
        self.scores.register_kill(10.0)
        self.scores.decay_combo(11.0)
        self.assertEqual(self.scores.combo, 1)
        self.scores.decay_combo(10.0 + COMBO_WINDOW + 0.01)
        self.assertEqual(self.scores.combo, 0)

    def test_damage_resets_streak_but_keeps_best(self):
        self.scores.register_kill(1.0)
        self.scores.register_kill(1.5)
        self.scores.register_damage()
        self.assertEqual((self.scores.combo, self.scores.streak), (0, 0))
        self.assertEqual(self.scores.best_streak, 2)

    def test_survival_paid_once_per_whole_second(self):
        self.assertEqual(self.scores.award_survival(0.9), 0)
        self.assertEqual(self.scores.award_survival(2.3), 2 * SURVIVAL_POINTS)
        self.assertEqual(self.scores.award_survival(2.9), 0)
        self.assertEqual(self.scores.award_survival(3.0, 2), 2 * SURVIVAL_POINTS)


class GameScoringTests(unittest.TestCase):
    def setUp(self):
        self.game, self.clock = make_game()
        self.game.start()
        self.round = self.game.round
        self.player = self.round.player

    def _place_on_player(self, entity):
        entity.x = self.player.x
        entity.y = self.player.y
        return entity

    def _shoot_down(self, obstacle_x=300.0):
        obstacle = Obstacle(ObstacleKind.RED, obstacle_x, 3)
        obstacle.y = 200
        bullet = Bullet(self.player)
        bullet.x = obstacle.x + 10
        bullet.y = obstacle.y + 10
        self.round.obstacles.append(obstacle)
        self.round.bullets.append(bullet)
        self.game._collide_bullets(self.clock())

    def test_double_score_doubles_a_plain_kill(self):
        self.round.powerups.append(self._place_on_player(Powerup(PowerupKind.DOUBLE_SCORE, 0)))
        self.game._collide_powerups(self.clock())
        before = self.round.scores.score
        self._shoot_down()
        self.assertEqual(self.round.scores.score - before, 2 * KILL_POINTS)

    def test_double_score_pickup_bonus_is_not_doubled(self):
        self.round.powerups.append(self._place_on_player(Powerup(PowerupKind.DOUBLE_SCORE, 0)))
        self.round.coins.append(self._place_on_player(Coin(CoinKind.SOLANA, 0)))
        self.game._resolve_collisions(self.clock())
        self.assertEqual(self.round.scores.score, POWERUP_BONUS + 2 * 30)

    def test_double_score_doubles_coins(self):
        self.round.timers.activate(PowerupKind.DOUBLE_SCORE, self.clock())
        self.round.coins.append(self._place_on_player(Coin(CoinKind.SOLANA, 0)))
        self.game._collide_coins(self.clock())
        self.assertEqual(self.round.scores.score, 60)
        self.assertEqual(self.round.coins, [])

    def test_powerup_pickup_bonus(self):
        self.round.powerups.append(self._place_on_player(Powerup(PowerupKind.WEAPON, 0)))
        self.game._collide_powerups(self.clock())
        self.assertEqual(self.round.scores.score, POWERUP_BONUS)
        self.assertTrue(self.round.timers.is_active(PowerupKind.WEAPON, self.clock()))

    def test_life_pickup_caps_lives(self):
        self.round.powerups.append(self._place_on_player(Powerup(PowerupKind.LIFE, 0)))
        self.game._collide_powerups(self.clock())
        self.assertEqual(self.round.lives, MAX_LIVES)
        self.assertEqual(self.round.scores.score, LIFE_BONUS)

        self.round.lives = 1
        self.round.powerups.append(self._place_on_player(Powerup(PowerupKind.LIFE, 0)))
        self.game._collide_powerups(self.clock())
        self.assertEqual(self.round.lives, 2)

    def test_combo_popup_and_bonus_in_game(self):
        self._shoot_down(100.0)
        self.clock.advance(0.5)
        self._shoot_down(600.0)
        self.assertEqual(self.round.scores.combo, 2)
        self.assertEqual(self.round.scores.score,
                         KILL_POINTS + KILL_POINTS + 2 * COMBO_BONUS_PER_HIT)
        texts = [p.text for p in self.game.effects.popups]
        self.assertIn("+200 COMBO x2", texts)

    def test_survival_points_accrue_while_running(self):
        for _ in range(int(2.5 * 60)):
            self.game.step(self.clock.advance(1 / 60))
        self.assertGreaterEqual(self.round.scores.score, 2 * SURVIVAL_POINTS)
        self.assertEqual(self.round.scores.survival_seconds, 2)


if __name__ == "__main__":
    unittest.main()
