import random
import unittest

from pythagoras.bosses import create_boss
from pythagoras.combat import (
    TurnOutcome,
    attack,
    boss_counterattack,
    defend,
    player_attack_boss,
    player_attack_enemy,
    player_defend_boss,
    player_defend_enemy,
)
from pythagoras.models import BossArchetype, Enemy

from tests.helpers import ScriptedRandom, make_log, make_player


class TestAttack(unittest.TestCase):
    def test_early_boss_takes_mitigated_damage(self) -> None:
        boss = create_boss(BossArchetype.EARLY)
        log = make_log()

        dealt = attack(40, boss, log)

        self.assertEqual(dealt, 30)
        self.assertEqual(boss.current_health, 170)
        self.assertAlmostEqual(boss.health_percentage(), 85)
        self.assertEqual(boss.phase, 1)
        self.assertIn("30", log.latest())

    def test_damage_floor_is_one(self) -> None:
        boss = create_boss(BossArchetype.FINAL)
        attack(3, boss, make_log())
        self.assertEqual(boss.current_health, 749)

    def test_attack_never_heals(self) -> None:
        rng = random.Random(42)
        for archetype in BossArchetype:
            boss = create_boss(archetype)
            for _ in range(50):
                before = boss.current_health
                raw = rng.uniform(0, 80)
                dealt = attack(raw, boss, make_log())
                self.assertLessEqual(boss.current_health, before)
                self.assertEqual(dealt, max(raw - boss.defense, 1))

    def test_defend_halves_incoming(self) -> None:
        player = make_player()
        defend(player, 30, make_log())
        self.assertEqual(player.health, 85)


class TestGenericEnemy(unittest.TestCase):
    def test_counterattack_is_fixed_and_unmitigated(self) -> None:
        player = make_player()
        enemy = Enemy.new()
        outcome = player_attack_enemy(player, enemy, make_log())
        self.assertEqual(outcome, TurnOutcome.ONGOING)
        self.assertEqual(enemy.health, 135)
        self.assertEqual(player.health, 90)

    def test_ten_attacks_defeat_enemy(self) -> None:
        player = make_player()
        enemy = Enemy.new()
        log = make_log()
        outcomes = [player_attack_enemy(player, enemy, log) for _ in range(10)]
        self.assertEqual(outcomes[-1], TurnOutcome.ENEMY_DEFEATED)
        self.assertTrue(all(o == TurnOutcome.ONGOING for o in outcomes[:-1]))
        self.assertLessEqual(enemy.health, 0)
        self.assertFalse(enemy.alive)
        self.assertEqual(player.health, 10)

    def test_defend_against_enemy(self) -> None:
        player = make_player()
        outcome = player_defend_enemy(player, Enemy.new(), make_log())
        self.assertEqual(outcome, TurnOutcome.ONGOING)
        self.assertEqual(player.health, 95)

    def test_player_defeat_is_clamped(self) -> None:
        player = make_player(health=5.0)
        outcome = player_attack_enemy(player, Enemy.new(), make_log())
        self.assertEqual(outcome, TurnOutcome.PLAYER_DEFEATED)
        self.assertEqual(player.health, 0)


class TestBossTurn(unittest.TestCase):
    def test_normal_attack_uses_variance_and_ignores_player_defense(self) -> None:
        boss = create_boss(BossArchetype.EARLY)
        player = make_player()
        rng = ScriptedRandom(randoms=[0.9, 0.5])

        outcome = boss_counterattack(boss, player, make_log(), rng)

        self.assertEqual(outcome, TurnOutcome.ONGOING)
        self.assertAlmostEqual(player.health, 75)
        self.assertEqual(rng.remaining(), 0)

    def test_variance_bounds(self) -> None:
        boss = create_boss(BossArchetype.MID)
        boss.cooldown = 2
        low = make_player()
        boss_counterattack(boss, low, make_log(), ScriptedRandom(randoms=[0.0]))
        self.assertAlmostEqual(low.health, 100 - 35 * 0.8)
        high = make_player()
        boss_counterattack(boss, high, make_log(), ScriptedRandom(randoms=[0.999999]))
        self.assertGreater(high.health, 100 - 35 * 1.2)

    def test_special_chosen_when_ready(self) -> None:
        boss = create_boss(BossArchetype.EARLY)
        player = make_player()
        log = make_log()

        boss_counterattack(boss, player, log, ScriptedRandom(randoms=[0.5]))

        self.assertAlmostEqual(player.health, 62.5)
        self.assertEqual(boss.cooldown, 3)
        self.assertIn("Geometric Shield", log.latest())

    def test_special_skipped_while_on_cooldown(self) -> None:
        boss = create_boss(BossArchetype.EARLY)
        boss.cooldown = 3
        player = make_player()
        # only the variance roll is drawn; no special roll while cooling down
        rng = ScriptedRandom(randoms=[0.0])

        boss_counterattack(boss, player, make_log(), rng)

        self.assertAlmostEqual(player.health, 80)
        self.assertEqual(boss.cooldown, 2)
        self.assertEqual(rng.remaining(), 0)

    def test_attack_then_counterattack(self) -> None:
        boss = create_boss(BossArchetype.EARLY)
        player = make_player(damage=40.0)
        outcome = player_attack_boss(player, boss, make_log(), ScriptedRandom(randoms=[0.9, 0.5]))
        self.assertEqual(outcome, TurnOutcome.ONGOING)
        self.assertEqual(boss.current_health, 170)
        self.assertAlmostEqual(player.health, 75)

    def test_killing_blow_skips_counterattack(self) -> None:
        boss = create_boss(BossArchetype.EARLY)
        boss.current_health = 3
        player = make_player()
        outcome = player_attack_boss(player, boss, make_log(), ScriptedRandom())
        self.assertEqual(outcome, TurnOutcome.ENEMY_DEFEATED)
        self.assertTrue(boss.defeated)
        self.assertEqual(player.health, 100)

    def test_final_special_can_defeat_player(self) -> None:
        boss = create_boss(BossArchetype.FINAL)
        player = make_player()
        outcome = boss_counterattack(boss, player, make_log(), ScriptedRandom(randoms=[0.1]))
        self.assertEqual(outcome, TurnOutcome.PLAYER_DEFEATED)
        self.assertEqual(player.health, 0)

    def test_defend_against_boss_ticks_cooldown(self) -> None:
        boss = create_boss(BossArchetype.LATE)
        boss.cooldown = 2
        player = make_player()
        player_defend_boss(player, boss, make_log())
        self.assertAlmostEqual(player.health, 77.5)
        self.assertEqual(boss.cooldown, 1)


if __name__ == "__main__":
    unittest.main()
