import random
import unittest

from pythagoras.mercy import attempt_mercy

from tests.helpers import ScriptedRandom


class TestMercy(unittest.TestCase):
    def test_roll_of_five_succeeds(self) -> None:
        result = attempt_mercy(ScriptedRandom(ints=[5]))
        self.assertEqual(result.roll, 5)
        self.assertTrue(result.success)

    def test_boundary_rolls(self) -> None:
        self.assertTrue(attempt_mercy(ScriptedRandom(ints=[7])).success)
        self.assertFalse(attempt_mercy(ScriptedRandom(ints=[8])).success)
        self.assertTrue(attempt_mercy(ScriptedRandom(ints=[1])).success)
        self.assertFalse(attempt_mercy(ScriptedRandom(ints=[10])).success)

    def test_success_rate_converges(self) -> None:
        rng = random.Random(2024)
        trials = 100_000
        successes = sum(attempt_mercy(rng).success for _ in range(trials))
        self.assertAlmostEqual(successes / trials, 0.70, delta=0.01)


if __name__ == "__main__":
    unittest.main()
