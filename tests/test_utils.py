import unittest

from diranalyzer.utils import round_half_up


class TestRoundHalfUp(unittest.TestCase):

    def test_positive_halves_round_up(self):
        self.assertEqual(round_half_up(12.5), 13)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.4), 2)

    def test_negative_halves_round_toward_zero(self):
        self.assertEqual(round_half_up(-2.5), -2)
        self.assertEqual(round_half_up(-2.6), -3)
        self.assertEqual(round_half_up(-0.4), 0)


if __name__ == '__main__':
    unittest.main()
