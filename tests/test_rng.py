import unittest
from collections import Counter

from letetris_piece import KINDS
from letetris_rng import PieceRandomizer


class TestPieceRandomizer(unittest.TestCase):

    def test_same_seed_same_sequence(self):
        a, b = PieceRandomizer(7), PieceRandomizer(7)
        self.assertEqual([a.next_kind() for _ in range(50)],
                         [b.next_kind() for _ in range(50)])

    def test_draws_every_kind(self):
        rng = PieceRandomizer(1234)
        counts = Counter(rng.next_kind() for _ in range(7000))
        self.assertEqual(set(counts), set(KINDS))
        for kind in KINDS:
            # uniform: 1000 expected per kind
            self.assertGreater(counts[kind], 800)
            self.assertLess(counts[kind], 1200)


if __name__ == '__main__':
    unittest.main()
