import unittest

from letetris_piece import KINDS, SHAPES, Piece, rotated_offsets


class TestShapes(unittest.TestCase):

    def test_every_kind_has_four_states_of_four_cells(self):
        self.assertEqual(sorted(SHAPES), sorted(KINDS))
        for kind in KINDS:
            self.assertEqual(len(SHAPES[kind]), 4)
            for state in SHAPES[kind]:
                self.assertEqual(len(state), 4)
                self.assertEqual(len(set(state)), 4)  # no overlapping cells

    def test_pivot_is_always_occupied(self):
        for kind in KINDS:
            for rotation in range(4):
                self.assertIn((0, 0), rotated_offsets(kind, rotation))

    def test_o_piece_is_rotation_invariant(self):
        states = {rotated_offsets("O", r) for r in range(4)}
        self.assertEqual(len(states), 1)

    def test_rotation_out_of_range(self):
        with self.assertRaises(ValueError):
            rotated_offsets("T", 4)
        with self.assertRaises(ValueError):
            rotated_offsets("T", -1)


class TestPiece(unittest.TestCase):

    def test_spawn_position(self):
        p = Piece.spawn("T", 10, 20)
        self.assertEqual((p.kind, p.rotation, p.x, p.y), ("T", 0, 5, 19))

    def test_spawn_unknown_kind(self):
        with self.assertRaises(KeyError):
            Piece.spawn("X", 10, 20)

    def test_cells(self):
        p = Piece("I", 1, 3, 7)
        self.assertEqual(p.cells(), [(3, 6), (3, 7), (3, 8), (3, 9)])
        p = Piece("O", 2, 0, 0)
        self.assertEqual(sorted(p.cells()), [(0, 0), (0, 1), (1, 0), (1, 1)])


if __name__ == '__main__':
    unittest.main()
