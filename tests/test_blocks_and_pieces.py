import unittest

import numpy as np

from well_grid.game import BASE_SHAPES, COLORS, Block, PieceSnapshot, TetrominoType, WellGrid, decode_block, encode_block


class TestBlockEncoding(unittest.TestCase):
    def test_given_block_when_encoded_then_id_followed_by_hex_color(self):
        self.assertEqual(encode_block(Block(12, '#3cc7d6')), '12#3cc7d6')

    def test_given_color_without_hash_when_encoded_then_value_error(self):
        for color in ('fbb414', 'red', 3, '#'):
            with self.subTest(color=color):
                with self.assertRaises(ValueError):
                    encode_block(Block(1, color))

    def test_given_merged_catalogue_piece_when_encoded_and_decoded_then_same_block(self):
        grid = WellGrid(rows=4, cols=4)
        grid.merge_piece(PieceSnapshot.from_kind(TetrominoType.S, x=0, y=2))
        for _, _, block in grid.blocks():
            with self.subTest(block=block):
                self.assertEqual(decode_block(encode_block(block)), block)

    def test_given_encoded_value_when_decoded_then_id_and_color_split(self):
        block = decode_block('12#3cc7d6')
        self.assertEqual(block.block_id, 12)
        self.assertEqual(block.color, '#3cc7d6')
        self.assertEqual(block.key, '12')

    def test_given_malformed_values_when_decoded_then_value_error(self):
        for value in ('', '12', '#3cc7d6', 'ab#3cc7d6', '12#'):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    decode_block(value)

    def test_given_blocks_when_compared_then_value_equality(self):
        self.assertEqual(Block(1, 'red'), Block(1, 'red'))
        self.assertNotEqual(Block(1, 'red'), Block(2, 'red'))


class TestPieces(unittest.TestCase):
    def test_given_catalogue_when_inspected_then_every_kind_has_four_cells_and_color(self):
        for kind in TetrominoType:
            with self.subTest(kind=kind.name):
                self.assertEqual(int(np.count_nonzero(BASE_SHAPES[kind])), 4)
                self.assertTrue(COLORS[kind].startswith('#'))

    def test_given_kind_when_snapshot_built_then_cells_offset_row_major(self):
        piece = PieceSnapshot.from_kind(TetrominoType.T, x=3, y=5)
        self.assertEqual(piece.color, COLORS[TetrominoType.T])
        self.assertEqual(piece.cells(), [(5, 3), (5, 4), (5, 5), (6, 4)])

    def test_given_empty_shape_when_cells_then_empty_list(self):
        self.assertEqual(PieceSnapshot(shape=np.zeros((0, 0)), color='red').cells(), [])


if __name__ == '__main__':
    unittest.main()
